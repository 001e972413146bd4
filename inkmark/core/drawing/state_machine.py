"""
Pointer-driven state machine that turns drag gestures into annotations.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from inkmark.core.annotations import (
    Annotation,
    CommentAnnotation,
    HighlightAnnotation,
    SignatureAnnotation,
    UnderlineAnnotation,
    generate_id,
)
from .coordinates import Point, SurfaceRect, to_surface_coords
from .tool_state import Tool

if TYPE_CHECKING:
    from inkmark.core.session import AnnotationSession

logger = logging.getLogger(__name__)

DEFAULT_COMMENT_TEXT = "New Comment"


class GestureState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class DrawingGesture:
    """In-progress pointer gesture. Never stored in the annotation model."""
    active: bool = False
    start_coords: Optional[Point] = None
    current_coords: Optional[Point] = None

    def clear(self) -> None:
        self.active = False
        self.start_coords = None
        self.current_coords = None


class DrawingStateMachine:
    """
    Tracks one gesture at a time and commits it with the active tool.

    All state it reads (tool parameters, page number, signature canvas, the
    annotation collection) belongs to the injected session.
    """

    def __init__(self, session: "AnnotationSession"):
        self.session = session
        self.gesture = DrawingGesture()

    @property
    def state(self) -> GestureState:
        if self.gesture.active:
            return GestureState.DRAGGING
        return GestureState.IDLE

    def pointer_down(self, client_pos: Tuple[float, float],
                     surface_rect: Optional[SurfaceRect]) -> bool:
        """
        Start a gesture. A second pointer-down while dragging replaces the
        start point.

        Returns:
            True if a gesture was started
        """
        if surface_rect is None:
            return False

        self.gesture.start_coords = to_surface_coords(client_pos, surface_rect)
        self.gesture.current_coords = self.gesture.start_coords
        self.gesture.active = True
        return True

    def pointer_move(self, client_pos: Tuple[float, float],
                     surface_rect: Optional[SurfaceRect]) -> Optional[Point]:
        """
        Track the pointer during a drag. Never touches the annotation model.

        Returns:
            The current surface point, or None if no gesture is in progress
        """
        if not self.gesture.active or self.gesture.start_coords is None or surface_rect is None:
            return None

        self.gesture.current_coords = to_surface_coords(client_pos, surface_rect)
        return self.gesture.current_coords

    def pointer_up(self, client_pos: Tuple[float, float],
                   surface_rect: Optional[SurfaceRect]) -> Optional[Annotation]:
        """
        Finish the gesture and commit an annotation for the current tool.

        The gesture is cleared whatever the outcome.

        Returns:
            The new annotation, or None if nothing was created
        """
        try:
            if not self.gesture.active or self.gesture.start_coords is None or surface_rect is None:
                logger.debug("Pointer up without an active gesture; ignored")
                return None

            end = to_surface_coords(client_pos, surface_rect)
            annotation = self._commit(self.gesture.start_coords, end)
            if annotation is not None:
                self.session.annotation_manager.add_annotation(annotation)
                logger.info("Created %s annotation on page %d at (%.1f, %.1f)",
                            annotation.annotation_type.value, annotation.page,
                            annotation.x, annotation.y)
            return annotation
        finally:
            self.gesture.clear()

    def preview(self) -> Optional[Annotation]:
        """
        Build the highlight or underline the current drag would create,
        without storing it.
        """
        gesture = self.gesture
        if not gesture.active or gesture.start_coords is None or gesture.current_coords is None:
            return None

        tool = self.session.tool_state.current_tool
        if tool == Tool.HIGHLIGHT:
            return self._build_highlight(gesture.start_coords, gesture.current_coords)
        if tool == Tool.UNDERLINE:
            return self._build_underline(gesture.start_coords, gesture.current_coords)
        return None

    def _commit(self, start: Point, end: Point) -> Optional[Annotation]:
        tool = self.session.tool_state.current_tool

        if tool == Tool.HIGHLIGHT:
            return self._build_highlight(start, end)
        elif tool == Tool.UNDERLINE:
            return self._build_underline(start, end)
        elif tool == Tool.COMMENT:
            return self._build_comment(end)
        elif tool == Tool.SIGNATURE:
            return self._build_signature(end)
        elif tool == Tool.SELECT:
            return None

        raise ValueError(f"Unhandled tool: {tool!r}")

    def _build_highlight(self, start: Point, end: Point) -> HighlightAnnotation:
        tools = self.session.tool_state
        return HighlightAnnotation(
            id=generate_id(),
            page=self.session.page_number,
            x=min(start.x, end.x),
            y=min(start.y, end.y),
            width=abs(end.x - start.x),
            height=self.session.settings.highlight_height,
            color=tools.highlight_color,
        )

    def _build_underline(self, start: Point, end: Point) -> UnderlineAnnotation:
        tools = self.session.tool_state
        return UnderlineAnnotation(
            id=generate_id(),
            page=self.session.page_number,
            x=min(start.x, end.x),
            # Strip sits at the lower of the two touched rows.
            y=max(start.y, end.y),
            width=abs(end.x - start.x),
            color=tools.underline_color,
        )

    def _build_comment(self, end: Point) -> CommentAnnotation:
        return CommentAnnotation(
            id=generate_id(),
            page=self.session.page_number,
            x=end.x,
            y=end.y,
            text=self.session.tool_state.take_comment_text(DEFAULT_COMMENT_TEXT),
        )

    def _build_signature(self, end: Point) -> Optional[SignatureAnnotation]:
        canvas = self.session.signature_canvas
        if canvas is None:
            logger.debug("Signature tool has no capture surface; nothing committed")
            return None

        return SignatureAnnotation(
            id=generate_id(),
            page=self.session.page_number,
            x=end.x,
            y=end.y,
            image_data=canvas.snapshot(),
        )
