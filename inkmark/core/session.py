"""
Top-level state for one open document.
"""
import logging
from typing import Optional

from inkmark.config import AppSettings
from inkmark.core.annotations import AnnotationManager
from inkmark.core.drawing import DrawingStateMachine, Tool, ToolState
from inkmark.core.overlay import PageOverlay
from inkmark.core.signature import SignatureCanvas

logger = logging.getLogger(__name__)


class AnnotationSession:
    """
    Owns the annotation collection, tool parameters, the gesture in progress,
    the signature canvas and the page position.
    """

    def __init__(self, settings: Optional[AppSettings] = None):
        self.settings = settings or AppSettings()
        self.annotation_manager = AnnotationManager()
        self.tool_state = ToolState(
            highlight_color=self.settings.highlight_color,
            underline_color=self.settings.underline_color,
        )
        self.drawing = DrawingStateMachine(self)
        self.signature_canvas: Optional[SignatureCanvas] = None

        self.page_number: int = 1
        self.page_count: int = 0

        # Size of the displayed page surface, used to size the signature canvas
        self.surface_size = (0, 0)

    # ===== Tools =====

    def set_tool(self, tool: Tool) -> None:
        """
        Select the active tool.

        Entering the signature tool creates a blank signature canvas;
        leaving it discards the canvas.
        """
        previous = self.tool_state.current_tool
        self.tool_state.current_tool = tool

        if tool == Tool.SIGNATURE and previous != Tool.SIGNATURE:
            width, height = self.surface_size
            self.signature_canvas = SignatureCanvas(
                width, height, stroke_width=self.settings.signature_stroke_width
            )
        elif tool != Tool.SIGNATURE:
            self.signature_canvas = None

        logger.debug("Tool changed from %s to %s", previous.value, tool.value)

    def set_surface_size(self, width: int, height: int) -> None:
        """Record the displayed page size. An existing signature canvas keeps its strokes."""
        self.surface_size = (int(width), int(height))
        if self.signature_canvas is not None:
            self.signature_canvas.resize(*self.surface_size)

    # ===== Navigation =====

    def set_page_count(self, page_count: int) -> None:
        """Apply the page count reported after a successful load."""
        self.page_count = max(0, page_count)
        self.page_number = 1

    def go_to_previous_page(self) -> bool:
        """Move back one page. Returns True if the page changed."""
        return self._set_page(self.page_number - 1)

    def go_to_next_page(self) -> bool:
        """Move forward one page. Returns True if the page changed."""
        return self._set_page(self.page_number + 1)

    def go_to_page(self, page_number: int) -> bool:
        """Jump to a 1-based page, clamped to the document."""
        return self._set_page(page_number)

    def _set_page(self, page_number: int) -> bool:
        if self.page_count <= 0:
            return False
        clamped = max(1, min(self.page_count, page_number))
        if clamped == self.page_number:
            return False
        self.page_number = clamped
        return True

    # ===== Rendering =====

    def current_overlay(self) -> PageOverlay:
        """Overlay primitives for the page on screen."""
        return PageOverlay(self.annotation_manager, self.page_number)

    def reset(self) -> None:
        """Discard everything tied to the current document."""
        self.annotation_manager.clear_all()
        self.drawing.gesture.clear()
        self.tool_state.comment_text = ""
        if self.signature_canvas is not None:
            self.signature_canvas.reset()
        self.page_number = 1
        self.page_count = 0
