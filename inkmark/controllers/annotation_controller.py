"""
Controller for managing annotation operations.
"""
import logging
from typing import Optional

from PyQt5.QtCore import QObject, Qt, pyqtSignal
from PyQt5.QtWidgets import QWidget

from inkmark.core.annotations import Annotation
from inkmark.core.drawing import Tool, to_surface_coords
from inkmark.core.session import AnnotationSession
from .input_handler import event_client_pos, widget_surface_rect

logger = logging.getLogger(__name__)


class AnnotationController(QObject):
    """Routes pointer events from the page surface into the drawing state machine."""

    # Signals
    annotations_changed = pyqtSignal()  # Emitted when an annotation is committed
    preview_changed = pyqtSignal()  # Emitted when the live preview or signature ink changes
    tool_changed = pyqtSignal(object)  # Emits the new Tool

    def __init__(self, session: AnnotationSession, parent: QObject = None):
        super().__init__(parent)
        self.session = session

    # ===== Tool parameters =====

    def set_tool(self, tool: Tool) -> None:
        """
        Select the active tool.

        Args:
            tool: Tool for the next gesture
        """
        if tool == self.session.tool_state.current_tool:
            return
        self.session.set_tool(tool)
        self.tool_changed.emit(tool)
        self.preview_changed.emit()

    def set_highlight_color(self, color: str) -> None:
        self.session.tool_state.highlight_color = color

    def set_underline_color(self, color: str) -> None:
        self.session.tool_state.underline_color = color

    def set_comment_text(self, text: str) -> None:
        self.session.tool_state.comment_text = text

    # ===== Pointer events =====

    def handle_mouse_press(self, surface: Optional[QWidget], event) -> None:
        """
        Start a gesture on the page surface.

        Args:
            surface: Widget displaying the page, or None if nothing is shown
            event: The mouse event
        """
        if event.button() != Qt.LeftButton:
            return

        surface_rect = widget_surface_rect(surface)
        client_pos = event_client_pos(event)
        if not self.session.drawing.pointer_down(client_pos, surface_rect):
            return

        canvas = self.session.signature_canvas
        if canvas is not None:
            canvas.add_point(to_surface_coords(client_pos, surface_rect))
            self.preview_changed.emit()

    def handle_mouse_move(self, surface: Optional[QWidget], event) -> None:
        """
        Track a drag. Updates the preview and, for the signature tool, inks
        the signature canvas while the left button is held.
        """
        surface_rect = widget_surface_rect(surface)
        if surface_rect is None:
            return

        client_pos = event_client_pos(event)
        changed = self.session.drawing.pointer_move(client_pos, surface_rect) is not None

        canvas = self.session.signature_canvas
        if canvas is not None and event.buttons() & Qt.LeftButton:
            canvas.add_point(to_surface_coords(client_pos, surface_rect))
            changed = True

        if changed:
            self.preview_changed.emit()

    def handle_mouse_release(self, surface: Optional[QWidget], event) -> Optional[Annotation]:
        """
        Finish the gesture and commit an annotation for the active tool.

        Returns:
            The new annotation, or None if nothing was created
        """
        if event.button() != Qt.LeftButton:
            return None

        canvas = self.session.signature_canvas
        if canvas is not None:
            canvas.end_stroke()

        annotation = self.session.drawing.pointer_up(
            event_client_pos(event), widget_surface_rect(surface)
        )
        self.preview_changed.emit()

        if annotation is not None:
            self.annotations_changed.emit()
        return annotation
