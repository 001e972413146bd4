from typing import Optional, Tuple

from PyQt5.QtCore import QPoint, Qt
from PyQt5.QtGui import QKeySequence

from inkmark.core.drawing import SurfaceRect, Tool


def event_client_pos(event) -> Tuple[float, float]:
    """Screen-space position of a mouse event."""
    pos = event.globalPos()
    return float(pos.x()), float(pos.y())


def widget_surface_rect(widget) -> Optional[SurfaceRect]:
    """
    Bounding rectangle of a widget in screen space.

    Returns:
        The rectangle, or None if there is no widget
    """
    if widget is None:
        return None
    origin = widget.mapToGlobal(QPoint(0, 0))
    return SurfaceRect(float(origin.x()), float(origin.y()),
                       float(widget.width()), float(widget.height()))


class UserInputHandler:
    """Maps document and navigation shortcuts onto MainWindow actions."""

    def __init__(self, window):
        self.window = window

    def handle_key_press(self, event) -> bool:
        """
        Run the action bound to a key press.

        Returns:
            True if the event was consumed
        """
        if event.matches(QKeySequence.Open):
            self.window.open_pdf()
        elif event.matches(QKeySequence.Close):
            self.window.close_pdf()
        elif event.key() in (Qt.Key_Left, Qt.Key_PageUp):
            self.window.view_controller.previous_page()
        elif event.key() in (Qt.Key_Right, Qt.Key_PageDown):
            self.window.view_controller.next_page()
        elif event.key() == Qt.Key_Escape:
            self.window.annotation_toolbar.select_tool(Tool.SELECT)
        else:
            event.ignore()
            return False

        event.accept()
        return True
