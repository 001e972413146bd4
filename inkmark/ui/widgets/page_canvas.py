from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPainter
from PyQt5.QtWidgets import QLabel, QSizePolicy

from inkmark.controllers.annotation_controller import AnnotationController
from inkmark.core.drawing import Tool
from inkmark.core.overlay import project_annotation
from .overlay_painter import OverlayPainter

PREVIEW_OPACITY = 0.6


# Widget that displays the current page and captures annotation gestures
class PageCanvas(QLabel):

    def __init__(self, controller: AnnotationController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.session = controller.session
        self.overlay_painter = OverlayPainter()

        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setMouseTracking(True)

        controller.preview_changed.connect(self.update)
        controller.annotations_changed.connect(self.update)
        controller.tool_changed.connect(self._on_tool_changed)

    def set_page_pixmap(self, pixmap) -> None:
        """Show a rendered page and resize to it."""
        if pixmap is None:
            self.clear()
            self.resize(0, 0)
        else:
            self.setPixmap(pixmap)
            self.resize(pixmap.size())
        self.session.set_surface_size(self.width(), self.height())
        self.update()

    def clear_page(self) -> None:
        self.set_page_pixmap(None)
        self.overlay_painter.clear_cache()

    def has_page(self) -> bool:
        pixmap = self.pixmap()
        return pixmap is not None and not pixmap.isNull()

    def _surface(self):
        # No surface to draw on until a page is displayed
        return self if self.has_page() else None

    def _on_tool_changed(self, tool: Tool) -> None:
        if tool == Tool.SELECT:
            self.setCursor(Qt.ArrowCursor)
        else:
            self.setCursor(Qt.CrossCursor)

    def mousePressEvent(self, event):
        self.controller.handle_mouse_press(self._surface(), event)

    def mouseMoveEvent(self, event):
        self.controller.handle_mouse_move(self._surface(), event)

    def mouseReleaseEvent(self, event):
        self.controller.handle_mouse_release(self._surface(), event)

    def paintEvent(self, event):
        # 1. Draw the page pixmap
        super().paintEvent(event)
        if not self.has_page():
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        # 2. Stored annotations for this page, oldest first
        self.overlay_painter.paint(painter, self.session.current_overlay())

        # 3. Live highlight/underline preview
        preview = self.session.drawing.preview()
        if preview is not None:
            painter.setOpacity(PREVIEW_OPACITY)
            self.overlay_painter.paint(painter, [project_annotation(preview)])
            painter.setOpacity(1.0)

        # 4. Signature ink not yet committed
        canvas = self.session.signature_canvas
        if canvas is not None:
            painter.drawImage(0, 0, canvas.image)

        painter.end()
