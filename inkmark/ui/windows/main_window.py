"""
Main application window for Inkmark PDF.
"""
import logging
import os
from typing import Optional

from PyQt5.QtCore import QEvent, Qt
from PyQt5.QtWidgets import (
    QFileDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from inkmark.config import AppSettings
from inkmark.controllers import AnnotationController, UserInputHandler, ViewController
from inkmark.core.document import PDFDocumentReader, validate_document
from inkmark.core.errors import DocumentValidationError
from inkmark.core.session import AnnotationSession
from inkmark.styles import ThemeManager
from inkmark.ui.toolbars import AnnotationToolbar
from inkmark.ui.widgets import PageCanvas, Toast
from inkmark.utils.warning_manager import PromptKind, confirmation_prompts

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main window: document controls, annotation tools, page view and navigation."""

    def __init__(self, file_path: Optional[str] = None, settings: Optional[AppSettings] = None):
        super().__init__()
        self.setWindowTitle("Inkmark PDF")

        self.settings = settings or AppSettings()
        self.pdf_reader = PDFDocumentReader()
        self.session = AnnotationSession(self.settings)

        self.annotation_controller = AnnotationController(self.session, self)
        self.view_controller = ViewController(self.session, self)
        self.input_handler = UserInputHandler(self)
        self._shown_page: Optional[int] = None

        self.setup_ui()
        self._connect_signals()
        ThemeManager.apply_theme(self, self.settings.dark_mode)
        self._update_navigation()

        if file_path:
            self.load_pdf(file_path)

    # ===== UI setup =====

    def setup_ui(self):
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Top frame: document buttons and tool picker
        top_frame = QFrame(central)
        top_frame.setObjectName("TopFrame")
        top_layout = QHBoxLayout(top_frame)
        top_layout.setContentsMargins(10, 8, 10, 8)
        top_layout.setSpacing(8)

        self.open_button = QPushButton("Open PDF", top_frame)
        self.open_button.setToolTip("Open a PDF document (Ctrl+O)")
        top_layout.addWidget(self.open_button)

        self.close_button = QPushButton("Close", top_frame)
        self.close_button.setToolTip("Close the document (Ctrl+W)")
        top_layout.addWidget(self.close_button)

        self.annotation_toolbar = AnnotationToolbar(
            self.settings.highlight_color, self.settings.underline_color, top_frame
        )
        top_layout.addWidget(self.annotation_toolbar, 1)
        layout.addWidget(top_frame)

        # Page view
        self.scroll_area = QScrollArea(central)
        self.scroll_area.setWidgetResizable(True)
        self.page_backdrop = QWidget()
        self.page_backdrop.setObjectName("PageBackdrop")
        backdrop_layout = QVBoxLayout(self.page_backdrop)
        backdrop_layout.setContentsMargins(10, 10, 10, 10)
        self.page_canvas = PageCanvas(self.annotation_controller, self.page_backdrop)
        backdrop_layout.addWidget(self.page_canvas, 0, Qt.AlignHCenter | Qt.AlignTop)
        self.scroll_area.setWidget(self.page_backdrop)
        # Paging keys must work while the scroll area has focus
        self.scroll_area.installEventFilter(self)
        layout.addWidget(self.scroll_area, 1)

        # Navigation bar
        self.navigation_bar = QFrame(central)
        self.navigation_bar.setObjectName("NavigationBar")
        nav_layout = QHBoxLayout(self.navigation_bar)
        nav_layout.setContentsMargins(10, 6, 10, 6)
        nav_layout.addStretch()
        self.prev_button = QPushButton("Previous", self.navigation_bar)
        nav_layout.addWidget(self.prev_button)
        self.page_status_label = QLabel(self.navigation_bar)
        self.page_status_label.setObjectName("PageStatus")
        self.page_status_label.setAlignment(Qt.AlignCenter)
        self.page_status_label.setMinimumWidth(120)
        nav_layout.addWidget(self.page_status_label)
        self.next_button = QPushButton("Next", self.navigation_bar)
        nav_layout.addWidget(self.next_button)
        nav_layout.addStretch()
        layout.addWidget(self.navigation_bar)

        self.setCentralWidget(central)
        self.toast = Toast(central, self.settings.toast_duration_ms)

    def _connect_signals(self):
        self.open_button.clicked.connect(self.open_pdf)
        self.close_button.clicked.connect(self.close_pdf)
        self.prev_button.clicked.connect(self.view_controller.previous_page)
        self.next_button.clicked.connect(self.view_controller.next_page)

        toolbar = self.annotation_toolbar
        toolbar.tool_selected.connect(self.annotation_controller.set_tool)
        toolbar.highlight_color_changed.connect(self.annotation_controller.set_highlight_color)
        toolbar.underline_color_changed.connect(self.annotation_controller.set_underline_color)
        toolbar.comment_text_changed.connect(self.annotation_controller.set_comment_text)
        toolbar.signature_clear_requested.connect(self._clear_signature)

        self.annotation_controller.annotations_changed.connect(self._on_annotations_changed)
        self.view_controller.page_changed.connect(self._on_page_changed)
        self.view_controller.width_changed.connect(lambda _width: self._render_current_page())

    # ===== Document handling =====

    def open_pdf(self):
        """Ask for a file and load it."""
        start_dir = ""
        if self.pdf_reader.current_handle:
            start_dir = os.path.dirname(self.pdf_reader.current_handle.path)
        file_path, _ = QFileDialog.getOpenFileName(self, "Open PDF", start_dir, "PDF Files (*.pdf)")
        if file_path:
            self.load_pdf(file_path)

    def load_pdf(self, file_path: str) -> bool:
        """
        Validate and load a PDF, replacing the current document.

        Rejected or unreadable files leave the current document and its
        annotations untouched.

        Returns:
            True if the document was loaded
        """
        self.toast.dismiss()

        try:
            handle = validate_document(file_path, self.settings.max_upload_mb)
        except DocumentValidationError as e:
            self.toast.show_error(e.message)
            return False
        except OSError as e:
            logger.warning("Cannot read %s: %s", file_path, e)
            self.toast.show_error("Could not read the selected file.")
            return False

        if not self._confirm_discard_annotations():
            return False

        success, page_count = self.pdf_reader.load_pdf(handle)
        if not success:
            self.toast.show_error("Error loading PDF.")
            return False

        self.session.reset()
        self._shown_page = None
        self.page_canvas.overlay_painter.clear_cache()
        self.setWindowTitle(f"Inkmark PDF - {os.path.basename(handle.path)}")
        self._update_render_width()
        self.view_controller.set_document_info(page_count)
        return True

    def close_pdf(self):
        """Close the document and discard its annotations."""
        if not self.pdf_reader.is_loaded():
            return
        if not self._confirm_discard_annotations():
            return

        self.pdf_reader.close_document()
        self.session.reset()
        self._shown_page = None
        self.page_canvas.clear_page()
        self.setWindowTitle("Inkmark PDF")
        self._update_navigation()

    def _confirm_discard_annotations(self) -> bool:
        if self.session.annotation_manager.get_annotation_count() == 0:
            return True
        return confirmation_prompts.confirm(self, PromptKind.DISCARD_ANNOTATIONS)

    # ===== Rendering =====

    def _update_render_width(self):
        margins = self.page_backdrop.layout().contentsMargins()
        available = self.scroll_area.viewport().width() - margins.left() - margins.right()
        self.view_controller.update_container_width(available)

    def _render_current_page(self):
        if not self.pdf_reader.is_loaded() or self.view_controller.render_width <= 0:
            return
        pixmap = self.pdf_reader.render_page(
            self.session.page_number, self.view_controller.render_width
        )
        if pixmap is None:
            self.toast.show_error("Error loading PDF.")
            # Stay on the page that is still on screen
            if self._shown_page is not None:
                self.session.go_to_page(self._shown_page)
            return
        self.page_canvas.set_page_pixmap(pixmap)
        self._shown_page = self.session.page_number

    def _update_navigation(self):
        has_pages = self.view_controller.page_count > 0
        self.navigation_bar.setVisible(has_pages)
        self.close_button.setEnabled(self.pdf_reader.is_loaded())
        self.prev_button.setEnabled(self.view_controller.can_go_previous())
        self.next_button.setEnabled(self.view_controller.can_go_next())
        if has_pages:
            self.page_status_label.setText(
                f"Page {self.view_controller.page_number} of {self.view_controller.page_count}"
            )

    # ===== Slots =====

    def _on_page_changed(self, page_number: int):
        self._render_current_page()
        self._update_navigation()

    def _on_annotations_changed(self):
        # A committed comment consumes the pending text
        self.annotation_toolbar.set_comment_text(self.session.tool_state.comment_text)
        self.page_canvas.update()

    def _clear_signature(self):
        if self.session.signature_canvas is not None:
            self.session.signature_canvas.reset()
            self.page_canvas.update()

    # ===== Qt events =====

    def keyPressEvent(self, event):
        if not self.input_handler.handle_key_press(event):
            super().keyPressEvent(event)

    def eventFilter(self, watched, event):
        if watched is self.scroll_area and event.type() == QEvent.KeyPress:
            if self.input_handler.handle_key_press(event):
                return True
        return super().eventFilter(watched, event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._update_render_width()

    def closeEvent(self, event):
        self.pdf_reader.close_document()
        event.accept()
