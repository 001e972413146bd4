"""
PDF document loading and page rendering.
"""
import logging
from typing import Optional, Tuple

import fitz  # PyMuPDF
from PyQt5.QtGui import QImage, QPixmap

from inkmark.core.errors import DocumentLoadError
from .file_validation import DocumentHandle

logger = logging.getLogger(__name__)


class PDFDocumentReader:
    """Handles PDF document loading, rendering, and basic operations."""

    def __init__(self):
        self.doc: Optional[fitz.Document] = None
        self.total_pages: int = 0
        self.current_handle: Optional[DocumentHandle] = None

    def open_document(self, handle: DocumentHandle) -> fitz.Document:
        """
        Open a document with PyMuPDF.

        Raises:
            DocumentLoadError: if the file cannot be parsed or has no pages
        """
        try:
            doc = fitz.open(handle.path)
        except Exception as e:
            raise DocumentLoadError(f"Error loading PDF: {e}") from e

        if doc.page_count == 0:
            doc.close()
            raise DocumentLoadError("Error loading PDF: document has no pages")
        return doc

    def load_pdf(self, handle: DocumentHandle) -> Tuple[bool, int]:
        """
        Load a PDF document, replacing any open one.

        On failure the currently open document is left untouched.

        Args:
            handle: Validated document handle

        Returns:
            Tuple of (success flag, number of pages)
        """
        try:
            doc = self.open_document(handle)
        except DocumentLoadError as e:
            logger.error("%s (%s)", e, handle.path)
            return False, 0

        if self.doc:
            self.close_document()

        self.doc = doc
        self.total_pages = doc.page_count
        self.current_handle = handle
        logger.info("Loaded %s (%d pages)", handle.path, self.total_pages)
        return True, self.total_pages

    def close_document(self) -> None:
        """Close the current PDF document and clear all state."""
        if self.doc:
            self.doc.close()
            self.doc = None

        self.total_pages = 0
        self.current_handle = None

    def render_page(self, page_number: int, width: int) -> Optional[QPixmap]:
        """
        Render a page scaled to the requested pixel width.

        Args:
            page_number: 1-based page number
            width: Target width in pixels

        Returns:
            Pixmap of the page, or None if nothing can be rendered
        """
        if not self.doc or not (1 <= page_number <= self.total_pages) or width <= 0:
            return None

        try:
            page = self.doc.load_page(page_number - 1)
            zoom = width / page.rect.width
            pix = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False)
            img = QImage(
                pix.samples, pix.width, pix.height, pix.stride, QImage.Format_RGB888
            )
            # QImage does not own pix.samples; copy before pix is released
            return QPixmap.fromImage(img.copy())
        except Exception:
            logger.exception("Error rendering page %d", page_number)
            return None

    def is_loaded(self) -> bool:
        """Check if a document is currently loaded."""
        return self.doc is not None
