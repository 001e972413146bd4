"""
Controller for page navigation and render width.
"""
from PyQt5.QtCore import QObject, pyqtSignal

from inkmark.core.session import AnnotationSession

# Containers wider than NARROW and narrower than WIDE render pages at half width.
NARROW_CONTAINER_WIDTH = 600
WIDE_CONTAINER_WIDTH = 1000


def compute_render_width(container_width: int) -> int:
    """
    Page width to request for a container of the given width.

    Args:
        container_width: Available width in pixels

    Returns:
        Width in pixels to render the page at
    """
    if NARROW_CONTAINER_WIDTH < container_width < WIDE_CONTAINER_WIDTH:
        return container_width // 2
    return max(0, container_width)


class ViewController(QObject):
    """Manages page position and render width for the viewer."""

    # Signals
    page_changed = pyqtSignal(int)  # Emitted with the new 1-based page number
    width_changed = pyqtSignal(int)  # Emitted when the render width changes

    def __init__(self, session: AnnotationSession, parent: QObject = None):
        super().__init__(parent)
        self.session = session
        self.render_width: int = 0

    @property
    def page_number(self) -> int:
        return self.session.page_number

    @property
    def page_count(self) -> int:
        return self.session.page_count

    def set_document_info(self, page_count: int) -> None:
        """
        Apply the page count of a newly loaded document and show page 1.

        Args:
            page_count: Total number of pages in the document
        """
        self.session.set_page_count(page_count)
        self.page_changed.emit(self.session.page_number)

    def previous_page(self) -> bool:
        """Go back one page; no-op on the first page."""
        if self.session.go_to_previous_page():
            self.page_changed.emit(self.session.page_number)
            return True
        return False

    def next_page(self) -> bool:
        """Go forward one page; no-op on the last page."""
        if self.session.go_to_next_page():
            self.page_changed.emit(self.session.page_number)
            return True
        return False

    def can_go_previous(self) -> bool:
        return self.page_count > 0 and self.page_number > 1

    def can_go_next(self) -> bool:
        return self.page_count > 0 and self.page_number < self.page_count

    def update_container_width(self, container_width: int) -> int:
        """
        Recompute the render width from the container size.

        Annotations keep their stored pixel coordinates when the width changes.

        Returns:
            The new render width
        """
        width = compute_render_width(container_width)
        if width != self.render_width:
            self.render_width = width
            self.width_changed.emit(width)
        return width
