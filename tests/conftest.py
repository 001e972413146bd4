"""Shared fixtures.

Qt runs headless through the offscreen platform plugin; the variable has to
be set before pytest-qt creates the QApplication.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import fitz  # noqa: E402
import pytest  # noqa: E402

from inkmark.config import AppSettings  # noqa: E402
from inkmark.core.drawing import SurfaceRect  # noqa: E402
from inkmark.core.session import AnnotationSession  # noqa: E402

# Surface placed at (100, 200) on screen; tests pass client positions.
SURFACE = SurfaceRect(100.0, 200.0, 600.0, 800.0)


def client(x: float, y: float) -> tuple:
    """Client position for a point at (x, y) on SURFACE."""
    return (SURFACE.left + x, SURFACE.top + y)


@pytest.fixture
def session() -> AnnotationSession:
    """Fresh session showing page 1 of a three-page document."""
    s = AnnotationSession(AppSettings())
    s.set_page_count(3)
    return s


@pytest.fixture
def make_pdf(tmp_path):
    """Write a PDF with the given number of pages and return its path."""

    def _make(pages: int = 2, name: str = "doc.pdf") -> str:
        path = tmp_path / name
        doc = fitz.open()
        for index in range(pages):
            page = doc.new_page(width=595, height=842)
            page.insert_text((72, 72), f"Page {index + 1}")
        doc.save(str(path))
        doc.close()
        return str(path)

    return _make
