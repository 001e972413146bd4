"""Smoke tests for the main window wiring."""

import pytest
from PyQt5.QtCore import Qt

from inkmark.core.annotations import CommentAnnotation, generate_id
from inkmark.core.drawing import Tool
from inkmark.ui import MainWindow
from inkmark.utils import confirmation_prompts


@pytest.fixture
def window(qtbot, monkeypatch):
    # Never block on the discard dialog
    monkeypatch.setattr(confirmation_prompts, "confirm", lambda *args: True)
    win = MainWindow()
    qtbot.addWidget(win)
    win.resize(1200, 900)
    win.show()
    qtbot.waitExposed(win)
    return win


def test_starts_without_document(window: MainWindow) -> None:
    assert not window.pdf_reader.is_loaded()
    assert not window.navigation_bar.isVisible()
    assert not window.close_button.isEnabled()


def test_rejected_file_shows_toast(window: MainWindow, tmp_path) -> None:
    """Validation errors are reported and nothing is loaded."""

    path = tmp_path / "notes.txt"
    path.write_text("hello")

    assert window.load_pdf(str(path)) is False
    assert window.toast.text() == "Please select a PDF file."
    assert window.toast.isVisible()
    assert not window.pdf_reader.is_loaded()


def test_load_shows_first_page(window: MainWindow, make_pdf) -> None:
    assert window.load_pdf(make_pdf(pages=3)) is True

    assert window.page_canvas.has_page()
    assert window.page_status_label.text() == "Page 1 of 3"
    assert not window.prev_button.isEnabled()
    assert window.next_button.isEnabled()
    assert abs(window.session.surface_size[0] - window.view_controller.render_width) <= 1


def test_keyboard_navigation_and_escape(qtbot, window: MainWindow, make_pdf) -> None:
    """Arrow keys page through the document and Escape returns to select."""

    window.load_pdf(make_pdf(pages=2))
    window.annotation_toolbar.select_tool(Tool.HIGHLIGHT)
    assert window.session.tool_state.current_tool is Tool.HIGHLIGHT

    qtbot.keyClick(window, Qt.Key_Right)
    assert window.session.page_number == 2
    assert window.page_status_label.text() == "Page 2 of 2"

    qtbot.keyClick(window, Qt.Key_Right)
    assert window.session.page_number == 2

    qtbot.keyClick(window, Qt.Key_Escape)
    assert window.session.tool_state.current_tool is Tool.SELECT


def test_loading_new_document_discards_annotations(window: MainWindow, make_pdf) -> None:
    window.load_pdf(make_pdf(pages=2, name="first.pdf"))
    window.session.annotation_manager.add_annotation(
        CommentAnnotation(id=generate_id(), page=1, x=1.0, y=1.0, text="note")
    )

    window.load_pdf(make_pdf(pages=4, name="second.pdf"))

    assert window.session.annotation_manager.get_annotation_count() == 0
    assert window.view_controller.page_count == 4


def test_declined_discard_keeps_document(window: MainWindow, make_pdf, monkeypatch) -> None:
    """Answering no to the discard prompt leaves everything as it was."""

    window.load_pdf(make_pdf(pages=2, name="first.pdf"))
    window.session.annotation_manager.add_annotation(
        CommentAnnotation(id=generate_id(), page=1, x=1.0, y=1.0, text="note")
    )
    monkeypatch.setattr(confirmation_prompts, "confirm", lambda *args: False)

    assert window.load_pdf(make_pdf(pages=4, name="second.pdf")) is False
    assert window.session.annotation_manager.get_annotation_count() == 1
    assert window.view_controller.page_count == 2


def test_close_resets_view(window: MainWindow, make_pdf) -> None:
    window.load_pdf(make_pdf(pages=2))
    window.close_pdf()

    assert not window.pdf_reader.is_loaded()
    assert not window.page_canvas.has_page()
    assert not window.navigation_bar.isVisible()


def test_paging_keys_work_while_scroll_area_has_focus(qtbot, window: MainWindow, make_pdf) -> None:
    """Clicking the page focuses the scroll area; arrows must still turn pages."""

    window.load_pdf(make_pdf(pages=3))
    window.scroll_area.setFocus()

    qtbot.keyClick(window.scroll_area, Qt.Key_Right)
    assert window.session.page_number == 2

    qtbot.keyClick(window.scroll_area, Qt.Key_Left)
    assert window.session.page_number == 1
    assert window.page_status_label.text() == "Page 1 of 3"


def test_render_failure_keeps_current_page(window: MainWindow, make_pdf, monkeypatch) -> None:
    """A page that cannot be rendered leaves the previous page selected."""

    window.load_pdf(make_pdf(pages=3))
    monkeypatch.setattr(window.pdf_reader, "render_page", lambda page, width: None)

    assert window.view_controller.next_page()

    assert window.session.page_number == 1
    assert window.page_status_label.text() == "Page 1 of 3"
    assert window.toast.text() == "Error loading PDF."
    assert window.page_canvas.has_page()
