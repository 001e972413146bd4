"""Tests for page navigation and render width."""

import pytest

from inkmark.controllers import ViewController
from inkmark.controllers.view_controller import compute_render_width
from inkmark.core.session import AnnotationSession


@pytest.mark.parametrize(
    "container,expected",
    [(0, 0), (-5, 0), (600, 600), (601, 300), (999, 499), (1000, 1000), (1600, 1600)],
)
def test_compute_render_width(container: int, expected: int) -> None:
    """Mid-sized containers render pages at half width."""

    assert compute_render_width(container) == expected


def test_session_navigation_is_clamped(session: AnnotationSession) -> None:
    """Previous and next never leave the document."""

    assert session.go_to_previous_page() is False
    assert session.page_number == 1

    assert session.go_to_next_page() is True
    assert session.go_to_next_page() is True
    assert session.go_to_next_page() is False
    assert session.page_number == 3

    assert session.go_to_page(99) is False
    assert session.go_to_page(-4) is True
    assert session.page_number == 1


def test_navigation_without_document_does_nothing() -> None:
    session = AnnotationSession()
    assert session.go_to_next_page() is False
    assert session.go_to_previous_page() is False
    assert session.page_number == 1


def test_view_controller_emits_page_changes(qtbot, session: AnnotationSession) -> None:
    """page_changed fires only when the page really changes."""

    controller = ViewController(session)
    assert not controller.can_go_previous()
    assert controller.can_go_next()

    with qtbot.waitSignal(controller.page_changed) as blocker:
        assert controller.next_page()
    assert blocker.args == [2]

    controller.next_page()
    with qtbot.assertNotEmitted(controller.page_changed):
        assert controller.next_page() is False
    assert not controller.can_go_next()


def test_set_document_info_resets_to_first_page(qtbot, session: AnnotationSession) -> None:
    controller = ViewController(session)
    session.go_to_page(3)

    with qtbot.waitSignal(controller.page_changed) as blocker:
        controller.set_document_info(5)
    assert blocker.args == [1]
    assert controller.page_count == 5
    assert controller.can_go_next()


def test_width_changes_are_signalled_once(qtbot, session: AnnotationSession) -> None:
    controller = ViewController(session)

    with qtbot.waitSignal(controller.width_changed) as blocker:
        assert controller.update_container_width(800) == 400
    assert blocker.args == [400]

    with qtbot.assertNotEmitted(controller.width_changed):
        controller.update_container_width(801)
