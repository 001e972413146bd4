"""Tests for annotation records and the annotation manager."""

import dataclasses

import pytest

from inkmark.core.annotations import (
    AnnotationManager,
    AnnotationType,
    CommentAnnotation,
    HighlightAnnotation,
    SignatureAnnotation,
    UnderlineAnnotation,
    generate_id,
)
from inkmark.core.errors import DuplicateAnnotationError


def _highlight(page: int = 1, ann_id: str = None) -> HighlightAnnotation:
    return HighlightAnnotation(
        id=ann_id or generate_id(), page=page, x=1.0, y=2.0,
        color="#ffff00", width=30.0, height=20.0,
    )


def test_generated_ids_are_unique() -> None:
    """Ids never repeat across many generations."""

    ids = {generate_id() for _ in range(1000)}
    assert len(ids) == 1000


def test_variants_carry_their_discriminant() -> None:
    """Each variant reports its own annotation type."""

    assert HighlightAnnotation.annotation_type is AnnotationType.HIGHLIGHT
    assert UnderlineAnnotation.annotation_type is AnnotationType.UNDERLINE
    assert CommentAnnotation.annotation_type is AnnotationType.COMMENT
    assert SignatureAnnotation.annotation_type is AnnotationType.SIGNATURE


def test_annotations_are_immutable() -> None:
    """Page and coordinates cannot be reassigned after creation."""

    ann = _highlight(page=2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ann.page = 3  # type: ignore[misc]


def test_to_dict_includes_variant_fields() -> None:
    """Dictionary form holds common and variant-specific fields."""

    comment = CommentAnnotation(id="c1", page=1, x=5.0, y=6.0, text="hello")
    assert comment.to_dict() == {
        "id": "c1", "type": "comment", "page": 1, "x": 5.0, "y": 6.0, "text": "hello",
    }

    signature = SignatureAnnotation(id="s1", page=2, x=0.0, y=0.0, image_data="data:x")
    assert signature.to_dict()["imageData"] == "data:x"
    assert signature.to_dict()["type"] == "signature"


def test_manager_keeps_insertion_order_and_filters_pages() -> None:
    """Page filtering preserves creation order."""

    manager = AnnotationManager()
    first = _highlight(page=1)
    other_page = _highlight(page=2)
    second = _highlight(page=1)
    for ann in (first, other_page, second):
        manager.add_annotation(ann)

    assert manager.get_annotations_for_page(1) == [first, second]
    assert manager.get_annotations_for_page(2) == [other_page]
    assert manager.get_annotations_for_page(3) == []
    assert list(manager) == [first, other_page, second]
    assert len(manager) == manager.get_annotation_count() == 3


def test_manager_rejects_duplicate_ids() -> None:
    """Adding a second annotation with a used id fails."""

    manager = AnnotationManager()
    manager.add_annotation(_highlight(ann_id="same"))
    with pytest.raises(DuplicateAnnotationError):
        manager.add_annotation(_highlight(ann_id="same"))
    assert manager.get_annotation_count() == 1


def test_cleared_ids_are_not_reused() -> None:
    """Ids stay reserved after the collection is cleared."""

    manager = AnnotationManager()
    manager.add_annotation(_highlight(ann_id="a"))
    manager.clear_all()
    assert manager.get_annotation_count() == 0
    with pytest.raises(DuplicateAnnotationError):
        manager.add_annotation(_highlight(ann_id="a"))
