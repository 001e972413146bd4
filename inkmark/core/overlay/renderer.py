"""
Projection of stored annotations into paintable primitives for one page.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Union

from inkmark.core.annotations import (
    Annotation,
    AnnotationManager,
    AnnotationType,
    CommentAnnotation,
    HighlightAnnotation,
    SignatureAnnotation,
    UnderlineAnnotation,
)

HIGHLIGHT_OPACITY = 0.5
UNDERLINE_THICKNESS = 3.0
NOTE_BACKGROUND = "#fef9c3"
NOTE_PADDING = 8
SIGNATURE_MAX_WIDTH = 200
SIGNATURE_MAX_HEIGHT = 100


@dataclass(frozen=True)
class RectPrimitive:
    """Filled rectangle (highlights and underlines)."""
    annotation_id: str
    x: float
    y: float
    width: float
    height: float
    color: str
    opacity: float = 1.0


@dataclass(frozen=True)
class NotePrimitive:
    """Comment box whose top-left corner sits at (x, y)."""
    annotation_id: str
    x: float
    y: float
    text: str
    background: str = NOTE_BACKGROUND
    padding: int = NOTE_PADDING


@dataclass(frozen=True)
class ImagePrimitive:
    """Raster stamp, scaled down to fit within max_width x max_height."""
    annotation_id: str
    x: float
    y: float
    image_data: str
    max_width: int = SIGNATURE_MAX_WIDTH
    max_height: int = SIGNATURE_MAX_HEIGHT


OverlayPrimitive = Union[RectPrimitive, NotePrimitive, ImagePrimitive]


def _project_highlight(annotation: HighlightAnnotation) -> RectPrimitive:
    return RectPrimitive(annotation.id, annotation.x, annotation.y,
                         annotation.width, annotation.height,
                         annotation.color, HIGHLIGHT_OPACITY)


def _project_underline(annotation: UnderlineAnnotation) -> RectPrimitive:
    return RectPrimitive(annotation.id, annotation.x, annotation.y,
                         annotation.width, UNDERLINE_THICKNESS, annotation.color)


def _project_comment(annotation: CommentAnnotation) -> NotePrimitive:
    return NotePrimitive(annotation.id, annotation.x, annotation.y, annotation.text)


def _project_signature(annotation: SignatureAnnotation) -> ImagePrimitive:
    return ImagePrimitive(annotation.id, annotation.x, annotation.y, annotation.image_data)


# Every AnnotationType needs an entry here.
PROJECTORS: Dict[AnnotationType, Callable[..., OverlayPrimitive]] = {
    AnnotationType.HIGHLIGHT: _project_highlight,
    AnnotationType.UNDERLINE: _project_underline,
    AnnotationType.COMMENT: _project_comment,
    AnnotationType.SIGNATURE: _project_signature,
}


def project_annotation(annotation: Annotation) -> OverlayPrimitive:
    """Convert one annotation into its visual primitive."""
    try:
        projector = PROJECTORS[annotation.annotation_type]
    except KeyError:
        raise ValueError(
            f"No overlay projection for {annotation.annotation_type!r}"
        ) from None
    return projector(annotation)


class PageOverlay:
    """
    Primitives for the annotations on one page.

    Iteration is lazy and can be repeated; each pass re-reads the
    annotation collection, so a fresh PageOverlay is not required after
    the model changes, but the page number is fixed per instance.
    """

    def __init__(self, manager: AnnotationManager, page_number: int):
        self.manager = manager
        self.page_number = page_number

    def __iter__(self) -> Iterator[OverlayPrimitive]:
        for annotation in self.manager.get_annotations_for_page(self.page_number):
            yield project_annotation(annotation)
