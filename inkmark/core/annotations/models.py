"""
Annotation records placed on document pages.
"""
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict


class AnnotationType(Enum):
    HIGHLIGHT = "highlight"
    UNDERLINE = "underline"
    COMMENT = "comment"
    SIGNATURE = "signature"


def generate_id() -> str:
    """Return a new opaque annotation id."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Annotation:
    """
    Common fields of every annotation.

    Coordinates are pixels relative to the top-left corner of the page
    surface as it was displayed when the annotation was created.
    """
    annotation_type: ClassVar[AnnotationType]

    id: str
    page: int  # 1-based page number
    x: float
    y: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert annotation to a plain dictionary."""
        data = {
            'id': self.id,
            'type': self.annotation_type.value,
            'page': self.page,
            'x': self.x,
            'y': self.y,
        }
        data.update(self._extra_fields())
        return data

    def _extra_fields(self) -> Dict[str, Any]:
        return {}


@dataclass(frozen=True)
class HighlightAnnotation(Annotation):
    """Translucent rectangle over a region of the page."""
    annotation_type: ClassVar[AnnotationType] = AnnotationType.HIGHLIGHT

    color: str
    width: float
    height: float

    def _extra_fields(self) -> Dict[str, Any]:
        return {'color': self.color, 'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class UnderlineAnnotation(Annotation):
    """Thin strip drawn beneath a line of text."""
    annotation_type: ClassVar[AnnotationType] = AnnotationType.UNDERLINE

    color: str
    width: float

    def _extra_fields(self) -> Dict[str, Any]:
        return {'color': self.color, 'width': self.width}


@dataclass(frozen=True)
class CommentAnnotation(Annotation):
    """Note box anchored at a point."""
    annotation_type: ClassVar[AnnotationType] = AnnotationType.COMMENT

    text: str

    def _extra_fields(self) -> Dict[str, Any]:
        return {'text': self.text}


@dataclass(frozen=True)
class SignatureAnnotation(Annotation):
    """Raster signature stamp; image_data is a data URL."""
    annotation_type: ClassVar[AnnotationType] = AnnotationType.SIGNATURE

    image_data: str

    def _extra_fields(self) -> Dict[str, Any]:
        return {'imageData': self.image_data}
