"""
Annotation system for PDF documents.
"""
from .models import (
    Annotation,
    AnnotationType,
    CommentAnnotation,
    HighlightAnnotation,
    SignatureAnnotation,
    UnderlineAnnotation,
    generate_id,
)
from .manager import AnnotationManager

__all__ = [
    'Annotation',
    'AnnotationType',
    'HighlightAnnotation',
    'UnderlineAnnotation',
    'CommentAnnotation',
    'SignatureAnnotation',
    'generate_id',
    'AnnotationManager',
]
