"""
Page overlay renderer.
"""
from .renderer import (
    ImagePrimitive,
    NotePrimitive,
    OverlayPrimitive,
    PageOverlay,
    RectPrimitive,
    project_annotation,
)

__all__ = [
    'ImagePrimitive',
    'NotePrimitive',
    'OverlayPrimitive',
    'PageOverlay',
    'RectPrimitive',
    'project_annotation',
]
