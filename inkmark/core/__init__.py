"""
Core business logic for Inkmark PDF.
"""
from .annotations import Annotation, AnnotationManager, AnnotationType

__all__ = ['AnnotationManager', 'Annotation', 'AnnotationType']
