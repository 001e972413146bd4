"""
Ordered collection of the annotations created in a document session.
"""
import logging
from typing import Iterator, List, Set

from inkmark.core.errors import DuplicateAnnotationError
from .models import Annotation

logger = logging.getLogger(__name__)


class AnnotationManager:
    """Holds all annotations for the open document in creation order."""

    def __init__(self):
        self.annotations: List[Annotation] = []
        self._ids: Set[str] = set()

    def add_annotation(self, annotation: Annotation) -> None:
        """
        Append a new annotation.

        Args:
            annotation: Annotation to add

        Raises:
            DuplicateAnnotationError: if an annotation with the same id exists
        """
        if annotation.id in self._ids:
            raise DuplicateAnnotationError(
                f"Annotation id {annotation.id!r} is already in use"
            )
        self._ids.add(annotation.id)
        self.annotations.append(annotation)
        logger.debug("Added %s annotation %s on page %d",
                     annotation.annotation_type.value, annotation.id, annotation.page)

    def get_annotations_for_page(self, page: int) -> List[Annotation]:
        """
        Get all annotations for a specific page.

        Args:
            page: 1-based page number

        Returns:
            Annotations on the page, in creation order
        """
        return [ann for ann in self.annotations if ann.page == page]

    def clear_all(self) -> None:
        """Discard every annotation. Ids stay reserved for the manager's lifetime."""
        self.annotations.clear()

    def get_annotation_count(self) -> int:
        """Get total number of annotations."""
        return len(self.annotations)

    def __iter__(self) -> Iterator[Annotation]:
        return iter(self.annotations)

    def __len__(self) -> int:
        return len(self.annotations)
