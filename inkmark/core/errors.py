"""
Exception types raised by the core.
"""


class InkmarkError(Exception):
    """Base class for all Inkmark errors."""


class DocumentValidationError(InkmarkError):
    """A selected file was rejected before loading."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDocumentTypeError(DocumentValidationError):
    """The selected file is not a PDF."""


class DocumentTooLargeError(DocumentValidationError):
    """The selected file exceeds the configured size limit."""


class DocumentLoadError(InkmarkError):
    """The rendering backend could not open the document."""


class DuplicateAnnotationError(InkmarkError):
    """An annotation with the same id is already in the collection."""
