"""
Checks applied to a selected file before it is handed to the renderer.
"""
import logging
import mimetypes
import os
from dataclasses import dataclass
from typing import Optional

from inkmark.core.errors import DocumentTooLargeError, InvalidDocumentTypeError

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DEFAULT_MAX_SIZE_MB = 10


@dataclass(frozen=True)
class DocumentHandle:
    """A validated document the rendering backend can open."""
    path: str
    size: int
    mime_type: str


def guess_mime_type(path: str) -> Optional[str]:
    mime_type, _ = mimetypes.guess_type(path)
    return mime_type


def validate_document(path: str, max_size_mb: float = DEFAULT_MAX_SIZE_MB) -> DocumentHandle:
    """
    Validate that a file is a PDF within the size limit.

    Args:
        path: Path to the selected file
        max_size_mb: Largest accepted size in megabytes

    Returns:
        Handle to the accepted document

    Raises:
        InvalidDocumentTypeError: if the file is not a PDF
        DocumentTooLargeError: if the file exceeds max_size_mb
    """
    mime_type = guess_mime_type(path)
    if mime_type != PDF_MIME_TYPE:
        logger.info("Rejected %s: type %s", path, mime_type)
        raise InvalidDocumentTypeError("Please select a PDF file.")

    size = os.path.getsize(path)
    if size > max_size_mb * 1024 * 1024:
        logger.info("Rejected %s: %d bytes exceeds %s MB", path, size, max_size_mb)
        raise DocumentTooLargeError(f"File must be less than {max_size_mb:g}MB.")

    return DocumentHandle(path=os.path.abspath(path), size=size, mime_type=mime_type)
