"""
PDF document acquisition and rendering.
"""
from .file_validation import DocumentHandle, validate_document
from .pdf_reader import PDFDocumentReader

__all__ = ['DocumentHandle', 'validate_document', 'PDFDocumentReader']
