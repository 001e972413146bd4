"""
Inkmark PDF: annotate PDF pages with highlights, underlines, comments and signatures.
"""

__version__ = "0.1.0"
