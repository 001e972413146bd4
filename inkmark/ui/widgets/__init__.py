"""
Custom widgets for page display and notifications.
"""
from .overlay_painter import OverlayPainter
from .page_canvas import PageCanvas
from .toast import Toast

__all__ = ['OverlayPainter', 'PageCanvas', 'Toast']
