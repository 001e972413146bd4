"""
Conversion of pointer positions into page-surface pixel coordinates.
"""
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    x: float
    y: float


class SurfaceRect(NamedTuple):
    """Bounding rectangle of the rendering surface in client coordinates."""
    left: float
    top: float
    width: float
    height: float


def to_surface_coords(client_pos: Tuple[float, float], surface_rect: SurfaceRect) -> Point:
    """
    Translate a client-space pointer position into the surface's local space.

    Args:
        client_pos: (x, y) position of the pointer event
        surface_rect: Bounding rectangle of the rendering surface

    Returns:
        Point relative to the surface's top-left corner
    """
    client_x, client_y = client_pos
    return Point(client_x - surface_rect.left, client_y - surface_rect.top)
