"""Tests for painting overlay primitives onto an image."""

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QImage, QPainter

from inkmark.core.overlay import RectPrimitive
from inkmark.ui.widgets import OverlayPainter


def _paint_alpha(primitive: RectPrimitive, painter_opacity: float) -> int:
    image = QImage(20, 20, QImage.Format_ARGB32)
    image.fill(Qt.transparent)
    painter = QPainter(image)
    painter.setOpacity(painter_opacity)
    OverlayPainter().paint(painter, [primitive])
    painter.end()
    return image.pixelColor(5, 5).alpha()


def test_rect_opacity_combines_with_painter_opacity(qapp) -> None:
    """A faded painter fades opaque and translucent boxes alike."""

    strip = RectPrimitive("u", 0, 0, 20, 13, "#0000ff")
    box = RectPrimitive("h", 0, 0, 20, 20, "#ffff00", 0.5)

    assert _paint_alpha(strip, 1.0) == 255
    assert abs(_paint_alpha(strip, 0.6) - 153) <= 2
    assert abs(_paint_alpha(box, 1.0) - 128) <= 2
    assert abs(_paint_alpha(box, 0.6) - 77) <= 2


def test_zero_width_rect_paints_nothing(qapp) -> None:
    assert _paint_alpha(RectPrimitive("u", 0, 0, 0, 20, "#0000ff"), 1.0) == 0
