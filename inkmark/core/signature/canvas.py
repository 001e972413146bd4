"""
Free-draw raster that accumulates signature strokes.
"""
import base64
from typing import Optional

from PyQt5.QtCore import QBuffer, QByteArray, QIODevice, QPointF, Qt
from PyQt5.QtGui import QColor, QImage, QPainter, QPen

from inkmark.core.drawing.coordinates import Point

PNG_DATA_URL_PREFIX = "data:image/png;base64,"


def encode_image_payload(image: QImage) -> str:
    """Encode an image as a PNG data URL."""
    byte_array = QByteArray()
    buffer = QBuffer(byte_array)
    buffer.open(QIODevice.WriteOnly)
    image.save(buffer, "PNG")
    buffer.close()
    return PNG_DATA_URL_PREFIX + bytes(byte_array.toBase64()).decode("ascii")


def decode_image_payload(payload: str) -> Optional[QImage]:
    """
    Decode a data URL produced by encode_image_payload.

    Returns:
        The image, or None if the payload cannot be decoded
    """
    if not payload.startswith("data:") or "," not in payload:
        return None

    _, encoded = payload.split(",", 1)
    try:
        raw = base64.b64decode(encoded, validate=True)
    except ValueError:
        return None

    image = QImage()
    if not image.loadFromData(raw):
        return None
    return image


class SignatureCanvas:
    """
    Transparent raster that signature strokes are drawn onto.

    Strokes accumulate until reset() is called; snapshot() always captures
    the whole drawing.
    """

    def __init__(self, width: int, height: int, stroke_width: float = 2.0,
                 stroke_color: str = "#000000"):
        self.image = QImage(max(1, int(width)), max(1, int(height)),
                            QImage.Format_ARGB32_Premultiplied)
        self.image.fill(Qt.transparent)
        self.stroke_width = stroke_width
        self.stroke_color = stroke_color
        self._last_point: Optional[Point] = None

    @property
    def width(self) -> int:
        return self.image.width()

    @property
    def height(self) -> int:
        return self.image.height()

    def draw_segment(self, start: Point, end: Point) -> None:
        """Stroke a round-capped line from start to end."""
        painter = QPainter(self.image)
        painter.setRenderHint(QPainter.Antialiasing)
        pen = QPen(QColor(self.stroke_color), self.stroke_width,
                   Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin)
        painter.setPen(pen)
        painter.drawLine(QPointF(start.x, start.y), QPointF(end.x, end.y))
        painter.end()

    def add_point(self, point: Point) -> None:
        """Extend the current stroke to point."""
        if self._last_point is not None:
            self.draw_segment(self._last_point, point)
        self._last_point = point

    def end_stroke(self) -> None:
        """Lift the pen; the next point starts a new stroke."""
        self._last_point = None

    def snapshot(self) -> str:
        """Return the accumulated drawing as a PNG data URL."""
        return encode_image_payload(self.image)

    def resize(self, width: int, height: int) -> None:
        """Change the raster size, keeping existing strokes anchored at the top-left."""
        width, height = max(1, int(width)), max(1, int(height))
        if (width, height) == (self.width, self.height):
            return
        image = QImage(width, height, QImage.Format_ARGB32_Premultiplied)
        image.fill(Qt.transparent)
        painter = QPainter(image)
        painter.drawImage(0, 0, self.image)
        painter.end()
        self.image = image

    def reset(self) -> None:
        """Erase all strokes."""
        self.image.fill(Qt.transparent)
        self._last_point = None
