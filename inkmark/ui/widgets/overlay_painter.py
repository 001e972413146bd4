"""
QPainter drawing of overlay primitives.
"""
from typing import Dict, Iterable, Optional

from PyQt5.QtCore import QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QFontMetrics, QImage, QPainter, QPen

from inkmark.core.overlay import ImagePrimitive, NotePrimitive, OverlayPrimitive, RectPrimitive
from inkmark.core.signature import decode_image_payload

NOTE_TEXT_COLOR = QColor(30, 30, 30)
NOTE_BORDER_COLOR = QColor(0, 0, 0, 40)
NOTE_RADIUS = 4.0


class OverlayPainter:
    """Paints primitives and caches decoded signature images by annotation id."""

    def __init__(self):
        self._images: Dict[str, Optional[QImage]] = {}

    def clear_cache(self) -> None:
        self._images.clear()

    def paint(self, painter: QPainter, primitives: Iterable[OverlayPrimitive]) -> None:
        for primitive in primitives:
            if isinstance(primitive, RectPrimitive):
                self._paint_rect(painter, primitive)
            elif isinstance(primitive, NotePrimitive):
                self._paint_note(painter, primitive)
            elif isinstance(primitive, ImagePrimitive):
                self._paint_image(painter, primitive)
            else:
                raise TypeError(f"Cannot paint {type(primitive).__name__}")

    def _paint_rect(self, painter: QPainter, rect: RectPrimitive) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return
        painter.save()
        painter.setOpacity(painter.opacity() * rect.opacity)
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(QColor(rect.color)))
        painter.drawRect(QRectF(rect.x, rect.y, rect.width, rect.height))
        painter.restore()

    def _paint_note(self, painter: QPainter, note: NotePrimitive) -> None:
        painter.save()
        metrics = QFontMetrics(painter.font())
        text_rect = metrics.boundingRect(0, 0, 10000, 10000, Qt.AlignLeft | Qt.AlignTop, note.text)
        box = QRectF(note.x, note.y,
                     text_rect.width() + 2 * note.padding,
                     text_rect.height() + 2 * note.padding)

        # Drop shadow
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(0, 0, 0, 50))
        painter.drawRoundedRect(box.translated(0, 2), NOTE_RADIUS, NOTE_RADIUS)

        painter.setPen(QPen(NOTE_BORDER_COLOR, 1))
        painter.setBrush(QBrush(QColor(note.background)))
        painter.drawRoundedRect(box, NOTE_RADIUS, NOTE_RADIUS)

        painter.setPen(NOTE_TEXT_COLOR)
        painter.drawText(box.adjusted(note.padding, note.padding, -note.padding, -note.padding),
                         Qt.AlignLeft | Qt.AlignTop, note.text)
        painter.restore()

    def _paint_image(self, painter: QPainter, stamp: ImagePrimitive) -> None:
        if stamp.annotation_id not in self._images:
            self._images[stamp.annotation_id] = decode_image_payload(stamp.image_data)
        image = self._images[stamp.annotation_id]
        if image is None or image.isNull():
            return

        # Scale down only, keeping the aspect ratio
        scale = min(1.0, stamp.max_width / image.width(), stamp.max_height / image.height())
        target = QRectF(stamp.x, stamp.y, image.width() * scale, image.height() * scale)
        painter.save()
        painter.setRenderHint(QPainter.SmoothPixmapTransform)
        painter.drawImage(target, image)
        painter.restore()
