"""
Transient notification shown over the main window.
"""
from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import QGraphicsDropShadowEffect, QLabel

ERROR_STYLE = """
    QLabel {
        background-color: #ff6b6b;
        color: white;
        border-radius: 6px;
        padding: 10px 16px;
        font-weight: bold;
    }
"""


class Toast(QLabel):
    """Label that floats at the top of its parent and hides itself after a delay."""

    def __init__(self, parent=None, duration_ms: int = 3000):
        super().__init__(parent)
        self.setObjectName("Toast")
        self.duration_ms = duration_ms
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.hide)

        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(20)
        shadow.setColor(QColor(0, 0, 0, 80))
        shadow.setOffset(0, 2)
        self.setGraphicsEffect(shadow)
        self.hide()

    def show_error(self, message: str) -> None:
        self._show(message, ERROR_STYLE)

    def dismiss(self) -> None:
        self._timer.stop()
        self.hide()

    def _show(self, message: str, style: str) -> None:
        self.setStyleSheet(style)
        self.setText(message)
        self.adjustSize()
        parent = self.parentWidget()
        if parent is not None:
            self.move((parent.width() - self.width()) // 2, 16)
        self.show()
        self.raise_()
        self._timer.start(self.duration_ms)
