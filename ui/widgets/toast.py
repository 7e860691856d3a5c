# ui/widgets/toast.py

from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout, QGraphicsOpacityEffect
from PySide6.QtCore import Qt, QTimer, QPoint, QPropertyAnimation, QEasingCurve

from core.config import TOAST_DURATION


class Toast(QWidget):
    """Short-lived confirmation shown over the bottom centre of its parent."""

    FADE_MS = 300

    def __init__(self, message, duration=TOAST_DURATION, parent=None):
        super().__init__(parent)
        self.setWindowFlags(Qt.FramelessWindowHint | Qt.ToolTip)
        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet("""
            background: #2d2d2d;
            color: #f0f0f0;
            padding: 8px;
            border: 1px solid #555;
            font-size: 13px;
        """)

        self.label = QLabel(message, self)
        layout = QVBoxLayout(self)
        layout.addWidget(self.label)
        layout.setContentsMargins(10, 6, 10, 6)

        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)

        self.fade_in = self._fade(0, 1)
        self.fade_out = self._fade(1, 0)
        self.fade_out.finished.connect(self.close)

        self.adjustSize()
        QTimer.singleShot(duration, self.fade_out.start)

    def _fade(self, start: float, end: float) -> QPropertyAnimation:
        anim = QPropertyAnimation(self.opacity_effect, b"opacity", self)
        anim.setDuration(self.FADE_MS)
        anim.setStartValue(start)
        anim.setEndValue(end)
        anim.setEasingCurve(QEasingCurve.InOutQuad)
        return anim

    def show(self):
        parent = self.parentWidget()
        if parent is not None:
            anchor = parent.mapToGlobal(QPoint(parent.width() // 2, parent.height()))
            self.move(anchor.x() - self.width() // 2, anchor.y() - self.height() - 40)
        super().show()
        self.fade_in.start()
