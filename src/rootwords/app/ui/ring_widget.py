from __future__ import annotations

from PySide6.QtCore import Qt, QPointF, QRectF, Signal
from PySide6.QtGui import QColor, QFont, QPainter, QPen, QBrush, QMouseEvent, QPaintEvent
from PySide6.QtWidgets import QWidget, QSizePolicy

from rootwords import config
from rootwords.app.state import Store
from rootwords.model.ring import LetterSlot

SLOT_COLORS = {
    "normal": ("#FFFFFF", "#2B8FD2"),
    "selected": ("#2B8FD2", "#FFFFFF"),
    "disabled": ("#E6E6E6", "#A0A0A0"),
    "used": ("#C8E6C9", "#7A9A7C"),
    "commit": ("#FFB347", "#000000"),
}
PATH_COLOR = "#2B8FD2"


class RingWidget(QWidget):
    """
    Draws the letter ring and turns mouse (and synthesized touch) input into
    pointer events for the store, in ring coordinates.
    """
    word_changed = Signal(str)

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.setMinimumSize(240, 240)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMouseTracking(False)

        self.store.selection_changed.connect(self._on_selection_changed)
        self.store.availability_changed.connect(self.update)
        self.store.session_reset.connect(lambda _: self.update())

    # ---- coordinate mapping ----

    def _scale_and_offset(self) -> tuple[float, float, float]:
        size = config.RING_CANVAS_SIZE
        scale = min(self.width(), self.height()) / size
        ox = (self.width() - size * scale) / 2
        oy = (self.height() - size * scale) / 2
        return scale, ox, oy

    def to_ring(self, pos: QPointF) -> tuple[float, float]:
        scale, ox, oy = self._scale_and_offset()
        return (pos.x() - ox) / scale, (pos.y() - oy) / scale

    # ---- input ----

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.store.pointer_down(*self.to_ring(event.position()))
            self.update()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if event.buttons() & Qt.MouseButton.LeftButton:
            self.store.pointer_move(*self.to_ring(event.position()))
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.store.pointer_up(*self.to_ring(event.position()))
        super().mouseReleaseEvent(event)

    def _on_selection_changed(self, state) -> None:
        self.word_changed.emit(state.word)
        self.update()

    # ---- painting ----

    @staticmethod
    def _slot_style(slot: LetterSlot, selected: set) -> str:
        if slot.is_commit:
            return "commit"
        if slot.id in selected:
            return "selected"
        if slot.used:
            return "used"
        if not slot.available:
            return "disabled"
        return "normal"

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        scale, ox, oy = self._scale_and_offset()
        painter.translate(ox, oy)
        painter.scale(scale, scale)

        ring = self.store.ring
        r = config.SLOT_HIT_RADIUS

        # connecting path
        path = self.store.gesture_path()
        if len(path) > 1:
            pen = QPen(QColor(PATH_COLOR), 4)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(pen)
            for p1, p2 in zip(path, path[1:]):
                painter.drawLine(QPointF(p1.x, p1.y), QPointF(p2.x, p2.y))

        selected = {slot.id for slot in self.store.controller.gesture.selection}
        font = QFont()
        font.setPointSizeF(16)
        font.setBold(True)
        painter.setFont(font)

        for slot in ring.all_slots:
            if slot.is_commit and not (selected or self.store.controller.gesture.active):
                continue
            fill, text = SLOT_COLORS[self._slot_style(slot, selected)]
            rect = QRectF(slot.position.x - r, slot.position.y - r, 2 * r, 2 * r)
            painter.setPen(QPen(QColor("#2B8FD2"), 2))
            painter.setBrush(QBrush(QColor(fill)))
            painter.drawEllipse(rect)
            painter.setPen(QColor(text))
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, slot.letter)

        painter.end()
