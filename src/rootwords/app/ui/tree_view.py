from __future__ import annotations

from typing import Optional, TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QRectF
from PySide6.QtWidgets import QGraphicsRectItem, QWidget
import pyqtgraph as pg

from rootwords import config
from rootwords.app.state import Store
from rootwords.model.layout import LayoutEntry, layout_extent

if TYPE_CHECKING:
    import numpy.typing as npt
    from rootwords.model.tree import NodeId

BOX_HEIGHT = 0.6
BOX_MARGIN = 0.08
EDGE_COLOR = "#2B8FD2"
BOX_FILL = "#FFFFFF"
CURRENT_FILL = "#FFE0B2"


def bezier_curve(
    start: tuple[float, float],
    end: tuple[float, float],
    n_points: int = 24
) -> npt.NDArray[np.float64]:
    """Vertical S-shaped cubic bezier between two points, as an (N, 2) array."""
    (x0, y0), (x1, y1) = start, end
    ym = (y0 + y1) / 2
    ctrl = np.array([[x0, y0], [x0, ym], [x1, ym], [x1, y1]], dtype=np.float64)
    t = np.linspace(0.0, 1.0, n_points)[:, None]
    return (
        (1 - t) ** 3 * ctrl[0]
        + 3 * (1 - t) ** 2 * t * ctrl[1]
        + 3 * (1 - t) * t ** 2 * ctrl[2]
        + t ** 3 * ctrl[3]
    )


def cell_rect(entry: LayoutEntry) -> QRectF:
    """World rectangle of a layout entry (y grows downwards, one unit per row)."""
    x = entry.column_start * config.TREE_CELL_WIDTH + BOX_MARGIN
    y = entry.row * config.TREE_ROW_HEIGHT
    w = entry.column_span * config.TREE_CELL_WIDTH - 2 * BOX_MARGIN
    return QRectF(x, y, w, BOX_HEIGHT * config.TREE_ROW_HEIGHT)


class TreeView(pg.PlotWidget):
    """
    Draws the derivation tree from the layout: every word in its cell, a curve
    to its parent, the current node highlighted. Clicking a word selects it.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent, background="w")
        self.store = store
        self._rects: dict[NodeId, QRectF] = {}

        self.hideAxis("left")
        self.hideAxis("bottom")
        self.setMenuEnabled(False)
        self.getViewBox().invertY(True)
        self.getViewBox().setAspectLocked(False)

        self.scene().sigMouseClicked.connect(self._on_clicked)
        self.store.tree_changed.connect(lambda _: self.redraw())
        self.redraw()

    def redraw(self) -> None:
        self.clear()
        self._rects.clear()

        layout = self.store.layout
        tree = self.store.tree
        current = self.store.current_node_id

        for node, _ in tree.walk():
            entry = layout[node.id]
            rect = cell_rect(entry)
            self._rects[node.id] = rect

            if node.parent is not None:
                parent_rect = cell_rect(layout[node.parent])
                curve = bezier_curve(
                    (parent_rect.center().x(), parent_rect.bottom()),
                    (rect.center().x(), rect.top()),
                )
                self.plot(curve[:, 0], curve[:, 1], pen=pg.mkPen(EDGE_COLOR, width=2))

            box = QGraphicsRectItem(rect)
            box.setPen(pg.mkPen(EDGE_COLOR, width=1.5))
            box.setBrush(pg.mkBrush(CURRENT_FILL if node.id == current else BOX_FILL))
            self.addItem(box)

            label = pg.TextItem(node.word, color="k", anchor=(0.5, 0.5))
            label.setPos(rect.center().x(), rect.center().y())
            self.addItem(label)

        rows, columns = layout_extent(layout)
        self.setXRange(0, max(columns, 1) * config.TREE_CELL_WIDTH, padding=0.05)
        self.setYRange(0, max(rows, 1) * config.TREE_ROW_HEIGHT, padding=0.05)

    def node_at(self, x: float, y: float) -> Optional[NodeId]:
        for node_id, rect in self._rects.items():
            if rect.contains(x, y):
                return node_id
        return None

    def _on_clicked(self, event) -> None:
        pos = self.getViewBox().mapSceneToView(event.scenePos())
        node_id = self.node_at(pos.x(), pos.y())
        if node_id is not None:
            self.store.select_node(node_id)
