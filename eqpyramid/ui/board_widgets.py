"""Pyramid board UI: hexagonal cells arranged in rows of 1, 2, 3 and 4."""

from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QPen, QPolygonF
from PySide6.QtWidgets import QHBoxLayout, QSizePolicy, QVBoxLayout, QWidget

from eqpyramid.ui.colors import BoardColors, blend_hex
from eqpyramid.ui.formatting import cell_label
from eqpyramid.ui.models import CellState, pyramid_rows


class HexCell(QWidget):
    """A clickable hexagon showing one cell's operator and number."""

    def __init__(self, index: int, on_click: Callable[[int], None], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._index = index
        self._on_click = on_click
        self._state: Optional[CellState] = None
        self._hovered = False
        self.setMinimumSize(96, 96)
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Preferred)
        self.setCursor(Qt.PointingHandCursor)
        self.setAttribute(Qt.WidgetAttribute.WA_Hover, True)

    @property
    def index(self) -> int:
        return self._index

    def set_state(self, state: Optional[CellState]) -> None:
        self._state = state
        self.update()

    def enterEvent(self, event) -> None:
        self._hovered = True
        self.update()
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:
        self._hovered = False
        self.update()
        super().leaveEvent(event)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self._on_click(self._index)
        super().mousePressEvent(event)

    def _hexagon(self) -> QPolygonF:
        side = min(self.width(), self.height()) / 2 - 4
        cx, cy = self.width() / 2, self.height() / 2
        points = [
            QPointF(cx + side * math.cos(math.radians(60 * i - 30)), cy + side * math.sin(math.radians(60 * i - 30)))
            for i in range(6)
        ]
        return QPolygonF(points)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        selected = self._state is not None and self._state.selected
        fill = BoardColors.CELL_SELECTED if selected else BoardColors.CELL
        if self._hovered and not selected:
            fill = blend_hex(BoardColors.CELL, BoardColors.CELL_BORDER, 0.35)
        painter.setBrush(QColor(fill))
        painter.setPen(QPen(QColor(BoardColors.CELL_BORDER), 3))
        painter.drawPolygon(self._hexagon())

        size = min(self.width(), self.height())
        label = self._state.label if self._state else cell_label(self._index)
        font = QFont(painter.font())
        font.setPointSize(max(8, size // 10))
        painter.setFont(font)
        painter.setPen(QColor(BoardColors.TEXT_MUTED))
        painter.drawText(0, int(size * 0.18), self.width(), int(size * 0.2), Qt.AlignCenter, label)

        if self._state and self._state.text:
            font.setPointSize(max(12, size // 5))
            font.setBold(True)
            painter.setFont(font)
            painter.setPen(QColor(BoardColors.CELL_TEXT))
            painter.drawText(self.rect(), Qt.AlignCenter, self._state.text)

        if selected:
            badge = max(18, size // 5)
            painter.setBrush(QColor(BoardColors.ORDER_BADGE))
            painter.setPen(Qt.NoPen)
            painter.drawEllipse(self.width() - badge - 4, 4, badge, badge)
            font.setPointSize(max(8, badge // 2))
            painter.setFont(font)
            painter.setPen(QColor(BoardColors.CELL_TEXT))
            painter.drawText(self.width() - badge - 4, 4, badge, badge, Qt.AlignCenter, str(self._state.order))


class PyramidBoard(QWidget):
    """Ten hex cells stacked as a pyramid, top row first."""

    def __init__(
        self,
        on_cell_clicked: Callable[[int], None],
        cell_count: int = 10,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._cells: List[HexCell] = []
        layout = QVBoxLayout(self)
        layout.setSpacing(4)
        index = 0
        for count in pyramid_rows(cell_count):
            row = QHBoxLayout()
            row.setSpacing(8)
            row.addStretch(1)
            for _ in range(count):
                cell = HexCell(index, on_cell_clicked, self)
                self._cells.append(cell)
                row.addWidget(cell)
                index += 1
            row.addStretch(1)
            layout.addLayout(row)

    def set_states(self, states: Sequence[CellState]) -> None:
        """Render ``states``; cells without a state are drawn blank."""
        by_index = {s.index: s for s in states}
        for cell_widget in self._cells:
            cell_widget.set_state(by_index.get(cell_widget.index))
