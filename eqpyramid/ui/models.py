"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from eqpyramid.core.cells import Cell
from eqpyramid.ui.formatting import cell_label, format_cell


@dataclass
class CellState:
    """UI state for a single board cell: its text and selection marker."""

    index: int
    label: str
    text: str
    order: Optional[int] = None

    @property
    def selected(self) -> bool:
        return self.order is not None


def build_cell_states(cells: Sequence[Cell], selection: Sequence[int]) -> List[CellState]:
    """Describe every cell for rendering, marking selected cells with their pick order."""
    states = []
    for index, cell in enumerate(cells):
        order = selection.index(index) + 1 if index in selection else None
        states.append(
            CellState(
                index=index,
                label=cell_label(index),
                text=format_cell(cell),
                order=order,
            )
        )
    return states


def pyramid_rows(cell_count: int) -> List[int]:
    """Row sizes 1, 2, 3, ... with the last row holding whatever remains."""
    rows: List[int] = []
    remaining = cell_count
    size = 1
    while remaining > 0:
        rows.append(min(size, remaining))
        remaining -= size
        size += 1
    return rows
