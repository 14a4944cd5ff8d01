"""Text shown on the board: labels, formulas, results and the countdown."""

from __future__ import annotations

from fractions import Fraction
from typing import Optional, Sequence

from eqpyramid.core.cells import Cell
from eqpyramid.core.state import INVALID, OutcomeStatus, UsedFormula

STATUS_TEXT = {
    OutcomeStatus.CORRECT: "Correct",
    OutcomeStatus.INCORRECT: "Wrong",
    OutcomeStatus.ALREADY_USED: "Already used",
}

PLACEHOLDER = "Pick three cells to build a formula"


def cell_label(index: int) -> str:
    """0 -> "A", 9 -> "J"."""
    return chr(ord("A") + index)


def format_cell(cell: Cell) -> str:
    return f"{cell.operator.value}{cell.number}"


def format_expression(cells: Sequence[Cell], selection: Sequence[int]) -> str:
    """The formula built so far; the first cell shows its number only."""
    if not selection:
        return ""
    parts = [str(cells[selection[0]].number)]
    for index in selection[1:]:
        cell = cells[index]
        parts.append(f"{cell.operator.value} {cell.number}")
    return " ".join(parts)


def format_result(result: Optional[Fraction]) -> str:
    if result is None:
        return INVALID
    if result.denominator == 1:
        return str(result.numerator)
    return f"{float(result):.2f}"


def format_countdown(seconds: int) -> str:
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def format_used_formula(cells: Sequence[Cell], entry: UsedFormula) -> str:
    """e.g. "ABC: 5 × 3 + 2 = 17"."""
    labels = "".join(cell_label(i) for i in entry.combination)
    return f"{labels}: {format_expression(cells, entry.combination)} = {entry.result}"


def status_text(status: OutcomeStatus) -> str:
    return STATUS_TEXT[status]
