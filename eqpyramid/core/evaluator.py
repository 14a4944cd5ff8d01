"""Expression evaluation for a three-cell combination."""

from __future__ import annotations

from fractions import Fraction
from typing import Optional, Union

from eqpyramid.core.cells import Cell, Operator

Number = Union[int, Fraction]


def apply_operator(a: Number, op: Operator, b: Number) -> Fraction:
    """Apply ``op`` exactly. Raises ZeroDivisionError for a zero divisor."""
    a = Fraction(a)
    b = Fraction(b)
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUBTRACT:
        return a - b
    if op is Operator.MULTIPLY:
        return a * b
    return a / b


def evaluate(cell_a: Cell, cell_b: Cell, cell_c: Cell) -> Optional[Fraction]:
    """Evaluate ``a op_b b op_c c`` with multiply/divide binding tighter.

    The first cell contributes only its number; its operator is ignored.
    Returns None when any step divides by zero.
    """
    a, b, c = cell_a.number, cell_b.number, cell_c.number
    op_b, op_c = cell_b.operator, cell_c.operator
    try:
        if op_c.is_multiplicative and not op_b.is_multiplicative:
            return apply_operator(a, op_b, apply_operator(b, op_c, c))
        return apply_operator(apply_operator(a, op_b, b), op_c, c)
    except ZeroDivisionError:
        return None


def integral_value(result: Optional[Fraction]) -> Optional[int]:
    """Return ``result`` as an int when it is a whole number, otherwise None."""
    if result is None or result.denominator != 1:
        return None
    return result.numerator
