"""Tests for eqpyramid.core.evaluator – three-cell expression evaluation."""

from __future__ import annotations

from fractions import Fraction

import pytest

from eqpyramid.core.cells import Cell, Operator
from eqpyramid.core.evaluator import apply_operator, evaluate, integral_value

ADD, SUB, MUL, DIV = Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY, Operator.DIVIDE


def c(op: Operator, n: int) -> Cell:
    return Cell(operator=op, number=n)


# ---------------------------------------------------------------------------
# apply_operator
# ---------------------------------------------------------------------------

class TestApplyOperator:
    def test_add(self):
        assert apply_operator(2, ADD, 3) == 5

    def test_subtract_can_go_negative(self):
        assert apply_operator(2, SUB, 3) == -1

    def test_multiply(self):
        assert apply_operator(4, MUL, 3) == 12

    def test_divide_is_exact(self):
        assert apply_operator(7, DIV, 2) == Fraction(7, 2)

    def test_divide_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            apply_operator(7, DIV, 0)


# ---------------------------------------------------------------------------
# evaluate – precedence
# ---------------------------------------------------------------------------

class TestEvaluatePrecedence:
    def test_first_operator_is_ignored(self):
        for op in Operator:
            assert evaluate(c(op, 5), c(ADD, 3), c(ADD, 2)) == 10

    def test_only_second_multiplicative(self):
        # 5 × 3 + 2
        assert evaluate(c(ADD, 5), c(MUL, 3), c(ADD, 2)) == 17

    def test_only_third_multiplicative(self):
        # 5 + 3 × 2 = 11, not (5 + 3) × 2
        assert evaluate(c(ADD, 5), c(ADD, 3), c(MUL, 2)) == 11

    def test_subtract_then_divide(self):
        # 10 - 6 ÷ 3 = 8
        assert evaluate(c(MUL, 10), c(SUB, 6), c(DIV, 3)) == 8

    def test_both_multiplicative_left_to_right(self):
        # 8 ÷ 4 × 2 = 4, not 8 ÷ 8
        assert evaluate(c(ADD, 8), c(DIV, 4), c(MUL, 2)) == 4

    def test_both_additive_left_to_right(self):
        # 5 - 3 - 1 = 1, not 5 - (3 - 1)
        assert evaluate(c(ADD, 5), c(SUB, 3), c(SUB, 1)) == 1

    def test_non_integer_result_is_returned(self):
        # 7 ÷ 2 + 1
        assert evaluate(c(ADD, 7), c(DIV, 2), c(ADD, 1)) == Fraction(9, 2)

    def test_exact_division_round_trip(self):
        # 1 ÷ 3 × 3 is exactly 1
        assert evaluate(c(ADD, 1), c(DIV, 3), c(MUL, 3)) == 1


# ---------------------------------------------------------------------------
# evaluate – division by zero
# ---------------------------------------------------------------------------

class TestEvaluateDivisionByZero:
    def test_second_step_divisor_zero(self):
        assert evaluate(c(ADD, 5), c(DIV, 0), c(ADD, 1)) is None

    def test_third_divisor_zero(self):
        assert evaluate(c(ADD, 5), c(ADD, 1), c(DIV, 0)) is None

    def test_intermediate_zero_divisor(self):
        # 6 ÷ 3 ÷ 0
        assert evaluate(c(ADD, 6), c(DIV, 3), c(DIV, 0)) is None

    def test_zero_dividend_is_fine(self):
        assert evaluate(c(ADD, 0), c(DIV, 5), c(ADD, 1)) == 1


# ---------------------------------------------------------------------------
# integral_value
# ---------------------------------------------------------------------------

class TestIntegralValue:
    def test_whole_fraction(self):
        assert integral_value(Fraction(6, 2)) == 3

    def test_non_whole(self):
        assert integral_value(Fraction(7, 2)) is None

    def test_none(self):
        assert integral_value(None) is None

    def test_negative_whole(self):
        assert integral_value(Fraction(-4)) == -4
