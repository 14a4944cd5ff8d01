from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def is_multiplicative(self) -> bool:
        return self in (Operator.MULTIPLY, Operator.DIVIDE)


@dataclass(frozen=True)
class Cell:
    """One board position: an operator and a number."""

    operator: Operator
    number: int


def generate_cells(
    rng: random.Random,
    count: int = 10,
    number_min: int = 1,
    number_max: int = 11,
) -> Tuple[Cell, ...]:
    """Draw ``count`` independent cells, operator and number uniformly at random."""
    operators = list(Operator)
    return tuple(
        Cell(operator=rng.choice(operators), number=rng.randint(number_min, number_max))
        for _ in range(count)
    )
