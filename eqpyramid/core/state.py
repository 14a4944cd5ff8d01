"""Round state and check outcome types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction
from typing import List, Optional, Set, Tuple, Union

from eqpyramid.core.cells import Cell

Combination = Tuple[int, int, int]

INVALID = "invalid"


class RoundState(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    ENDED = "ended"


class OutcomeStatus(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    ALREADY_USED = "already_used"


@dataclass(frozen=True)
class Outcome:
    """Result of checking one completed selection."""

    status: OutcomeStatus
    result: Optional[Fraction]
    combination: Combination

    @property
    def is_correct(self) -> bool:
        return self.status is OutcomeStatus.CORRECT

    @property
    def display_result(self) -> Union[int, float, str]:
        """Whole results as int, others as float, and "invalid" when there is none."""
        if self.result is None:
            return INVALID
        if self.result.denominator == 1:
            return self.result.numerator
        return float(self.result)


@dataclass(frozen=True)
class UsedFormula:
    combination: Combination
    result: int


@dataclass
class Round:
    """A single timed play session.

    ``cells`` and ``target`` are fixed when the round is created; the
    selection buffer and the used combinations change as players play.
    """

    cells: Tuple[Cell, ...]
    target: int
    time_remaining: int
    state: RoundState = RoundState.ACTIVE
    selection: List[int] = field(default_factory=list)
    used_combinations: Set[Combination] = field(default_factory=set)
    used_formulas: List[UsedFormula] = field(default_factory=list)
