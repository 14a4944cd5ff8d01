from __future__ import annotations

import logging

from eqpyramid.core.evaluator import evaluate, integral_value
from eqpyramid.core.state import Outcome, OutcomeStatus, Round, UsedFormula

logger = logging.getLogger(__name__)

SELECTION_SIZE = 3


def check_combination(current: Round, evaluate_fn=evaluate) -> Outcome:
    """Check the round's full selection against its target.

    A combination already credited this round is rejected without being
    evaluated. A correct combination is recorded so it cannot score twice.
    The caller is responsible for clearing the selection afterwards.
    """
    if len(current.selection) != SELECTION_SIZE:
        raise ValueError(f"expected {SELECTION_SIZE} selected cells, got {len(current.selection)}")
    key = tuple(current.selection)

    if key in current.used_combinations:
        logger.info("Combination %s already used this round", key)
        return Outcome(status=OutcomeStatus.ALREADY_USED, result=None, combination=key)

    i, j, k = key
    result = evaluate_fn(current.cells[i], current.cells[j], current.cells[k])
    value = integral_value(result)
    if value is None or value != current.target:
        logger.info("Combination %s gives %s, target is %d", key, result, current.target)
        return Outcome(status=OutcomeStatus.INCORRECT, result=result, combination=key)

    current.used_combinations.add(key)
    current.used_formulas.append(UsedFormula(combination=key, result=value))
    logger.info("Combination %s hits target %d", key, current.target)
    return Outcome(status=OutcomeStatus.CORRECT, result=result, combination=key)
