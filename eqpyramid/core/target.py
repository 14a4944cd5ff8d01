"""Target number selection from the reachable results of a board."""

from __future__ import annotations

import itertools
import logging
import random
from collections import Counter
from fractions import Fraction
from typing import Callable, Dict, List, Optional, Sequence

from eqpyramid.core.cells import Cell
from eqpyramid.core.evaluator import evaluate, integral_value
from eqpyramid.core.settings import GameSettings

logger = logging.getLogger(__name__)

Evaluator = Callable[[Cell, Cell, Cell], Optional[Fraction]]


def tally_results(cells: Sequence[Cell], evaluate_fn: Evaluator = evaluate) -> Dict[int, int]:
    """Count how many ordered triples reach each positive integer.

    Every ordered triple over the board is considered, repeated indices
    included, so a board of ten cells yields 1000 evaluations.
    """
    counts: Counter = Counter()
    for a, b, c in itertools.product(cells, repeat=3):
        value = integral_value(evaluate_fn(a, b, c))
        if value is not None and value > 0:
            counts[value] += 1
    return dict(counts)


def candidate_targets(counts: Dict[int, int], settings: GameSettings) -> List[int]:
    """Values inside the frequency band, most frequent first (ties by value)."""
    in_band = [
        (value, count)
        for value, count in sorted(counts.items())
        if settings.band_min <= count <= settings.band_max
    ]
    in_band.sort(key=lambda item: item[1], reverse=True)
    return [value for value, _ in in_band[: settings.top_candidates]]


def select_target(
    cells: Sequence[Cell],
    rng: random.Random,
    settings: Optional[GameSettings] = None,
    evaluate_fn: Evaluator = evaluate,
) -> int:
    settings = settings or GameSettings()
    counts = tally_results(cells, evaluate_fn)
    candidates = candidate_targets(counts, settings)
    if candidates:
        target = rng.choice(candidates)
        logger.debug("Target %d chosen from candidates %s", target, candidates)
        return target

    if counts:
        target = rng.choice(sorted(counts))
        logger.info("No result inside the frequency band; falling back to %d", target)
        return target

    logger.warning("Board has no positive integer result; using default target %d", settings.default_target)
    return settings.default_target
