from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, Tuple

from eqpyramid.core.cells import Cell, generate_cells
from eqpyramid.core.checker import SELECTION_SIZE, check_combination
from eqpyramid.core.countdown import ManualTicker, Ticker
from eqpyramid.core.settings import GameSettings
from eqpyramid.core.state import Outcome, Round, RoundState
from eqpyramid.core.target import select_target

logger = logging.getLogger(__name__)

_EVENTS = ("round_started", "selection_changed", "tick", "outcome", "round_ended")


class GameEngine:
    """Owns the current round and drives it through idle, active and ended.

    The engine is synchronous and knows nothing about presentation. Adapters
    call its methods in response to input and register callbacks to hear
    about round starts, selection changes, countdown ticks, check outcomes
    and round ends. Calls that make no sense in the current state are
    ignored rather than reported.
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        rng: Optional[random.Random] = None,
        ticker: Optional[Ticker] = None,
    ) -> None:
        self._settings = settings or GameSettings()
        self._rng = rng or random.Random()
        self._ticker: Ticker = ticker if ticker is not None else ManualTicker()
        self._round: Optional[Round] = None
        self._listeners: Dict[str, List[Callable]] = {name: [] for name in _EVENTS}

    # -- listeners ---------------------------------------------------------

    def on_round_started(self, callback: Callable[[Round], None]) -> None:
        self._listeners["round_started"].append(callback)

    def on_selection_changed(self, callback: Callable[[List[int]], None]) -> None:
        self._listeners["selection_changed"].append(callback)

    def on_tick(self, callback: Callable[[int], None]) -> None:
        """Register for the remaining seconds after every countdown step."""
        self._listeners["tick"].append(callback)

    def on_outcome(self, callback: Callable[[Outcome], None]) -> None:
        self._listeners["outcome"].append(callback)

    def on_round_ended(self, callback: Callable[[Round], None]) -> None:
        self._listeners["round_ended"].append(callback)

    def _emit(self, event: str, payload) -> None:
        for callback in list(self._listeners[event]):
            callback(payload)

    # -- read-only state ---------------------------------------------------

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def round(self) -> Optional[Round]:
        return self._round

    @property
    def state(self) -> RoundState:
        if self._round is None:
            return RoundState.IDLE
        return self._round.state

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return self._round.cells if self._round else ()

    @property
    def target(self) -> Optional[int]:
        return self._round.target if self._round else None

    @property
    def selection(self) -> List[int]:
        return list(self._round.selection) if self._round else []

    @property
    def time_remaining(self) -> int:
        if self._round is None:
            return self._settings.round_seconds
        return self._round.time_remaining

    # -- transitions -------------------------------------------------------

    def start_round(self) -> Optional[Round]:
        """Begin a fresh round from idle or ended. Ignored while a round is active."""
        if self.state is RoundState.ACTIVE:
            logger.debug("start_round ignored: a round is already active")
            return None

        self._ticker.stop()
        s = self._settings
        cells = generate_cells(self._rng, s.cell_count, s.number_min, s.number_max)
        target = select_target(cells, self._rng, s)
        self._round = Round(cells=cells, target=target, time_remaining=s.round_seconds)
        logger.info("Round started: target=%d, %d seconds", target, s.round_seconds)

        self._ticker.start(self.tick)
        self._emit("round_started", self._round)
        return self._round

    def end_round(self) -> None:
        """Finish the active round early. The board and selection stay for review."""
        if self.state is not RoundState.ACTIVE:
            logger.debug("end_round ignored in state %s", self.state.value)
            return
        self._finish()
        self._emit("round_ended", self._round)

    def _finish(self) -> None:
        self._round.state = RoundState.ENDED
        self._ticker.stop()
        logger.info(
            "Round ended with %d seconds left, %d correct formulas",
            self._round.time_remaining,
            len(self._round.used_formulas),
        )

    def tick(self) -> None:
        """Apply one countdown step; reaching zero ends the round in the same step."""
        if self.state is not RoundState.ACTIVE:
            logger.debug("tick ignored in state %s", self.state.value)
            return
        current = self._round
        current.time_remaining = max(0, current.time_remaining - 1)
        expired = current.time_remaining == 0
        if expired:
            self._finish()

        self._emit("tick", current.time_remaining)
        if expired:
            self._emit("round_ended", current)

    # -- selection ---------------------------------------------------------

    def select_cell(self, index: int) -> Optional[Outcome]:
        """Append ``index`` to the selection; the third cell triggers a check.

        Returns the outcome when a check ran, otherwise None.
        """
        if self.state is not RoundState.ACTIVE:
            logger.debug("select_cell(%s) ignored in state %s", index, self.state.value)
            return None
        current = self._round
        if not 0 <= index < len(current.cells):
            logger.debug("select_cell(%s) ignored: no such cell", index)
            return None
        if len(current.selection) >= SELECTION_SIZE or index in current.selection:
            logger.debug("select_cell(%s) ignored: selection is %s", index, current.selection)
            return None

        current.selection.append(index)
        self._emit("selection_changed", list(current.selection))
        if len(current.selection) < SELECTION_SIZE:
            return None

        outcome = check_combination(current)
        self._emit("outcome", outcome)
        self.clear_selection()
        return outcome

    def clear_selection(self) -> None:
        if self._round is None or not self._round.selection:
            return
        self._round.selection.clear()
        self._emit("selection_changed", [])
