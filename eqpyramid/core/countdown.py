from __future__ import annotations

from typing import Callable, Optional, Protocol


class Ticker(Protocol):
    """A once-per-second timer the engine can start and stop."""

    @property
    def is_running(self) -> bool: ...

    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class ManualTicker:
    """Ticker that fires only when told to. Used headless and in tests."""

    def __init__(self) -> None:
        self._callback: Optional[Callable[[], None]] = None
        self.starts = 0

    @property
    def is_running(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        if self._callback is not None:
            raise RuntimeError("ticker already running; stop it first")
        self._callback = callback
        self.starts += 1

    def stop(self) -> None:
        self._callback = None

    def fire(self, times: int = 1) -> None:
        """Deliver ``times`` ticks, stopping early if the ticker is stopped."""
        for _ in range(times):
            if self._callback is None:
                return
            self._callback()
