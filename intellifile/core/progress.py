"""Uniform progress reporting for tool runs."""

from __future__ import annotations

from typing import Callable, Optional

ProgressCallback = Callable[[float], None]

START = 10.0
COMPLETE = 100.0


class ProgressReporter:
    """Translate per-item completion into the shared 0-100 progress scale.

    A run reports ``10`` when it starts, then ``10 + 90 * done / total`` as
    items finish, and ``100`` only from :meth:`finish`. The value handed to
    the callback never decreases and never reaches ``100`` before the run
    has succeeded.
    """

    def __init__(self, callback: Optional[ProgressCallback] = None) -> None:
        self._callback = callback
        self._last = 0.0

    @property
    def value(self) -> float:
        return self._last

    def _emit(self, value: float) -> None:
        if value <= self._last:
            return
        self._last = value
        if self._callback is not None:
            self._callback(value)

    def start(self) -> None:
        self._emit(START)

    def advance(self, done: int, total: int) -> None:
        if total <= 0:
            return
        value = START + (COMPLETE - START) * min(done, total) / total
        if value >= COMPLETE:
            return
        self._emit(value)

    def finish(self) -> None:
        self._emit(COMPLETE)


__all__ = ["ProgressCallback", "ProgressReporter", "START", "COMPLETE"]
