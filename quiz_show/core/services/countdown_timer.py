"""Restartable per-question countdown driven by the Qt event loop.

Architecture note:
    The countdown separates *what* happens on a tick from *which* countdown is
    running. Callbacks live in a single slot that is replaced on every
    ``configure`` call, so callers can hand in fresh closures on each state
    update without disturbing the schedule. Only a change of ``restart_key``
    (or of the budget) resets the remaining seconds and restarts the
    underlying ``QTimer``.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass

from PySide6.QtCore import QObject, QTimer

from quiz_show.constants.quiz_constants import TICK_INTERVAL_MS

TickCallback = Callable[[int], None]
ElapsedCallback = Callable[[], None]

_UNSET = object()


@dataclass(slots=True)
class _CallbackSlot:
    on_tick: TickCallback | None = None
    on_elapsed: ElapsedCallback | None = None


class CountdownTimer(QObject):
    """Counts whole seconds down from a budget to zero."""

    def __init__(self, tick_interval_ms: int = TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._callbacks = _CallbackSlot()
        self._restart_key: Hashable = _UNSET
        self._budget_seconds: int = 0
        self._remaining_seconds: int = 0
        self._running: bool = False
        self._elapsed: bool = False

        self._interval_timer = QTimer(self)
        self._interval_timer.setInterval(tick_interval_ms)
        self._interval_timer.timeout.connect(self._handle_interval)

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def budget_seconds(self) -> int:
        return self._budget_seconds

    @property
    def restart_key(self) -> Hashable | None:
        return None if self._restart_key is _UNSET else self._restart_key

    def is_running(self) -> bool:
        return self._running

    def has_elapsed(self) -> bool:
        return self._elapsed

    def configure(
        self,
        budget_seconds: int,
        running: bool,
        on_tick: TickCallback | None = None,
        on_elapsed: ElapsedCallback | None = None,
        restart_key: Hashable | None = None,
    ) -> None:
        """Describe the desired countdown for the current logical period."""
        self._callbacks = _CallbackSlot(on_tick=on_tick, on_elapsed=on_elapsed)

        if restart_key != self._restart_key or budget_seconds != self._budget_seconds:
            self._reset(budget_seconds, restart_key)

        if running:
            self._resume()
        else:
            self._pause()

    def _reset(self, budget_seconds: int, restart_key: Hashable | None) -> None:
        self._interval_timer.stop()
        self._restart_key = restart_key
        self._budget_seconds = budget_seconds
        self._remaining_seconds = max(0, budget_seconds)
        self._running = False
        self._elapsed = False

    def _resume(self) -> None:
        if self._running or self._elapsed:
            return
        if self._remaining_seconds <= 0:
            # A non-positive budget counts as already elapsed.
            self._finish()
            return
        self._running = True
        self._interval_timer.start()

    def _pause(self) -> None:
        if not self._running:
            return
        self._running = False
        self._interval_timer.stop()

    def _handle_interval(self) -> None:
        if not self._running:
            return
        self._remaining_seconds = max(0, self._remaining_seconds - 1)
        on_tick = self._callbacks.on_tick
        if on_tick is not None:
            on_tick(self._remaining_seconds)
        # The tick callback may have paused or re-keyed the countdown.
        if self._running and self._remaining_seconds <= 0:
            self._finish()

    def _finish(self) -> None:
        self._interval_timer.stop()
        self._running = False
        self._elapsed = True
        on_elapsed = self._callbacks.on_elapsed
        if on_elapsed is not None:
            on_elapsed()
