"""
Frame scheduler - timers and next-frame callbacks without threads.

The host loop owns the clock and calls advance() once per display frame
with the elapsed milliseconds. The scheduler then fires whatever became
due. Nothing here sleeps or spawns a thread, so games built on it run the
same under pygame and in tests.

Usage:
    scheduler = FrameScheduler()
    spawn = scheduler.call_every(5000, game.spawn_ship)
    scheduler.request_frame(game.run)

    while running:
        scheduler.advance(clock.tick(60))

    spawn.cancel()
"""
from typing import Callable, List, Optional

from mathdef.errors import ConfigurationError
from mathdef.logging import get_logger

log = get_logger('scheduler')

Callback = Callable[[], None]


class Handle:
    """Cancelable reference to a scheduled callback."""

    def __init__(self, callback: Callback, interval: Optional[float] = None):
        self.callback = callback
        self.interval = interval
        self.time_remaining = interval if interval is not None else 0.0
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def recurring(self) -> bool:
        return self.interval is not None

    def cancel(self) -> None:
        """Stop the callback from running again. Safe to call repeatedly."""
        self._cancelled = True

    def __repr__(self) -> str:
        kind = f"every {self.interval}ms" if self.recurring else "next frame"
        state = " cancelled" if self._cancelled else ""
        return f"Handle({getattr(self.callback, '__name__', self.callback)!r}, {kind}{state})"


class FrameScheduler:
    """Recurring timers plus one-shot next-frame callbacks.

    Ordering within advance():
        1. Interval timers that came due fire, in registration order.
           A timer fires at most once per advance() and keeps its phase.
        2. Frame callbacks requested before this advance() run, in
           request order. Callbacks requested while these run are
           deferred to the following frame.
    """

    def __init__(self):
        self._timers: List[Handle] = []
        self._frame_callbacks: List[Handle] = []
        self._elapsed = 0.0
        self._frames = 0

    @property
    def elapsed(self) -> float:
        """Total milliseconds advanced so far."""
        return self._elapsed

    @property
    def frames(self) -> int:
        """Number of advance() calls so far."""
        return self._frames

    @property
    def pending_timers(self) -> int:
        return sum(1 for handle in self._timers if not handle.cancelled)

    @property
    def pending_frames(self) -> int:
        return sum(1 for handle in self._frame_callbacks if not handle.cancelled)

    def call_every(self, interval: float, callback: Callback) -> Handle:
        """Run callback every `interval` milliseconds until cancelled.

        Raises:
            ConfigurationError: If interval is not positive
        """
        if interval <= 0:
            raise ConfigurationError(f"Timer interval must be positive, got {interval}")
        handle = Handle(callback, interval=float(interval))
        self._timers.append(handle)
        log.debug("Timer registered: %r", handle)
        return handle

    def request_frame(self, callback: Callback) -> Handle:
        """Run callback once on the next frame."""
        handle = Handle(callback)
        self._frame_callbacks.append(handle)
        return handle

    def advance(self, elapsed_ms: float) -> None:
        """Move the clock forward and fire everything that became due.

        Args:
            elapsed_ms: Milliseconds since the previous advance()
        """
        self._elapsed += elapsed_ms
        self._frames += 1

        for handle in list(self._timers):
            if handle.cancelled:
                continue
            handle.time_remaining -= elapsed_ms
            if handle.time_remaining <= 0:
                handle.time_remaining += handle.interval
                if handle.time_remaining <= 0:
                    handle.time_remaining = handle.interval
                handle.callback()
        self._timers = [h for h in self._timers if not h.cancelled]

        due, self._frame_callbacks = self._frame_callbacks, []
        for handle in due:
            if not handle.cancelled:
                handle.callback()
                handle.cancel()

    def cancel_all(self) -> None:
        for handle in self._timers + self._frame_callbacks:
            handle.cancel()
        self._timers = []
        self._frame_callbacks = []
