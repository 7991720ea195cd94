"""
timers.py — Periodic Timer Schedulers
======================================
The playback controller never sleeps or spawns threads.  It asks a
Scheduler for a repeating timer and the host decides how time passes:

    • ManualScheduler     – virtual clock; tests call advance(ms)
    • MonotonicScheduler  – real clock, fired from poll() (web requests)
    • AsyncioScheduler    – loop.call_later, for asyncio hosts

All three share one contract:
    handle = scheduler.call_every(ms, callback)
    scheduler.cancel(handle)

A cancelled handle never fires again, even if it was already due when
cancel() was called from inside another callback.
"""

import asyncio
import itertools
import logging
import time
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


# ---------------------------------------------------------------------------
# Handle
# ---------------------------------------------------------------------------
class TimerHandle:
    """
    Attributes:
        id          : Monotonic sequence number (tie-breaker for equal due times).
        interval_ms : Period between fires.
        callback    : Zero-argument callable.
        next_due    : Scheduler-clock time of the next fire, in ms.
        active      : False once cancelled.
    """

    __slots__ = ("id", "interval_ms", "callback", "next_due", "active", "_native")

    def __init__(self, handle_id: int, interval_ms: float, callback: Callback, next_due: float):
        self.id:          int      = handle_id
        self.interval_ms: float    = interval_ms
        self.callback:    Callback = callback
        self.next_due:    float    = next_due
        self.active:      bool     = True
        self._native = None

    def __repr__(self) -> str:
        state = "active" if self.active else "cancelled"
        return f"TimerHandle(id={self.id}, every={self.interval_ms}ms, {state})"


# ---------------------------------------------------------------------------
# Abstract scheduler
# ---------------------------------------------------------------------------
class Scheduler:
    """Base class.  Subclasses implement call_every / cancel."""

    def __init__(self):
        self._ids = itertools.count(1)

    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        raise NotImplementedError

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        raise NotImplementedError

    @property
    def active_count(self) -> int:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Virtual clock
# ---------------------------------------------------------------------------
class ManualScheduler(Scheduler):
    """
    Deterministic scheduler driven by advance(ms).

    Due timers fire in (next_due, id) order.  The clock is moved to each
    fire time before its callback runs, so a timer armed from inside a
    callback starts counting from that instant.
    """

    def __init__(self):
        super().__init__()
        self.now_ms:  float = 0.0
        self._timers: Dict[int, TimerHandle] = {}

    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(next(self._ids), interval_ms, callback, self.now_ms + interval_ms)
        self._timers[handle.id] = handle
        logger.debug("Armed %r", handle)
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        if handle is None:
            return
        handle.active = False
        if self._timers.pop(handle.id, None) is not None:
            logger.debug("Cancelled %r", handle)

    @property
    def active_count(self) -> int:
        return len(self._timers)

    def advance(self, ms: float) -> int:
        """Move the clock forward by *ms*, firing every due timer.  Returns fires."""
        target = self.now_ms + max(0.0, ms)
        fired  = 0
        while True:
            due = self._next_due(target)
            if due is None:
                break
            self.now_ms = due.next_due
            due.next_due += due.interval_ms
            due.callback()
            fired += 1
        self.now_ms = target
        return fired

    def _next_due(self, target: float) -> Optional[TimerHandle]:
        ready: List[TimerHandle] = [
            h for h in self._timers.values() if h.active and h.next_due <= target
        ]
        if not ready:
            return None
        return min(ready, key=lambda h: (h.next_due, h.id))


# ---------------------------------------------------------------------------
# Real clock, polled
# ---------------------------------------------------------------------------
class MonotonicScheduler(ManualScheduler):
    """
    Virtual clock that follows time.monotonic().  Nothing fires on its
    own: the host calls poll() (e.g. once per HTTP request) and every
    tick that came due since the last poll fires in order.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        super().__init__()
        self._clock = clock
        self._last  = clock()

    def poll(self) -> int:
        now = self._clock()
        elapsed_ms = (now - self._last) * 1000.0
        self._last = now
        return self.advance(elapsed_ms)


# ---------------------------------------------------------------------------
# asyncio
# ---------------------------------------------------------------------------
class AsyncioScheduler(Scheduler):
    """Repeating timers on an asyncio event loop via loop.call_later."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        super().__init__()
        self._loop   = loop
        self._timers: Dict[int, TimerHandle] = {}

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(next(self._ids), interval_ms, callback, self.loop.time() * 1000.0 + interval_ms)
        self._timers[handle.id] = handle
        self._schedule(handle)
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        if handle is None:
            return
        handle.active = False
        self._timers.pop(handle.id, None)
        if handle._native is not None:
            handle._native.cancel()
            handle._native = None

    @property
    def active_count(self) -> int:
        return len(self._timers)

    def _schedule(self, handle: TimerHandle) -> None:
        handle._native = self.loop.call_later(handle.interval_ms / 1000.0, self._fire, handle)

    def _fire(self, handle: TimerHandle) -> None:
        if not handle.active:
            return
        handle.next_due += handle.interval_ms
        self._schedule(handle)
        handle.callback()
