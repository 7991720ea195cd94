"""
controller.py — Playback Controller
====================================
The ONLY object a renderer talks to during playback.  It owns one
PlaybackSession (a materialized StepSequence plus a cursor) and exposes
transport controls: play / pause / seek / speed / reset.

State machine:
    IDLE            →  load()     →  PAUSED(0)
    PAUSED(c)       →  play()     →  PLAYING(c)
    PLAYING(c)      →  tick       →  PLAYING(c+1), or PAUSED(last) when
                                     c+1 is the last index
    PLAYING(c)      →  pause()    →  PAUSED(c)
    PAUSED|PLAYING  →  seek(i)    →  PAUSED(clamp(i))
    PAUSED|PLAYING  →  reset()    →  PAUSED(0)
    any             →  unload()   →  IDLE

Invariants:
  - 0 ≤ cursor ≤ last at all times.
  - At most one live timer.  Every path that arms a timer disarms the
    previous one first (_arm calls _disarm).
  - Out-of-range input is clamped or ignored, never raised.  Seeking
    to ±inf clamps to the last or first Step; NaN and non-finite speeds
    are ignored; speeds above MAX_SPEED_MS are clamped to it.
  - Playback pauses on the tick that lands on the last Step, so the
    timer never fires a tick that has nowhere to go.  A renderer sees
    the same cursor values as pausing on the following tick would give.

Threading:
  Not thread-safe.  Timer callbacks must arrive on the same thread that
  calls the transport methods, which every bundled Scheduler guarantees.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from algorithms.step import Step
from engine.sequence import StepSequence
from engine.timers import ManualScheduler, Scheduler, TimerHandle

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    IDLE    = "idle"
    PAUSED  = "paused"
    PLAYING = "playing"


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1000,    # teaching mode
    "medium": 400,
    "fast":   150,     # demo mode
    "turbo":  50,
}

DEFAULT_SPEED_MS = SPEED_PRESETS["medium"]
MAX_SPEED_MS     = 60_000


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
@dataclass
class PlaybackSession:
    """
    Attributes:
        sequence : The loaded StepSequence.
        cursor   : Index of the Step currently shown.
        playing  : True while the timer is live.
        speed_ms : Interval between ticks.
        timer    : The one live TimerHandle, if playing.
    """

    sequence: StepSequence
    cursor:   int                   = 0
    playing:  bool                  = False
    speed_ms: int                   = DEFAULT_SPEED_MS
    timer:    Optional[TimerHandle] = None

    @property
    def last(self) -> int:
        return self.sequence.last_index


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        scheduler : Source of periodic ticks.
        session   : Current PlaybackSession, None while IDLE.
        speed_ms  : Interval applied to the next session and to the live one.
        on_step   : Optional callback(Step) fired whenever the visible Step
                    may have changed (tick, seek, load, reset, set_speed).
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        speed_ms: int = DEFAULT_SPEED_MS,
        on_step: Optional[Callable[[Step], None]] = None,
    ):
        self.scheduler: Scheduler                       = scheduler or ManualScheduler()
        self.session:   Optional[PlaybackSession]       = None
        self.speed_ms:  int                             = speed_ms if _valid_speed(speed_ms) else DEFAULT_SPEED_MS
        self.on_step:   Optional[Callable[[Step], None]] = on_step

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, sequence: Union[StepSequence, Iterable[Step]]) -> None:
        """Discard any current session and show Step 0 of *sequence*, paused."""
        if not isinstance(sequence, StepSequence):
            sequence = StepSequence(sequence)
        self._disarm()
        self.session = PlaybackSession(sequence=sequence, speed_ms=self.speed_ms)
        logger.debug("Loaded %r", sequence)
        self._notify()

    def unload(self) -> None:
        """Back to IDLE."""
        self._disarm()
        self.session = None

    def reset(self) -> None:
        """PAUSED(0) on the same sequence, or IDLE if nothing is loaded."""
        if self.session is None:
            return
        self._disarm()
        self.session.cursor = 0
        self._notify()

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        s = self.session
        if s is None or s.playing:
            return
        if s.cursor >= s.last:
            logger.debug("play() ignored: already at the last step")
            return
        self._arm()

    def pause(self) -> None:
        if self.session is None or not self.session.playing:
            return
        self._disarm()
        logger.debug("Paused at %d", self.session.cursor)

    def toggle_play(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def advance(self) -> None:
        """One timer tick: move forward by exactly one Step, auto-stop at the end."""
        s = self.session
        if s is None or not s.playing:
            return
        s.cursor = min(s.cursor + 1, s.last)
        if s.cursor >= s.last:
            self._disarm()
            logger.debug("Reached the last step (%d), paused", s.last)
        self._notify()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def seek(self, index: int) -> None:
        """Jump to *index* (clamped) and pause.  No-op while IDLE."""
        s = self.session
        if s is None:
            return
        if isinstance(index, float) and math.isinf(index):
            index = s.last if index > 0 else 0
        try:
            index = int(index)
        except (TypeError, ValueError, OverflowError):
            logger.debug("seek() ignored: %r is not an index", index)
            return
        self._disarm()
        s.cursor = max(0, min(index, s.last))
        self._notify()

    def step_forward(self) -> None:
        if self.session is not None:
            self.seek(self.session.cursor + 1)

    def step_backward(self) -> None:
        if self.session is not None:
            self.seek(self.session.cursor - 1)

    def jump_to_end(self) -> None:
        if self.session is not None:
            self.seek(self.session.last)

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, ms: int) -> None:
        """Change the tick interval.  A live timer is re-armed; the cursor stays."""
        if not _valid_speed(ms):
            logger.debug("set_speed() ignored: %r", ms)
            return
        self.speed_ms = max(1, min(int(ms), MAX_SPEED_MS))
        s = self.session
        if s is None:
            return
        s.speed_ms = self.speed_ms
        if s.playing:
            self._arm()
        self._notify()

    def set_speed_preset(self, preset: str) -> None:
        ms = SPEED_PRESETS.get(preset)
        if ms is None:
            logger.debug("Unknown speed preset %r", preset)
            return
        self.set_speed(ms)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    def current(self) -> Optional[Step]:
        if self.session is None:
            return None
        return self.session.sequence[self.session.cursor]

    @property
    def state(self) -> PlaybackState:
        if self.session is None:
            return PlaybackState.IDLE
        return PlaybackState.PLAYING if self.session.playing else PlaybackState.PAUSED

    @property
    def cursor(self) -> Optional[int]:
        return self.session.cursor if self.session else None

    @property
    def total_steps(self) -> int:
        return len(self.session.sequence) if self.session else 0

    @property
    def is_playing(self) -> bool:
        return self.state is PlaybackState.PLAYING

    @property
    def is_finished(self) -> bool:
        s = self.session
        return s is not None and s.cursor >= s.last

    def snapshot(self) -> dict:
        """JSON-ready view of the transport state plus the current Step."""
        step = self.current()
        return {
            "state":       self.state.value,
            "cursor":      self.cursor,
            "total_steps": self.total_steps,
            "speed_ms":    self.speed_ms,
            "finished":    self.is_finished,
            "step":        step.to_dict() if step is not None else None,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _arm(self) -> None:
        s = self.session
        self._disarm()
        s.timer   = self.scheduler.call_every(s.speed_ms, self.advance)
        s.playing = True
        logger.debug("Playing from %d every %dms", s.cursor, s.speed_ms)

    def _disarm(self) -> None:
        s = self.session
        if s is None:
            return
        if s.timer is not None:
            self.scheduler.cancel(s.timer)
            s.timer = None
        s.playing = False

    def _notify(self) -> None:
        step = self.current()
        if self.on_step and step is not None:
            self.on_step(step)


def _valid_speed(ms) -> bool:
    if isinstance(ms, bool) or not isinstance(ms, (int, float)):
        return False
    if isinstance(ms, float) and not math.isfinite(ms):
        return False
    return ms > 0
