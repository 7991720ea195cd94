"""
engine/
-------
Materialization, playback & recording layer.

    from engine import materialize, PlaybackController, Recorder
"""

from engine.errors     import EmptyProducerError, UnknownAlgorithmError
from engine.sequence   import StepSequence, materialize
from engine.timers     import (
    AsyncioScheduler,
    ManualScheduler,
    MonotonicScheduler,
    Scheduler,
    TimerHandle,
)
from engine.controller import (
    DEFAULT_SPEED_MS,
    SPEED_PRESETS,
    PlaybackController,
    PlaybackSession,
    PlaybackState,
)
from engine.recorder   import Recorder, RunMetrics, record

__all__ = [
    "EmptyProducerError",
    "UnknownAlgorithmError",
    "StepSequence",
    "materialize",
    "Scheduler",
    "TimerHandle",
    "ManualScheduler",
    "MonotonicScheduler",
    "AsyncioScheduler",
    "PlaybackController",
    "PlaybackSession",
    "PlaybackState",
    "SPEED_PRESETS",
    "DEFAULT_SPEED_MS",
    "Recorder",
    "RunMetrics",
    "record",
]
