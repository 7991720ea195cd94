"""
recorder.py — Run Recorder & Metrics
=====================================
Runs one registered producer to completion and keeps the result.

Usage:
    rec = Recorder()
    rec.start("bubble_sort", array=[5, 3, 1, 4, 2])
    rec.run_to_completion()          # materializes the StepSequence
    rec.metrics.total_steps          # the analytics card
    rec.export()                     # serialisable snapshot for save/replay
"""

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.step import Step
from engine.errors import UnknownAlgorithmError
from engine.sequence import StepSequence, materialize

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    family:       str   = ""
    total_steps:  int   = 0          # number of Steps yielded
    wall_time_ms: float = 0.0        # wall-clock time to materialize


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        sequence : The materialized StepSequence (after run_to_completion).
        metrics  : Computed RunMetrics (after run_to_completion).
        params   : Effective parameters (registry defaults merged with overrides).
    """

    def __init__(self):
        self.sequence: Optional[StepSequence] = None
        self.metrics:  Optional[RunMetrics]   = None
        self.params:   Dict[str, Any]         = {}

        self._algo_info: Optional[AlgoInfo]      = None
        self._producer:  Optional[Iterator[Step]] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, **params: Any) -> None:
        """Resolve the algorithm and build its producer with merged params."""
        info = get_algorithm(algo_key)
        if info is None:
            raise UnknownAlgorithmError(algo_key)

        self._algo_info = info
        self.params     = {**info.defaults, **params}
        self.sequence   = None
        self.metrics    = None
        self._producer  = info.fn(**self.params)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the producer, keep every Step, compute metrics."""
        if self._producer is None or self._algo_info is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.sequence  = materialize(self._producer)
        wall_ms        = (time.monotonic() - started) * 1000
        self._producer = None

        info = self._algo_info
        self.metrics = RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            family=info.family,
            total_steps=len(self.sequence),
            wall_time_ms=round(wall_ms, 2),
        )
        logger.debug("Materialized %s: %d steps in %.2fms",
                     info.key, self.metrics.total_steps, self.metrics.wall_time_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "params":   _jsonable(self.params),
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    self.sequence.to_list() if self.sequence else [],
        }


def record(algo_key: str, **params: Any) -> Recorder:
    """start() + run_to_completion() in one call."""
    rec = Recorder()
    rec.start(algo_key, **params)
    rec.run_to_completion()
    return rec


def _jsonable(params: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in params.items():
        to_dict = getattr(value, "to_dict", None)
        out[key] = to_dict() if callable(to_dict) else value
    return out
