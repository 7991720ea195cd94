"""
sequence.py — Step Materializer
================================
Drains a producer generator into a StepSequence: a finite, indexable,
immutable run of Steps that the playback controller can scrub freely.

    seq = materialize(bubble_sort(array=[5, 3, 1]))
    seq[0], seq[-1], len(seq)

Design decisions:
  - Consumption is eager.  Producers validate their own parameters and
    always terminate, so there is no step cap here.
  - An empty run is a broken producer, not an empty animation:
    EmptyProducerError is raised rather than returning len 0.
"""

from typing import Iterable, Iterator, Tuple, Union

from algorithms.step import Step
from engine.errors import EmptyProducerError


class StepSequence:
    """
    Ordered, immutable, len ≥ 1.

    Attributes:
        steps : The underlying tuple of Steps.
    """

    __slots__ = ("_steps",)

    def __init__(self, steps: Iterable[Step]):
        self._steps: Tuple[Step, ...] = tuple(steps)
        if not self._steps:
            raise EmptyProducerError("A StepSequence needs at least one Step.")

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    @property
    def last_index(self) -> int:
        return len(self._steps) - 1

    @property
    def first(self) -> Step:
        return self._steps[0]

    @property
    def last(self) -> Step:
        return self._steps[-1]

    @property
    def family(self) -> str:
        return self._steps[0].family

    def to_list(self) -> list:
        return [s.to_dict() for s in self._steps]

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index: Union[int, slice]):
        return self._steps[index]

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __eq__(self, other) -> bool:
        return isinstance(other, StepSequence) and self._steps == other._steps

    def __hash__(self) -> int:
        return hash(self._steps)

    def __repr__(self) -> str:
        return f"StepSequence(family={self.family}, steps={len(self)})"


def materialize(producer: Iterable[Step]) -> StepSequence:
    """Consume *producer* completely and return its Steps as a StepSequence."""
    steps = list(producer)
    if not steps:
        raise EmptyProducerError("Producer finished without yielding any Step.")
    return StepSequence(steps)
