"""Scripted random source for deterministic trait draws."""

from collections import deque
from typing import Iterable, List


class SequenceRNG:
    """Returns the scripted values in order, then ``fallback`` forever.

    The default fallback of 0.99 is above every catalog probability, so
    draws past the script never apply a trait.
    """

    def __init__(self, values: Iterable[float] = (), fallback: float = 0.99) -> None:
        self._values = deque(values)
        self.fallback = fallback
        self.draws: List[float] = []

    def random(self) -> float:
        value = self._values.popleft() if self._values else self.fallback
        self.draws.append(value)
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)
