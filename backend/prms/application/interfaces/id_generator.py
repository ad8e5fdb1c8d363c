"""Identifier generation port and the default creation-time generator."""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable


class IdGenerator(ABC):
    """Produces opaque string identifiers for new entities."""

    @abstractmethod
    def next_id(self) -> str:
        ...


class MonotonicIdGenerator(IdGenerator):
    """Millisecond creation-time ids, forced strictly increasing.

    Two calls inside the same millisecond still yield distinct ids, and
    ids sort by recency when compared numerically.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def next_id(self) -> str:
        candidate = int(self._clock() * 1000)
        self._last = max(candidate, self._last + 1)
        return str(self._last)
