import logging
from typing import NamedTuple

log = logging.getLogger(__name__)


class InvalidIndex(ValueError):
    """Raised when a negative index is requested."""

    def __init__(self, index: int):
        super().__init__(f"Fibonacci index must be non-negative, got {index}")
        self.index = index


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    current_size: int


def _check_index(index) -> int:
    """Validate *index* and return it unchanged."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"index must be an int, got {type(index).__name__}")
    if index < 0:
        log.debug("rejecting negative index %d", index)
        raise InvalidIndex(index)
    return index


class FibonacciCache:
    """Write-once table of Fibonacci values, grown from the base case upward.

    Stored indices always form the contiguous range ``0..k``: a value is
    only ever written once both of its predecessors are present, so
    entries are appended and never modified or removed.

    An instance is meant to live for one computation and is not safe to
    share between threads.
    """

    def __init__(self):
        self._values = [0, 1]
        self._hits = 0
        self._misses = 0

    def get(self, index: int) -> int:
        """Return the Fibonacci value at *index*, computing it at most once."""
        _check_index(index)
        if index < len(self._values):
            self._hits += 1
            return self._values[index]
        self._misses += 1
        self._extend_to(index)
        return self._values[index]

    def compute_range(self, n: int) -> list[int]:
        """Return the values for indices ``0..n`` inclusive."""
        _check_index(n)
        self._extend_to(n)
        return self._values[: n + 1]

    def _extend_to(self, index: int) -> None:
        values = self._values
        start = len(values)
        if index < start:
            return
        a, b = values[-2], values[-1]
        for _ in range(start, index + 1):
            a, b = b, a + b
            values.append(b)
        log.debug("extended cache from %d to %d entries", start, len(values))

    def cache_info(self) -> CacheInfo:
        return CacheInfo(self._hits, self._misses, len(self._values))

    def __len__(self):
        return len(self._values)

    def __contains__(self, index):
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._values)

    def __repr__(self):
        return f"<FibonacciCache size={len(self._values)}>"
