import itertools
import logging

from fibcache._cache import FibonacciCache, _check_index
from fibcache._methods import Method

log = logging.getLogger(__name__)


class FibonacciStream:
    """Restartable stream of Fibonacci values.

    Each iteration starts a fresh producer that steps the pair
    ``(a, b) -> (b, a + b)`` from ``(0, 1)`` and emits ``a``. The stream
    itself is unbounded, so callers bound it with :meth:`take`,
    :meth:`nth` or ``itertools.islice``.
    """

    def __iter__(self):
        a, b = 0, 1
        while True:
            yield a
            a, b = b, a + b

    def take(self, count: int) -> list[int]:
        """Return the first *count* values."""
        _check_index(count)
        return list(itertools.islice(self, count))

    def nth(self, n: int) -> int:
        """Return the value at index *n*."""
        _check_index(n)
        return next(itertools.islice(self, n, None))

    def __repr__(self):
        return "<FibonacciStream>"


_METHOD_STR_MAP = {"cache": Method.CACHE, "stream": Method.STREAM}


def _resolve_method(method):
    """Accept Method enum, int, or string and return a Method member."""
    if isinstance(method, Method):
        return method
    if isinstance(method, int):
        return Method(method)
    if isinstance(method, str):
        try:
            return _METHOD_STR_MAP[method]
        except KeyError:
            raise ValueError(f"Unknown method: {method!r}. Use 'cache' or 'stream'.") from None
    raise TypeError(f"method must be a Method, int, or str, got {type(method).__name__}")


def fib(n: int, method: "str | int | Method" = Method.CACHE) -> int:
    """Return the *n*-th Fibonacci number.

    Every call owns its working state: a fresh FibonacciCache (or stream)
    is built for the request and dropped when it returns.

    Args:
        n: Non-negative index into the sequence.
        method: Method.CACHE (default) or Method.STREAM. Also accepts the
                strings "cache" and "stream".

    Raises:
        InvalidIndex: If *n* is negative.
    """
    resolved = _resolve_method(method)
    log.debug("fib(%r) via %s", n, resolved.name)
    if resolved == Method.STREAM:
        return FibonacciStream().nth(n)
    return FibonacciCache().get(n)


def fib_range(n: int, method: "str | int | Method" = Method.CACHE) -> list[int]:
    """Return the Fibonacci numbers for indices ``0..n`` inclusive."""
    resolved = _resolve_method(method)
    log.debug("fib_range(%r) via %s", n, resolved.name)
    if resolved == Method.STREAM:
        _check_index(n)
        return FibonacciStream().take(n + 1)
    return FibonacciCache().compute_range(n)
