from fibcache._cache import CacheInfo, FibonacciCache, InvalidIndex
from fibcache._methods import Method
from fibcache._sequence import FibonacciStream, fib, fib_range

__all__ = [
    "CacheInfo",
    "fib",
    "fib_range",
    "FibonacciCache",
    "FibonacciStream",
    "InvalidIndex",
    "Method",
]
