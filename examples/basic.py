# /// script
# requires-python = ">=3.10"
# dependencies = ["fibcache"]
# ///
"""Basic example — compute Fibonacci numbers with a per-call cache."""

import logging

from fibcache import FibonacciCache, InvalidIndex, fib, fib_range

logging.basicConfig(level=logging.INFO, format="%(message)s")
log = logging.getLogger(__name__)


if __name__ == "__main__":
    # Each call builds its own cache and throws it away afterwards
    log.info("fib(80) = %s", fib(80))
    log.info("fib_range(10) = %s", fib_range(10))

    # Keep a cache around to reuse values across lookups
    fc = FibonacciCache()
    fc.get(30)
    fc.get(12)  # already stored on the way to 30
    log.info("Cache info: %s", fc.cache_info())

    try:
        fib(-1)
    except InvalidIndex as exc:
        log.info("Rejected: %s", exc)
