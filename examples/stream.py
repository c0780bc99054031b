# /// script
# requires-python = ">=3.10"
# dependencies = ["fibcache"]
# ///
"""Streams — a restartable Fibonacci producer bounded by the caller."""

import itertools
import logging

from fibcache import FibonacciStream, Method, fib

logging.basicConfig(level=logging.INFO, format="%(message)s")
log = logging.getLogger(__name__)


if __name__ == "__main__":
    stream = FibonacciStream()
    log.info("First 12: %s", stream.take(12))

    # Every iteration starts over from (0, 1)
    log.info("First 5 again: %s", stream.take(5))

    # Any bound works, including islice
    evens = [x for x in itertools.islice(stream, 30) if x % 2 == 0]
    log.info("Even values below index 30: %s", evens)

    log.info("fib(90) via stream = %s", fib(90, method=Method.STREAM))
    log.info("fib(90) via cache  = %s", fib(90, method="cache"))
