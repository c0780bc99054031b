import itertools

import pytest

from fibcache import FibonacciStream, InvalidIndex, fib


def test_take():
    stream = FibonacciStream()
    assert stream.take(0) == []
    assert stream.take(1) == [0]
    assert stream.take(8) == [0, 1, 1, 2, 3, 5, 8, 13]


def test_stream_is_restartable():
    stream = FibonacciStream()
    assert stream.take(5) == [0, 1, 1, 2, 3]
    assert stream.take(5) == [0, 1, 1, 2, 3]


def test_independent_iterators():
    stream = FibonacciStream()
    first = iter(stream)
    second = iter(stream)
    assert [next(first) for _ in range(4)] == [0, 1, 1, 2]
    assert next(second) == 0
    assert next(first) == 3


def test_islice_bounds_stream():
    values = list(itertools.islice(FibonacciStream(), 10, 13))
    assert values == [55, 89, 144]


def test_nth_matches_fib():
    stream = FibonacciStream()
    for n in range(0, 100):
        assert stream.nth(n) == fib(n)


def test_negative_bounds():
    stream = FibonacciStream()
    with pytest.raises(InvalidIndex):
        stream.take(-1)
    with pytest.raises(InvalidIndex):
        stream.nth(-1)


def test_non_integer_bounds():
    with pytest.raises(TypeError):
        FibonacciStream().take(2.5)
