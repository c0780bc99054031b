import pytest

from fibcache import FibonacciCache, InvalidIndex, fib, fib_range


def test_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


def test_known_values():
    assert fib(10) == 55
    assert fib(20) == 6765
    assert fib(50) == 12586269025


def test_recurrence_holds():
    for n in range(2, 200):
        assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_range():
    assert fib_range(0) == [0]
    assert fib_range(1) == [0, 1]
    assert fib_range(5) == [0, 1, 1, 2, 3, 5]


def test_range_length_and_last_element():
    for n in range(0, 60):
        values = fib_range(n)
        assert len(values) == n + 1
        assert values[-1] == fib(n)


def test_negative_index():
    with pytest.raises(InvalidIndex):
        fib(-1)
    with pytest.raises(InvalidIndex):
        fib_range(-3)
    with pytest.raises(InvalidIndex):
        FibonacciCache().get(-1)


def test_invalid_index_is_value_error():
    """Callers catching ValueError still see negative indices."""
    with pytest.raises(ValueError, match="non-negative") as excinfo:
        fib(-7)
    assert excinfo.value.index == -7


def test_non_integer_index():
    with pytest.raises(TypeError):
        fib(2.0)
    with pytest.raises(TypeError):
        fib("3")
    with pytest.raises(TypeError):
        fib(True)


def test_large_index_has_no_recursion_limit():
    value = fib(5000)
    assert value == fib_range(5000)[-1]
    assert len(str(value)) == 1045
