import pytest

from fibcache import InvalidIndex, Method, fib, fib_range


def test_methods_agree():
    for method in Method:
        assert fib(0, method=method) == 0
        assert fib(1, method=method) == 1
        assert fib(10, method=method) == 55
        assert fib_range(5, method=method) == [0, 1, 1, 2, 3, 5]


def test_method_from_string():
    assert fib(12, method="cache") == 144
    assert fib(12, method="stream") == 144
    assert fib_range(3, method="stream") == [0, 1, 1, 2]


def test_method_from_int():
    assert fib(15, method=0) == 610
    assert fib(15, method=1) == 610


def test_unknown_method_string():
    with pytest.raises(ValueError, match="Unknown method"):
        fib(3, method="recursive")


def test_unknown_method_int():
    with pytest.raises(ValueError):
        fib(3, method=7)


def test_bad_method_type():
    with pytest.raises(TypeError, match="method must be"):
        fib(3, method=1.0)


def test_negative_index_for_every_method():
    for method in Method:
        with pytest.raises(InvalidIndex):
            fib(-1, method=method)
        with pytest.raises(InvalidIndex):
            fib_range(-1, method=method)


def test_method_checked_before_index():
    with pytest.raises(ValueError, match="Unknown method"):
        fib(-1, method="nope")
