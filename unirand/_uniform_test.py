"""Tests for the shared float and range helpers."""

import pytest

from ._uniform import (
    INT32_MAX,
    INT32_MIN,
    biased_range,
    check_range,
    check_seed,
    rejection_limit,
    word_to_float,
)


def test_word_to_float_endpoints():
    assert word_to_float(0) == 0.0
    assert word_to_float(1) == 2.0**-32
    assert word_to_float(0x80000000) == 0.5
    top = word_to_float(0xFFFFFFFF)
    assert top < 1.0
    assert top == 1.0 - 2.0**-32


def test_check_range_returns_length():
    assert check_range(0, 0) == 1
    assert check_range(-3, 3) == 7
    assert check_range(INT32_MIN, -1) == 2**31
    assert check_range(0, INT32_MAX) == 2**31


@pytest.mark.parametrize(
    "lo, hi",
    [
        (1, 0),
        (INT32_MIN, 0),
        (INT32_MIN, INT32_MAX),
        (0, INT32_MAX + 1),
        (INT32_MIN - 1, INT32_MIN),
    ],
)
def test_check_range_rejects(lo, hi):
    with pytest.raises(ValueError):
        check_range(lo, hi)


def test_check_range_rejects_non_int():
    with pytest.raises(TypeError):
        check_range(0.0, 1)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        check_range(0, True)


def test_check_seed():
    assert check_seed(0) == 0
    assert check_seed(0xFFFFFFFF) == 0xFFFFFFFF
    with pytest.raises(ValueError):
        check_seed(-1)
    with pytest.raises(TypeError):
        check_seed("1")  # type: ignore[arg-type]


def test_biased_range_scales_float():
    assert biased_range(lambda: 0.0, 5, 9) == 5
    assert biased_range(lambda: 0.5, 0, 9) == 5
    assert biased_range(lambda: 0.999, -10, -1) == -1


def test_biased_range_clamps_rounding_overflow():
    assert biased_range(lambda: 1.0, 0, 2) == 2


def test_rejection_limit():
    assert rejection_limit(1) == 2**32
    assert rejection_limit(2) == 2**32
    assert rejection_limit(3) == 4294967295
    assert rejection_limit(6) == 4294967292
    assert rejection_limit(2**31 + 1) == 2**31 + 1
    assert rejection_limit(2**32) == 2**32


@pytest.mark.parametrize("bad", [0, -1, 2**32 + 1])
def test_rejection_limit_rejects(bad):
    with pytest.raises(ValueError):
        rejection_limit(bad)
