"""Tests for the chi-square uniformity helpers."""

import numpy as np
import pytest

from .uniformity import (
    check_uniform,
    chi_square,
    chi_square_critical,
    frequencies,
)


def test_frequencies_counts_each_value():
    counts = frequencies([3, 4, 4, 6, 6, 6], 3, 7)
    assert counts.tolist() == [1, 2, 0, 3, 0]


def test_frequencies_accepts_arrays():
    counts = frequencies(np.array([0, 1, 1], dtype=np.uint32), 0, 1)
    assert counts.tolist() == [1, 2]


def test_frequencies_rejects_out_of_range():
    with pytest.raises(ValueError):
        frequencies([0, 5], 0, 4)
    with pytest.raises(ValueError):
        frequencies([-1], 0, 4)


def test_chi_square_perfectly_uniform_is_zero():
    stat, p = chi_square(np.array([10, 10, 10]))
    assert stat == 0.0
    assert p == pytest.approx(1.0)


def test_chi_square_known_value():
    # expected 10 each: (5^2 + 5^2) / 10
    stat, p = chi_square(np.array([15, 5]))
    assert stat == pytest.approx(5.0)
    assert p == pytest.approx(0.025347, abs=1e-5)


def test_chi_square_needs_observations():
    with pytest.raises(ValueError):
        chi_square(np.zeros(3))


@pytest.mark.parametrize(
    "dof, confidence, table",
    [
        (1, 0.99, 6.634897),
        (2, 0.99, 9.210340),
        (5, 0.95, 11.070498),
        (30, 0.99, 50.892181),
    ],
)
def test_chi_square_critical_matches_table(dof, confidence, table):
    assert chi_square_critical(dof, confidence) == pytest.approx(table, abs=1e-5)


def test_chi_square_critical_validates():
    with pytest.raises(ValueError):
        chi_square_critical(0)
    with pytest.raises(ValueError):
        chi_square_critical(3, 1.0)


def test_check_uniform_flags_skew():
    draws = [0] * 600 + [1] * 400
    result = check_uniform(draws, 0, 1)
    assert result.dof == 1
    assert result.statistic == pytest.approx(40.0)
    assert result.pvalue < 0.01
    assert not result.passed


def test_check_uniform_just_inside_threshold():
    # chi2 = 2 * 135^2 / 5500 = 6.627, just under the 99% critical 6.635
    draws = [0] * 5635 + [1] * 5365
    result = check_uniform(draws, 0, 1)
    assert result.statistic == pytest.approx(6.6273, abs=1e-4)
    assert result.statistic < result.critical
    assert result.pvalue >= 0.01
    assert result.passed


def test_check_uniform_just_outside_threshold():
    # chi2 = 2 * 136^2 / 5500 = 6.726
    draws = [0] * 5636 + [1] * 5364
    result = check_uniform(draws, 0, 1)
    assert result.statistic > result.critical
    assert not result.passed


def test_check_uniform_accepts_balanced():
    draws = [0, 1, 2] * 1000
    result = check_uniform(draws, 0, 2)
    assert result.passed
    assert result.to_dict()["statistic"] == 0.0
    assert result.to_dict()["pvalue"] == pytest.approx(1.0)


def test_check_uniform_needs_two_values():
    with pytest.raises(ValueError):
        check_uniform([4, 4], 4, 4)
