"""Goodness-of-fit checks for ranged integer draws.

Pearson's chi-square test against a uniform expectation. A sample passes
at a given confidence when its p-value is at least ``1 - confidence``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np
from scipy import stats


@dataclass
class UniformityResult:
    statistic: float
    pvalue: float
    critical: float
    dof: int
    passed: bool

    def to_dict(self) -> dict:
        return {
            "statistic": self.statistic,
            "pvalue": self.pvalue,
            "critical": self.critical,
            "dof": self.dof,
            "passed": self.passed,
        }


def frequencies(draws: Iterable[int] | np.ndarray, lo: int, hi: int) -> np.ndarray:
    """Count how often each value of [lo, hi] occurs in ``draws``."""
    arr = np.asarray(
        draws if isinstance(draws, np.ndarray) else list(draws),
        dtype=np.int64,
    )
    offsets = arr - lo
    if offsets.size and (offsets.min() < 0 or offsets.max() > hi - lo):
        raise ValueError(f"draws fall outside [{lo}, {hi}]")
    return np.bincount(offsets, minlength=hi - lo + 1)


def chi_square(counts: np.ndarray) -> tuple[float, float]:
    """Pearson statistic and p-value of ``counts`` against equal counts."""
    counts = np.asarray(counts, dtype=np.float64)
    if counts.sum() == 0:
        raise ValueError("no observations")
    chi2, p = stats.chisquare(counts)
    return float(chi2), float(p)


def chi_square_critical(dof: int, confidence: float = 0.99) -> float:
    """Upper critical value of the chi-square distribution."""
    if dof < 1:
        raise ValueError(f"dof must be positive, got {dof}")
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")
    return float(stats.chi2.ppf(confidence, dof))


def check_uniform(
    draws: Iterable[int] | np.ndarray,
    lo: int,
    hi: int,
    confidence: float = 0.99,
) -> UniformityResult:
    counts = frequencies(draws, lo, hi)
    dof = counts.size - 1
    if dof < 1:
        raise ValueError("need at least two possible values")
    stat, p = chi_square(counts)
    critical = chi_square_critical(dof, confidence)
    return UniformityResult(
        statistic=stat,
        pvalue=p,
        critical=critical,
        dof=dof,
        passed=p >= 1.0 - confidence,
    )
