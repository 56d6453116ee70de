"""Float conversion and integer range mapping shared by both generators.

Both generators emit 32-bit words; everything above raw bits goes through
the helpers here so the two classes agree on bounds checking and on how a
word becomes a double or a ranged integer.

Floats are produced as ``word / 2**32``. For IEEE-754 doubles this is
bit-identical to the classic trick of packing the word into the mantissa
of a double in [1, 2) and subtracting 1.0, so no byte-order probe is
needed.
"""

from __future__ import annotations

import math
from typing import Callable

MASK32 = 0xFFFFFFFF
TWO_32 = 1 << 32
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

_INV_TWO_32 = 1.0 / TWO_32


def word_to_float(word: int) -> float:
    """Map a 32-bit word to [0, 1) with 2^-32 resolution."""
    return word * _INV_TWO_32


def check_seed(seed: int) -> int:
    """Validate a 32-bit seed and return it unchanged."""
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError(f"seed must be an int, got {type(seed).__name__}")
    if seed < 0 or seed > MASK32:
        raise ValueError(f"seed must fit in 32 unsigned bits, got {seed}")
    return seed


def check_range(lo: int, hi: int) -> int:
    """Validate an inclusive integer range and return its length.

    Bounds must be signed 32-bit integers with ``lo <= hi`` and
    ``hi - lo < 2**31``.
    """
    for name, v in (("lo", lo), ("hi", hi)):
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"{name} must be an int, got {type(v).__name__}")
        if v < INT32_MIN or v > INT32_MAX:
            raise ValueError(f"{name}={v} is outside the signed 32-bit range")
    if hi < lo:
        raise ValueError(f"empty range: hi={hi} < lo={lo}")
    if hi - lo > INT32_MAX:
        raise ValueError(
            f"range [{lo}, {hi}] spans more than 2**31 values"
        )
    return hi - lo + 1


def biased_range(next_float: Callable[[], float], lo: int, hi: int) -> int:
    """Scale one float draw onto [lo, hi].

    Frequencies deviate from uniform by at most 2^-32 and are exact when
    the range length is a power of two.
    """
    interval = check_range(lo, hi)
    r = math.floor(next_float() * interval) + lo
    # Rounding in the multiply can land exactly on hi + 1.
    if r > hi:
        r = hi
    return r


def rejection_limit(interval: int) -> int:
    """Largest multiple of ``interval`` that does not exceed 2^32.

    Words at or above the limit are rejected by exact range sampling.
    A full 2^32 span has no rejected words.
    """
    if interval <= 0 or interval > TWO_32:
        raise ValueError(f"interval must be in [1, 2**32], got {interval}")
    return (TWO_32 // interval) * interval
