"""Mother-of-All multiply-with-carry generator.

A lag-4 multiply-with-carry generator after George Marsaglia's "Mother of
All" design. Each step forms a weighted sum of the last four outputs plus
the carry; the low 32 bits are the new output and the high bits the new
carry.

History layout: ``x[0]`` is the newest output, ``x[3]`` the oldest, and
``x[4]`` holds the carry.

There is no exact range mode and no array seeding for this generator.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ._uniform import MASK32, biased_range, check_seed, word_to_float

# Weights applied to x[3], x[2], x[1], x[0]
_W3 = 2111111111
_W2 = 1492
_W1 = 1776
_W0 = 5115

_SEED_MUL = 29943829
_WARMUP_DRAWS = 19


class MotherGenerator:
    def __init__(self, seed: int) -> None:
        self._x: list[int] = [0] * 5
        self.seed(seed)

    @property
    def history(self) -> tuple[int, ...]:
        return tuple(self._x)

    def seed(self, seed: int) -> None:
        """Reset the history buffer from a 32-bit seed.

        The seed is pushed through an LCG so no seed, 0 included, leaves
        the buffer all zero.
        """
        s = check_seed(seed)
        for i in range(5):
            s = (s * _SEED_MUL - 1) & MASK32
            self._x[i] = s
        for _ in range(_WARMUP_DRAWS):
            self.next_word()

    def next_word(self) -> int:
        x = self._x
        total = _W3 * x[3] + _W2 * x[2] + _W1 * x[1] + _W0 * x[0] + x[4]
        x[3] = x[2]
        x[2] = x[1]
        x[1] = x[0]
        x[4] = total >> 32
        x[0] = total & MASK32
        return x[0]

    def next_words(self, count: int) -> np.ndarray:
        """Draw ``count`` words into a uint32 array."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return np.fromiter(
            (self.next_word() for _ in range(count)),
            dtype=np.uint32,
            count=count,
        )

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return word_to_float(self.next_word())

    def biased_range(self, lo: int, hi: int) -> int:
        """Approximately uniform integer in [lo, hi] inclusive."""
        return biased_range(self.next_float, lo, hi)

    def get_state(self) -> tuple[int, ...]:
        return tuple(self._x)

    def set_state(self, state: Sequence[int]) -> None:
        if len(state) != 5:
            raise ValueError(f"history needs 5 words, got {len(state)}")
        if any(w < 0 or w > MASK32 for w in state):
            raise ValueError("history words must fit in 32 unsigned bits")
        self._x = [int(w) for w in state]

    def clone(self) -> MotherGenerator:
        twin = MotherGenerator.__new__(MotherGenerator)
        twin._x = list(self._x)
        return twin
