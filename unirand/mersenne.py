"""Mersenne Twister pseudorandom number generator.

Implements the MT19937 recurrence (Matsumoto & Nishimura, 1998) and the
smaller MT11213A parameter set, with 32-bit tempered output.

Reference: http://www.math.sci.hiroshima-u.ac.jp/m-mat/MT/emt.html

The state is a fixed block of ``n`` words plus a cursor. The whole block is
regenerated ("twisted") when the cursor runs off the end, so ``index == n``
right after seeding means the first draw triggers a twist.

Two integer range mappings are offered:

  * ``biased_range`` scales a float draw. Fast, but for a range length that
    is not a power of two some values come up more often than others by up
    to one part in 2^32.
  * ``exact_range`` uses rejection sampling on raw words, so every value in
    the range is exactly equally likely. The rejection limit is memoized
    for the last range length requested.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ._uniform import (
    MASK32,
    biased_range,
    check_range,
    check_seed,
    rejection_limit,
    word_to_float,
)


@dataclass(frozen=True)
class MersenneParams:
    """Constants of one Mersenne Twister variant."""

    name: str
    n: int  # state words
    m: int  # middle word offset
    r: int  # separation point of one word
    u: int  # tempering shifts
    s: int
    t: int
    l: int  # noqa: E741
    a: int  # twist matrix
    b: int  # tempering masks
    c: int

    @property
    def upper_mask(self) -> int:
        return (MASK32 << self.r) & MASK32

    @property
    def lower_mask(self) -> int:
        return (1 << self.r) - 1


MT19937 = MersenneParams(
    name="MT19937",
    n=624,
    m=397,
    r=31,
    u=11,
    s=7,
    t=15,
    l=18,
    a=0x9908B0DF,
    b=0x9D2C5680,
    c=0xEFC60000,
)

MT11213A = MersenneParams(
    name="MT11213A",
    n=351,
    m=175,
    r=19,
    u=11,
    s=7,
    t=15,
    l=17,
    a=0xE4BD75F5,
    b=0x655E5280,
    c=0xFFD58000,
)

_INIT_MUL = 1812433253
_ARRAY_SEED = 19650218
_ARRAY_MUL1 = 1664525
_ARRAY_MUL2 = 1566083941


class MersenneTwister:
    def __init__(self, seed: int, params: MersenneParams = MT19937) -> None:
        self._params = params
        self._state: list[int] = [0] * params.n
        self._index: int = params.n
        self._last_interval: int = 0
        self._rejection_limit: int = 0
        self.seed(seed)

    @classmethod
    def from_array(
        cls, seeds: Sequence[int], params: MersenneParams = MT19937
    ) -> MersenneTwister:
        """Construct a generator seeded with more than 32 bits of entropy."""
        mt = cls(0, params)
        mt.seed_by_array(seeds)
        return mt

    @property
    def params(self) -> MersenneParams:
        return self._params

    @property
    def index(self) -> int:
        return self._index

    @property
    def last_interval(self) -> int:
        return self._last_interval

    @property
    def rejection_limit(self) -> int:
        return self._rejection_limit

    # -- seeding --

    def seed(self, seed: int) -> None:
        """Reset the state from a single 32-bit seed.

        Every seed, 0 included, is used as given.
        """
        check_seed(seed)
        mt = self._state
        mt[0] = seed
        for i in range(1, self._params.n):
            prev = mt[i - 1]
            mt[i] = (_INIT_MUL * (prev ^ (prev >> 30)) + i) & MASK32
        self._index = self._params.n
        self._last_interval = 0
        self._rejection_limit = 0

    def seed_by_array(self, seeds: Sequence[int]) -> None:
        """Reset the state from a sequence of 32-bit words.

        All bits of every word influence the output sequence. Words must be
        integers and are taken modulo 2^32.
        """
        key = []
        for k in seeds:
            if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
                raise TypeError(
                    f"seed words must be ints, got {type(k).__name__}"
                )
            key.append(int(k) & MASK32)
        if not key:
            raise ValueError("seed_by_array needs at least one seed word")
        self.seed(_ARRAY_SEED)
        mt = self._state
        n = self._params.n
        i, j = 1, 0
        for _ in range(max(n, len(key))):
            prev = mt[i - 1]
            mt[i] = (
                (mt[i] ^ ((prev ^ (prev >> 30)) * _ARRAY_MUL1)) + key[j] + j
            ) & MASK32
            i += 1
            j += 1
            if i >= n:
                mt[0] = mt[n - 1]
                i = 1
            if j >= len(key):
                j = 0
        for _ in range(n - 1):
            prev = mt[i - 1]
            mt[i] = (
                (mt[i] ^ ((prev ^ (prev >> 30)) * _ARRAY_MUL2)) - i
            ) & MASK32
            i += 1
            if i >= n:
                mt[0] = mt[n - 1]
                i = 1
        # MSB is 1, assuring a non-zero initial array
        mt[0] = 0x80000000
        self._index = n

    # -- output --

    def _twist(self) -> None:
        p = self._params
        mt = self._state
        n, m, a = p.n, p.m, p.a
        upper, lower = p.upper_mask, p.lower_mask
        for kk in range(n):
            y = (mt[kk] & upper) | (mt[(kk + 1) % n] & lower)
            mt[kk] = mt[(kk + m) % n] ^ (y >> 1) ^ (a if y & 1 else 0)
        self._index = 0

    def next_word(self) -> int:
        """Next tempered 32-bit word."""
        if self._index >= self._params.n:
            self._twist()
        p = self._params
        y = self._state[self._index]
        self._index += 1
        y ^= y >> p.u
        y ^= (y << p.s) & p.b
        y ^= (y << p.t) & p.c
        y ^= y >> p.l
        return y

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

    def exact_range(self, lo: int, hi: int) -> int:
        """Exactly uniform integer in [lo, hi] inclusive."""
        interval = check_range(lo, hi)
        if interval != self._last_interval:
            self._rejection_limit = rejection_limit(interval)
            self._last_interval = interval
        limit = self._rejection_limit
        while True:
            word = self.next_word()
            if word < limit:
                return lo + word % interval

    # -- snapshots --

    def get_state(self) -> tuple[tuple[int, ...], int]:
        """Return ``(words, index)``; feed it to ``set_state`` to resume."""
        return tuple(self._state), self._index

    def set_state(self, state: tuple[Sequence[int], int]) -> None:
        words, index = state
        n = self._params.n
        if len(words) != n:
            raise ValueError(
                f"{self._params.name} state needs {n} words, got {len(words)}"
            )
        if not 0 <= index <= n:
            raise ValueError(f"index must be in [0, {n}], got {index}")
        if any(w < 0 or w > MASK32 for w in words):
            raise ValueError("state words must fit in 32 unsigned bits")
        self._state = [int(w) for w in words]
        self._index = index
        self._last_interval = 0
        self._rejection_limit = 0

    def clone(self) -> MersenneTwister:
        """Independent copy that continues the same sequence."""
        twin = MersenneTwister.__new__(MersenneTwister)
        twin._params = self._params
        twin._state = list(self._state)
        twin._index = self._index
        twin._last_interval = self._last_interval
        twin._rejection_limit = self._rejection_limit
        return twin
