"""Parity checks between our Mersenne Twister and independent MT19937s.

Two reference implementations ship with a normal Python install:

  * numpy's legacy ``RandomState(int)`` seeds with the single-word MT19937
    procedure, matching ``MersenneTwister(seed)``.
  * CPython's ``random.Random(int)`` splits the integer into 32-bit words
    (least significant first) and runs the array seeding procedure,
    matching ``MersenneTwister.from_array(words)``.

For each scenario the seeded state block, the cursor, and the first
``count`` raw words must agree exactly.
"""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from unirand.mersenne import MersenneTwister


def key_to_int(seeds: Sequence[int]) -> int:
    """Pack 32-bit seed words into the integer CPython would split back.

    CPython drops high zero words, so the last word must be non-zero
    unless the key is the single word 0.
    """
    if not seeds:
        raise ValueError("key must have at least one word")
    if len(seeds) > 1 and seeds[-1] == 0:
        raise ValueError("last key word must be non-zero")
    n = 0
    for i, word in enumerate(seeds):
        if word < 0 or word > 0xFFFFFFFF:
            raise ValueError(f"key word {word} does not fit in 32 bits")
        n |= word << (32 * i)
    return n


def compare_words(
    ours: Sequence[int], theirs: Sequence[int], label: str, limit: int = 5
) -> list[str]:
    """Describe up to ``limit`` positions where two word lists differ."""
    diffs = []
    if len(ours) != len(theirs):
        diffs.append(f"{label}: length {len(ours)} vs {len(theirs)}")
    mismatches = [
        i for i, (a, b) in enumerate(zip(ours, theirs)) if int(a) != int(b)
    ]
    for i in mismatches[:limit]:
        diffs.append(f"{label}[{i}]: {int(ours[i])} vs {int(theirs[i])}")
    if len(mismatches) > limit:
        diffs.append(f"{label}: {len(mismatches) - limit} more mismatches")
    return diffs


@dataclass
class ParityScenario:
    """One seeding to check against a reference implementation."""

    name: str
    seed: Optional[int] = None
    seeds: Optional[list[int]] = None
    count: int = 1500

    def reference(self) -> str:
        return "cpython" if self.seeds is not None else "numpy"


@dataclass
class ParityTiming:
    ours_secs: float
    reference_secs: float

    @property
    def total_secs(self) -> float:
        return self.ours_secs + self.reference_secs


PARITY_SCENARIOS = [
    ParityScenario("seed_0", seed=0),
    ParityScenario("seed_1", seed=1),
    ParityScenario("seed_5489", seed=5489),
    ParityScenario("seed_max", seed=0xFFFFFFFF),
    ParityScenario("seed_long_run", seed=20240607, count=5000),
    ParityScenario("array_zero", seeds=[0]),
    ParityScenario("array_reference", seeds=[0x123, 0x234, 0x345, 0x456]),
    ParityScenario("array_wide", seeds=[0xDEADBEEF, 0, 0xFFFFFFFF, 7]),
    ParityScenario("array_longer_than_state", seeds=list(range(1, 700))),
]


def _ours(scenario: ParityScenario) -> tuple[list[int], int, list[int]]:
    if scenario.seeds is not None:
        mt = MersenneTwister.from_array(scenario.seeds)
    else:
        assert scenario.seed is not None
        mt = MersenneTwister(scenario.seed)
    words, index = mt.get_state()
    return list(words), index, mt.next_words(scenario.count).tolist()


def _numpy_reference(seed: int, count: int) -> tuple[list[int], int, list[int]]:
    rs = np.random.RandomState(seed)
    _, key, pos, _, _ = rs.get_state()
    # A full-width uint32 request returns raw generator words.
    draws = rs.randint(0, 2**32, size=count, dtype=np.uint32)
    return key.tolist(), int(pos), draws.tolist()


def _cpython_reference(
    seeds: Sequence[int], count: int
) -> tuple[list[int], int, list[int]]:
    r = random.Random(key_to_int(seeds))
    _, internal, _ = r.getstate()
    draws = [r.getrandbits(32) for _ in range(count)]
    return list(internal[:-1]), internal[-1], draws


def run_parity(
    scenario: ParityScenario, verbose: bool = False
) -> tuple[bool, list[str], ParityTiming]:
    """Seed both implementations and compare state and output.

    Returns:
        (success, diffs, timing)
    """
    t0 = time.perf_counter()
    our_words, our_index, our_draws = _ours(scenario)
    ours_secs = time.perf_counter() - t0

    t0 = time.perf_counter()
    if scenario.seeds is not None:
        ref_words, ref_index, ref_draws = _cpython_reference(
            scenario.seeds, scenario.count
        )
    else:
        assert scenario.seed is not None
        ref_words, ref_index, ref_draws = _numpy_reference(
            scenario.seed, scenario.count
        )
    ref_secs = time.perf_counter() - t0

    diffs = compare_words(our_words, ref_words, "state")
    if our_index != ref_index:
        diffs.append(f"index: {our_index} vs {ref_index}")
    diffs.extend(compare_words(our_draws, ref_draws, "draw"))

    if verbose and diffs:
        print(f"\nDifferences found against {scenario.reference()}:")
        for diff in diffs:
            print(f"  - {diff}")

    return len(diffs) == 0, diffs, ParityTiming(ours_secs, ref_secs)


def _format_result(
    scenario: ParityScenario,
    success: bool,
    diffs: list[str],
    timing: ParityTiming,
    verbose: bool,
) -> str:
    time_str = (
        f"  ({timing.total_secs:.2f}s"
        f", ours {timing.ours_secs:.2f}s"
        f", {scenario.reference()} {timing.reference_secs:.2f}s)"
    )
    if success:
        return f"✓ {scenario.name}{time_str}"
    lines = [f"✗ {scenario.name}{time_str}"]
    if verbose:
        for diff in diffs:
            lines.append(f"    {diff}")
    return "\n".join(lines)


def main() -> int:
    """CLI entry point with pytest-compatible exit codes."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Compare MersenneTwister against reference MT19937s"
    )
    parser.add_argument(
        "--scenario",
        type=str,
        help="Run specific scenario by name",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print detailed comparison output",
    )
    parser.add_argument(
        "--count-multiplier",
        type=int,
        default=1,
        metavar="N",
        help="Multiply the number of compared draws by N",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop on first failure",
    )
    args = parser.parse_args()

    scenarios = list(PARITY_SCENARIOS)
    if args.scenario:
        scenarios = [s for s in scenarios if s.name == args.scenario]
        if not scenarios:
            print(f"Scenario '{args.scenario}' not found")
            return 1

    passed = 0
    failed = 0
    total_time = 0.0
    for scenario in scenarios:
        if args.count_multiplier > 1:
            scenario = ParityScenario(
                scenario.name,
                seed=scenario.seed,
                seeds=scenario.seeds,
                count=scenario.count * args.count_multiplier,
            )
        success, diffs, timing = run_parity(scenario, args.verbose)
        print(_format_result(scenario, success, diffs, timing, args.verbose))
        total_time += timing.total_secs
        if success:
            passed += 1
        else:
            failed += 1
            if args.fail_fast:
                print(f"\n{passed} passed, {failed} failed (stopped early)")
                return 1

    print(f"\n{passed} passed, {failed} failed ({total_time:.2f}s total)")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
