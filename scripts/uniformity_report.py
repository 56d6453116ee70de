#!/usr/bin/env python3
"""Chi-square uniformity report for ranged integer draws.

Draws N values in [lo, hi] with each available range mode of each
generator and reports the chi-square statistic against the critical value.

Usage (from the repository root):
    python scripts/uniformity_report.py                      # [0, 2], 3M draws
    python scripts/uniformity_report.py --lo 1 --hi 6 --draws 600000
    python scripts/uniformity_report.py --kind mother --seed 9
    python scripts/uniformity_report.py --json               # machine-readable
"""

import argparse
import json
import sys
import time
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from unirand.config import KINDS, GeneratorConfig, build_generator  # noqa: E402
from unirand.uniformity import check_uniform  # noqa: E402


def run_report(
    kinds: list[str], seed: int, lo: int, hi: int, draws: int, confidence: float
) -> list[dict]:
    rows = []
    for kind in kinds:
        modes = ["biased"]
        if kind != "mother":
            modes.append("exact")
        for mode in modes:
            gen = build_generator(GeneratorConfig(kind=kind, seed=seed))
            fn = gen.biased_range if mode == "biased" else gen.exact_range
            t0 = time.perf_counter()
            values = [fn(lo, hi) for _ in range(draws)]
            secs = time.perf_counter() - t0
            result = check_uniform(values, lo, hi, confidence)
            row = {"kind": kind, "mode": mode, "secs": secs}
            row.update(result.to_dict())
            rows.append(row)
    return rows


def main() -> int:
    parser = argparse.ArgumentParser(description="Chi-square uniformity report")
    parser.add_argument(
        "--kind",
        choices=KINDS,
        action="append",
        help="Generator kind (repeatable; default: all)",
    )
    parser.add_argument("--seed", type=int, default=1)
    parser.add_argument("--lo", type=int, default=0)
    parser.add_argument("--hi", type=int, default=2)
    parser.add_argument("--draws", type=int, default=3_000_000)
    parser.add_argument("--confidence", type=float, default=0.99)
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    args = parser.parse_args()

    kinds = args.kind or list(KINDS)
    try:
        rows = run_report(
            kinds, args.seed, args.lo, args.hi, args.draws, args.confidence
        )
    except (ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(rows, indent=2))
    else:
        print(
            f"[{args.lo}, {args.hi}], {args.draws} draws,"
            f" {args.confidence:.0%} confidence"
        )
        for row in rows:
            mark = "✓" if row["passed"] else "✗"
            print(
                f"{mark} {row['kind']:<14} {row['mode']:<7}"
                f" chi2={row['statistic']:.3f} p={row['pvalue']:.4f}"
                f" (critical {row['critical']:.3f}, dof {row['dof']})"
                f"  {row['secs']:.2f}s"
            )
    return 0 if all(r["passed"] for r in rows) else 1


if __name__ == "__main__":
    sys.exit(main())
