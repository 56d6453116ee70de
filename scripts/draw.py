#!/usr/bin/env python3
"""Print numbers from a seeded generator, one per line.

Usage (from the repository root):
    # First 5 raw words of MT19937 seeded with 5489
    python scripts/draw.py --seed 5489 --count 5

    # Exact dice rolls
    python scripts/draw.py --seed 7 --mode exact --lo 1 --hi 6 --count 10

    # Floats from the multiply-with-carry generator
    python scripts/draw.py --kind mother --seed 42 --mode float

    # Generator described by a JSON config file
    python scripts/draw.py --config gen.json --mode biased --lo 0 --hi 99
"""

import argparse
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from unirand.config import (  # noqa: E402
    KINDS,
    GeneratorConfig,
    build_generator,
    load_config,
)

MODES = ("word", "float", "biased", "exact")


def draw(gen, mode: str, lo: int, hi: int):
    if mode == "word":
        return gen.next_word()
    if mode == "float":
        return gen.next_float()
    if mode == "biased":
        return gen.biased_range(lo, hi)
    return gen.exact_range(lo, hi)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--kind", choices=KINDS, default="mersenne")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--seeds",
        type=int,
        nargs="+",
        help="Seed words for array seeding (mersenne kinds only)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="JSON generator config; overrides --kind/--seed/--seeds",
    )
    parser.add_argument("--count", type=int, default=5)
    parser.add_argument("--mode", choices=MODES, default="word")
    parser.add_argument("--lo", type=int, default=0)
    parser.add_argument("--hi", type=int, default=99)
    args = parser.parse_args()

    try:
        if args.config:
            config = load_config(Path(args.config))
        else:
            config = GeneratorConfig(
                kind=args.kind, seed=args.seed, seeds=args.seeds
            )
        gen = build_generator(config)
        if args.mode == "exact" and not hasattr(gen, "exact_range"):
            print(
                f"Error: exact mode is not available for '{config.kind}'",
                file=sys.stderr,
            )
            return 2
        for _ in range(args.count):
            print(draw(gen, args.mode, args.lo, args.hi))
    except (OSError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
