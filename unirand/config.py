"""Generator configuration: JSON documents decoded into dataclasses.

A config names the generator kind and its seed material::

    {"kind": "mersenne", "seed": 5489}
    {"kind": "mersenne", "seeds": [291, 564, 837, 1110]}
    {"kind": "mother", "seed": 42}

Used by ``scripts/draw.py`` and ``scripts/uniformity_report.py`` (via
``--config``) to build a seeded generator.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ._uniform import check_seed
from .mersenne import MT11213A, MT19937, MersenneTwister
from .mother import MotherGenerator

Generator = Union[MersenneTwister, MotherGenerator]

MERSENNE_KINDS = {"mersenne": MT19937, "mersenne11213": MT11213A}
KINDS = (*MERSENNE_KINDS, "mother")


@dataclass
class GeneratorConfig:
    kind: str = "mersenne"
    seed: int = 0
    seeds: list[int] | None = None

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(
                f"Unknown generator kind '{self.kind}'"
                f" (expected one of {', '.join(KINDS)})"
            )
        check_seed(self.seed)
        if self.seeds is not None:
            if self.kind == "mother":
                raise ValueError("the mother generator has no array seeding")
            if not self.seeds:
                raise ValueError("seeds must not be empty")

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        seeds = d.get("seeds")
        return GeneratorConfig(
            kind=d.get("kind", "mersenne"),
            seed=d.get("seed", 0),
            seeds=list(seeds) if seeds is not None else None,
        )

    def to_dict(self) -> dict:
        d: dict = {"kind": self.kind, "seed": self.seed}
        if self.seeds is not None:
            d["seeds"] = list(self.seeds)
        return d


def build_generator(config: GeneratorConfig) -> Generator:
    """Return a freshly seeded generator described by ``config``."""
    if config.kind == "mother":
        return MotherGenerator(config.seed)
    params = MERSENNE_KINDS[config.kind]
    if config.seeds is not None:
        return MersenneTwister.from_array(config.seeds, params)
    return MersenneTwister(config.seed, params)


def load_config(path: Path) -> GeneratorConfig:
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return GeneratorConfig.from_dict(data)


def save_config(config: GeneratorConfig, path: Path) -> None:
    """Write ``config`` as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
        f.write("\n")
