"""Deterministic uniform pseudorandom generators."""

from .config import GeneratorConfig, build_generator, load_config
from .mersenne import MT11213A, MT19937, MersenneParams, MersenneTwister
from .mother import MotherGenerator

__all__ = [
    "GeneratorConfig",
    "MT11213A",
    "MT19937",
    "MersenneParams",
    "MersenneTwister",
    "MotherGenerator",
    "build_generator",
    "load_config",
]
