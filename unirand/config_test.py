"""Tests for generator configuration loading and building."""

import json

import pytest

from .config import (
    GeneratorConfig,
    build_generator,
    load_config,
    save_config,
)
from .mersenne import MT11213A, MersenneTwister
from .mother import MotherGenerator


def test_defaults():
    cfg = GeneratorConfig.from_dict({})
    assert cfg.kind == "mersenne"
    assert cfg.seed == 0
    assert cfg.seeds is None


def test_build_mersenne_matches_direct():
    gen = build_generator(GeneratorConfig(kind="mersenne", seed=1))
    assert isinstance(gen, MersenneTwister)
    assert gen.next_word() == 1791095845


def test_build_mersenne_from_seeds():
    gen = build_generator(
        GeneratorConfig.from_dict({"seeds": [0x123, 0x234, 0x345, 0x456]})
    )
    assert gen.next_word() == 1067595299


def test_build_mt11213a():
    gen = build_generator(GeneratorConfig(kind="mersenne11213", seed=3))
    assert isinstance(gen, MersenneTwister)
    assert gen.params is MT11213A


def test_build_mother():
    gen = build_generator(GeneratorConfig(kind="mother", seed=5))
    assert isinstance(gen, MotherGenerator)
    assert gen.next_word() == MotherGenerator(5).next_word()


def test_unknown_kind():
    with pytest.raises(ValueError, match="Unknown generator kind"):
        GeneratorConfig.from_dict({"kind": "xorshift"})


def test_mother_rejects_seed_array():
    with pytest.raises(ValueError):
        GeneratorConfig(kind="mother", seeds=[1, 2])


def test_empty_seed_array():
    with pytest.raises(ValueError):
        GeneratorConfig(seeds=[])


def test_bad_seed():
    with pytest.raises(ValueError):
        GeneratorConfig(seed=-3)


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "gen.json"
    cfg = GeneratorConfig(kind="mersenne", seed=9, seeds=[1, 2, 3])
    save_config(cfg, path)
    assert json.loads(path.read_text()) == {
        "kind": "mersenne",
        "seed": 9,
        "seeds": [1, 2, 3],
    }
    assert load_config(path) == cfg


def test_load_rejects_non_object(tmp_path):
    path = tmp_path / "gen.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_config(path)
