# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for scenario setup and the seeded scatter."""
import pytest

from accretion.domain.body_registry import BodyRegistry
from accretion.domain.scenario import (
    FIXED_BODIES,
    BodySpec,
    Scenario,
    ScatterConfig,
    default_scenario,
    generate_scatter,
)


class TestScatterConfig:

    def test_defaults(self):
        config = ScatterConfig()
        assert config.count == 10
        assert config.seed == 0

    def test_rejects_negative_count(self):
        with pytest.raises(ValueError):
            ScatterConfig(count=-1)

    def test_rejects_non_positive_mass(self):
        with pytest.raises(ValueError):
            ScatterConfig(mass_range=(0.0, 1.0))

    def test_rejects_empty_range(self):
        with pytest.raises(ValueError):
            ScatterConfig(position_range=(5.0, 5.0))


class TestGenerateScatter:

    def test_same_seed_same_bodies(self):
        assert generate_scatter(ScatterConfig(seed=7)) == generate_scatter(ScatterConfig(seed=7))

    def test_different_seed_differs(self):
        assert generate_scatter(ScatterConfig(seed=1)) != generate_scatter(ScatterConfig(seed=2))

    def test_count(self):
        assert len(generate_scatter(ScatterConfig(count=25))) == 25
        assert generate_scatter(ScatterConfig(count=0)) == []

    def test_within_ranges(self):
        config = ScatterConfig(count=200, seed=3)
        for spec in generate_scatter(config):
            assert 0.1 <= spec.mass < 1.0
            assert all(-400.0 <= c < 400.0 for c in spec.position)
            assert all(-50.0 <= c < 50.0 for c in spec.velocity)

    def test_prefix_stable_when_count_grows(self):
        short = generate_scatter(ScatterConfig(count=3, seed=11))
        long = generate_scatter(ScatterConfig(count=6, seed=11))
        assert long[:3] == short


class TestDefaultScenario:

    def test_fixed_bodies_first(self):
        registry = BodyRegistry()
        ids = default_scenario(registry)
        assert len(ids) == len(FIXED_BODIES) + 10
        first = registry.get(ids[0])
        assert first.mass == 10.0
        assert first.position == (0.0, 0.0)
        assert registry.get(ids[1]).velocity == (60.0, 60.0)
        assert registry.get(ids[2]).position == (100.0, 0.0)

    def test_deterministic(self):
        r1, r2 = BodyRegistry(), BodyRegistry()
        default_scenario(r1)
        default_scenario(r2)
        state1 = [(b.position, b.velocity, b.mass) for b in r1]
        state2 = [(b.position, b.velocity, b.mass) for b in r2]
        assert state1 == state2


class TestScenario:

    def test_build_explicit_then_scatter(self):
        scenario = Scenario(
            bodies=(BodySpec((1.0, 2.0), (0.0, 0.0), 3.0),),
            scatter=ScatterConfig(count=2),
        )
        registry = BodyRegistry()
        ids = scenario.build(registry)
        assert len(ids) == 3
        assert registry.get(ids[0]).mass == 3.0

    def test_empty(self):
        registry = BodyRegistry()
        assert Scenario().build(registry) == []
