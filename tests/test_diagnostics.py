# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for system conservation diagnostics."""
import pytest

from accretion.domain.body_registry import BodyRegistry
from accretion.domain.diagnostics import summarize


class TestSummarize:

    def test_empty(self):
        summary = summarize(BodyRegistry(), 10.0, 10.0)
        assert summary.body_count == 0
        assert summary.total_mass == 0.0
        assert summary.total_energy == 0.0

    def test_two_bodies(self):
        registry = BodyRegistry()
        registry.create((0.0, 0.0), (10.0, 0.0), 2.0)
        registry.create((20.0, 0.0), (0.0, 0.0), 3.0)
        summary = summarize(registry, 10.0, 10.0)
        assert summary.body_count == 2
        assert summary.total_mass == 5.0
        assert summary.momentum == pytest.approx((2.0, 0.0))
        assert summary.momentum_magnitude == pytest.approx(2.0)
        assert summary.center_of_mass == pytest.approx((12.0, 0.0))
        assert summary.kinetic_energy == pytest.approx(1.0)
        assert summary.potential_energy == pytest.approx(-30.0)
        assert summary.total_energy == pytest.approx(-29.0)

    def test_coincident_pair_has_no_potential(self):
        registry = BodyRegistry()
        registry.create((1.0, 1.0), (0.0, 0.0), 1.0)
        registry.create((1.0, 1.0), (0.0, 0.0), 1.0)
        assert summarize(registry, 10.0, 1.0).potential_energy == 0.0
