# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the reference semi-implicit Euler backend."""
import pytest

from accretion.adapters.euler_backend import SemiImplicitEulerBackend
from accretion.domain.body_registry import BodyRegistry
from accretion.domain.collision_merge import ContactEvent, ContactKind
from accretion.ports.physics_backend import PhysicsBackend


class TestPortCompliance:

    def test_is_physics_backend(self):
        assert isinstance(SemiImplicitEulerBackend(), PhysicsBackend)

    def test_rejects_bad_scale(self):
        with pytest.raises(ValueError):
            SemiImplicitEulerBackend(length_scale=0.0)


class TestIntegrate:

    def test_velocity_then_position(self):
        registry = BodyRegistry()
        body_id = registry.create((0.0, 0.0), (0.0, 0.0), 2.0)
        registry.get(body_id).force = (10.0, 0.0)
        SemiImplicitEulerBackend(length_scale=10.0).integrate(registry, 0.1)
        body = registry.get(body_id)
        # a = 5 m/s² = 50 units/s²; v = 5 units/s; x uses the new velocity
        assert body.velocity == pytest.approx((5.0, 0.0))
        assert body.position == pytest.approx((0.5, 0.0))

    def test_free_body_drifts(self):
        registry = BodyRegistry()
        body_id = registry.create((1.0, 2.0), (3.0, -4.0), 1.0)
        SemiImplicitEulerBackend().integrate(registry, 0.5)
        assert registry.get(body_id).position == pytest.approx((2.5, 0.0))


class TestContacts:

    def test_begin_and_end_events(self):
        registry = BodyRegistry()
        a = registry.create((0.0, 0.0), (0.0, 0.0), 1.0)
        b = registry.create((1.0, 0.0), (0.0, 0.0), 1.0)
        backend = SemiImplicitEulerBackend()

        assert backend.detect_contacts(registry) == [
            ContactEvent(ContactKind.STARTED, a, b),
        ]
        assert backend.detect_contacts(registry) == []

        registry.set_position(b, (100.0, 0.0))
        assert backend.detect_contacts(registry) == [
            ContactEvent(ContactKind.STOPPED, a, b),
        ]

    def test_separated_bodies_no_contact(self):
        registry = BodyRegistry()
        registry.create((0.0, 0.0), (0.0, 0.0), 1.0)
        registry.create((100.0, 0.0), (0.0, 0.0), 1.0)
        assert SemiImplicitEulerBackend().detect_contacts(registry) == []

    def test_events_ordered_by_id(self):
        registry = BodyRegistry()
        ids = [registry.create((0.0, 0.0), (0.0, 0.0), 1.0) for _ in range(3)]
        events = SemiImplicitEulerBackend().detect_contacts(registry)
        assert [(e.body_a, e.body_b) for e in events] == [
            (ids[0], ids[1]), (ids[0], ids[2]), (ids[1], ids[2]),
        ]
