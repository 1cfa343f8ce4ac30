# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Reference physics backend: semi-implicit Euler with circle contacts.

Integration is symplectic Euler. Velocity is updated first from the
accumulated force, then position from the new velocity:

    v ← v + (F / m) · L · dt
    x ← x + v · dt

Forces are in N (SI); L converts accelerations to world units.

Contacts are broad-phase free O(n²) circle overlap tests. A STARTED event
is emitted when a pair begins touching and STOPPED when it separates.
"""
import itertools
import math

import numpy as np

from accretion.domain.body_registry import BodyRegistry
from accretion.domain.collision_merge import ContactEvent, ContactKind


class SemiImplicitEulerBackend:
    """PhysicsBackend adapter for headless runs and tests."""

    def __init__(self, length_scale: float = 10.0) -> None:
        if length_scale <= 0:
            raise ValueError(f"length_scale must be positive, got {length_scale}")
        self.length_scale = length_scale
        self._touching: set[tuple[int, int]] = set()

    def integrate(self, bodies: BodyRegistry, dt: float) -> None:
        scale = self.length_scale
        for body in bodies:
            accel = np.array(body.force) / body.mass * scale
            velocity = np.array(body.velocity) + accel * dt
            position = np.array(body.position) + velocity * dt
            body.velocity = (float(velocity[0]), float(velocity[1]))
            body.position = (float(position[0]), float(position[1]))

    def detect_contacts(self, bodies: BodyRegistry) -> list[ContactEvent]:
        touching = set()
        ordered = sorted(bodies, key=lambda b: b.body_id)
        for a, b in itertools.combinations(ordered, 2):
            distance = math.hypot(
                b.position[0] - a.position[0], b.position[1] - a.position[1],
            )
            if distance <= a.radius + b.radius:
                touching.add((a.body_id, b.body_id))

        events = [
            ContactEvent(ContactKind.STARTED, a, b)
            for a, b in sorted(touching - self._touching)
        ]
        events.extend(
            ContactEvent(ContactKind.STOPPED, a, b)
            for a, b in sorted(self._touching - touching)
        )
        self._touching = touching
        return events
