# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for the rigid-body physics backend.

The backend owns time integration and collision detection. The core hands
it accumulated forces each tick and receives contact events back.
"""
from typing import Protocol, runtime_checkable

from accretion.domain.body_registry import BodyRegistry
from accretion.domain.collision_merge import ContactEvent


@runtime_checkable
class PhysicsBackend(Protocol):
    """Port for integrating bodies and reporting contacts."""

    length_scale: float  # world units per meter

    def integrate(self, bodies: BodyRegistry, dt: float) -> None:
        """
        Advance positions and velocities by dt using each body's force.

        Implementations must be symplectic (or otherwise keep energy
        drift bounded over closed two-body orbits).
        """
        ...

    def detect_contacts(self, bodies: BodyRegistry) -> list[ContactEvent]:
        """Report contacts that began or ended since the previous call."""
        ...
