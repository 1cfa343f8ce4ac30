# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Body registry.

Canonical arena of celestial body records keyed by stable integer ids.
Every other domain module reads and writes body state through here.

Units: positions in world units, velocities in world units/s, mass in kg,
force in N. The length scale (world units per meter) is applied by the
modules that need SI values.
"""
import itertools
import math
from dataclasses import dataclass, field
from typing import Iterator

RADIUS_SCALE = 5.0  # world units, constant areal density


class InvalidMassError(ValueError):
    """Raised when a body is given a mass that is not finite and > 0."""


@dataclass(frozen=True)
class DominantPartner:
    """Strongest pairwise interaction acting on a body during one tick."""
    body_id: int
    force_magnitude: float


@dataclass
class Body:
    """Mutable state of one body. Owned by BodyRegistry."""
    body_id: int
    position: tuple[float, float]
    velocity: tuple[float, float]
    mass: float
    force: tuple[float, float] = (0.0, 0.0)
    dominant_partner: DominantPartner | None = field(default=None)

    @property
    def radius(self) -> float:
        return radius_from_mass(self.mass)


def radius_from_mass(mass: float) -> float:
    """
    Body radius for a given mass, assuming constant areal density.

    radius = k · sqrt(mass / 2π)

    Args:
        mass: Body mass (kg), must be > 0.

    Returns:
        Radius in world units.
    """
    _check_mass(mass)
    return RADIUS_SCALE * math.sqrt(mass / (2.0 * math.pi))


def _check_mass(mass: float) -> None:
    if not math.isfinite(mass) or mass <= 0:
        raise InvalidMassError(f"mass must be finite and > 0, got {mass}")


def _as_vector(value) -> tuple[float, float]:
    x, y = value
    return (float(x), float(y))


class BodyRegistry:
    """Arena of Body records. Ids are handed out once and never reused."""

    def __init__(self) -> None:
        self._bodies: dict[int, Body] = {}
        self._ids = itertools.count(1)

    def create(
        self,
        position: tuple[float, float],
        velocity: tuple[float, float],
        mass: float,
    ) -> int:
        """Insert a new body and return its id."""
        _check_mass(mass)
        body_id = next(self._ids)
        self._bodies[body_id] = Body(
            body_id=body_id,
            position=_as_vector(position),
            velocity=_as_vector(velocity),
            mass=float(mass),
        )
        return body_id

    def remove(self, body_id: int) -> Body:
        """Remove a body, returning its final state."""
        try:
            return self._bodies.pop(body_id)
        except KeyError:
            raise KeyError(f"no body with id {body_id}") from None

    def get(self, body_id: int) -> Body:
        try:
            return self._bodies[body_id]
        except KeyError:
            raise KeyError(f"no body with id {body_id}") from None

    def find(self, body_id: int | None) -> Body | None:
        """Return the body, or None if it does not exist (or id is None)."""
        if body_id is None:
            return None
        return self._bodies.get(body_id)

    def set_position(self, body_id: int, position: tuple[float, float]) -> None:
        self.get(body_id).position = _as_vector(position)

    def set_velocity(self, body_id: int, velocity: tuple[float, float]) -> None:
        self.get(body_id).velocity = _as_vector(velocity)

    def set_mass(self, body_id: int, mass: float) -> None:
        body = self.get(body_id)
        _check_mass(mass)
        body.mass = float(mass)

    def ids(self) -> list[int]:
        """Live body ids in creation order."""
        return list(self._bodies)

    def __contains__(self, body_id: object) -> bool:
        return body_id in self._bodies

    def __iter__(self) -> Iterator[Body]:
        return iter(list(self._bodies.values()))

    def __len__(self) -> int:
        return len(self._bodies)
