# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
System-level conservation diagnostics.

Total mass, momentum, centre of mass and energy of the registry, used to
check the force/integration contract over long runs.
"""
import itertools
import math
from dataclasses import dataclass

import numpy as np

from accretion.domain.body_registry import BodyRegistry


@dataclass(frozen=True)
class SystemSummary:
    """Aggregate state of all bodies (SI units unless noted)."""
    body_count: int
    total_mass: float
    momentum: tuple[float, float]
    center_of_mass: tuple[float, float]  # world units
    kinetic_energy: float
    potential_energy: float

    @property
    def momentum_magnitude(self) -> float:
        return math.hypot(self.momentum[0], self.momentum[1])

    @property
    def total_energy(self) -> float:
        return self.kinetic_energy + self.potential_energy


def summarize(
    bodies: BodyRegistry,
    gravitational_constant: float,
    length_scale: float,
) -> SystemSummary:
    """
    Summarize the registry.

    Potential energy is −G·m_a·m_b/|r| over unordered pairs; coincident
    pairs are skipped, as the force field skips them.

    Args:
        bodies: Registry to summarize.
        gravitational_constant: G in simulation units.
        length_scale: World units per meter.

    Returns:
        SystemSummary. An empty registry has zero mass and a centre of
        mass at the origin.
    """
    body_list = list(bodies)
    if not body_list:
        return SystemSummary(0, 0.0, (0.0, 0.0), (0.0, 0.0), 0.0, 0.0)

    masses = np.array([b.mass for b in body_list])
    positions = np.array([b.position for b in body_list])
    velocities = np.array([b.velocity for b in body_list]) / length_scale

    total_mass = float(masses.sum())
    momentum = (masses[:, None] * velocities).sum(axis=0)
    com = (masses[:, None] * positions).sum(axis=0) / total_mass
    kinetic = float(0.5 * (masses * (velocities ** 2).sum(axis=1)).sum())

    potential = 0.0
    for a, b in itertools.combinations(body_list, 2):
        r = math.hypot(
            (b.position[0] - a.position[0]) / length_scale,
            (b.position[1] - a.position[1]) / length_scale,
        )
        if r == 0.0:
            continue
        potential -= gravitational_constant * a.mass * b.mass / r

    return SystemSummary(
        body_count=len(body_list),
        total_mass=total_mass,
        momentum=(float(momentum[0]), float(momentum[1])),
        center_of_mass=(float(com[0]), float(com[1])),
        kinetic_energy=kinetic,
        potential_energy=potential,
    )
