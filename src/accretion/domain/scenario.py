# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Scenario setup: fixed bodies and a seeded random scatter.

The scatter draws from a numpy Generator seeded explicitly and consumes
values in a fixed order (mass, position x, position y, velocity x,
velocity y per body), so a seed always produces the same bodies.
"""
from dataclasses import dataclass, field

import numpy as np

from accretion.domain.body_registry import BodyRegistry
from accretion.domain.config import SimulationConfig


@dataclass(frozen=True)
class BodySpec:
    """Initial state of one body."""
    position: tuple[float, float]
    velocity: tuple[float, float]
    mass: float


@dataclass(frozen=True)
class ScatterConfig:
    """Parameters of the seeded random scatter (world units)."""
    count: int = 10
    seed: int = 0
    mass_range: tuple[float, float] = (0.1, 1.0)
    position_range: tuple[float, float] = (-400.0, 400.0)
    velocity_range: tuple[float, float] = (-50.0, 50.0)

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        if self.mass_range[0] <= 0:
            raise ValueError(f"mass_range must be positive, got {self.mass_range}")
        for name in ("mass_range", "position_range", "velocity_range"):
            low, high = getattr(self, name)
            if low >= high:
                raise ValueError(f"{name} must satisfy low < high, got {(low, high)}")


FIXED_BODIES: tuple[BodySpec, ...] = (
    BodySpec(position=(0.0, 0.0), velocity=(0.0, 0.0), mass=10.0),
    BodySpec(position=(-100.0, 0.0), velocity=(60.0, 60.0), mass=5.0),
    BodySpec(position=(100.0, 0.0), velocity=(-100.0, -100.0), mass=5.0),
)


def generate_scatter(config: ScatterConfig) -> list[BodySpec]:
    """Deterministic list of random bodies for a scatter configuration."""
    rng = np.random.default_rng(config.seed)
    specs = []
    for _ in range(config.count):
        mass = float(rng.uniform(*config.mass_range))
        px = float(rng.uniform(*config.position_range))
        py = float(rng.uniform(*config.position_range))
        vx = float(rng.uniform(*config.velocity_range))
        vy = float(rng.uniform(*config.velocity_range))
        specs.append(BodySpec(position=(px, py), velocity=(vx, vy), mass=mass))
    return specs


def populate(bodies: BodyRegistry, specs) -> list[int]:
    """Create a body for each spec, in order. Returns the new ids."""
    return [bodies.create(s.position, s.velocity, s.mass) for s in specs]


def scatter_bodies(bodies: BodyRegistry, config: ScatterConfig) -> list[int]:
    return populate(bodies, generate_scatter(config))


def default_scenario(
    bodies: BodyRegistry,
    scatter: ScatterConfig | None = None,
) -> list[int]:
    """Three fixed bodies followed by the seeded scatter."""
    ids = populate(bodies, FIXED_BODIES)
    ids.extend(scatter_bodies(bodies, scatter or ScatterConfig()))
    return ids


@dataclass(frozen=True)
class Scenario:
    """Complete initial condition: settings, explicit bodies and scatter."""
    config: SimulationConfig = field(default_factory=SimulationConfig)
    bodies: tuple[BodySpec, ...] = ()
    scatter: ScatterConfig | None = None

    def build(self, bodies: BodyRegistry) -> list[int]:
        """Populate a registry: explicit bodies first, then the scatter."""
        ids = populate(bodies, self.bodies)
        if self.scatter is not None:
            ids.extend(scatter_bodies(bodies, self.scatter))
        return ids
