# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Simulation configuration."""
import math
from dataclasses import dataclass

from accretion.domain.gravity_field import DEFAULT_GRAVITATIONAL_CONSTANT
from accretion.domain.trails import DEFAULT_FADEOUT_S, DEFAULT_TRAIL_LENGTH


@dataclass(frozen=True)
class SimulationConfig:
    """Tick-driver settings.

    length_scale is world units per physical meter; force and orbital
    element math divide world coordinates by it.
    """
    gravitational_constant: float = DEFAULT_GRAVITATIONAL_CONSTANT
    length_scale: float = 10.0
    dt: float = 1e-4
    trajectory_resolution: int | None = None
    trail_length: int = DEFAULT_TRAIL_LENGTH
    trail_fadeout_s: float = DEFAULT_FADEOUT_S

    def __post_init__(self) -> None:
        if not math.isfinite(self.gravitational_constant) or self.gravitational_constant <= 0:
            raise ValueError(
                f"gravitational_constant must be positive, got {self.gravitational_constant}"
            )
        if not math.isfinite(self.length_scale) or self.length_scale < 1.0:
            raise ValueError(f"length_scale must be >= 1.0, got {self.length_scale}")
        if not math.isfinite(self.dt) or self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.trajectory_resolution is not None and self.trajectory_resolution < 2:
            raise ValueError(
                f"trajectory_resolution must be >= 2, got {self.trajectory_resolution}"
            )
        if self.trail_length < 1:
            raise ValueError(f"trail_length must be >= 1, got {self.trail_length}")
        if self.trail_fadeout_s < 0:
            raise ValueError(f"trail_fadeout_s must be non-negative, got {self.trail_fadeout_s}")
