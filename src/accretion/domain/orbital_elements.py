# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Instantaneous Kepler orbit of a body about its dominant partner.

Treats the body and its dominant partner as an isolated two-body problem
and derives the conic section the body would follow if every other body
vanished. See https://en.wikipedia.org/wiki/Kepler_orbit.

Planar conventions: the angular momentum h = r × v is a scalar (the z
component), and v × h = (v_y·h, −v_x·h).
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

import numpy as np

from accretion.domain.body_registry import BodyRegistry

logger = logging.getLogger(__name__)

# Source density of the sampled trajectory: one point per 0.001π of anomaly.
SAMPLES_PER_PI = 1000
OPEN_ORBIT_SPAN = 0.75  # fraction of π sampled either side of periapsis


class ConicType(Enum):
    ELLIPSE = "ellipse"      # includes the circle, e in [0, 1)
    PARABOLA = "parabola"    # e == 1
    HYPERBOLA = "hyperbola"  # e > 1


def classify_conic(eccentricity: float) -> ConicType:
    """Classify an orbit by eccentricity. e == 1 is an open orbit."""
    if 0.0 <= eccentricity < 1.0:
        return ConicType.ELLIPSE
    if eccentricity == 1.0:
        return ConicType.PARABOLA
    return ConicType.HYPERBOLA


@dataclass(frozen=True)
class OrbitalElements:
    """Planar Kepler elements relative to a partner body (SI units)."""
    partner_id: int
    mu: float
    specific_angular_momentum: float
    eccentricity_vector: tuple[float, float]
    eccentricity: float
    semi_latus_rectum: float
    specific_energy: float

    @property
    def conic_type(self) -> ConicType:
        return classify_conic(self.eccentricity)

    @property
    def is_closed(self) -> bool:
        return self.conic_type is ConicType.ELLIPSE

    @property
    def argument_of_periapsis(self) -> float:
        """Angle of the eccentricity vector (rad); 0 for a circular orbit."""
        ex, ey = self.eccentricity_vector
        if ex == 0.0 and ey == 0.0:
            return 0.0
        return math.atan2(ey, ex)

    @property
    def semi_major_axis(self) -> float:
        """a = p / (1 − e²); infinite for a parabola, negative for a hyperbola."""
        denom = 1.0 - self.eccentricity ** 2
        if denom == 0.0:
            return math.inf
        return self.semi_latus_rectum / denom


def compute_orbital_elements(
    position: tuple[float, float],
    velocity: tuple[float, float],
    mu: float,
    partner_id: int = 0,
) -> OrbitalElements | None:
    """
    Kepler elements from relative planar state.

    h = r × v,  e_vec = (v × h)/μ − r/|r|,  p = h²/μ,  ε = ½|v|² − μ/|r|

    Args:
        position: Relative position r (m).
        velocity: Relative velocity v (m/s).
        mu: Gravitational parameter G·(m1 + m2).
        partner_id: Id of the body the state is relative to.

    Returns:
        OrbitalElements, or None when |r| or μ is zero or a result is
        not finite.
    """
    rx, ry = position
    vx, vy = velocity
    r_mag = math.hypot(rx, ry)
    if r_mag == 0.0 or mu == 0.0:
        return None

    h = rx * vy - ry * vx
    ex = (vy * h) / mu - rx / r_mag
    ey = (-vx * h) / mu - ry / r_mag
    e = math.hypot(ex, ey)
    p = h * h / mu
    energy = 0.5 * (vx * vx + vy * vy) - mu / r_mag

    if not all(math.isfinite(x) for x in (h, ex, ey, p, energy)):
        return None

    return OrbitalElements(
        partner_id=partner_id,
        mu=mu,
        specific_angular_momentum=h,
        eccentricity_vector=(ex, ey),
        eccentricity=e,
        semi_latus_rectum=p,
        specific_energy=energy,
    )


class Trajectory:
    """
    Sampled conic trajectory in world units.

    Lazy and restartable: every iteration recomputes the points from the
    stored elements, so iterating twice yields identical sequences.
    Samples beyond a hyperbola's asymptote (non-positive denominator) are
    not emitted.
    """

    def __init__(
        self,
        elements: OrbitalElements,
        focus: tuple[float, float],
        length_scale: float,
        resolution: int | None = None,
    ) -> None:
        if resolution is not None and resolution < 2:
            raise ValueError(f"resolution must be >= 2, got {resolution}")
        self.elements = elements
        self.focus = focus
        self.length_scale = length_scale
        span = 1.0 if elements.is_closed else OPEN_ORBIT_SPAN
        self.angle_range = (-span * math.pi, span * math.pi)
        if resolution is None:
            resolution = 2 * round(span * SAMPLES_PER_PI) + 1
        self.resolution = resolution

    def angles(self) -> np.ndarray:
        """Polar angles sampled, measured from periapsis (rad)."""
        return np.linspace(self.angle_range[0], self.angle_range[1], self.resolution)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        e = self.elements.eccentricity
        p = self.elements.semi_latus_rectum
        omega = self.elements.argument_of_periapsis
        scale = self.length_scale
        fx = self.focus[0] / scale
        fy = self.focus[1] / scale
        for theta in self.angles():
            denom = 1.0 + e * math.cos(theta)
            if denom <= 0.0:
                continue
            radius = p / denom
            phi = theta + omega
            x = (radius * math.cos(phi) + fx) * scale
            y = (radius * math.sin(phi) + fy) * scale
            if math.isfinite(x) and math.isfinite(y):
                yield (x, y)

    def points(self) -> list[tuple[float, float]]:
        return list(self)


@dataclass(frozen=True)
class OrbitPrediction:
    """Elements plus sampled trajectory for one body."""
    body_id: int
    elements: OrbitalElements
    trajectory: Trajectory


class OrbitalElementsPredictor:
    """Predicts each body's orbit about its dominant partner."""

    def __init__(
        self,
        gravitational_constant: float,
        length_scale: float,
        resolution: int | None = None,
    ) -> None:
        if length_scale <= 0:
            raise ValueError(f"length_scale must be positive, got {length_scale}")
        self.gravitational_constant = gravitational_constant
        self.length_scale = length_scale
        self.resolution = resolution

    def elements(self, bodies: BodyRegistry, body_id: int) -> OrbitalElements | None:
        """Orbital elements of a body, or None when there is no usable partner."""
        body = bodies.get(body_id)
        if body.dominant_partner is None:
            return None
        partner = bodies.find(body.dominant_partner.body_id)
        if partner is None:
            logger.debug(
                "Body %d: dominant partner %d no longer exists",
                body_id, body.dominant_partner.body_id,
            )
            return None

        scale = self.length_scale
        r = (
            (body.position[0] - partner.position[0]) / scale,
            (body.position[1] - partner.position[1]) / scale,
        )
        v = (
            (body.velocity[0] - partner.velocity[0]) / scale,
            (body.velocity[1] - partner.velocity[1]) / scale,
        )
        mu = self.gravitational_constant * (body.mass + partner.mass)
        return compute_orbital_elements(r, v, mu, partner_id=partner.body_id)

    def predict(self, bodies: BodyRegistry, body_id: int) -> OrbitPrediction | None:
        """
        Orbital elements and sampled trajectory for one body.

        Returns None when the body has no dominant partner, the partner
        has been removed, or the relative state is singular.
        """
        elements = self.elements(bodies, body_id)
        if elements is None:
            return None
        partner = bodies.get(elements.partner_id)
        trajectory = Trajectory(
            elements, partner.position, self.length_scale, self.resolution,
        )
        return OrbitPrediction(body_id=body_id, elements=elements, trajectory=trajectory)
