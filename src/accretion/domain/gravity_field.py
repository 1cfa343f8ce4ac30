# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Pairwise Newtonian gravity with dominant-partner tracking.

Direct O(n²) summation over unordered pairs. Each pair is evaluated once
and the resulting force is applied with opposite signs to both bodies, so
the accumulated forces are exactly antisymmetric per pair.

Forces are accumulated on the bodies for the physics backend to integrate;
positions and velocities are never touched here.

No external dependencies, only stdlib math/dataclasses/itertools/logging.
"""
import itertools
import logging
import math
from dataclasses import dataclass

from accretion.domain.body_registry import Body, BodyRegistry, DominantPartner

logger = logging.getLogger(__name__)

DEFAULT_GRAVITATIONAL_CONSTANT = 10.0


@dataclass(frozen=True)
class ForceFieldReport:
    """Pair bookkeeping for one force accumulation pass."""
    pairs_applied: int
    pairs_skipped: int


def pairwise_force(
    body_a: Body,
    body_b: Body,
    gravitational_constant: float,
    length_scale: float,
) -> tuple[float, float] | None:
    """
    Gravitational force exerted on body_a by body_b.

    F = G · m_a · m_b / |r|² · r̂,  r = (pos_b − pos_a) / length_scale

    Args:
        body_a: Body receiving the force.
        body_b: Body exerting the force.
        gravitational_constant: G in simulation units.
        length_scale: World units per meter.

    Returns:
        (Fx, Fy) in N, or None when the pair has no finite force
        (coincident positions or overflow).
    """
    rx = (body_b.position[0] - body_a.position[0]) / length_scale
    ry = (body_b.position[1] - body_a.position[1]) / length_scale
    r2 = rx * rx + ry * ry
    if r2 == 0.0:
        return None

    r = math.sqrt(r2)
    magnitude = gravitational_constant * body_a.mass * body_b.mass / r2
    fx = magnitude * (rx / r)
    fy = magnitude * (ry / r)
    if not (math.isfinite(fx) and math.isfinite(fy)):
        return None
    return (fx, fy)


def _record_partner(body: Body, other_id: int, magnitude: float) -> None:
    current = body.dominant_partner
    if current is None or magnitude > current.force_magnitude:
        body.dominant_partner = DominantPartner(body_id=other_id, force_magnitude=magnitude)


class GravityForceField:
    """Accumulates gravity on every registered body once per tick."""

    def __init__(
        self,
        gravitational_constant: float = DEFAULT_GRAVITATIONAL_CONSTANT,
        length_scale: float = 1.0,
    ) -> None:
        if length_scale <= 0:
            raise ValueError(f"length_scale must be positive, got {length_scale}")
        self.gravitational_constant = gravitational_constant
        self.length_scale = length_scale

    def step(
        self,
        bodies: BodyRegistry,
        gravitational_constant: float | None = None,
        length_scale: float | None = None,
    ) -> ForceFieldReport:
        """Reset and re-accumulate forces and dominant partners.

        G and the length scale default to the values the field was built with.
        """
        g = self.gravitational_constant if gravitational_constant is None else gravitational_constant
        scale = self.length_scale if length_scale is None else length_scale
        return accumulate_gravity(bodies, g, scale)


def reset_interactions(bodies: BodyRegistry) -> None:
    """Zero accumulated forces and clear dominant partners."""
    for body in bodies:
        body.force = (0.0, 0.0)
        body.dominant_partner = None


def accumulate_gravity(
    bodies: BodyRegistry,
    gravitational_constant: float,
    length_scale: float,
) -> ForceFieldReport:
    """
    One full force pass over the registry.

    Clears every body's force and dominant partner, then visits each
    unordered pair once. Singular pairs (coincident bodies, non-finite
    force) contribute nothing and are counted as skipped.

    Args:
        bodies: Registry to update in place.
        gravitational_constant: G in simulation units.
        length_scale: World units per meter.

    Returns:
        ForceFieldReport with applied/skipped pair counts.
    """
    reset_interactions(bodies)

    applied = 0
    skipped = 0
    for body_a, body_b in itertools.combinations(bodies, 2):
        force = pairwise_force(body_a, body_b, gravitational_constant, length_scale)
        if force is None:
            skipped += 1
            logger.debug(
                "Skipping singular pair (%d, %d)", body_a.body_id, body_b.body_id,
            )
            continue

        fx, fy = force
        body_a.force = (body_a.force[0] + fx, body_a.force[1] + fy)
        body_b.force = (body_b.force[0] - fx, body_b.force[1] - fy)

        magnitude = math.hypot(fx, fy)
        _record_partner(body_a, body_b.body_id, magnitude)
        _record_partner(body_b, body_a.body_id, magnitude)
        applied += 1

    return ForceFieldReport(pairs_applied=applied, pairs_skipped=skipped)
