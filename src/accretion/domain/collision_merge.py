# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Inelastic merging of colliding bodies.

Contact events come from the physics backend. A contact that begins
replaces both bodies with a single body carrying their combined mass,
momentum and centre of mass. Contact-end events carry no action.

No external dependencies, only stdlib math/dataclasses/enum/logging.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from accretion.domain.body_registry import BodyRegistry

logger = logging.getLogger(__name__)


class NonFiniteResultError(ArithmeticError):
    """A merged quantity evaluated to NaN or infinity."""


class ContactKind(Enum):
    STARTED = "started"
    STOPPED = "stopped"


@dataclass(frozen=True)
class ContactEvent:
    """Contact between two bodies reported by the physics backend."""
    kind: ContactKind
    body_a: int
    body_b: int


@dataclass(frozen=True)
class MergeResult:
    """Outcome of one merge: the new body and the two it replaced."""
    merged_id: int
    consumed: tuple[int, int]
    consumed_masses: tuple[float, float]
    mass: float
    position: tuple[float, float]
    velocity: tuple[float, float]


def mass_weighted_mean(
    a: tuple[float, float],
    mass_a: float,
    b: tuple[float, float],
    mass_b: float,
) -> tuple[float, float]:
    """
    Mass-weighted average of two 2-vectors: (a·m_a + b·m_b) / (m_a + m_b).

    Raises:
        NonFiniteResultError: If either component is NaN or infinite.
    """
    total = mass_a + mass_b
    x = (a[0] * mass_a + b[0] * mass_b) / total
    y = (a[1] * mass_a + b[1] * mass_b) / total
    if not (math.isfinite(x) and math.isfinite(y)):
        raise NonFiniteResultError(f"non-finite weighted mean ({x}, {y})")
    return (x, y)


class CollisionMerge:
    """Applies perfectly inelastic merges to a BodyRegistry."""

    def __init__(self, bodies: BodyRegistry) -> None:
        self._bodies = bodies

    def on_contact_begin(self, body_a: int, body_b: int) -> MergeResult | None:
        """
        Merge two touching bodies into one.

        Skips when either body was already consumed or both ids are the
        same body. Aborts (both bodies untouched) when the merged mass,
        velocity or position is not finite.

        Returns:
            MergeResult, or None when no merge took place.
        """
        if body_a == body_b:
            return None
        first = self._bodies.find(body_a)
        second = self._bodies.find(body_b)
        if first is None or second is None:
            logger.debug(
                "Skipping contact (%d, %d): body no longer exists", body_a, body_b,
            )
            return None

        combined_mass = first.mass + second.mass
        try:
            if not math.isfinite(combined_mass):
                raise NonFiniteResultError(f"non-finite combined mass {combined_mass}")
            velocity = mass_weighted_mean(
                first.velocity, first.mass, second.velocity, second.mass,
            )
            position = mass_weighted_mean(
                first.position, first.mass, second.position, second.mass,
            )
        except NonFiniteResultError as exc:
            logger.warning("Merge of %d and %d aborted: %s", body_a, body_b, exc)
            return None

        merged_id = self._bodies.create(position, velocity, combined_mass)
        self._bodies.remove(body_a)
        self._bodies.remove(body_b)
        logger.info(
            "Merged bodies %d and %d into %d (mass %.6g)",
            body_a, body_b, merged_id, combined_mass,
        )
        return MergeResult(
            merged_id=merged_id,
            consumed=(body_a, body_b),
            consumed_masses=(first.mass, second.mass),
            mass=combined_mass,
            position=position,
            velocity=velocity,
        )

    def on_contact_end(self, body_a: int, body_b: int) -> None:
        """Separation needs no action."""

    def process(self, events: Iterable[ContactEvent]) -> list[MergeResult]:
        """Handle a batch of contact events in arrival order."""
        merges = []
        for event in events:
            if event.kind is not ContactKind.STARTED:
                self.on_contact_end(event.body_a, event.body_b)
                continue
            result = self.on_contact_begin(event.body_a, event.body_b)
            if result is not None:
                merges.append(result)
        return merges
