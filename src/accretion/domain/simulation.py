# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Fixed-rate tick driver.

One tick runs, in this order and never concurrently:

    reset forces / dominant partners
    accumulate gravity
    backend integration          (external)
    backend contact detection    (external)
    merge contacts
    record trails

Predictions read the post-merge state on demand. The driver owns the
registry for the whole tick; consumers only ever observe completed ticks.
"""
import logging
from dataclasses import dataclass

from accretion.domain.body_registry import BodyRegistry
from accretion.domain.collision_merge import CollisionMerge, MergeResult
from accretion.domain.config import SimulationConfig
from accretion.domain.gravity_field import GravityForceField
from accretion.domain.orbital_elements import (
    ConicType,
    OrbitalElementsPredictor,
    OrbitPrediction,
)
from accretion.domain.trails import TrailStore
from accretion.ports.physics_backend import PhysicsBackend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickReport:
    """What happened during one tick."""
    tick: int
    time_s: float
    pairs_applied: int
    pairs_skipped: int
    merges: tuple[MergeResult, ...]


@dataclass(frozen=True)
class BodySnapshot:
    """Recorded state of one body at the end of a tick."""
    body_id: int
    mass: float
    radius: float
    position: tuple[float, float]
    velocity: tuple[float, float]
    partner_id: int | None
    eccentricity: float | None
    conic_type: ConicType | None


@dataclass(frozen=True)
class TelemetryFrame:
    """All bodies at the end of one tick."""
    tick: int
    time_s: float
    bodies: tuple[BodySnapshot, ...]


class Simulation:
    """Runs the per-tick pipeline over a registry and a physics backend."""

    def __init__(
        self,
        bodies: BodyRegistry,
        backend: PhysicsBackend,
        config: SimulationConfig | None = None,
    ) -> None:
        self.config = config or SimulationConfig(length_scale=backend.length_scale)
        if backend.length_scale != self.config.length_scale:
            raise ValueError(
                f"backend length_scale {backend.length_scale} does not match "
                f"config length_scale {self.config.length_scale}"
            )
        self.bodies = bodies
        self.backend = backend
        self.force_field = GravityForceField(
            self.config.gravitational_constant, self.config.length_scale,
        )
        self.merger = CollisionMerge(bodies)
        self.predictor = OrbitalElementsPredictor(
            self.config.gravitational_constant,
            self.config.length_scale,
            self.config.trajectory_resolution,
        )
        self.trails = TrailStore(
            length=self.config.trail_length, fadeout_s=self.config.trail_fadeout_s,
        )
        self.tick_count = 0
        self.time_s = 0.0

    def tick(self) -> TickReport:
        dt = self.config.dt
        forces = self.force_field.step(self.bodies)
        self.backend.integrate(self.bodies, dt)
        contacts = self.backend.detect_contacts(self.bodies)
        merges = self.merger.process(contacts)

        for merge in merges:
            self.trails.on_merge(merge)
        self.trails.prune(self.bodies)
        self.trails.record(self.bodies)
        self.trails.advance(dt)

        self.tick_count += 1
        self.time_s += dt
        if forces.pairs_skipped:
            logger.debug(
                "Tick %d: %d singular pair(s) skipped", self.tick_count, forces.pairs_skipped,
            )
        return TickReport(
            tick=self.tick_count,
            time_s=self.time_s,
            pairs_applied=forces.pairs_applied,
            pairs_skipped=forces.pairs_skipped,
            merges=tuple(merges),
        )

    def run(self, ticks: int, record_every: int = 0) -> tuple[list[TickReport], list[TelemetryFrame]]:
        """
        Run a number of ticks.

        Args:
            ticks: Number of ticks to run (>= 0).
            record_every: Record a telemetry frame every N ticks; 0 disables.

        Returns:
            (tick reports, telemetry frames)
        """
        if ticks < 0:
            raise ValueError(f"ticks must be non-negative, got {ticks}")
        if record_every < 0:
            raise ValueError(f"record_every must be non-negative, got {record_every}")
        reports = []
        frames = []
        for _ in range(ticks):
            reports.append(self.tick())
            if record_every and self.tick_count % record_every == 0:
                frames.append(self.snapshot())
        return reports, frames

    def predict(self, body_id: int) -> OrbitPrediction | None:
        return self.predictor.predict(self.bodies, body_id)

    def predictions(self) -> dict[int, OrbitPrediction]:
        """Predictions for every body that has one."""
        result = {}
        for body_id in self.bodies.ids():
            prediction = self.predict(body_id)
            if prediction is not None:
                result[body_id] = prediction
        return result

    def snapshot(self) -> TelemetryFrame:
        """Telemetry frame of the current (completed-tick) state."""
        snapshots = []
        for body in self.bodies:
            elements = self.predictor.elements(self.bodies, body.body_id)
            snapshots.append(BodySnapshot(
                body_id=body.body_id,
                mass=body.mass,
                radius=body.radius,
                position=body.position,
                velocity=body.velocity,
                partner_id=elements.partner_id if elements else None,
                eccentricity=elements.eccentricity if elements else None,
                conic_type=elements.conic_type if elements else None,
            ))
        return TelemetryFrame(tick=self.tick_count, time_s=self.time_s, bodies=tuple(snapshots))
