# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Accretion

Two-dimensional N-body gravity with inelastic merging and instantaneous
Kepler orbit prediction. Pairwise Newtonian force accumulation with
dominant-partner tracking, momentum-conserving merges on contact, planar
orbital elements and sampled conic trajectories, motion trails, seeded
scenarios and conservation diagnostics.
"""

from accretion.domain.body_registry import (
    Body,
    BodyRegistry,
    DominantPartner,
    InvalidMassError,
    radius_from_mass,
)
from accretion.domain.gravity_field import (
    ForceFieldReport,
    GravityForceField,
    accumulate_gravity,
    pairwise_force,
)
from accretion.domain.collision_merge import (
    CollisionMerge,
    ContactEvent,
    ContactKind,
    MergeResult,
    NonFiniteResultError,
)
from accretion.domain.orbital_elements import (
    ConicType,
    OrbitalElements,
    OrbitalElementsPredictor,
    OrbitPrediction,
    Trajectory,
    classify_conic,
    compute_orbital_elements,
)
from accretion.domain.config import SimulationConfig
from accretion.domain.scenario import (
    BodySpec,
    Scenario,
    ScatterConfig,
    default_scenario,
    generate_scatter,
)
from accretion.domain.diagnostics import SystemSummary, summarize
from accretion.domain.trails import Trail, TrailStore
from accretion.domain.simulation import (
    BodySnapshot,
    Simulation,
    TelemetryFrame,
    TickReport,
)
