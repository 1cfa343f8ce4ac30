# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON scenario file I/O adapter.

Scenario format:

    {
      "config": {"gravitational_constant": 10.0, "length_scale": 10.0, "dt": 0.0001},
      "bodies": [
        {"position": [0.0, 0.0], "velocity": [0.0, 0.0], "mass": 10.0}
      ],
      "scatter": {"count": 10, "seed": 0}
    }

All blocks are optional. Unknown config keys are rejected.
"""
import json
from dataclasses import asdict, fields
from typing import Any

from accretion.domain.body_registry import radius_from_mass
from accretion.domain.config import SimulationConfig
from accretion.domain.scenario import BodySpec, Scenario, ScatterConfig
from accretion.ports import ScenarioReader, ScenarioWriter


def _vector(value: Any, name: str) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{name} must be a 2-element list, got {value!r}")
    return (float(value[0]), float(value[1]))


def _known_keys(data: dict, cls: type, block: str) -> dict:
    allowed = {f.name for f in fields(cls)}
    unknown = set(data) - allowed
    if unknown:
        raise ValueError(f"Unknown {block} keys: {', '.join(sorted(unknown))}")
    return data


def parse_scenario(data: dict[str, Any]) -> Scenario:
    """Build a validated Scenario from decoded JSON."""
    if not isinstance(data, dict):
        raise ValueError("Scenario must be a JSON object")

    config = SimulationConfig(
        **_known_keys(data.get("config", {}), SimulationConfig, "config"),
    )

    bodies = []
    for index, entry in enumerate(data.get("bodies", [])):
        try:
            mass = float(entry["mass"])
        except KeyError:
            raise ValueError(f"Body {index} has no mass") from None
        radius_from_mass(mass)  # rejects non-positive mass up front
        bodies.append(BodySpec(
            position=_vector(entry.get("position", [0.0, 0.0]), f"bodies[{index}].position"),
            velocity=_vector(entry.get("velocity", [0.0, 0.0]), f"bodies[{index}].velocity"),
            mass=mass,
        ))

    scatter = None
    scatter_data = data.get("scatter")
    if scatter_data is not None:
        scatter_data = dict(_known_keys(scatter_data, ScatterConfig, "scatter"))
        for key in ("mass_range", "position_range", "velocity_range"):
            if key in scatter_data:
                scatter_data[key] = _vector(scatter_data[key], f"scatter.{key}")
        scatter = ScatterConfig(**scatter_data)

    return Scenario(config=config, bodies=tuple(bodies), scatter=scatter)


def scenario_to_dict(scenario: Scenario) -> dict[str, Any]:
    data: dict[str, Any] = {
        "config": asdict(scenario.config),
        "bodies": [
            {
                "position": list(spec.position),
                "velocity": list(spec.velocity),
                "mass": spec.mass,
            }
            for spec in scenario.bodies
        ],
    }
    if scenario.scatter is not None:
        scatter = asdict(scenario.scatter)
        for key in ("mass_range", "position_range", "velocity_range"):
            scatter[key] = list(scatter[key])
        data["scatter"] = scatter
    return data


class JsonScenarioReader(ScenarioReader):
    """Reads scenarios from JSON files."""

    def read_scenario(self, path: str) -> Scenario:
        with open(path, encoding='utf-8') as f:
            return parse_scenario(json.load(f))


class JsonScenarioWriter(ScenarioWriter):
    """Writes scenarios to JSON files."""

    def write_scenario(self, scenario: Scenario, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(scenario_to_dict(scenario), f, indent=2)
