# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for scenario JSON I/O and CSV telemetry export.

Verifies port compliance, output format, and adapter behavior.
"""
import csv
import json

import pytest

from accretion.adapters.csv_exporter import CsvTelemetryExporter
from accretion.adapters.euler_backend import SemiImplicitEulerBackend
from accretion.adapters.json_io import (
    JsonScenarioReader,
    JsonScenarioWriter,
    parse_scenario,
)
from accretion.domain.body_registry import BodyRegistry, InvalidMassError
from accretion.domain.config import SimulationConfig
from accretion.domain.scenario import BodySpec, Scenario, ScatterConfig
from accretion.domain.simulation import Simulation
from accretion.ports import ScenarioReader, ScenarioWriter
from accretion.ports.export import TelemetryExporter


def _frames(ticks=4, record_every=2):
    registry = BodyRegistry()
    registry.create((0.0, 0.0), (0.0, 0.0), 10.0)
    registry.create((100.0, 0.0), (0.0, 30.0), 1.0)
    sim = Simulation(registry, SemiImplicitEulerBackend(10.0), SimulationConfig())
    _, frames = sim.run(ticks, record_every=record_every)
    return frames


class TestPortCompliance:

    def test_csv_exporter_is_telemetry_exporter(self):
        assert issubclass(CsvTelemetryExporter, TelemetryExporter)

    def test_json_reader_is_scenario_reader(self):
        assert issubclass(JsonScenarioReader, ScenarioReader)

    def test_json_writer_is_scenario_writer(self):
        assert issubclass(JsonScenarioWriter, ScenarioWriter)

    @pytest.mark.parametrize("port", [TelemetryExporter, ScenarioReader, ScenarioWriter])
    def test_ports_are_abstract(self, port):
        with pytest.raises(TypeError):
            port()


class TestParseScenario:

    def test_empty_object(self):
        scenario = parse_scenario({})
        assert scenario.config == SimulationConfig()
        assert scenario.bodies == ()
        assert scenario.scatter is None

    def test_full(self):
        scenario = parse_scenario({
            "config": {"gravitational_constant": 2.0, "length_scale": 5.0},
            "bodies": [{"position": [1, 2], "velocity": [3, 4], "mass": 6}],
            "scatter": {"count": 3, "seed": 9, "mass_range": [0.5, 2.0]},
        })
        assert scenario.config.gravitational_constant == 2.0
        assert scenario.bodies == (BodySpec((1.0, 2.0), (3.0, 4.0), 6.0),)
        assert scenario.scatter == ScatterConfig(count=3, seed=9, mass_range=(0.5, 2.0))

    def test_unknown_config_key(self):
        with pytest.raises(ValueError, match="Unknown config keys"):
            parse_scenario({"config": {"gravity": 1.0}})

    def test_invalid_mass(self):
        with pytest.raises(InvalidMassError):
            parse_scenario({"bodies": [{"mass": -1.0}]})

    def test_missing_mass(self):
        with pytest.raises(ValueError, match="no mass"):
            parse_scenario({"bodies": [{"position": [0, 0]}]})

    def test_bad_vector(self):
        with pytest.raises(ValueError, match="position"):
            parse_scenario({"bodies": [{"position": [0, 0, 0], "mass": 1.0}]})


class TestJsonRoundTrip:

    def test_write_then_read(self, tmp_path):
        scenario = Scenario(
            config=SimulationConfig(dt=1e-3),
            bodies=(BodySpec((0.0, 0.0), (1.0, 0.0), 2.0),),
            scatter=ScatterConfig(count=4, seed=5),
        )
        path = str(tmp_path / "scene.json")
        JsonScenarioWriter().write_scenario(scenario, path)
        with open(path, encoding="utf-8") as f:
            assert json.load(f)["scatter"]["position_range"] == [-400.0, 400.0]
        assert JsonScenarioReader().read_scenario(path) == scenario


class TestCsvExporter:

    def test_header_and_rows(self, tmp_path):
        frames = _frames()
        path = str(tmp_path / "telemetry.csv")
        count = CsvTelemetryExporter().export(frames, path)
        assert count == 4  # 2 frames x 2 bodies
        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == [
            'tick', 'time_s', 'body_id', 'mass', 'radius',
            'x', 'y', 'vx', 'vy',
            'partner_id', 'eccentricity', 'conic_type',
        ]
        assert len(rows) == 5
        assert [r[0] for r in rows[1:]] == ['2', '2', '4', '4']

    def test_orbit_columns(self, tmp_path):
        path = str(tmp_path / "telemetry.csv")
        CsvTelemetryExporter().export(_frames(), path)
        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert rows[1]['partner_id'] == rows[0]['body_id']
        assert rows[1]['conic_type'] in ('ellipse', 'parabola', 'hyperbola')

    def test_no_frames_header_only(self, tmp_path, caplog):
        path = str(tmp_path / "empty.csv")
        assert CsvTelemetryExporter().export([], path) == 0
        with open(path) as f:
            assert len(f.readlines()) == 1
        assert "No telemetry frames" in caplog.text
