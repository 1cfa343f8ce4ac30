# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for headless simulation runs.

Usage:
    # Default scenario (three fixed bodies + seeded scatter of 10)
    accretion --ticks 10000

    # Scenario file, different seed and scatter size
    accretion --scenario scene.json --ticks 5000
    accretion --seed 42 --scatter-count 25

    # Telemetry and scenario export
    accretion --ticks 10000 --record-every 100 --export-csv telemetry.csv
    accretion --save-scenario scene.json
"""
import argparse
import json
import logging
import sys
from dataclasses import replace

from accretion.domain.body_registry import BodyRegistry
from accretion.domain.diagnostics import summarize
from accretion.domain.scenario import FIXED_BODIES, Scenario, ScatterConfig
from accretion.domain.simulation import Simulation
from accretion.adapters.csv_exporter import CsvTelemetryExporter
from accretion.adapters.euler_backend import SemiImplicitEulerBackend
from accretion.adapters.json_io import JsonScenarioReader, JsonScenarioWriter


def load_scenario(args: argparse.Namespace) -> Scenario:
    """Scenario from --scenario, or the default one, with CLI overrides applied."""
    if args.scenario:
        scenario = JsonScenarioReader().read_scenario(args.scenario)
    else:
        scenario = Scenario(bodies=FIXED_BODIES, scatter=ScatterConfig())

    if args.seed is not None or args.scatter_count is not None:
        scatter = scenario.scatter or ScatterConfig(count=0)
        if args.seed is not None:
            scatter = replace(scatter, seed=args.seed)
        if args.scatter_count is not None:
            scatter = replace(scatter, count=args.scatter_count)
        scenario = replace(scenario, scatter=scatter)
    if args.dt is not None:
        scenario = replace(scenario, config=replace(scenario.config, dt=args.dt))
    return scenario


def run(scenario: Scenario, ticks: int, record_every: int = 0):
    """
    Build and run a simulation.

    Returns:
        (simulation, tick reports, telemetry frames)
    """
    bodies = BodyRegistry()
    scenario.build(bodies)
    backend = SemiImplicitEulerBackend(length_scale=scenario.config.length_scale)
    sim = Simulation(bodies, backend, scenario.config)
    reports, frames = sim.run(ticks, record_every=record_every)
    return sim, reports, frames


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main():
    parser = argparse.ArgumentParser(
        description="Run a 2D N-body gravity simulation with merging and orbit prediction"
    )
    parser.add_argument(
        '--scenario', '-s',
        help="Path to scenario JSON (default: built-in three-body scene + scatter)"
    )
    parser.add_argument(
        '--ticks', '-n', type=int, default=1000,
        help="Number of fixed ticks to run (default: 1000)"
    )
    parser.add_argument(
        '--dt', type=float,
        help="Tick length in seconds (overrides scenario config)"
    )
    parser.add_argument(
        '--seed', type=int,
        help="Seed for the random scatter (overrides scenario)"
    )
    parser.add_argument(
        '--scatter-count', type=int,
        help="Number of randomly scattered bodies (overrides scenario)"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log debug detail (singular pairs, skipped merges)"
    )
    parser.add_argument(
        '--quiet', '-q', action='store_true', default=False,
        help="Only log warnings"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--export-csv',
        help="Export recorded telemetry to CSV"
    )
    export_group.add_argument(
        '--record-every', type=int, default=0,
        help="Record telemetry every N ticks (default: only the final state)"
    )
    export_group.add_argument(
        '--save-scenario',
        help="Write the effective scenario to JSON and exit without running"
    )

    args = parser.parse_args()
    _configure_logging(args.verbose, args.quiet)

    if args.ticks < 0:
        parser.error(f"--ticks must be non-negative, got {args.ticks}")
    if args.record_every < 0:
        parser.error(f"--record-every must be non-negative, got {args.record_every}")

    try:
        scenario = load_scenario(args)
    except FileNotFoundError:
        print(f"Error: scenario file not found: {args.scenario}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: invalid JSON in {args.scenario}: {e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, TypeError) as e:
        print(f"Error: invalid scenario: {e}", file=sys.stderr)
        sys.exit(1)

    if args.save_scenario:
        JsonScenarioWriter().write_scenario(scenario, args.save_scenario)
        print(f"Saved scenario to {args.save_scenario}")
        return

    sim, reports, frames = run(scenario, args.ticks, record_every=args.record_every)
    merges = sum(len(r.merges) for r in reports)
    skipped = sum(r.pairs_skipped for r in reports)

    config = scenario.config
    summary = summarize(sim.bodies, config.gravitational_constant, config.length_scale)
    print(f"Ran {sim.tick_count} ticks ({sim.time_s:.4f} s simulated)")
    print(f"  Bodies: {summary.body_count}  Merges: {merges}  Singular pairs skipped: {skipped}")
    print(f"  Total mass: {summary.total_mass:.6g}")
    print(f"  Momentum: ({summary.momentum[0]:.6g}, {summary.momentum[1]:.6g})")
    print(f"  Total energy: {summary.total_energy:.6g}")

    predictions = sim.predictions()
    for body_id, prediction in sorted(predictions.items()):
        elements = prediction.elements
        print(
            f"  Body {body_id}: orbits {elements.partner_id}, "
            f"e={elements.eccentricity:.4f} ({elements.conic_type.value})"
        )

    if args.export_csv:
        if not frames:
            frames = [sim.snapshot()]
        n = CsvTelemetryExporter().export(frames, args.export_csv)
        print(f"Exported {n} rows to {args.export_csv}")


if __name__ == "__main__":
    main()
