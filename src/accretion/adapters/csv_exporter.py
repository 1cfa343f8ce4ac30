# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV telemetry exporter.

One row per body per recorded tick. Bodies without a prediction that tick
(no dominant partner) leave the orbit columns empty.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from accretion.domain.simulation import TelemetryFrame
from accretion.ports.export import TelemetryExporter

logger = logging.getLogger(__name__)

_HEADER = [
    'tick', 'time_s', 'body_id', 'mass', 'radius',
    'x', 'y', 'vx', 'vy',
    'partner_id', 'eccentricity', 'conic_type',
]


class CsvTelemetryExporter(TelemetryExporter):
    """Exports recorded telemetry frames to CSV."""

    def export(self, frames: list[TelemetryFrame], path: str) -> int:
        rows = 0
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)
            for frame in frames:
                for body in frame.bodies:
                    writer.writerow([
                        frame.tick,
                        f'{frame.time_s:.6f}',
                        body.body_id,
                        f'{body.mass:.6g}',
                        f'{body.radius:.6g}',
                        f'{body.position[0]:.6f}',
                        f'{body.position[1]:.6f}',
                        f'{body.velocity[0]:.6f}',
                        f'{body.velocity[1]:.6f}',
                        '' if body.partner_id is None else body.partner_id,
                        '' if body.eccentricity is None else f'{body.eccentricity:.6f}',
                        '' if body.conic_type is None else body.conic_type.value,
                    ])
                    rows += 1

        if not frames:
            logger.warning("No telemetry frames recorded; wrote header only to %s", path)
        logger.info("Exported %d telemetry rows to %s", rows, path)
        return rows
