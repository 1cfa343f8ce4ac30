# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for simulation telemetry export.

Adapters implement this to write recorded body states in various formats.
"""
from abc import ABC, abstractmethod

from accretion.domain.simulation import TelemetryFrame


class TelemetryExporter(ABC):
    """Port for exporting recorded telemetry to file."""

    @abstractmethod
    def export(self, frames: list[TelemetryFrame], path: str) -> int:
        """
        Export telemetry frames to a file.

        Args:
            frames: Recorded frames, in tick order.
            path: Output file path.

        Returns:
            Number of body rows written.
        """
        ...
