# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for scenario I/O, telemetry export and the reference backend.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from accretion.adapters.csv_exporter import CsvTelemetryExporter
from accretion.adapters.euler_backend import SemiImplicitEulerBackend
from accretion.adapters.json_io import JsonScenarioReader, JsonScenarioWriter

__all__ = [
    "CsvTelemetryExporter",
    "JsonScenarioReader",
    "JsonScenarioWriter",
    "SemiImplicitEulerBackend",
]
