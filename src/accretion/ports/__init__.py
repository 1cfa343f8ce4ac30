# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for scenario file I/O.

Adapters implement these to handle different file formats.
"""
from abc import ABC, abstractmethod

from accretion.domain.scenario import Scenario


class ScenarioReader(ABC):
    """Port for reading scenario definitions."""

    @abstractmethod
    def read_scenario(self, path: str) -> Scenario:
        """Read and validate a scenario file."""
        ...


class ScenarioWriter(ABC):
    """Port for writing scenario definitions."""

    @abstractmethod
    def write_scenario(self, scenario: Scenario, path: str) -> None:
        """Write a scenario to file."""
        ...
