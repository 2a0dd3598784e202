"""Scenario context: species registry, clock and the scenario bundle loader."""

from .contract import Scenario
from .io import load_scenario
from .registry import ScenarioClock, SpeciesDataset

__all__ = ["Scenario", "load_scenario", "ScenarioClock", "SpeciesDataset"]
