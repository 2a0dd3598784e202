"""Scenario IO helpers."""

from .loaders import load_scenario, read_csv, read_species_csv

__all__ = ["load_scenario", "read_csv", "read_species_csv"]
