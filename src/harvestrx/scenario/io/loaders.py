"""Scenario loading utilities (YAML metadata + optional species CSV)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd
import yaml

from harvestrx.scenario.contract.models import Scenario

__all__ = ["load_scenario", "read_csv", "read_species_csv"]


def read_csv(path: Path) -> pd.DataFrame:
    """Load a CSV file using pandas with UTF-8 defaults."""
    return pd.read_csv(path)


def read_species_csv(path: Path) -> list[str]:
    """Return the ``name`` column of a species table, blanks dropped."""
    frame = read_csv(path)
    if "name" not in frame.columns:
        raise ValueError(f"Species table {path} must have a 'name' column")
    names = frame["name"].dropna().astype(str).str.strip()
    return [name for name in names if name]


def load_scenario(yaml_path: str | Path) -> Scenario:
    """Load a Scenario from its YAML metadata.

    Species are taken from an inline ``species`` list or, when
    ``data.species`` names a CSV file (relative to the YAML file), from that
    table's ``name`` column.
    """
    base_path = Path(yaml_path).resolve()
    with base_path.open("r", encoding="utf-8") as handle:
        meta = yaml.safe_load(handle) or {}
    root = base_path.parent
    if not isinstance(meta, dict):
        raise ValueError(f"Scenario {base_path} must be a mapping")
    data_section = meta.get("data") or {}
    if not isinstance(data_section, dict):
        raise ValueError(f"Scenario {base_path} must be a mapping")

    species = meta.get("species")
    if "species" in data_section:
        candidate = root / data_section["species"]
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        species = read_species_csv(candidate)
    if species is None:
        raise ValueError(f"Scenario {base_path} does not define any species")

    payload: dict[str, Any] = {
        "name": meta.get("name", base_path.stem),
        "end_year": meta.get("end_year"),
        "species": species,
    }
    for key in ("extension", "start_year"):
        if key in meta:
            payload[key] = meta[key]
    return Scenario.model_validate(payload)
