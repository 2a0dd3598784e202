"""Utilities for appending structured diagnostic records."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from harvestrx.model.prescriptions import RoundedInterval


def append_jsonl(path: str | Path, record: Mapping[str, Any]) -> None:
    """Append a JSON record as a single line to the given path."""
    path = Path(path)
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        json.dump(record, handle, ensure_ascii=False, separators=(",", ":"))
        handle.write("\n")


def log_rounded_intervals(
    path: str | Path, source: str, rounded: Iterable[RoundedInterval]
) -> int:
    """Write one ``rounded_interval`` record per entry; return how many were written."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
    count = 0
    for entry in rounded:
        append_jsonl(
            path,
            {
                "record_type": "rounded_interval",
                "timestamp": timestamp,
                "source": source,
                "line": entry.line_number,
                "requested": entry.requested,
                "rounded_up_to": entry.rounded_up_to,
            },
        )
        count += 1
    return count


__all__ = ["append_jsonl", "log_rounded_intervals"]
