from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..domain.errors import RecordSourceError
from .metrics import metrics


@metrics.wrap_sync("records:yaml.load", source="yaml")
def load_records_from_yaml(path: str, *, key: str = "records") -> list[dict[str, Any]]:
    p = Path(path)
    if not p.exists():
        raise RecordSourceError(f"records file not found: {path}")

    with p.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise RecordSourceError(f"Invalid YAML in {path}") from exc

    if not isinstance(data, dict) or key not in data:
        raise RecordSourceError(f"Invalid records file format: expected a mapping with {key!r}")

    records = data[key]
    if not isinstance(records, list):
        raise RecordSourceError(f"{key} must be a list")

    normalized = []
    for entry in records:
        if not isinstance(entry, dict):
            raise RecordSourceError(f"Invalid record entry: {entry!r}")
        normalized.append({str(name): value for name, value in entry.items()})
    return normalized
