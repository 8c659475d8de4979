"""Loading and persisting the asset type index file."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .index_models import AssetTypeIndex, AssetTypeIndexEntry

_ENTRY_FIELDS = ("id", "name", "location")


class AssetTypeIndexError(Exception):
    """Raised when the asset type index file cannot be read or is malformed."""


def load_asset_type_index(index_path: Path | str) -> AssetTypeIndex:
    """Load the index, treating a missing file as an empty index."""
    path = Path(index_path)
    if not path.exists():
        return AssetTypeIndex()
    try:
        parsed = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise AssetTypeIndexError(f"Failed to read asset type index {path}: {exc}") from exc
    if not isinstance(parsed, list):
        raise AssetTypeIndexError(f"Asset type index {path} must be a JSON array.")
    return AssetTypeIndex([_parse_entry(item, position) for position, item in enumerate(parsed)])


def write_asset_type_index(index_path: Path | str, index: AssetTypeIndex) -> Path:
    """Rewrite the index file sorted by asset id."""
    path = Path(index_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [entry.to_json() for entry in index.sorted_entries()]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path


def _parse_entry(item: Any, position: int) -> AssetTypeIndexEntry:
    if not isinstance(item, Mapping):
        raise AssetTypeIndexError(f"Asset type index entry #{position} must be an object.")
    values: dict[str, str] = {}
    for field_name in _ENTRY_FIELDS:
        value = item.get(field_name)
        if not isinstance(value, str):
            raise AssetTypeIndexError(
                f"Asset type index entry #{position} requires a string '{field_name}'."
            )
        values[field_name] = value
    return AssetTypeIndexEntry(**values)
