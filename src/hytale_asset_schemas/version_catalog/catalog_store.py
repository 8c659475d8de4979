"""Reading and writing the version catalog file."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .catalog_models import CatalogVersion

_STRING_FIELDS = ("id", "patchline", "version", "date", "commit")


class VersionCatalogError(Exception):
    """Raised when the version catalog cannot be read or is malformed."""


def load_version_catalog(catalog_path: Path | str) -> list[CatalogVersion]:
    path = Path(catalog_path)
    if not path.exists():
        raise VersionCatalogError(f"Version catalog not found: {path}")
    try:
        parsed = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise VersionCatalogError(f"Failed to read version catalog {path}: {exc}") from exc
    if not isinstance(parsed, list):
        raise VersionCatalogError(f"Version catalog {path} must be a JSON array.")
    return [_parse_version(item, position) for position, item in enumerate(parsed)]


def write_version_catalog(catalog_path: Path | str, catalog: Iterable[CatalogVersion]) -> Path:
    path = Path(catalog_path)
    payload = [version.to_json() for version in catalog]
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path


def _parse_version(item: Any, position: int) -> CatalogVersion:
    if not isinstance(item, Mapping):
        raise VersionCatalogError(f"Version catalog entry #{position} must be an object.")
    values: dict[str, str] = {}
    for field_name in _STRING_FIELDS:
        value = item.get(field_name)
        if not isinstance(value, str):
            raise VersionCatalogError(
                f"Version catalog entry #{position} requires a string '{field_name}'."
            )
        values[field_name] = value
    size = item.get("size", 0)
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise VersionCatalogError(
            f"Version catalog entry #{position} requires a non-negative integer 'size'."
        )
    sha256 = item.get("sha256")
    if sha256 is not None and not isinstance(sha256, str):
        raise VersionCatalogError(f"Version catalog entry #{position} 'sha256' must be a string.")
    return CatalogVersion(size=size, sha256=sha256 or None, **values)
