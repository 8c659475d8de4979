"""Version catalog entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CatalogVersion:  # pylint: disable=too-many-instance-attributes
    """One server release listed on the documentation site."""

    id: str
    patchline: str
    version: str
    date: str
    commit: str
    size: int
    sha256: str | None = None

    @property
    def artifact_filename(self) -> str:
        return f"{self.patchline}-{self.version}.jar"

    def to_json(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "patchline": self.patchline,
            "version": self.version,
            "date": self.date,
            "commit": self.commit,
            "size": self.size,
        }
        if self.sha256 is not None:
            payload["sha256"] = self.sha256
        return payload


@dataclass(frozen=True)
class CatalogRefreshReport:
    """What one catalog refresh verified, updated and could not reach."""

    catalog: tuple[CatalogVersion, ...]
    verified: tuple[str, ...] = field(default_factory=tuple)
    missing: tuple[str, ...] = field(default_factory=tuple)
    hashed: tuple[str, ...] = field(default_factory=tuple)
    failed_downloads: tuple[str, ...] = field(default_factory=tuple)
