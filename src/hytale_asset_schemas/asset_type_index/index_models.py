"""Asset type index entities."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class AssetTypeIndexEntry:
    """One asset type listed on the documentation site."""

    id: str
    name: str
    location: str

    def to_json(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "location": self.location}


class AssetTypeIndex:
    """In-memory index keyed by asset id, preserving first-seen order."""

    def __init__(self, entries: list[AssetTypeIndexEntry] | None = None) -> None:
        self._entries: dict[str, AssetTypeIndexEntry] = {}
        for entry in entries or []:
            self._entries[entry.id] = entry

    def upsert(self, asset_id: str, location: str) -> AssetTypeIndexEntry:
        """Update the location of a known asset type or append a new entry."""
        existing = self._entries.get(asset_id)
        if existing is None:
            entry = AssetTypeIndexEntry(id=asset_id, name=asset_id, location=location)
        else:
            entry = replace(existing, location=location)
        self._entries[asset_id] = entry
        return entry

    def get(self, asset_id: str) -> AssetTypeIndexEntry | None:
        return self._entries.get(asset_id)

    def sorted_entries(self) -> list[AssetTypeIndexEntry]:
        return sorted(self._entries.values(), key=lambda entry: (entry.id.casefold(), entry.id))

    def __len__(self) -> int:
        return len(self._entries)
