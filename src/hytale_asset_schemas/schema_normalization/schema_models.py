"""Schema normalization entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AssetLocation:
    """Where the game stores assets of one type, as declared by the generator."""

    asset_id: str
    path: str
    extension: str
