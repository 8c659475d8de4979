"""Artifact retrieval entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VersionInfo:
    """One published server version and where its artifact can be downloaded."""

    version: str
    download_url: str


@dataclass(frozen=True)
class ArtifactProbe:
    """Result of checking whether a version's artifact is downloadable."""

    version: str
    exists: bool
    size: int | None = None
