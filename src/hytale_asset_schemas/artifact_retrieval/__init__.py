"""Artifact retrieval exports."""

from .artifact_models import ArtifactProbe, VersionInfo
from .maven_artifact_source import (
    ArtifactSource,
    ArtifactSourceError,
    MavenArtifactSource,
    latest_version,
)

__all__ = [
    "ArtifactProbe",
    "ArtifactSource",
    "ArtifactSourceError",
    "MavenArtifactSource",
    "VersionInfo",
    "latest_version",
]
