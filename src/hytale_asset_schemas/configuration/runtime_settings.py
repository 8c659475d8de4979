"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PublicationSettings:
    """Where raw schemas are read from and published schemas are written to."""

    source_dir: Path | None
    output_dir: Path
    index_path: Path
    common_filename: str
    skip_filenames: tuple[str, ...]


@dataclass(frozen=True)
class GeneratorSettings:
    """How the server's schema generator is invoked on a downloaded artifact.

    ``server_jar`` is None when the downloaded artifact is the server jar
    itself, as published to Maven. Otherwise the artifact is a server archive
    and ``server_jar`` is the jar's path inside it.
    """

    java_executable: str
    server_jar: str | None
    schema_subdir: str
    manifest: Mapping[str, object]


@dataclass(frozen=True)
class ArtifactSettings:  # pylint: disable=too-many-instance-attributes
    """Maven repository coordinates and local paths for server artifacts."""

    repository_url: str
    group_id: str
    artifact_id: str
    timeout_seconds: int
    versions_path: Path
    downloads_dir: Path
    request_interval_seconds: float
    download_interval_seconds: float


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    publication: PublicationSettings
    generator: GeneratorSettings
    artifacts: ArtifactSettings | None
