"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from hytale_asset_schemas.configuration.runtime_settings import (
    GeneratorSettings,
    PublicationSettings,
)


@dataclass(frozen=True)
class PublicationRequest:
    """Input contract for publishing one directory of generated schemas."""

    schema_dir: Path
    output_dir: Path
    index_path: Path
    common_filename: str = "common.json"
    skip_filenames: tuple[str, ...] = ("other.json",)

    @staticmethod
    def from_settings(settings: PublicationSettings, schema_dir: Path) -> PublicationRequest:
        return PublicationRequest(
            schema_dir=schema_dir,
            output_dir=settings.output_dir,
            index_path=settings.index_path,
            common_filename=settings.common_filename,
            skip_filenames=settings.skip_filenames,
        )


@dataclass(frozen=True)
class FileFailure:
    """A raw schema file that could not be published."""

    filename: str
    message: str


@dataclass(frozen=True)
class PublicationSummary:
    """Output contract for one completed publication run."""

    written_paths: tuple[Path, ...]
    failures: tuple[FileFailure, ...]
    skipped_filenames: tuple[str, ...]
    common_definition_count: int
    index_path: Path
    index_entry_count: int

    @property
    def succeeded(self) -> bool:
        return not self.failures


@dataclass(frozen=True)
class ExtractionRequest:
    """Input contract for fetching a server release and publishing its schemas."""

    version: str
    publication: PublicationSettings
    generator: GeneratorSettings
    work_root: Path | None = None


@dataclass(frozen=True)
class ExtractionOutcome:
    """Output contract for one completed extraction run."""

    version: str
    summary: PublicationSummary
