"""Fetch, unpack, generate and publish schemas for one server release."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from hytale_asset_schemas.artifact_retrieval import ArtifactSource, ArtifactSourceError
from hytale_asset_schemas.schema_extraction import (
    ArchiveError,
    CommandRunner,
    GeneratorError,
    run_schema_generator,
    unpack_archive,
    write_minimal_manifest,
)

from .run_contracts import (
    ExtractionOutcome,
    ExtractionRequest,
    PublicationRequest,
    PublicationSummary,
)
from .schema_publication_use_case import PublicationError, publish_generated_schemas

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when any step of the extraction run fails."""


def execute_schema_extraction(
    request: ExtractionRequest,
    *,
    artifact_source: ArtifactSource,
    run_command: CommandRunner | None = None,
) -> ExtractionOutcome:
    """Run every extraction step in order inside a temporary working directory.

    Each step depends on the files the previous one produced. The working
    directory is removed whether the run succeeds or fails.
    """
    with tempfile.TemporaryDirectory(
        prefix=".temp-schema-gen-", dir=request.work_root
    ) as work_dir_name:
        work_dir = Path(work_dir_name)
        try:
            summary = _extract_into(work_dir, request, artifact_source, run_command)
        except (
            ArtifactSourceError,
            ArchiveError,
            GeneratorError,
            PublicationError,
            OSError,
        ) as exc:
            raise ExtractionError(str(exc)) from exc
        finally:
            logger.info("Cleaning up temporary files in %s", work_dir)
    return ExtractionOutcome(version=request.version, summary=summary)


def _extract_into(
    work_dir: Path,
    request: ExtractionRequest,
    artifact_source: ArtifactSource,
    run_command: CommandRunner | None,
) -> PublicationSummary:
    logger.info("Downloading server %s", request.version)
    payload = artifact_source.fetch_version(request.version)
    server_jar = _stage_server_jar(work_dir, request, payload)

    assets_dir = work_dir / "assets"
    write_minimal_manifest(assets_dir, request.generator.manifest)
    logger.info("Created minimal asset pack at %s", assets_dir)

    run_schema_generator(
        server_jar,
        assets_dir,
        java_executable=request.generator.java_executable,
        run_command=run_command,
    )

    return publish_generated_schemas(
        PublicationRequest.from_settings(
            request.publication, assets_dir / request.generator.schema_subdir
        )
    )


def _stage_server_jar(work_dir: Path, request: ExtractionRequest, payload: bytes) -> Path:
    jar_in_archive = request.generator.server_jar
    if jar_in_archive is None:
        server_jar = work_dir / f"server-{request.version}.jar"
        server_jar.write_bytes(payload)
        return server_jar
    archive_path = work_dir / f"server-{request.version}.zip"
    archive_path.write_bytes(payload)
    server_dir = unpack_archive(archive_path, work_dir / "server")
    return server_dir / jar_in_archive
