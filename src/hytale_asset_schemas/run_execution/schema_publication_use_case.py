"""Publication of a directory of generated schemas."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from hytale_asset_schemas.asset_type_index import (
    AssetTypeIndex,
    AssetTypeIndexError,
    load_asset_type_index,
    write_asset_type_index,
)
from hytale_asset_schemas.schema_normalization import (
    SchemaDocumentError,
    assemble_asset_document,
    assemble_common_document,
    asset_location,
)

from .run_contracts import FileFailure, PublicationRequest, PublicationSummary

logger = logging.getLogger(__name__)

COMMON_OUTPUT_FILENAME = "common.schema.json"

DocumentAssembler = Callable[[Any], dict[str, Any]]


class PublicationError(Exception):
    """Raised when a publication run cannot start or cannot be completed."""


class _RawSchemaError(Exception):
    """Raised when one raw schema file cannot be read or parsed."""


def publish_generated_schemas(request: PublicationRequest) -> PublicationSummary:
    """Clean every raw schema in ``request.schema_dir`` and update the asset type index.

    The common definitions file is published first. A file that cannot be
    read, parsed or assembled is recorded as a failure and the run moves on
    to the next file.

    Raises:
      PublicationError: If the schema directory or the common definitions file
        is missing, or the index cannot be read or written.
    """
    schema_dir = request.schema_dir
    if not schema_dir.is_dir():
        raise PublicationError(f"Schema directory not found at: {schema_dir}")
    common_path = schema_dir / request.common_filename
    if not common_path.is_file():
        raise PublicationError(
            f"Common definitions file {request.common_filename} not found in: {schema_dir}"
        )

    try:
        index = load_asset_type_index(request.index_path)
    except AssetTypeIndexError as exc:
        raise PublicationError(str(exc)) from exc

    request.output_dir.mkdir(parents=True, exist_ok=True)
    written_paths: list[Path] = []
    failures: list[FileFailure] = []
    skipped: list[str] = []

    logger.info("Processing: %s (shared definitions)", request.common_filename)
    common_definition_count = 0
    try:
        _, common_document = _publish_file(
            common_path, request.output_dir / COMMON_OUTPUT_FILENAME, assemble_common_document
        )
    except (_RawSchemaError, SchemaDocumentError, OSError) as exc:
        failures.append(_record_failure(common_path, exc))
    else:
        written_paths.append(request.output_dir / COMMON_OUTPUT_FILENAME)
        common_definition_count = len(common_document.get("$defs", {}))
        logger.info("Extracted %d shared definitions", common_definition_count)

    for raw_path in sorted(schema_dir.glob("*.json")):
        if raw_path.name == request.common_filename:
            continue
        if raw_path.name in request.skip_filenames:
            logger.info("Skipping reference schema: %s", raw_path.name)
            skipped.append(raw_path.name)
            continue
        logger.info("Processing: %s", raw_path.name)
        output_path = request.output_dir / published_filename(raw_path.name)
        try:
            raw, _ = _publish_file(raw_path, output_path, assemble_asset_document)
        except (_RawSchemaError, SchemaDocumentError, OSError) as exc:
            failures.append(_record_failure(raw_path, exc))
            continue
        written_paths.append(output_path)
        _update_index(index, raw)

    try:
        write_asset_type_index(request.index_path, index)
    except OSError as exc:
        raise PublicationError(
            f"Failed to write asset type index {request.index_path}: {exc}"
        ) from exc

    return PublicationSummary(
        written_paths=tuple(written_paths),
        failures=tuple(failures),
        skipped_filenames=tuple(skipped),
        common_definition_count=common_definition_count,
        index_path=request.index_path,
        index_entry_count=len(index),
    )


def published_filename(raw_filename: str) -> str:
    """Map ``Foo.json`` to ``Foo.schema.json``."""
    return f"{Path(raw_filename).stem}.schema.json"


def _publish_file(
    raw_path: Path, output_path: Path, assemble: DocumentAssembler
) -> tuple[Any, dict[str, Any]]:
    raw = _read_raw_schema(raw_path)
    document = assemble(raw)
    output_path.write_text(
        json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
    return raw, document


def _update_index(index: AssetTypeIndex, raw: Any) -> None:
    location = asset_location(raw)
    if location is None:
        return
    index.upsert(location.asset_id, location.path)
    logger.info("Location: %s", location.path)
    logger.info("Extension: %s", location.extension)


def _record_failure(raw_path: Path, exc: Exception) -> FileFailure:
    logger.error("Error processing %s: %s", raw_path.name, exc)
    return FileFailure(filename=raw_path.name, message=str(exc))


def _read_raw_schema(raw_path: Path) -> Any:
    try:
        text = raw_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise _RawSchemaError(f"Failed to read {raw_path.name}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise _RawSchemaError(f"Invalid JSON in {raw_path.name}: {exc}") from exc
