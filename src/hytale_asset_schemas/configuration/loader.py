"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    ArtifactSettings,
    Configuration,
    GeneratorSettings,
    PublicationSettings,
)

_DEFAULT_MANIFEST = {"Group": "Test", "Name": "Test"}


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    publication = _parse_publication_section(parsed.get("publication"), base_path)
    generator = _parse_generator_section(parsed.get("generator"))
    artifacts_section = parsed.get("artifacts")
    artifacts = (
        None
        if artifacts_section is None
        else _parse_artifacts_section(artifacts_section, base_path)
    )

    return Configuration(
        path=path,
        publication=publication,
        generator=generator,
        artifacts=artifacts,
    )


def _parse_publication_section(value: Any, base_path: Path) -> PublicationSettings:
    section = _require_mapping(value, "publication")
    source_dir_raw = _optional_string(section.get("source_dir"), "publication.source_dir")
    output_dir = _require_non_empty_string(section.get("output_dir"), "publication.output_dir")
    index_path = _require_non_empty_string(section.get("index_path"), "publication.index_path")
    common_filename = _require_filename(
        section.get("common_filename", "common.json"), "publication.common_filename"
    )
    skip_filenames = _normalize_string_sequence(
        section.get("skip_filenames", ["other.json"]), "publication.skip_filenames"
    )
    if common_filename in skip_filenames:
        raise ConfigurationError(
            "publication.common_filename must not be listed in publication.skip_filenames."
        )
    return PublicationSettings(
        source_dir=None if source_dir_raw is None else _resolve_path(base_path, source_dir_raw),
        output_dir=_resolve_path(base_path, output_dir),
        index_path=_resolve_path(base_path, index_path),
        common_filename=common_filename,
        skip_filenames=skip_filenames,
    )


def _parse_generator_section(value: Any) -> GeneratorSettings:
    section = {} if value is None else _require_mapping(value, "generator")
    java_executable = _require_non_empty_string(
        section.get("java_executable", "java"), "generator.java_executable"
    )
    server_jar = _optional_string(section.get("server_jar"), "generator.server_jar")
    schema_subdir = _require_non_empty_string(
        section.get("schema_subdir", "Schema"), "generator.schema_subdir"
    )
    manifest = section.get("manifest", _DEFAULT_MANIFEST)
    if not isinstance(manifest, Mapping) or not manifest:
        raise ConfigurationError("generator.manifest must be a non-empty mapping.")
    return GeneratorSettings(
        java_executable=java_executable,
        server_jar=server_jar,
        schema_subdir=schema_subdir,
        manifest=dict(manifest),
    )


def _parse_artifacts_section(value: Any, base_path: Path) -> ArtifactSettings:
    section = _require_mapping(value, "artifacts")
    repository_url = _require_non_empty_string(
        section.get("repository_url"), "artifacts.repository_url"
    ).rstrip("/")
    if not repository_url.startswith(("http://", "https://")):
        raise ConfigurationError("artifacts.repository_url must be an http(s) URL.")
    group_id = _require_non_empty_string(section.get("group_id"), "artifacts.group_id")
    artifact_id = _require_non_empty_string(section.get("artifact_id"), "artifacts.artifact_id")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 60), "artifacts.timeout_seconds"
    )
    versions_path = _require_non_empty_string(
        section.get("versions_path", "versions.json"), "artifacts.versions_path"
    )
    downloads_dir = _require_non_empty_string(
        section.get("downloads_dir", "downloads"), "artifacts.downloads_dir"
    )
    request_interval_seconds = _require_non_negative_number(
        section.get("request_interval_seconds", 0.3), "artifacts.request_interval_seconds"
    )
    download_interval_seconds = _require_non_negative_number(
        section.get("download_interval_seconds", 1.0), "artifacts.download_interval_seconds"
    )
    return ArtifactSettings(
        repository_url=repository_url,
        group_id=group_id,
        artifact_id=artifact_id,
        timeout_seconds=timeout_seconds,
        versions_path=_resolve_path(base_path, versions_path),
        downloads_dir=_resolve_path(base_path, downloads_dir),
        request_interval_seconds=request_interval_seconds,
        download_interval_seconds=download_interval_seconds,
    )


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_filename(value: Any, field_name: str) -> str:
    filename = _require_non_empty_string(value, field_name)
    if Path(filename).name != filename or not filename.endswith(".json"):
        raise ConfigurationError(f"{field_name} must be a bare *.json file name.")
    return filename


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value


def _require_non_negative_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{field_name} must be a number.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return float(value)
