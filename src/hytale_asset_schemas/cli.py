"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from hytale_asset_schemas.artifact_retrieval import (
    ArtifactSourceError,
    MavenArtifactSource,
    latest_version,
)
from hytale_asset_schemas.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ArtifactSettings,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from hytale_asset_schemas.run_execution import (
    ExtractionError,
    ExtractionRequest,
    PublicationError,
    PublicationRequest,
    PublicationSummary,
    execute_schema_extraction,
    publish_generated_schemas,
)
from hytale_asset_schemas.version_catalog import (
    VersionCatalogError,
    load_version_catalog,
    refresh_version_catalog,
    write_version_catalog,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


_config_option = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="hytale-asset-schemas")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Verbosity of progress logging on stderr",
)
def cli(log_level: str) -> None:
    """Publish cleaned Hytale asset JSON schemas."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="publish")
@_config_option
@click.option(
    "--schema-dir",
    "schema_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory of raw generated *.json schemas (overrides publication.source_dir)",
)
def publish(config_path: str, schema_dir: str | None) -> None:
    """Clean a directory of generated schemas and update the asset type index."""
    configuration = _load(config_path)
    source_dir = Path(schema_dir) if schema_dir else configuration.publication.source_dir
    if source_dir is None:
        raise CliError(
            "No schema directory given: pass --schema-dir or set publication.source_dir."
        )
    try:
        summary = publish_generated_schemas(
            PublicationRequest.from_settings(configuration.publication, source_dir)
        )
    except PublicationError as exc:
        raise CliError(str(exc)) from exc
    _report_publication(summary)


@cli.command(name="extract")
@_config_option
@click.option(
    "--server-version",
    "version",
    required=False,
    help="Server version to extract schemas from (defaults to the latest listed version)",
)
def extract(config_path: str, version: str | None) -> None:
    """Download a server release, run its schema generator and publish the result."""
    configuration = _load(config_path)
    artifacts = _require_artifacts(configuration)
    with MavenArtifactSource(artifacts) as source:
        try:
            resolved_version = version or latest_version(source).version
            outcome = execute_schema_extraction(
                ExtractionRequest(
                    version=resolved_version,
                    publication=configuration.publication,
                    generator=configuration.generator,
                ),
                artifact_source=source,
            )
        except (ArtifactSourceError, ExtractionError) as exc:
            raise CliError(str(exc)) from exc
    click.echo(f"extracted schemas from server {outcome.version}")
    _report_publication(outcome.summary)


@cli.command(name="list-versions")
@_config_option
def list_versions(config_path: str) -> None:
    """List the server versions published in the artifact repository."""
    artifacts = _require_artifacts(_load(config_path))
    with MavenArtifactSource(artifacts) as source:
        try:
            versions = source.list_versions()
        except ArtifactSourceError as exc:
            raise CliError(str(exc)) from exc
    for info in versions:
        click.echo(f"{info.version}\t{info.download_url}")


@cli.command(name="refresh-versions")
@_config_option
def refresh_versions(config_path: str) -> None:
    """Verify catalogued versions and hash the ones without a SHA-256."""
    artifacts = _require_artifacts(_load(config_path))
    try:
        catalog = load_version_catalog(artifacts.versions_path)
    except VersionCatalogError as exc:
        raise CliError(str(exc)) from exc
    with MavenArtifactSource(artifacts) as source:
        report = refresh_version_catalog(
            catalog,
            source,
            downloads_dir=artifacts.downloads_dir,
            request_interval_seconds=artifacts.request_interval_seconds,
            download_interval_seconds=artifacts.download_interval_seconds,
        )
    try:
        write_version_catalog(artifacts.versions_path, report.catalog)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(
        f"verified {len(report.verified)}, missing {len(report.missing)}, "
        f"hashed {len(report.hashed)}, failed downloads {len(report.failed_downloads)}"
    )
    for label in report.missing:
        click.echo(f"not found: {label}", err=True)
    click.echo(str(artifacts.versions_path))


def _load(config_path: str) -> Configuration:
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _require_artifacts(configuration: Configuration) -> ArtifactSettings:
    if configuration.artifacts is None:
        raise CliError("Configuration section 'artifacts' is required for this command.")
    return configuration.artifacts


def _report_publication(summary: PublicationSummary) -> None:
    for path in summary.written_paths:
        click.echo(str(path))
    click.echo(f"asset types: {summary.index_entry_count} ({summary.index_path})")
    for failure in summary.failures:
        click.echo(f"error: {failure.filename}: {failure.message}", err=True)
    if summary.failures:
        raise CliError(f"{len(summary.failures)} schema file(s) could not be published.")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
