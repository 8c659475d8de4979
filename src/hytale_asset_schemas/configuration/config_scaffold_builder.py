"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schemas.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for hytale-asset-schemas.
# Replace every <REQUIRED> placeholder before running publish.
# Relative paths are resolved against the directory of this file.

publication:
  # Directory holding the generator's raw *.json files. Only used by `publish`
  # when --schema-dir is not given; `extract` publishes straight from the
  # generator output.
  # source_dir: <OPTIONAL>
  output_dir: "<REQUIRED>"
  index_path: "<REQUIRED>"
  common_filename: common.json
  skip_filenames:
    - other.json

generator:
  java_executable: java
  # Leave unset when the downloaded artifact is the server jar itself.
  # Set it to the jar's path inside the download when that is a server archive.
  # server_jar: Server/HytaleServer.jar
  schema_subdir: Schema
  manifest:
    Group: Test
    Name: Test

# Only required by extract, list-versions and refresh-versions.
# Uncomment and fill in every <REQUIRED> placeholder to use them.
# artifacts:
#   repository_url: <REQUIRED>
#   group_id: <REQUIRED>
#   artifact_id: <REQUIRED>
#   timeout_seconds: 60
#   versions_path: <REQUIRED>
#   downloads_dir: downloads
#   request_interval_seconds: 0.3
#   download_interval_seconds: 1.0
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
