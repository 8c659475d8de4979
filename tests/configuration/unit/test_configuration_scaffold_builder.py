"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from hytale_asset_schemas.configuration import load_configuration
from hytale_asset_schemas.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Configuration template" in scaffold
    assert "publication:" in scaffold
    assert "generator:" in scaffold
    assert "# artifacts:" in scaffold
    assert "#   download_interval_seconds:" in scaffold
    assert "# source_dir: <OPTIONAL>" in scaffold
    assert "# server_jar:" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "skip_filenames:" in scaffold


def test_placeholder_configuration_keeps_optional_sections_commented_out() -> None:
    parsed = yaml.safe_load(build_placeholder_configuration())

    assert set(parsed) == {"publication", "generator"}
    assert "source_dir" not in parsed["publication"]
    assert "server_jar" not in parsed["generator"]
    assert parsed["publication"]["common_filename"] == "common.json"
    assert parsed["generator"]["manifest"] == {"Group": "Test", "Name": "Test"}


def test_scaffold_with_publication_fields_filled_in_loads(tmp_path: Path) -> None:
    config_path = write_placeholder_configuration(tmp_path / "schemas.yaml")
    text = config_path.read_text(encoding="utf-8")
    text = text.replace('output_dir: "<REQUIRED>"', "output_dir: out")
    text = text.replace('index_path: "<REQUIRED>"', "index_path: asset-types.json")
    config_path.write_text(text, encoding="utf-8")

    configuration = load_configuration(config_path)

    assert configuration.publication.source_dir is None
    assert configuration.generator.server_jar is None
    assert configuration.artifacts is None


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "schemas.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "schemas.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
