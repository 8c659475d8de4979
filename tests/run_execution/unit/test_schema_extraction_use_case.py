"""Tests for the schema extraction use-case service."""

from __future__ import annotations

import io
import json
import zipfile
from pathlib import Path

import httpx
import pytest
from hytale_asset_schemas.artifact_retrieval import (
    ArtifactProbe,
    ArtifactSourceError,
    MavenArtifactSource,
    VersionInfo,
)
from hytale_asset_schemas.configuration import (
    ArtifactSettings,
    GeneratorSettings,
    PublicationSettings,
)
from hytale_asset_schemas.run_execution import (
    ExtractionError,
    ExtractionRequest,
    execute_schema_extraction,
)

ARCHIVE_SERVER_JAR = "Server/HytaleServer.jar"


def _server_archive() -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr(ARCHIVE_SERVER_JAR, b"jar-bytes")
        archive.writestr("Assets.zip", b"")
    return buffer.getvalue()


def _maven_server_jar() -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("META-INF/MANIFEST.MF", "Main-Class: com.example.game.Main\n")
        archive.writestr("com/example/game/Main.class", b"\xca\xfe\xba\xbe")
    return buffer.getvalue()


class _FakeArtifactSource:
    def __init__(self, payload: bytes | None = None) -> None:
        self._payload = payload
        self.fetched: list[str] = []

    def list_versions(self) -> list[VersionInfo]:
        return [VersionInfo(version="1.0.0", download_url="memory://1.0.0")]

    def fetch_version(self, version: str) -> bytes:
        self.fetched.append(version)
        if self._payload is None:
            raise ArtifactSourceError(f"Request for {version} failed with status 404")
        return self._payload

    def probe_version(self, version: str) -> ArtifactProbe:
        return ArtifactProbe(version=version, exists=self._payload is not None)


class _FakeGenerator:
    """Writes raw schemas the way the server does and records the command."""

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.commands: list[tuple[str, ...]] = []
        self.seen_manifest: dict | None = None
        self.seen_jar: bytes | None = None

    def __call__(self, command: tuple[str, ...], cwd: Path) -> int:
        self.commands.append(command)
        self.seen_jar = Path(command[2]).read_bytes()
        assets_dir = Path(command[command.index("--assets") + 1])
        self.seen_manifest = json.loads((assets_dir / "manifest.json").read_text(encoding="utf-8"))
        schema_dir = assets_dir / "Schema"
        schema_dir.mkdir()
        (schema_dir / "common.json").write_text(
            json.dumps({"definitions": {"Vector3": {"type": "object"}}}), encoding="utf-8"
        )
        (schema_dir / "Sword.json").write_text(
            json.dumps({"title": "Sword", "hytale": {"path": "Item/Weapons"}}), encoding="utf-8"
        )
        return self.exit_code


def _request(tmp_path: Path, *, server_jar: str | None = ARCHIVE_SERVER_JAR) -> ExtractionRequest:
    work_root = tmp_path / "work"
    work_root.mkdir()
    return ExtractionRequest(
        version="1.0.0",
        publication=PublicationSettings(
            source_dir=None,
            output_dir=tmp_path / "schemas",
            index_path=tmp_path / "asset-types.json",
            common_filename="common.json",
            skip_filenames=("other.json",),
        ),
        generator=GeneratorSettings(
            java_executable="java",
            server_jar=server_jar,
            schema_subdir="Schema",
            manifest={"Group": "Test", "Name": "Test"},
        ),
        work_root=work_root,
    )


def test_extraction_runs_every_step_and_cleans_up(tmp_path: Path) -> None:
    request = _request(tmp_path)
    source = _FakeArtifactSource(_server_archive())
    generator = _FakeGenerator(exit_code=1)

    outcome = execute_schema_extraction(request, artifact_source=source, run_command=generator)

    assert source.fetched == ["1.0.0"]
    assert outcome.version == "1.0.0"
    assert outcome.summary.succeeded
    assert (tmp_path / "schemas" / "common.schema.json").exists()
    assert (tmp_path / "schemas" / "Sword.schema.json").exists()
    assert generator.seen_manifest == {"Group": "Test", "Name": "Test"}
    assert generator.seen_jar == b"jar-bytes"
    command = generator.commands[0]
    assert command[:2] == ("java", "-jar")
    assert command[2].endswith("HytaleServer.jar")
    assert command[3:6] == ("--generate-schema", "--bare", "--assets")
    assert list((tmp_path / "work").iterdir()) == []


def test_downloaded_jar_is_run_directly_without_unpacking(tmp_path: Path) -> None:
    jar = _maven_server_jar()
    settings = ArtifactSettings(
        repository_url="https://maven.example.com/release",
        group_id="com.example.game",
        artifact_id="Server",
        timeout_seconds=5,
        versions_path=tmp_path / "versions.json",
        downloads_dir=tmp_path / "downloads",
        request_interval_seconds=0.0,
        download_interval_seconds=0.0,
    )
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        return httpx.Response(200, content=jar)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    generator = _FakeGenerator()

    with MavenArtifactSource(settings, client=client) as source:
        outcome = execute_schema_extraction(
            _request(tmp_path, server_jar=None), artifact_source=source, run_command=generator
        )

    assert requested == ["/release/com/example/game/Server/1.0.0/Server-1.0.0.jar"]
    assert outcome.summary.succeeded
    assert generator.seen_jar == jar
    assert Path(generator.commands[0][2]).name == "server-1.0.0.jar"
    assert (tmp_path / "schemas" / "Sword.schema.json").exists()
    assert list((tmp_path / "work").iterdir()) == []


def test_fetch_failure_aborts_and_cleans_up(tmp_path: Path) -> None:
    request = _request(tmp_path)
    generator = _FakeGenerator()

    with pytest.raises(ExtractionError, match="404"):
        execute_schema_extraction(
            request, artifact_source=_FakeArtifactSource(None), run_command=generator
        )

    assert generator.commands == []
    assert list((tmp_path / "work").iterdir()) == []


def test_corrupt_archive_aborts(tmp_path: Path) -> None:
    request = _request(tmp_path)

    with pytest.raises(ExtractionError, match="Failed to extract"):
        execute_schema_extraction(
            request,
            artifact_source=_FakeArtifactSource(b"not a zip"),
            run_command=_FakeGenerator(),
        )
    assert list((tmp_path / "work").iterdir()) == []


def test_archive_without_server_jar_aborts(tmp_path: Path) -> None:
    with pytest.raises(ExtractionError, match="Server JAR not found"):
        execute_schema_extraction(
            _request(tmp_path),
            artifact_source=_FakeArtifactSource(_maven_server_jar()),
            run_command=_FakeGenerator(),
        )


def test_generator_without_output_is_fatal(tmp_path: Path) -> None:
    def _silent_generator(command: tuple[str, ...], cwd: Path) -> int:
        return 0

    with pytest.raises(ExtractionError, match="Schema directory not found"):
        execute_schema_extraction(
            _request(tmp_path),
            artifact_source=_FakeArtifactSource(_server_archive()),
            run_command=_silent_generator,
        )
