"""Invocation of the server's built-in schema generator."""

from __future__ import annotations

import json
import logging
import shlex
import subprocess
from collections.abc import Callable, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

CommandRunner = Callable[[tuple[str, ...], Path], int]


class GeneratorError(Exception):
    """Raised when the schema generator cannot be started."""


def write_minimal_manifest(assets_dir: Path, manifest: Mapping[str, object]) -> Path:
    """Create an asset pack manifest so the server accepts ``assets_dir``."""
    assets_dir.mkdir(parents=True, exist_ok=True)
    manifest_path = assets_dir / "manifest.json"
    manifest_path.write_text(json.dumps(dict(manifest), indent=2), encoding="utf-8")
    return manifest_path


def build_generator_command(
    server_jar: Path, assets_dir: Path, *, java_executable: str = "java"
) -> tuple[str, ...]:
    return (
        java_executable,
        "-jar",
        str(server_jar),
        "--generate-schema",
        "--bare",
        "--assets",
        str(assets_dir),
    )


def run_schema_generator(
    server_jar: Path,
    assets_dir: Path,
    *,
    java_executable: str = "java",
    run_command: CommandRunner | None = None,
) -> None:
    """Run the generator, which writes raw schemas below ``assets_dir``.

    The server exits after generating schemas, sometimes with a non-zero code;
    that exit code is logged rather than treated as a failure.
    """
    if not server_jar.is_file():
        raise GeneratorError(f"Server JAR not found at: {server_jar}")
    command_runner = run_command or _run_command
    command = build_generator_command(server_jar, assets_dir, java_executable=java_executable)
    logger.info("Executing: %s", shlex.join(command))
    exit_code = command_runner(command, assets_dir.parent)
    if exit_code != 0:
        logger.warning("Schema generator exited with code %d", exit_code)


def _run_command(command: tuple[str, ...], cwd: Path) -> int:
    try:
        completed = subprocess.run(list(command), cwd=cwd, check=False)
    except FileNotFoundError as exc:
        raise GeneratorError(f"Generator command not found: {shlex.join(command)}") from exc
    return completed.returncode
