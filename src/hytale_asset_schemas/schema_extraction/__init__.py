"""Schema extraction exports."""

from .archive_unpacking import ArchiveError, unpack_archive
from .generator_process import (
    CommandRunner,
    GeneratorError,
    build_generator_command,
    run_schema_generator,
    write_minimal_manifest,
)

__all__ = [
    "ArchiveError",
    "CommandRunner",
    "GeneratorError",
    "build_generator_command",
    "run_schema_generator",
    "unpack_archive",
    "write_minimal_manifest",
]
