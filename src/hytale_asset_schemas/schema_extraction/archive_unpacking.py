"""Server archive unpacking."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

logger = logging.getLogger(__name__)


class ArchiveError(Exception):
    """Raised when a server archive cannot be unpacked."""


def unpack_archive(archive_path: Path, target_dir: Path) -> Path:
    """Extract every member of ``archive_path`` below ``target_dir``."""
    logger.info("Extracting %s to %s", archive_path, target_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    try:
        with zipfile.ZipFile(archive_path) as archive:
            archive.extractall(target_dir)
    except (zipfile.BadZipFile, OSError) as exc:
        raise ArchiveError(f"Failed to extract {archive_path}: {exc}") from exc
    return target_dir
