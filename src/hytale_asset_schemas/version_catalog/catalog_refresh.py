"""Verification and hashing of the versions listed in the catalog."""

from __future__ import annotations

import hashlib
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import replace
from pathlib import Path

from hytale_asset_schemas.artifact_retrieval import ArtifactSource, ArtifactSourceError

from .catalog_models import CatalogRefreshReport, CatalogVersion

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], None]


def refresh_version_catalog(
    catalog: Sequence[CatalogVersion],
    source: ArtifactSource,
    *,
    downloads_dir: Path,
    request_interval_seconds: float = 0.0,
    download_interval_seconds: float = 0.0,
    sleep: Sleeper = time.sleep,
) -> CatalogRefreshReport:
    """Verify every catalog version and fill in missing hashes.

    Each version is probed; a changed artifact size is written back. Versions
    without a SHA-256 are downloaded into ``downloads_dir`` and hashed. A
    failed download leaves that version unhashed and does not stop the run.
    """
    refreshed = list(catalog)
    verified: list[str] = []
    missing: list[str] = []
    hashed: list[str] = []
    failed_downloads: list[str] = []

    for position, entry in enumerate(refreshed):
        label = f"{entry.patchline}/{entry.version}"
        probe = source.probe_version(entry.version)
        if not probe.exists:
            logger.warning("%s: NOT FOUND", label)
            missing.append(label)
        else:
            logger.info("%s: OK (%.2f MB)", label, (probe.size or 0) / 1024 / 1024)
            verified.append(label)
            if probe.size and probe.size != entry.size:
                refreshed[position] = replace(entry, size=probe.size)
        if request_interval_seconds:
            sleep(request_interval_seconds)

    for position, entry in enumerate(refreshed):
        if entry.sha256:
            continue
        label = f"{entry.patchline}/{entry.version}"
        try:
            payload = source.fetch_version(entry.version)
        except ArtifactSourceError as exc:
            logger.error("%s: download failed: %s", label, exc)
            failed_downloads.append(label)
            continue
        artifact_path = _store_artifact(downloads_dir, entry.artifact_filename, payload)
        digest = hashlib.sha256(payload).hexdigest()
        refreshed[position] = replace(entry, size=len(payload), sha256=digest)
        hashed.append(label)
        logger.info("%s: saved to %s, SHA256 %s", label, artifact_path, digest)
        if download_interval_seconds:
            sleep(download_interval_seconds)

    return CatalogRefreshReport(
        catalog=tuple(refreshed),
        verified=tuple(verified),
        missing=tuple(missing),
        hashed=tuple(hashed),
        failed_downloads=tuple(failed_downloads),
    )


def _store_artifact(downloads_dir: Path, filename: str, payload: bytes) -> Path:
    downloads_dir.mkdir(parents=True, exist_ok=True)
    path = downloads_dir / filename
    path.write_bytes(payload)
    return path
