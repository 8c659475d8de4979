"""Server artifact source backed by a Maven repository."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ElementTree
from typing import Protocol

import httpx

from hytale_asset_schemas.configuration.runtime_settings import ArtifactSettings

from .artifact_models import ArtifactProbe, VersionInfo

logger = logging.getLogger(__name__)


class ArtifactSourceError(Exception):
    """Raised when versions or artifacts cannot be retrieved."""


class ArtifactSource(Protocol):
    """Protocol implemented by real and fake artifact sources."""

    def list_versions(self) -> list[VersionInfo]: ...

    def fetch_version(self, version: str) -> bytes: ...

    def probe_version(self, version: str) -> ArtifactProbe: ...


class MavenArtifactSource:
    """Lists and downloads server jars from ``maven-metadata.xml`` coordinates."""

    def __init__(self, settings: ArtifactSettings, client: httpx.Client | None = None) -> None:
        self._settings = settings
        self._client = client or httpx.Client(
            timeout=settings.timeout_seconds, follow_redirects=True
        )

    @property
    def artifact_base_url(self) -> str:
        group_path = self._settings.group_id.replace(".", "/")
        return f"{self._settings.repository_url}/{group_path}/{self._settings.artifact_id}"

    def artifact_url(self, version: str) -> str:
        artifact_id = self._settings.artifact_id
        return f"{self.artifact_base_url}/{version}/{artifact_id}-{version}.jar"

    def list_versions(self) -> list[VersionInfo]:
        """Return every version listed in the repository metadata, oldest first."""
        metadata_url = f"{self.artifact_base_url}/maven-metadata.xml"
        response = self._get(metadata_url)
        try:
            root = ElementTree.fromstring(response.content)
        except ElementTree.ParseError as exc:
            raise ArtifactSourceError(f"Invalid Maven metadata at {metadata_url}: {exc}") from exc
        versions = [
            element.text.strip()
            for element in root.iterfind("./versioning/versions/version")
            if element.text and element.text.strip()
        ]
        return [
            VersionInfo(version=version, download_url=self.artifact_url(version))
            for version in versions
        ]

    def fetch_version(self, version: str) -> bytes:
        """Download the server artifact for ``version``."""
        url = self.artifact_url(version)
        logger.info("Downloading %s", url)
        return self._get(url).content

    def probe_version(self, version: str) -> ArtifactProbe:
        """Check availability with a one-byte range request."""
        url = self.artifact_url(version)
        try:
            response = self._client.get(url, headers={"Range": "bytes=0-0"})
        except httpx.HTTPError as exc:
            logger.warning("Probe of %s failed: %s", url, exc)
            return ArtifactProbe(version=version, exists=False)
        if response.status_code not in (200, 206):
            return ArtifactProbe(version=version, exists=False)
        return ArtifactProbe(
            version=version,
            exists=True,
            size=_total_size(response.headers.get("content-range")),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> MavenArtifactSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, url: str) -> httpx.Response:
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ArtifactSourceError(
                f"Request to {url} failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ArtifactSourceError(f"Request to {url} failed: {exc}") from exc
        return response


def latest_version(source: ArtifactSource) -> VersionInfo:
    """Return the newest version the source lists."""
    versions = source.list_versions()
    if not versions:
        raise ArtifactSourceError("Artifact source lists no versions.")
    return versions[-1]


def _total_size(content_range: str | None) -> int | None:
    if not content_range or "/" not in content_range:
        return None
    total = content_range.rsplit("/", 1)[1].strip()
    return int(total) if total.isdigit() else None
