"""Version catalog refresh and storage tests."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path

import pytest
from hytale_asset_schemas.artifact_retrieval import ArtifactProbe, ArtifactSourceError, VersionInfo
from hytale_asset_schemas.version_catalog import (
    CatalogVersion,
    VersionCatalogError,
    load_version_catalog,
    refresh_version_catalog,
    write_version_catalog,
)


class FakeArtifactSource:
    def __init__(
        self,
        *,
        sizes: dict[str, int | None],
        payloads: dict[str, bytes],
    ) -> None:
        self._sizes = sizes
        self._payloads = payloads
        self.fetched: list[str] = []

    def list_versions(self) -> list[VersionInfo]:
        return [VersionInfo(version, f"memory://{version}") for version in self._sizes]

    def fetch_version(self, version: str) -> bytes:
        self.fetched.append(version)
        if version not in self._payloads:
            raise ArtifactSourceError(f"Request for {version} failed with status 404")
        return self._payloads[version]

    def probe_version(self, version: str) -> ArtifactProbe:
        if version not in self._sizes:
            return ArtifactProbe(version=version, exists=False)
        return ArtifactProbe(version=version, exists=True, size=self._sizes[version])


def _entry(version: str, *, size: int = 10, sha256: str | None = None) -> CatalogVersion:
    return CatalogVersion(
        id=f"release-{version}",
        patchline="release",
        version=version,
        date="2026-01-15",
        commit="abc123",
        size=size,
        sha256=sha256,
    )


def test_refresh_updates_sizes_and_reports_missing(tmp_path: Path) -> None:
    catalog = [_entry("1.0", sha256="known"), _entry("2.0", sha256="known")]
    source = FakeArtifactSource(sizes={"1.0": 2048}, payloads={})

    report = refresh_version_catalog(catalog, source, downloads_dir=tmp_path)

    assert report.verified == ("release/1.0",)
    assert report.missing == ("release/2.0",)
    assert report.catalog[0].size == 2048
    assert report.catalog[1] == catalog[1]
    assert source.fetched == []


def test_refresh_keeps_size_when_probe_has_no_content_range(tmp_path: Path) -> None:
    catalog = [_entry("1.0", size=77, sha256="known")]
    source = FakeArtifactSource(sizes={"1.0": None}, payloads={})

    report = refresh_version_catalog(catalog, source, downloads_dir=tmp_path)

    assert report.catalog[0].size == 77


def test_refresh_downloads_and_hashes_unhashed_versions(tmp_path: Path) -> None:
    payload = b"server-jar-bytes"
    source = FakeArtifactSource(sizes={"1.0": len(payload)}, payloads={"1.0": payload})
    downloads_dir = tmp_path / "downloads"

    report = refresh_version_catalog([_entry("1.0")], source, downloads_dir=downloads_dir)

    assert report.hashed == ("release/1.0",)
    assert report.catalog[0].sha256 == hashlib.sha256(payload).hexdigest()
    assert report.catalog[0].size == len(payload)
    assert (downloads_dir / "release-1.0.jar").read_bytes() == payload


def test_failed_download_leaves_version_unhashed_and_continues(tmp_path: Path) -> None:
    source = FakeArtifactSource(sizes={"1.0": 1, "2.0": 1}, payloads={"2.0": b"ok"})

    report = refresh_version_catalog(
        [_entry("1.0"), _entry("2.0")], source, downloads_dir=tmp_path
    )

    assert report.failed_downloads == ("release/1.0",)
    assert report.hashed == ("release/2.0",)
    assert report.catalog[0].sha256 is None
    assert source.fetched == ["1.0", "2.0"]


def test_probes_and_downloads_use_separate_intervals(tmp_path: Path) -> None:
    sleeps: list[float] = []
    source = FakeArtifactSource(sizes={"1.0": 1, "2.0": 1}, payloads={"2.0": b"ok"})

    refresh_version_catalog(
        [_entry("1.0", sha256="known"), _entry("2.0")],
        source,
        downloads_dir=tmp_path,
        request_interval_seconds=0.3,
        download_interval_seconds=1.0,
        sleep=sleeps.append,
    )

    # two probes, then one download
    assert sleeps == [0.3, 0.3, 1.0]


def test_catalog_round_trip_uses_two_space_indentation(tmp_path: Path) -> None:
    catalog_path = tmp_path / "versions.json"
    catalog = [_entry("1.0"), _entry("2.0", sha256="ff")]

    write_version_catalog(catalog_path, catalog)

    text = catalog_path.read_text(encoding="utf-8")
    assert text.startswith('[\n  {\n    "id": "release-1.0"')
    assert text.endswith("]\n")
    assert "sha256" not in json.loads(text)[0]
    assert load_version_catalog(catalog_path) == catalog


def test_missing_catalog_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(VersionCatalogError, match="not found"):
        load_version_catalog(tmp_path / "versions.json")


@pytest.mark.parametrize(
    "contents",
    [
        "{broken",
        json.dumps({"id": "x"}),
        json.dumps([["not", "an", "object"]]),
        json.dumps([{"id": "x", "patchline": "release", "version": "1"}]),
        json.dumps(
            [
                {
                    "id": "x",
                    "patchline": "release",
                    "version": "1",
                    "date": "d",
                    "commit": "c",
                    "size": -1,
                }
            ]
        ),
    ],
)
def test_malformed_catalog_raises(tmp_path: Path, contents: str) -> None:
    catalog_path = tmp_path / "versions.json"
    catalog_path.write_text(contents, encoding="utf-8")

    with pytest.raises(VersionCatalogError):
        load_version_catalog(catalog_path)


def test_catalog_with_invalid_utf8_raises(tmp_path: Path) -> None:
    catalog_path = tmp_path / "versions.json"
    catalog_path.write_bytes(b"[\xff\xfe]")

    with pytest.raises(VersionCatalogError, match="Failed to read version catalog"):
        load_version_catalog(catalog_path)
