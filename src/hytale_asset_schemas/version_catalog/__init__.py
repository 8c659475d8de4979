"""Version catalog exports."""

from .catalog_models import CatalogRefreshReport, CatalogVersion
from .catalog_refresh import refresh_version_catalog
from .catalog_store import VersionCatalogError, load_version_catalog, write_version_catalog

__all__ = [
    "CatalogRefreshReport",
    "CatalogVersion",
    "VersionCatalogError",
    "load_version_catalog",
    "refresh_version_catalog",
    "write_version_catalog",
]
