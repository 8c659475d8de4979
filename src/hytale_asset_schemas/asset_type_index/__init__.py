"""Asset type index exports."""

from .index_models import AssetTypeIndex, AssetTypeIndexEntry
from .index_store import AssetTypeIndexError, load_asset_type_index, write_asset_type_index

__all__ = [
    "AssetTypeIndex",
    "AssetTypeIndexEntry",
    "AssetTypeIndexError",
    "load_asset_type_index",
    "write_asset_type_index",
]
