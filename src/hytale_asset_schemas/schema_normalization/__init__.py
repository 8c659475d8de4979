"""Schema normalization exports."""

from .deep_cleaner import clean_schema_node
from .document_assembly import (
    SchemaDocumentError,
    assemble_asset_document,
    assemble_common_document,
    asset_location,
    normalize_fragment,
)
from .pattern_substitution import (
    replace_color_patterns,
    replace_number_or_special_patterns,
    rewrite_common_refs,
)
from .schema_models import AssetLocation
from .union_simplifier import simplify_any_of

__all__ = [
    "AssetLocation",
    "SchemaDocumentError",
    "assemble_asset_document",
    "assemble_common_document",
    "asset_location",
    "clean_schema_node",
    "normalize_fragment",
    "replace_color_patterns",
    "replace_number_or_special_patterns",
    "rewrite_common_refs",
    "simplify_any_of",
]
