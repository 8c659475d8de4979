"""Fixed key sets and reference locations used by schema normalization."""

from __future__ import annotations

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

VENDOR_METADATA_KEYS = frozenset(
    {
        "hytale",
        "hytaleCommonAsset",
        "hytaleSchemaTypeField",
        "hytaleAssetRef",
    }
)

# Only stripped from `properties` maps; the same names are meaningful elsewhere.
EDITOR_METADATA_KEYS = frozenset(
    {
        "$Title",
        "$Comment",
        "$Author",
        "$TODO",
        "$Position",
        "$FloatingFunctionNodes",
        "$Groups",
        "$WorkspaceID",
        "$NodeId",
        "$NodeEditorMetadata",
    }
)

ENUM_DESCRIPTION_KEYS = ("enumDescriptions", "markdownEnumDescriptions")

BASE_PROPERTIES = frozenset({"Parent", "Tags"})

LEGACY_COMMON_REF_PREFIX = "common.json#/definitions/"
COMMON_REF_PREFIX = "common.schema.json#/$defs/"

BASE_DOCUMENT = "base.schema.json"
COLOR_RGB_REF = f"{BASE_DOCUMENT}#/$defs/ColorRGB"
NUMBER_OR_SPECIAL_REF = f"{BASE_DOCUMENT}#/$defs/NumberOrSpecial"
NULLABLE_NUMBER_OR_SPECIAL_REF = f"{BASE_DOCUMENT}#/$defs/NullableNumberOrSpecial"

COMMON_DOCUMENT_ID = "common.schema.json"
COMMON_DOCUMENT_TITLE = "Common Definitions"
COMMON_DOCUMENT_DESCRIPTION = "Shared type definitions used across Hytale asset schemas"
