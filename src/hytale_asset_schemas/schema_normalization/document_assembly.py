"""Assembly of publishable asset and common-definition schema documents."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .deep_cleaner import clean_schema_node
from .pattern_substitution import (
    replace_color_patterns,
    replace_number_or_special_patterns,
    rewrite_common_refs,
)
from .schema_models import AssetLocation
from .schema_vocabulary import (
    BASE_DOCUMENT,
    BASE_PROPERTIES,
    COMMON_DOCUMENT_DESCRIPTION,
    COMMON_DOCUMENT_ID,
    COMMON_DOCUMENT_TITLE,
    EDITOR_METADATA_KEYS,
    SCHEMA_DIALECT,
)

FRAGMENT_PIPELINE: tuple[Callable[[Any], Any], ...] = (
    rewrite_common_refs,
    clean_schema_node,
    replace_color_patterns,
    replace_number_or_special_patterns,
)


class SchemaDocumentError(Exception):
    """Raised when a raw schema document cannot be assembled."""


def normalize_fragment(node: Any) -> Any:
    """Run one schema fragment through every normalization pass in order."""
    for transform in FRAGMENT_PIPELINE:
        node = transform(node)
    return node


def assemble_asset_document(raw: Any) -> dict[str, Any]:
    """Build the published document for one asset type.

    Args:
      raw: Parsed raw schema document emitted by the generator.

    Returns:
      A new document that extends ``base.schema.json`` and carries only the
      asset's own properties and local definitions.

    Raises:
      SchemaDocumentError: If the document is not an object or has no title.
    """
    document = _require_object(raw)
    title = _require_title(document)
    description = document.get("description") or f"{title} asset type"

    assembled: dict[str, Any] = {"$schema": SCHEMA_DIALECT}
    if "$id" in document:
        assembled["$id"] = document["$id"]
    assembled.update(
        {
            "title": title,
            "description": description,
            "type": "object",
            "allOf": [{"$ref": BASE_DOCUMENT}],
        }
    )

    properties = _asset_properties(document.get("properties"))
    if properties:
        assembled["properties"] = properties

    local_definitions = document.get("$defs")
    if isinstance(local_definitions, Mapping) and local_definitions:
        cleaned_definitions = normalize_fragment(local_definitions)
        if cleaned_definitions:
            assembled["$defs"] = cleaned_definitions
    return assembled


def assemble_common_document(raw: Any) -> dict[str, Any]:
    """Build ``common.schema.json`` from the generator's shared definitions file."""
    document = _require_object(raw)
    assembled: dict[str, Any] = {
        "$schema": SCHEMA_DIALECT,
        "$id": COMMON_DOCUMENT_ID,
        "title": COMMON_DOCUMENT_TITLE,
        "description": COMMON_DOCUMENT_DESCRIPTION,
    }
    definitions = document.get("definitions")
    if isinstance(definitions, Mapping) and definitions:
        assembled["$defs"] = {
            name: normalize_fragment(definition) for name, definition in definitions.items()
        }
    return assembled


def asset_location(raw: Mapping[str, Any]) -> AssetLocation | None:
    """Return the declared on-disk location of the asset type, if any."""
    metadata = raw.get("hytale")
    title = raw.get("title")
    if not isinstance(metadata, Mapping) or not isinstance(title, str) or not title:
        return None
    path = metadata.get("path")
    if not isinstance(path, str) or not path:
        return None
    extension = metadata.get("extension")
    return AssetLocation(
        asset_id=title,
        path=path,
        extension=extension if isinstance(extension, str) and extension else ".json",
    )


def _asset_properties(raw_properties: Any) -> dict[str, Any]:
    if not isinstance(raw_properties, Mapping):
        return {}
    return {
        name: normalize_fragment(definition)
        for name, definition in raw_properties.items()
        if name not in BASE_PROPERTIES and name not in EDITOR_METADATA_KEYS
    }


def _require_object(raw: Any) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise SchemaDocumentError("Schema document root must be a JSON object.")
    return raw


def _require_title(document: Mapping[str, Any]) -> str:
    title = document.get("title")
    if not isinstance(title, str) or not title.strip():
        raise SchemaDocumentError("Schema document must declare a non-empty title.")
    return title
