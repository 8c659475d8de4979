"""Recursive removal of vendor and editor metadata from raw schema trees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .annotation_rules import is_redundant_annotation
from .schema_vocabulary import EDITOR_METADATA_KEYS, VENDOR_METADATA_KEYS
from .union_simplifier import simplify_any_of


def clean_schema_node(node: Any, *, inside_properties: bool = False) -> Any:
    """Return a cleaned copy of ``node`` without touching the input.

    ``inside_properties`` is True only while ``node`` is a ``properties`` map,
    where editor metadata keys are stripped in addition to vendor keys.
    """
    if isinstance(node, list):
        return [clean_schema_node(item) for item in node]
    if not isinstance(node, Mapping):
        return node

    cleaned: dict[str, Any] = {}
    for key, value in node.items():
        if _is_stripped_key(key, inside_properties=inside_properties):
            continue
        if is_redundant_annotation(key, value, node):
            continue
        cleaned[key] = clean_schema_node(value, inside_properties=key == "properties")
    return simplify_any_of(cleaned)


def _is_stripped_key(key: str, *, inside_properties: bool) -> bool:
    if key in VENDOR_METADATA_KEYS:
        return True
    return inside_properties and key in EDITOR_METADATA_KEYS
