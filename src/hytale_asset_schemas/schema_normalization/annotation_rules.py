"""Placeholder annotation detection shared by the cleaner and the union simplifier."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema_vocabulary import ENUM_DESCRIPTION_KEYS


def is_redundant_annotation(key: str, value: Any, node: Mapping[str, Any]) -> bool:
    """Return True for generator artifacts that carry no content of their own."""
    if key in ENUM_DESCRIPTION_KEYS and isinstance(value, list):
        return all(item == "" for item in value)
    if key == "markdownDescription":
        return "description" in node and node["description"] == value
    return False


def drop_redundant_annotations(node: dict[str, Any]) -> dict[str, Any]:
    return {
        key: value
        for key, value in node.items()
        if not is_redundant_annotation(key, value, node)
    }
