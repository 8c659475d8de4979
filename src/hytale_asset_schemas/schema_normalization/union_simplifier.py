"""Flattening of the nullable ``anyOf`` shapes emitted by the schema generator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .annotation_rules import drop_redundant_annotations
from .schema_vocabulary import NULLABLE_NUMBER_OR_SPECIAL_REF


def simplify_any_of(node: dict[str, Any]) -> dict[str, Any]:
    """Simplify a cleaned node until none of the nullable union shapes match.

    Nodes that do not match are returned unchanged, so the function is safe
    on arbitrary objects and idempotent on its own output.
    """
    current = node
    while True:
        simplified = _simplify_once(current)
        if simplified is current:
            return current
        current = simplified


def _simplify_once(node: dict[str, Any]) -> dict[str, Any]:
    split = _split_nullable_union(node.get("anyOf"))
    if split is None:
        return node
    null_item, other_item = split
    nested_items = other_item.get("anyOf")
    if not isinstance(nested_items, list):
        return node

    rest_of_node = {key: value for key, value in node.items() if key != "anyOf"}

    if is_number_or_special_union(nested_items):
        rest_of_other = {key: value for key, value in other_item.items() if key != "anyOf"}
        merged = {**rest_of_node, **rest_of_other, "$ref": NULLABLE_NUMBER_OR_SPECIAL_REF}
        return drop_redundant_annotations(merged)

    reference_pair = _string_or_reference_pair(nested_items)
    if reference_pair is not None:
        string_item, ref_item = reference_pair
        return {
            **rest_of_node,
            "anyOf": [{"type": "string", "title": string_item["title"]}, ref_item, null_item],
        }

    return {**rest_of_node, "anyOf": [*nested_items, null_item]}


def _split_nullable_union(items: Any) -> tuple[Mapping[str, Any], Mapping[str, Any]] | None:
    if not isinstance(items, list) or len(items) != 2:
        return None
    if not all(isinstance(item, Mapping) for item in items):
        return None
    null_items = [item for item in items if _has_type(item, "null")]
    if len(null_items) != 1:
        return None
    other_item = items[1] if null_items[0] is items[0] else items[0]
    return null_items[0], other_item


def is_number_or_special_union(items: Sequence[Any]) -> bool:
    """Return True when ``items`` holds a number entry and an Infinity/NaN string entry."""
    has_number = any(_has_type(item, "number") for item in items)
    has_special_string = any(
        _has_type(item, "string") and "Infinity" in _pattern_of(item) for item in items
    )
    return has_number and has_special_string


def has_null_entry(items: Sequence[Any]) -> bool:
    return any(_has_type(item, "null") for item in items)


def _string_or_reference_pair(
    items: Sequence[Any],
) -> tuple[Mapping[str, Any], Mapping[str, Any]] | None:
    if len(items) != 2:
        return None
    string_item = next(
        (
            item
            for item in items
            if _has_type(item, "string")
            and isinstance(item.get("title"), str)
            and item["title"].startswith("Reference to")
        ),
        None,
    )
    ref_item = next(
        (item for item in items if isinstance(item, Mapping) and "$ref" in item), None
    )
    if string_item is None or ref_item is None or string_item is ref_item:
        return None
    return string_item, ref_item


def _has_type(item: Any, type_name: str) -> bool:
    return isinstance(item, Mapping) and item.get("type") == type_name


def _pattern_of(item: Mapping[str, Any]) -> str:
    pattern = item.get("pattern")
    return pattern if isinstance(pattern, str) else ""
