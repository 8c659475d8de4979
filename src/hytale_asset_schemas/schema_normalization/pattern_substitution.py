"""Tree-wide rewrites that replace known generator shapes with shared references.

Each pass is a pure ``node -> node`` function. A node that does not match
the target shape is rebuilt from its recursively rewritten children; a node
that matches is replaced wholesale and its children are not visited.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .schema_vocabulary import (
    COLOR_RGB_REF,
    COMMON_REF_PREFIX,
    LEGACY_COMMON_REF_PREFIX,
    NULLABLE_NUMBER_OR_SPECIAL_REF,
    NUMBER_OR_SPECIAL_REF,
)
from .union_simplifier import has_null_entry, is_number_or_special_union

_HEX_COLOR_FRAGMENT = "#([0-9a-fA-F]"
_RGB_FUNCTION_FRAGMENT = "rgb\\("

NodeRewrite = Callable[[Mapping[str, Any]], Any]


def rewrite_common_refs(node: Any) -> Any:
    """Point ``common.json`` definition references at the published common document."""
    if isinstance(node, list):
        return [rewrite_common_refs(item) for item in node]
    if not isinstance(node, Mapping):
        return node
    rewritten: dict[str, Any] = {}
    for key, value in node.items():
        if key == "$ref" and isinstance(value, str) and value.startswith(LEGACY_COMMON_REF_PREFIX):
            rewritten[key] = COMMON_REF_PREFIX + value[len(LEGACY_COMMON_REF_PREFIX) :]
        else:
            rewritten[key] = rewrite_common_refs(value)
    return rewritten


def replace_color_patterns(node: Any) -> Any:
    """Replace the generated "Color RGB" union with a reference to the shared ColorRGB type."""
    return _walk(node, _color_replacement)


def replace_number_or_special_patterns(node: Any) -> Any:
    """Replace number-or-Infinity/NaN unions with references to the shared definitions."""
    return _walk(node, _number_or_special_replacement)


def _walk(node: Any, replacement_for: NodeRewrite) -> Any:
    if isinstance(node, list):
        return [_walk(item, replacement_for) for item in node]
    if not isinstance(node, Mapping):
        return node
    replacement = replacement_for(node)
    if replacement is not None:
        return replacement
    return {key: _walk(value, replacement_for) for key, value in node.items()}


def _color_replacement(node: Mapping[str, Any]) -> dict[str, Any] | None:
    items = node.get("anyOf")
    if node.get("title") != "Color RGB" or not isinstance(items, list):
        return None
    patterns = [
        item["pattern"]
        for item in items
        if isinstance(item, Mapping) and isinstance(item.get("pattern"), str)
    ]
    has_hex = any(_HEX_COLOR_FRAGMENT in pattern for pattern in patterns)
    has_rgb = any(_RGB_FUNCTION_FRAGMENT in pattern for pattern in patterns)
    if has_hex and has_rgb:
        return {"$ref": COLOR_RGB_REF}
    return None


def _number_or_special_replacement(node: Mapping[str, Any]) -> dict[str, Any] | None:
    any_of = node.get("anyOf")
    if (
        isinstance(any_of, list)
        and len(any_of) == 2
        and is_number_or_special_union(any_of)
        and not has_null_entry(any_of)
    ):
        return _without(node, "anyOf", ref=NUMBER_OR_SPECIAL_REF)

    one_of = node.get("oneOf")
    if isinstance(one_of, list) and is_number_or_special_union(one_of):
        ref = NULLABLE_NUMBER_OR_SPECIAL_REF if has_null_entry(one_of) else NUMBER_OR_SPECIAL_REF
        return _without(node, "oneOf", ref=ref)
    return None


def _without(node: Mapping[str, Any], union_key: str, *, ref: str) -> dict[str, Any]:
    rest = {key: value for key, value in node.items() if key != union_key}
    return {**rest, "$ref": ref}
