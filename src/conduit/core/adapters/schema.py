"""Reduce tool parameter schemas to the JSON Schema subset providers accept."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

UNSUPPORTED_KEYWORDS = frozenset(
    {
        "patternProperties",
        "additionalProperties",
        "const",
        "anyOf",
    }
)

# Keywords whose value maps names to schemas; the names are kept as-is.
_SCHEMA_MAPS = frozenset({"properties", "definitions", "$defs", "dependentSchemas"})


def sanitize_schema(schema: Mapping[str, Any]) -> dict[str, Any]:
    """Return a provider-safe copy of ``schema``.

    Nodes that declare ``properties`` or ``required`` without a ``type`` are
    typed as objects, and :data:`UNSUPPORTED_KEYWORDS` are dropped from every
    nested schema, whichever keyword (``items``, ``contains``, ``if`` ...)
    holds it. All other fields pass through unchanged. The input is never
    mutated and sanitizing an already sanitized schema returns an equal tree.
    """

    return _sanitize_value(schema)


def _sanitize_node(node: Mapping[str, Any]) -> dict[str, Any]:
    sanitized: dict[str, Any] = {}
    for key, value in node.items():
        if key in UNSUPPORTED_KEYWORDS:
            continue
        if key in _SCHEMA_MAPS and isinstance(value, Mapping):
            sanitized[key] = {
                name: _sanitize_value(inner) for name, inner in value.items()
            }
        else:
            sanitized[key] = _sanitize_value(value)

    if "type" not in sanitized and ("properties" in sanitized or "required" in sanitized):
        sanitized["type"] = "object"
    return sanitized


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return _sanitize_node(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_sanitize_value(item) for item in value]
    return value
