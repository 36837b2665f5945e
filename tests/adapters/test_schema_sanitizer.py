from __future__ import annotations

import copy

from conduit.core.adapters.schema import sanitize_schema


def build_example_schema() -> dict[str, object]:
    return {
        "type": "object",
        "patternProperties": {"^x-": {"type": "string"}},
        "additionalProperties": False,
        "properties": {
            "mode": {"type": "string", "const": "fast"},
            "options": {"anyOf": [{"type": "string"}, {"type": "number"}]},
            "list": {
                "type": "array",
                "items": {"type": "string", "const": "item"},
            },
        },
        "required": ["mode"],
    }


def test_adds_object_type_when_properties_or_required_present() -> None:
    sanitized = sanitize_schema(
        {
            "properties": {"action": {"type": "string"}},
            "required": ["action"],
        }
    )

    assert sanitized == {
        "type": "object",
        "properties": {"action": {"type": "string"}},
        "required": ["action"],
    }


def test_required_alone_implies_object() -> None:
    assert sanitize_schema({"required": []}) == {"required": [], "type": "object"}


def test_strips_unsupported_keywords_at_every_level() -> None:
    sanitized = sanitize_schema(build_example_schema())

    assert sanitized == {
        "type": "object",
        "properties": {
            "mode": {"type": "string"},
            "options": {},
            "list": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["mode"],
    }


def test_keeps_supported_fields() -> None:
    schema = {
        "type": "object",
        "properties": {
            "config": {
                "type": "object",
                "properties": {
                    "retries": {"type": "number", "minimum": 1},
                    "tags": {"type": "array", "items": {"type": "string"}},
                },
                "required": ["retries"],
            },
        },
        "required": ["config"],
    }

    assert sanitize_schema(schema) == schema


def test_property_named_like_a_keyword_is_kept() -> None:
    schema = {
        "type": "object",
        "properties": {
            "const": {"type": "string", "const": "x"},
            "anyOf": {"type": "integer"},
        },
    }

    assert sanitize_schema(schema) == {
        "type": "object",
        "properties": {
            "const": {"type": "string"},
            "anyOf": {"type": "integer"},
        },
    }


def test_nested_object_without_type_is_inferred_deep_in_arrays() -> None:
    schema = {
        "type": "array",
        "items": {
            "properties": {"id": {"type": "string"}},
            "additionalProperties": True,
        },
    }

    assert sanitize_schema(schema) == {
        "type": "array",
        "items": {"properties": {"id": {"type": "string"}}, "type": "object"},
    }


def test_strips_keywords_under_every_subschema_keyword() -> None:
    schema = {
        "type": "array",
        "contains": {"type": "integer", "const": 1},
        "additionalItems": {"anyOf": [{"type": "string"}, {"type": "number"}]},
        "if": {"properties": {"kind": {"const": "a"}}},
        "then": {"required": ["a"], "additionalProperties": False},
        "else": {"type": "object", "patternProperties": {"^b": {"type": "string"}}},
        "propertyNames": {"type": "string", "const": "x"},
        "dependentSchemas": {"const": {"type": "object", "const": {}}},
    }

    assert sanitize_schema(schema) == {
        "type": "array",
        "contains": {"type": "integer"},
        "additionalItems": {},
        "if": {"type": "object", "properties": {"kind": {}}},
        "then": {"type": "object", "required": ["a"]},
        "else": {"type": "object"},
        "propertyNames": {"type": "string"},
        "dependentSchemas": {"const": {"type": "object"}},
    }


def test_does_not_mutate_input() -> None:
    schema = build_example_schema()
    original = copy.deepcopy(schema)

    sanitized = sanitize_schema(schema)
    sanitized["properties"]["mode"]["type"] = "number"  # type: ignore[index]

    assert schema == original


def test_sanitizing_is_idempotent() -> None:
    once = sanitize_schema(build_example_schema())

    assert sanitize_schema(once) == once


def test_absent_fields_are_not_introduced() -> None:
    assert sanitize_schema({"type": "string"}) == {"type": "string"}
    assert sanitize_schema({}) == {}
