from __future__ import annotations

import pytest

from conduit.core import ConversionError, ToolSpec
from conduit.core.adapters.toolbridge import convert_tools, map_tool_choice


def build_settings_spec() -> ToolSpec:
    return ToolSpec(
        name="settings",
        description="  Settings tool  ",
        parameters={
            "properties": {
                "config": {
                    "type": "object",
                    "additionalProperties": False,
                    "properties": {
                        "retries": {"type": "number", "minimum": 1},
                        "mode": {"type": "string", "const": "fast"},
                    },
                    "required": ["retries"],
                },
            },
            "required": ["config"],
        },
    )


def test_convert_tools_builds_sanitized_function_declarations() -> None:
    converted = convert_tools([build_settings_spec()])

    assert converted == [
        {
            "functionDeclarations": [
                {
                    "name": "settings",
                    "description": "Settings tool",
                    "parameters": {
                        "type": "object",
                        "properties": {
                            "config": {
                                "type": "object",
                                "properties": {
                                    "retries": {"type": "number", "minimum": 1},
                                    "mode": {"type": "string"},
                                },
                                "required": ["retries"],
                            },
                        },
                        "required": ["config"],
                    },
                }
            ]
        }
    ]


def test_tool_spec_keeps_original_parameters() -> None:
    spec = build_settings_spec()

    assert spec.parameters["properties"]["config"]["additionalProperties"] is False


def test_convert_tools_returns_none_for_no_tools() -> None:
    assert convert_tools([]) is None


def test_convert_tools_rejects_duplicates() -> None:
    spec = build_settings_spec()

    with pytest.raises(ConversionError):
        convert_tools([spec, spec])


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "bad name", "parameters": {}},
        {"name": "ok", "parameters": {}, "description": "   "},
        {"name": "ok", "parameters": {"minimum": float("nan")}},
        {"name": "ok", "parameters": ["not", "a", "mapping"]},
    ],
)
def test_tool_spec_validation(kwargs: dict[str, object]) -> None:
    with pytest.raises(ConversionError):
        ToolSpec(**kwargs)  # type: ignore[arg-type]


@pytest.mark.parametrize(("choice", "mode"), [("auto", "AUTO"), ("none", "NONE"), ("ANY", "ANY")])
def test_map_tool_choice(choice: str, mode: str) -> None:
    assert map_tool_choice(choice) == mode


def test_map_tool_choice_rejects_unknown() -> None:
    with pytest.raises(ConversionError):
        map_tool_choice("required")
