"""Mapping helpers between Conduit tool specs and provider function declarations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import json
import re
from typing import Any

from ..errors import ConversionError
from ..message import ensure_json_compatible, freeze_json, thaw_json
from .schema import sanitize_schema

_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,64}$")

_TOOL_CHOICES = {
    "auto": "AUTO",
    "none": "NONE",
    "any": "ANY",
}


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """Conduit's canonical tool/function description."""

    name: str
    parameters: Mapping[str, Any]
    description: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not _NAME_PATTERN.fullmatch(self.name):
            msg = "tool name must match ^[a-zA-Z0-9_-]{1,64}$"
            raise ConversionError(msg)

        normalized_description: str | None = None
        if self.description is not None:
            if not isinstance(self.description, str):
                msg = "tool description must be a string when provided"
                raise ConversionError(msg)
            stripped = self.description.strip()
            if not stripped:
                msg = "tool description cannot be empty"
                raise ConversionError(msg)
            normalized_description = stripped

        if not isinstance(self.parameters, Mapping):
            msg = "tool parameters must be a mapping"
            raise ConversionError(msg)

        raw_parameters = thaw_json(self.parameters)
        try:
            ensure_json_compatible(raw_parameters, path=f"ToolSpec('{self.name}').parameters")
            sanitized = json.loads(json.dumps(raw_parameters, allow_nan=False))
        except (TypeError, ValueError) as exc:
            raise ConversionError(str(exc)) from exc

        if normalized_description is not None:
            object.__setattr__(self, "description", normalized_description)
        object.__setattr__(self, "parameters", freeze_json(sanitized))


def convert_tools(tool_specs: Sequence[ToolSpec]) -> list[dict[str, Any]] | None:
    """Convert tool specifications into a ``functionDeclarations`` block.

    Returns ``None`` when there are no tools so callers can omit the field.
    """

    if isinstance(tool_specs, (str, bytes, bytearray, Mapping)):
        msg = "tools must be provided as a sequence of ToolSpec instances"
        raise ConversionError(msg)

    declarations: list[dict[str, Any]] = []
    seen_names: set[str] = set()

    for index, spec in enumerate(tool_specs):
        if not isinstance(spec, ToolSpec):
            msg = f"tools[{index}] must be a ToolSpec"
            raise ConversionError(msg)
        if spec.name in seen_names:
            msg = f"duplicate tool name '{spec.name}'"
            raise ConversionError(msg)
        seen_names.add(spec.name)

        declaration: dict[str, Any] = {
            "name": spec.name,
            "parameters": sanitize_schema(spec.parameters),
        }
        if spec.description is not None:
            declaration["description"] = spec.description
        declarations.append(declaration)

    if not declarations:
        return None
    return [{"functionDeclarations": declarations}]


def map_tool_choice(choice: str) -> str:
    """Map a Conduit tool choice onto the provider's function calling mode."""

    mode = _TOOL_CHOICES.get(str(choice).lower())
    if mode is None:
        msg = f"unsupported tool choice {choice!r}"
        raise ConversionError(msg)
    return mode
