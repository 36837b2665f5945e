"""Provider conversion helpers."""

from __future__ import annotations

from .google import (
    REASONING_POLICIES,
    ReasoningPolicy,
    convert_messages,
    map_stop_reason,
    parts_to_content,
    reasoning_policy,
)
from .schema import sanitize_schema
from .toolbridge import ToolSpec, convert_tools, map_tool_choice

__all__ = [
    "REASONING_POLICIES",
    "ReasoningPolicy",
    "ToolSpec",
    "convert_messages",
    "convert_tools",
    "map_stop_reason",
    "map_tool_choice",
    "parts_to_content",
    "reasoning_policy",
    "sanitize_schema",
]
