"""Provider-agnostic message schema shared by the converters."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
import json
import math
from types import MappingProxyType
from typing import Any, Union

from .errors import ConversionError


class MessageRole(str, Enum):
    """Canonical role names supported by Conduit."""

    USER = "user"
    ASSISTANT = "assistant"
    TOOL_RESULT = "tool_result"


@dataclass(frozen=True, slots=True)
class TextContent:
    """Plain text content."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            msg = "text content must be a string"
            raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class ThinkingContent:
    """Hidden reasoning emitted by a model, with its opaque provider signature."""

    thinking: str
    thinking_signature: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.thinking, str):
            msg = "thinking content must be a string"
            raise TypeError(msg)
        if self.thinking_signature is not None and not isinstance(self.thinking_signature, str):
            msg = "thinking signature must be a string when provided"
            raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class ImageContent:
    """Base64 encoded image data."""

    data: str
    mime_type: str

    def __post_init__(self) -> None:
        if not isinstance(self.mime_type, str) or not self.mime_type:
            msg = "image mime type must be a non-empty string"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ToolCall:
    """A tool/function invocation emitted by an assistant message."""

    id: str
    name: str
    arguments: Mapping[str, Any]
    thought_signature: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            msg = "tool call id must be a non-empty string"
            raise ValueError(msg)
        if not isinstance(self.name, str) or not self.name:
            msg = "tool call name must be a non-empty string"
            raise ValueError(msg)
        if not isinstance(self.arguments, Mapping):
            msg = "tool call arguments must be a mapping"
            raise TypeError(msg)

        plain_arguments = thaw_json(self.arguments)
        ensure_json_compatible(plain_arguments, path="ToolCall.arguments")

        sanitized = json.loads(json.dumps(plain_arguments, allow_nan=False))
        object.__setattr__(self, "arguments", freeze_json(sanitized))


ContentPart = Union[TextContent, ThinkingContent, ImageContent, ToolCall]

_CONTENT_TYPES = (TextContent, ThinkingContent, ImageContent, ToolCall)


@dataclass(frozen=True, slots=True)
class Message:
    """A single conversation turn.

    ``provider`` and ``model`` record where an assistant message came from so
    converters can decide whether provider-specific data such as reasoning
    signatures may be replayed. Tool results carry the id and name of the call
    they answer.
    """

    role: MessageRole
    content: tuple[ContentPart, ...]
    provider: str | None = None
    model: str | None = None
    tool_call_id: str | None = None
    tool_name: str | None = None
    is_error: bool = False

    def __post_init__(self) -> None:
        role = MessageRole(self.role)
        object.__setattr__(self, "role", role)

        content = self.content
        if isinstance(content, str):
            content = (TextContent(content),)
        if not isinstance(content, Sequence):
            msg = "message content must be a string or a sequence of content parts"
            raise TypeError(msg)
        parts = tuple(content)
        for part in parts:
            if not isinstance(part, _CONTENT_TYPES):
                msg = f"unsupported content part {type(part).__name__}"
                raise TypeError(msg)
        object.__setattr__(self, "content", parts)

        if role is MessageRole.TOOL_RESULT:
            if not self.tool_call_id or not self.tool_name:
                msg = "tool result messages require tool_call_id and tool_name"
                raise ValueError(msg)

    def text(self) -> str:
        """Return the concatenated text parts of the message."""

        return "".join(part.text for part in self.content if isinstance(part, TextContent))


@dataclass(frozen=True, slots=True)
class Context:
    """Conversation handed to a provider converter."""

    messages: tuple[Message, ...]
    system_prompt: str | None = None
    tools: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))
        object.__setattr__(self, "tools", tuple(self.tools))


def content_from_wire(payload: Mapping[str, Any]) -> ContentPart:
    """Parse a gateway content part such as ``{"type": "text", "text": "hi"}``."""

    if not isinstance(payload, Mapping):
        msg = "content parts must be mappings"
        raise ConversionError(msg)

    part_type = payload.get("type")
    if part_type == "text":
        return TextContent(str(payload.get("text", "")))
    if part_type == "thinking":
        return ThinkingContent(
            str(payload.get("thinking", "")),
            thinking_signature=payload.get("thinkingSignature"),
        )
    if part_type == "image":
        return ImageContent(data=str(payload.get("data", "")), mime_type=str(payload.get("mimeType", "")))
    if part_type == "toolCall":
        return ToolCall(
            id=str(payload.get("id", "")),
            name=str(payload.get("name", "")),
            arguments=payload.get("arguments") or {},
            thought_signature=payload.get("thoughtSignature"),
        )

    msg = f"unsupported content part type {part_type!r}"
    raise ConversionError(msg)


def ensure_json_compatible(value: Any, *, path: str) -> None:
    if isinstance(value, Mapping):
        for key, inner in value.items():
            if not isinstance(key, str) or not key:
                msg = f"{path} keys must be non-empty strings"
                raise TypeError(msg)
            ensure_json_compatible(inner, path=f"{path}.{key}")
        return

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        for index, item in enumerate(value):
            ensure_json_compatible(item, path=f"{path}[{index}]")
        return

    if isinstance(value, (bool, type(None), str)):
        return

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            msg = f"{path} contains non-finite float values"
            raise ValueError(msg)
        return

    msg = f"{path} contains unsupported value type {type(value).__name__}"
    raise TypeError(msg)


def freeze_json(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({key: freeze_json(inner) for key, inner in value.items()})

    if isinstance(value, list):
        return tuple(freeze_json(inner) for inner in value)

    return value


def thaw_json(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: thaw_json(inner) for key, inner in value.items()}

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [thaw_json(inner) for inner in value]

    return value
