"""Conversion between Conduit messages and the Google generative-AI wire format."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
import logging
from typing import Any
from uuid import uuid4

from ..errors import ConversionError
from ..message import (
    ContentPart,
    Context,
    ImageContent,
    Message,
    MessageRole,
    TextContent,
    ThinkingContent,
    ToolCall,
    thaw_json,
)
from ..model import DEFAULT_FAMILY, Model

LOGGER = logging.getLogger(__name__)


class ReasoningPolicy(str, Enum):
    """How hidden reasoning from earlier assistant turns is replayed."""

    DROP = "drop"
    SIGNED = "signed"
    TAGGED = "tagged"
    # Signed when the message came from the target provider and model,
    # tagged text otherwise.
    SAME_MODEL = "same_model"


REASONING_POLICIES: Mapping[str, ReasoningPolicy] = {
    # Replayed thoughts make Gemini imitate its own reasoning verbatim.
    "gemini": ReasoningPolicy.DROP,
    "claude": ReasoningPolicy.SIGNED,
    DEFAULT_FAMILY: ReasoningPolicy.SAME_MODEL,
}

_STOP_REASONS = {
    "STOP": "stop",
    "MAX_TOKENS": "length",
}


def reasoning_policy(model: Model) -> ReasoningPolicy:
    return REASONING_POLICIES.get(model.family, REASONING_POLICIES[DEFAULT_FAMILY])


def convert_messages(model: Model, context: Context) -> list[dict[str, Any]]:
    """Convert a context into the provider's ordered ``contents`` list.

    Each message yields at most one entry. Assistant messages left without any
    parts after conversion are dropped, and consecutive tool results are merged
    into a single ``user`` entry.
    """

    policy = reasoning_policy(model)
    contents: list[dict[str, Any]] = []

    for message in context.messages:
        if message.role is MessageRole.USER:
            parts = _user_parts(model, message)
            if parts:
                contents.append({"role": "user", "parts": parts})
        elif message.role is MessageRole.ASSISTANT:
            parts = _assistant_parts(model, message, policy)
            if parts:
                contents.append({"role": "model", "parts": parts})
        else:
            part = _tool_result_part(message)
            previous = contents[-1] if contents else None
            if previous is not None and previous["role"] == "user" and all(
                "functionResponse" in existing for existing in previous["parts"]
            ):
                previous["parts"].append(part)
            else:
                contents.append({"role": "user", "parts": [part]})

    return contents


def parts_to_content(parts: Sequence[Mapping[str, Any]]) -> list[ContentPart]:
    """Normalize provider response parts into Conduit content parts."""

    content: list[ContentPart] = []
    for index, part in enumerate(parts):
        if not isinstance(part, Mapping):
            msg = f"parts[{index}] must be a mapping"
            raise ConversionError(msg)

        function_call = part.get("functionCall")
        if function_call is not None:
            if not isinstance(function_call, Mapping) or not function_call.get("name"):
                msg = f"parts[{index}].functionCall must include a name"
                raise ConversionError(msg)
            content.append(
                ToolCall(
                    id=function_call.get("id") or f"{function_call['name']}_{uuid4().hex[:12]}",
                    name=function_call["name"],
                    arguments=function_call.get("args") or {},
                    thought_signature=part.get("thoughtSignature"),
                )
            )
            continue

        text = part.get("text")
        if text is None:
            LOGGER.debug("skipping unsupported response part keys=%s", sorted(part))
            continue
        if part.get("thought") is True:
            content.append(ThinkingContent(text, thinking_signature=part.get("thoughtSignature")))
        else:
            content.append(TextContent(text))

    return content


def map_stop_reason(reason: str | None) -> str:
    return _STOP_REASONS.get(reason or "", "error")


def _user_parts(model: Model, message: Message) -> list[dict[str, Any]]:
    parts: list[dict[str, Any]] = []
    for item in message.content:
        if isinstance(item, TextContent):
            parts.append({"text": item.text})
        elif isinstance(item, ImageContent):
            if model.supports_images:
                parts.append({"inlineData": {"mimeType": item.mime_type, "data": item.data}})
    return parts


def _assistant_parts(model: Model, message: Message, policy: ReasoningPolicy) -> list[dict[str, Any]]:
    parts: list[dict[str, Any]] = []
    for item in message.content:
        if isinstance(item, TextContent):
            if item.text.strip():
                parts.append({"text": item.text})
        elif isinstance(item, ThinkingContent):
            part = _thinking_part(model, message, item, policy)
            if part is not None:
                parts.append(part)
        elif isinstance(item, ToolCall):
            call: dict[str, Any] = {
                "functionCall": {
                    "id": item.id,
                    "name": item.name,
                    "args": thaw_json(item.arguments),
                }
            }
            if item.thought_signature:
                call["thoughtSignature"] = item.thought_signature
            parts.append(call)
    return parts


def _thinking_part(
    model: Model,
    message: Message,
    item: ThinkingContent,
    policy: ReasoningPolicy,
) -> dict[str, Any] | None:
    if policy is ReasoningPolicy.SAME_MODEL:
        same_model = message.provider == model.provider and message.model == model.id
        policy = ReasoningPolicy.SIGNED if same_model else ReasoningPolicy.TAGGED

    if policy is ReasoningPolicy.DROP:
        return None
    if policy is ReasoningPolicy.TAGGED:
        if not item.thinking.strip():
            return None
        return {"text": f"<thinking>\n{item.thinking}\n</thinking>"}

    part: dict[str, Any] = {"thought": True, "text": item.thinking}
    if item.thinking_signature is not None:
        part["thoughtSignature"] = item.thinking_signature
    return part


def _tool_result_part(message: Message) -> dict[str, Any]:
    text = message.text()
    response = {"error": text} if message.is_error else {"output": text}
    return {
        "functionResponse": {
            "id": message.tool_call_id,
            "name": message.tool_name,
            "response": response,
        }
    }
