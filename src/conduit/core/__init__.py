"""Core data structures and provider converters for Conduit."""

from __future__ import annotations

from .errors import ConduitError, ConversionError, GatewayRequestError
from .message import (
    ContentPart,
    Context,
    ImageContent,
    Message,
    MessageRole,
    TextContent,
    ThinkingContent,
    ToolCall,
    content_from_wire,
)
from .model import Model
from .adapters.toolbridge import ToolSpec

__all__ = [
    "ConduitError",
    "ContentPart",
    "Context",
    "ConversionError",
    "GatewayRequestError",
    "ImageContent",
    "Message",
    "MessageRole",
    "Model",
    "TextContent",
    "ThinkingContent",
    "ToolCall",
    "ToolSpec",
    "content_from_wire",
]
