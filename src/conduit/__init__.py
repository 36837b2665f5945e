"""Client-side core of a conversational agent.

The package reconciles streaming chat events pushed by a session gateway with
local chat state, sends user input back through the gateway, and converts
provider-agnostic messages and tool schemas into the Google generative-AI wire
format.
"""

from __future__ import annotations

from .chat import (
    ChatEventKind,
    ChatEventPayload,
    ChatState,
    handle_chat_event,
    reconcile_chat_event,
    send_chat_message,
)
from .config import ChatConfig
from .core import ConduitError, Context, Message, Model, ToolSpec
from .core.adapters import convert_messages, convert_tools, sanitize_schema

__all__ = [
    "ChatConfig",
    "ChatEventKind",
    "ChatEventPayload",
    "ChatState",
    "ConduitError",
    "Context",
    "Message",
    "Model",
    "ToolSpec",
    "convert_messages",
    "convert_tools",
    "handle_chat_event",
    "reconcile_chat_event",
    "sanitize_schema",
    "send_chat_message",
]

__version__ = "0.1.0"
