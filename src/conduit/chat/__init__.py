"""Chat controllers reconciling gateway events with local session state."""

from .reconciler import ChatEventKind, ChatEventResult, handle_chat_event, reconcile_chat_event
from .schema import ChatEventPayload, ChatMessage
from .send import abort_chat_run, is_reset_command, load_chat_history, send_chat_message
from .state import ChatState, GatewayClient

__all__ = [
    "ChatEventKind",
    "ChatEventPayload",
    "ChatEventResult",
    "ChatMessage",
    "ChatState",
    "GatewayClient",
    "abort_chat_run",
    "handle_chat_event",
    "is_reset_command",
    "load_chat_history",
    "reconcile_chat_event",
    "send_chat_message",
]
