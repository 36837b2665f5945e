"""Mutable chat state owned by one gateway session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

from conduit.config import ChatConfig


@runtime_checkable
class GatewayClient(Protocol):
    """Request/response client connected to the session gateway."""

    @property
    def connected(self) -> bool:
        """Whether the underlying connection is open."""

    async def request(self, method: str, params: Mapping[str, Any]) -> Mapping[str, Any]:
        """Send ``method`` with ``params`` and return the decoded response."""


@dataclass(slots=True)
class ChatState:
    """Chat view state for a single session.

    ``chat_run_id`` and ``chat_stream`` are either both set, while a run
    streams into this session, or both ``None``.
    """

    session_key: str = "main"
    chat_run_id: str | None = None
    chat_stream: str | None = None
    chat_stream_started_at: int | None = None
    chat_messages: list[dict[str, Any]] = field(default_factory=list)
    chat_message: str = ""
    chat_attachments: list[dict[str, Any]] = field(default_factory=list)
    chat_sending: bool = False
    chat_loading: bool = False
    chat_thinking_level: str | None = None
    connected: bool = False
    client: GatewayClient | None = None
    last_error: str | None = None
    config: ChatConfig = field(default_factory=ChatConfig, repr=False)

    @classmethod
    def from_config(cls, config: ChatConfig, client: GatewayClient | None = None) -> ChatState:
        return cls(
            session_key=config.session_key,
            client=client,
            connected=bool(client is not None and client.connected),
            config=config,
        )

    def start_run(self, run_id: str, started_at: int) -> None:
        self.chat_run_id = run_id
        self.chat_stream = ""
        self.chat_stream_started_at = started_at

    def clear_run(self) -> None:
        self.chat_run_id = None
        self.chat_stream = None
        self.chat_stream_started_at = None

    def snapshot(self) -> ChatState:
        """Return a detached copy of the state, sharing only the client handle."""

        from copy import deepcopy

        return ChatState(
            session_key=self.session_key,
            chat_run_id=self.chat_run_id,
            chat_stream=self.chat_stream,
            chat_stream_started_at=self.chat_stream_started_at,
            chat_messages=deepcopy(self.chat_messages),
            chat_message=self.chat_message,
            chat_attachments=deepcopy(self.chat_attachments),
            chat_sending=self.chat_sending,
            chat_loading=self.chat_loading,
            chat_thinking_level=self.chat_thinking_level,
            connected=self.connected,
            client=self.client,
            last_error=self.last_error,
            config=self.config,
        )
