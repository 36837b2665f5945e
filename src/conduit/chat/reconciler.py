"""Reconcile gateway chat events with the local chat state."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Any

from pydantic import ValidationError

from .schema import ChatEventPayload, ChatMessage
from .state import ChatState

LOGGER = logging.getLogger(__name__)


class ChatEventKind(str, Enum):
    """Classification of a processed chat event."""

    IGNORED = "ignored"
    DELTA = "delta"
    FINAL = "final"
    ABORTED = "aborted"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ChatEventResult:
    """Outcome of reconciling one event.

    ``own_run`` tells whether the event belonged to the run tracked by the
    session. A ``FINAL`` result with ``own_run=False`` is typically a
    sub-agent announcing its findings; appending ``message`` to the history
    is up to the caller.
    """

    kind: ChatEventKind
    own_run: bool = False
    message: ChatMessage | None = None

    @property
    def ignored(self) -> bool:
        return self.kind is ChatEventKind.IGNORED


_IGNORED = ChatEventResult(ChatEventKind.IGNORED)


def reconcile_chat_event(
    state: ChatState,
    payload: ChatEventPayload | Mapping[str, Any] | None,
) -> ChatEventResult:
    """Apply ``payload`` to ``state`` and classify it.

    Events for other sessions, deltas from runs other than the tracked one,
    and unknown states are ignored without touching ``state``. Only the
    stream tracking fields and ``last_error`` are ever mutated; the message
    list belongs to the caller.
    """

    event = _coerce_payload(payload)
    if event is None:
        return _IGNORED

    if event.session_key != state.session_key:
        LOGGER.debug("ignoring chat event for session=%s", event.session_key)
        return _IGNORED

    own_run = event.run_id == state.chat_run_id

    if event.state == "delta":
        if not own_run:
            LOGGER.debug("ignoring delta from untracked run=%s", event.run_id)
            return _IGNORED
        _apply_delta(state, event.message)
        return ChatEventResult(ChatEventKind.DELTA, own_run=True, message=event.message)

    if event.state == "final":
        if own_run:
            state.clear_run()
        else:
            LOGGER.debug("final from untracked run=%s", event.run_id)
        return ChatEventResult(ChatEventKind.FINAL, own_run=own_run, message=event.message)

    if event.state in ("aborted", "error") and own_run:
        state.clear_run()
        if event.state == "error":
            state.last_error = event.error_message or "chat error"
            LOGGER.warning("run=%s failed: %s", event.run_id, state.last_error)
            return ChatEventResult(ChatEventKind.ERROR, own_run=True, message=event.message)
        return ChatEventResult(ChatEventKind.ABORTED, own_run=True, message=event.message)

    LOGGER.debug("ignoring chat event state=%s run=%s", event.state, event.run_id)
    return _IGNORED


def handle_chat_event(
    state: ChatState,
    payload: ChatEventPayload | Mapping[str, Any] | None,
) -> ChatEventKind | None:
    """Reconcile ``payload`` and return its kind, or ``None`` when ignored."""

    result = reconcile_chat_event(state, payload)
    if result.ignored:
        return None
    return result.kind


def _coerce_payload(payload: ChatEventPayload | Mapping[str, Any] | None) -> ChatEventPayload | None:
    if payload is None or isinstance(payload, ChatEventPayload):
        return payload
    if not isinstance(payload, Mapping):
        LOGGER.debug("ignoring chat event of type %s", type(payload).__name__)
        return None
    try:
        return ChatEventPayload.model_validate(payload)
    except ValidationError as exc:
        LOGGER.debug("ignoring malformed chat event: %s", exc)
        return None


def _apply_delta(state: ChatState, message: ChatMessage | None) -> None:
    if message is None:
        return
    # Deltas carry the full text streamed so far.
    text = message.text()
    current = state.chat_stream
    if not current or len(text) >= len(current):
        state.chat_stream = text
