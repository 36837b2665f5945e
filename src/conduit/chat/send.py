"""Outbound chat requests: send, history and abort."""

from __future__ import annotations

import logging
import re
import time
from typing import Any, Awaitable
from uuid import uuid4

from conduit.core.errors import GatewayRequestError

from .state import ChatState, GatewayClient

LOGGER = logging.getLogger(__name__)

_RESET_COMMAND = re.compile(r"^/(new|reset)(\s|$)", re.IGNORECASE)


def is_reset_command(text: str) -> bool:
    """Whether ``text`` starts a fresh session (``/new`` or ``/reset``)."""

    return _RESET_COMMAND.match(text.strip()) is not None


def _now_ms() -> int:
    return int(time.time() * 1000)


def send_chat_message(state: ChatState, text: str) -> Awaitable[str | None]:
    """Send ``text`` to the session; the returned awaitable yields the run id.

    Local state changes happen before this function returns, so the
    optimistic message is visible without awaiting the result. Conversational
    text is appended to ``state.chat_messages``; ``/new`` and ``/reset``
    commands are only sent. Nothing is sent, and the awaitable yields
    ``None``, when the client is missing or disconnected, or when there is
    neither text nor an attachment.

    Awaiting raises :class:`GatewayRequestError` when the request fails. The
    optimistic message is left in place and ``state.last_error`` describes the
    failure.
    """

    client = state.client
    if client is None or not state.connected:
        LOGGER.debug("not sending: gateway client unavailable")
        return _skipped()

    message = text.strip()
    attachments = list(state.chat_attachments)
    if not message and not attachments:
        return _skipped()

    now = _now_ms()
    if not is_reset_command(message):
        state.chat_messages.append(
            {
                "role": "user",
                "content": [{"type": "text", "text": text}],
                "timestamp": now,
            }
        )

    run_id = str(uuid4())
    state.chat_sending = True
    state.last_error = None
    state.start_run(run_id, now)

    params: dict[str, Any] = {
        "sessionKey": state.session_key,
        "message": text,
        "deliver": False,
        "idempotencyKey": run_id,
    }
    if attachments:
        params["attachments"] = attachments

    LOGGER.info("chat.send session=%s run=%s", state.session_key, run_id)
    return _dispatch(state, client, params, run_id)


async def _skipped() -> None:
    return None


async def _dispatch(
    state: ChatState,
    client: GatewayClient,
    params: dict[str, Any],
    run_id: str,
) -> str:
    try:
        await client.request("chat.send", params)
    except Exception as exc:
        state.clear_run()
        state.last_error = str(exc) or type(exc).__name__
        LOGGER.warning("chat.send failed session=%s: %s", state.session_key, state.last_error)
        raise GatewayRequestError("chat.send", state.last_error) from exc
    finally:
        state.chat_sending = False

    return run_id


async def load_chat_history(state: ChatState) -> list[dict[str, Any]]:
    """Replace ``state.chat_messages`` with the session history from the gateway."""

    client = state.client
    if client is None or not state.connected:
        return state.chat_messages

    state.chat_loading = True
    state.last_error = None
    LOGGER.info("chat.history session=%s limit=%s", state.session_key, state.config.history_limit)
    try:
        response = await client.request(
            "chat.history",
            {"sessionKey": state.session_key, "limit": state.config.history_limit},
        )
    except Exception as exc:
        state.last_error = str(exc) or type(exc).__name__
        LOGGER.warning("chat.history failed session=%s: %s", state.session_key, state.last_error)
        raise GatewayRequestError("chat.history", state.last_error) from exc
    finally:
        state.chat_loading = False

    messages = response.get("messages") if response else None
    state.chat_messages = list(messages) if isinstance(messages, list) else []
    state.chat_thinking_level = (response or {}).get("thinkingLevel")
    return state.chat_messages


async def abort_chat_run(state: ChatState) -> bool:
    """Ask the gateway to stop the tracked run; returns whether a request was sent."""

    client = state.client
    run_id = state.chat_run_id
    if client is None or not state.connected or run_id is None:
        return False

    LOGGER.info("chat.abort session=%s run=%s", state.session_key, run_id)
    try:
        await client.request("chat.abort", {"sessionKey": state.session_key, "runId": run_id})
    except Exception as exc:
        state.last_error = str(exc) or type(exc).__name__
        LOGGER.warning("chat.abort failed session=%s: %s", state.session_key, state.last_error)
        raise GatewayRequestError("chat.abort", state.last_error) from exc
    return True
