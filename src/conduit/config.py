"""Configuration shared by the chat controllers and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Mapping

ENV_PREFIX = "CONDUIT_"


@dataclass(slots=True)
class ChatConfig:
    """Settings for a chat session.

    Attributes
    ----------
    session_key:
        Gateway session the client attaches to. The gateway's primary session
        is called ``"main"``.
    history_limit:
        Maximum number of messages requested by ``chat.history``.
    log_level:
        Name of the logging level configured by the command line interface.
    """

    session_key: str = "main"
    history_limit: int = 200
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not self.session_key:
            raise ValueError("session key must not be empty")
        if self.history_limit <= 0:
            raise ValueError("history limit must be a positive integer")
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{self.log_level}'")
        self.log_level = level

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "ChatConfig":
        """Build a :class:`ChatConfig` from ``CONDUIT_*`` environment variables.

        Unset variables keep their defaults. ``CONDUIT_HISTORY_LIMIT`` must be
        an integer.
        """

        values: dict[str, object] = {}
        session_key = environ.get(f"{ENV_PREFIX}SESSION_KEY", "").strip()
        if session_key:
            values["session_key"] = session_key

        raw_limit = environ.get(f"{ENV_PREFIX}HISTORY_LIMIT", "").strip()
        if raw_limit:
            try:
                values["history_limit"] = int(raw_limit)
            except ValueError as exc:
                raise ValueError(f"invalid {ENV_PREFIX}HISTORY_LIMIT '{raw_limit}'") from exc

        log_level = environ.get(f"{ENV_PREFIX}LOG_LEVEL", "").strip()
        if log_level:
            values["log_level"] = log_level

        return cls(**values)
