"""Wire schemas for chat events pushed by the session gateway."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from conduit.core.message import Message, content_from_wire

LOGGER = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    """A chat message as delivered by the gateway."""

    model_config = ConfigDict(extra="allow", frozen=True)

    role: str = Field(..., description="Author role, e.g. 'user' or 'assistant'.")
    content: List[Dict[str, Any]] = Field(default_factory=list, description="Ordered content parts.")
    timestamp: int | float | None = Field(None, description="Creation time in epoch milliseconds.")

    def text(self) -> str:
        """Return the concatenated text parts of the message."""

        return "".join(
            str(part.get("text", "")) for part in self.content if part.get("type") == "text"
        )

    def to_message(self) -> Message:
        """Convert into a provider-agnostic :class:`~conduit.core.message.Message`."""

        return Message(
            role=self.role,
            content=tuple(content_from_wire(part) for part in self.content),
            provider=self.model_extra.get("provider") if self.model_extra else None,
            model=self.model_extra.get("model") if self.model_extra else None,
        )


class ChatEventPayload(BaseModel):
    """One ``chat`` event for a session run.

    Only the run and session identity and the state are required. A
    ``message`` or ``errorMessage`` that does not validate is dropped so the
    event can still be routed.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    run_id: str = Field(..., alias="runId", description="Run the event belongs to.")
    session_key: str = Field(..., alias="sessionKey", description="Session the run streams into.")
    state: str = Field(..., description="Run state: 'delta', 'final', 'aborted', 'error', ...")
    message: ChatMessage | None = Field(None, description="Message snapshot, if any.")
    error_message: str | None = Field(None, alias="errorMessage", description="Failure description for 'error' events.")

    @field_validator("message", "error_message", mode="wrap")
    @classmethod
    def _drop_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError as exc:
            LOGGER.debug("dropping invalid %s: %s", info.field_name, exc)
            return None


__all__ = ["ChatEventPayload", "ChatMessage"]
