"""Custom exception types used by Conduit core utilities."""

from __future__ import annotations


class ConduitError(RuntimeError):
    """Base class for errors raised by Conduit."""


class ConversionError(ConduitError):
    """Raised when a value cannot be converted to or from a provider format."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GatewayRequestError(ConduitError):
    """Raised when a gateway request fails."""

    def __init__(self, method: str, message: str) -> None:
        super().__init__(f"{method}: {message}")
        self.method = method
