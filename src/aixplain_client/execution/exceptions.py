"""Failures of the submit/poll protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING

from aixplain_client.errors import AiXplainError

if TYPE_CHECKING:
    from .models import ExecutionHandle


class ProtocolError(AiXplainError):
    """Base class for responses that do not match the expected shape."""


class SubmitDecodeError(ProtocolError):
    """Raised when a submit response carries neither inline output nor a polling URL."""


class PollingDecodeError(ProtocolError):
    """Raised when a completed polling body cannot be decoded into the typed output."""


class SupplierError(AiXplainError):
    """Raised when the remote execution reports a supplier-side failure."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Supplier error: {reason}")
        self.reason = reason


class PollingTimeoutError(AiXplainError):
    """Raised when polling ran out of attempts; the handle allows resuming later."""

    def __init__(self, handle: ExecutionHandle) -> None:
        super().__init__(f"Polling timed out before completion: {handle.url}")
        self.handle = handle


__all__ = [
    "PollingDecodeError",
    "PollingTimeoutError",
    "ProtocolError",
    "SubmitDecodeError",
    "SupplierError",
]
