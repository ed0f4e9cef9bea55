"""Transport-level failures."""

from __future__ import annotations

from aixplain_client.errors import AiXplainError


class TransportError(AiXplainError):
    """Base class for network failures."""


class UnexpectedStatusError(TransportError):
    """Raised when the platform answers with a status code other than the expected one."""

    def __init__(self, status_code: int, *, url: str | None = None, body: str | None = None) -> None:
        message = f"Invalid status code received: {status_code}"
        if url:
            message = f"{message} ({url})"
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.body = body


class MaxRetriesReachedError(TransportError):
    """Raised when every attempt of a request failed with an I/O error."""

    def __init__(self, method: str, url: str, attempts: int) -> None:
        super().__init__(
            f"The maximum number of retries for {method} {url} has been reached "
            f"after {attempts} attempts."
        )
        self.method = method
        self.url = url
        self.attempts = attempts


__all__ = ["MaxRetriesReachedError", "TransportError", "UnexpectedStatusError"]
