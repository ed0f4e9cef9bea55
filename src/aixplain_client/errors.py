"""Root exception hierarchy shared by every subsystem."""

from __future__ import annotations


class AiXplainError(RuntimeError):
    """Base class for all client failures."""


class ConfigurationError(AiXplainError):
    """Raised before any network call when credentials or URLs are missing."""


class MissingAPIKeyError(ConfigurationError):
    """Raised when neither a team key nor an aiXplain key is configured."""

    def __init__(self) -> None:
        super().__init__(
            "No API key was provided. Set TEAM_API_KEY or AIXPLAIN_API_KEY, "
            "or call CredentialStore.set()."
        )


class MissingURLError(ConfigurationError):
    """Raised when a required base URL is not configured."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No URL configured for {name}")
        self.name = name


class ConstructionError(AiXplainError):
    """Local failure while building a request; never retried."""


class InvalidURLError(ConstructionError):
    """Raised when a URL cannot be used as an absolute request target."""

    def __init__(self, url: str | None) -> None:
        message = f"The provided URL is malformed: {url}" if url else "Invalid URL."
        super().__init__(message)
        self.url = url


__all__ = [
    "AiXplainError",
    "ConfigurationError",
    "ConstructionError",
    "InvalidURLError",
    "MissingAPIKeyError",
    "MissingURLError",
]
