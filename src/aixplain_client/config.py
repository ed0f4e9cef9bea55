"""Credential and endpoint configuration sourced from the environment."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, fields, replace

DEFAULT_BACKEND_URL = "https://platform-api.aixplain.com"
DEFAULT_MODELS_RUN_URL = "https://models.aixplain.com/api/v1/execute/"


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip() or None


@dataclass(frozen=True, slots=True)
class Credentials:
    """Immutable snapshot of API keys and base URLs used for a single call."""

    backend_url: str | None = DEFAULT_BACKEND_URL
    models_run_url: str | None = DEFAULT_MODELS_RUN_URL
    team_api_key: str | None = None
    aixplain_api_key: str | None = None
    pipeline_api_key: str | None = None
    model_api_key: str | None = None
    hf_token: str | None = None

    @classmethod
    def from_env(cls) -> Credentials:
        return cls(
            backend_url=_env_str("BACKEND_URL") or DEFAULT_BACKEND_URL,
            models_run_url=_env_str("MODELS_RUN_URL") or DEFAULT_MODELS_RUN_URL,
            team_api_key=_env_str("TEAM_API_KEY"),
            aixplain_api_key=_env_str("AIXPLAIN_API_KEY"),
            pipeline_api_key=_env_str("PIPELINE_API_KEY"),
            model_api_key=_env_str("MODEL_API_KEY"),
            hf_token=_env_str("HF_TOKEN"),
        )

    def without_keys(self) -> Credentials:
        """Return a copy with every key removed and the URLs preserved."""

        return Credentials(backend_url=self.backend_url, models_run_url=self.models_run_url)

    @property
    def has_api_key(self) -> bool:
        return bool(self.team_api_key or self.aixplain_api_key)


@dataclass(frozen=True, slots=True)
class NetworkSettings:
    """Per-request timeout and bounded retry budget for raw I/O failures."""

    timeout_seconds: float = 10.0
    max_retries: int = 2


class CredentialStore:
    """Process-wide credential holder with snapshot reads.

    Writers replace the whole ``Credentials`` value under a lock, so a call
    that captured a snapshot keeps using it even if another task clears the
    store mid-flight.
    """

    def __init__(self, credentials: Credentials | None = None) -> None:
        self._lock = threading.Lock()
        self._current = credentials if credentials is not None else Credentials.from_env()

    def snapshot(self) -> Credentials:
        with self._lock:
            return self._current

    def set(self, **changes: str | None) -> Credentials:
        known = {item.name for item in fields(Credentials)}
        unknown = sorted(set(changes) - known)
        if unknown:
            msg = f"Unknown credential fields: {', '.join(unknown)}"
            raise ValueError(msg)
        with self._lock:
            self._current = replace(self._current, **changes)
            return self._current

    def clear(self) -> None:
        with self._lock:
            self._current = self._current.without_keys()

    def reload(self) -> Credentials:
        """Re-read the environment, discarding values set in code."""

        with self._lock:
            self._current = Credentials.from_env()
            return self._current


credentials = CredentialStore()


__all__ = [
    "DEFAULT_BACKEND_URL",
    "DEFAULT_MODELS_RUN_URL",
    "CredentialStore",
    "Credentials",
    "NetworkSettings",
    "credentials",
]
