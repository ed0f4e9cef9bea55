"""Shared CLI dependency helpers."""

from __future__ import annotations

from functools import lru_cache

from aixplain_client.config import CredentialStore
from aixplain_client.container import ServiceContainer, build_container


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Return a cached service container built from the current environment."""

    return build_container(CredentialStore())


def reset_container() -> None:
    get_container.cache_clear()
