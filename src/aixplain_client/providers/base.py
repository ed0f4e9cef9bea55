"""Shared plumbing for catalog (metadata) calls."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from aixplain_client.config import Credentials, CredentialStore
from aixplain_client.endpoints import backend_url
from aixplain_client.execution import ProtocolError
from aixplain_client.transport import Transport, build_headers, expect_status

logger = logging.getLogger(__name__)

M = TypeVar("M")


def decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        msg = f"Expected a JSON body from {response.request.url}"
        raise ProtocolError(msg) from exc


def decode_items(items: Iterable[Any], decoder: Callable[[Any], M], *, label: str) -> list[M]:
    """Decode catalog entries, skipping the ones that do not validate."""

    decoded: list[M] = []
    for item in items:
        try:
            decoded.append(decoder(item))
        except ValidationError as exc:
            logger.warning("Skipping malformed %s entry: %s", label, exc.errors()[:1])
    return decoded


class CatalogProvider:
    """Base for providers that read asset metadata from the backend."""

    def __init__(self, transport: Transport, store: CredentialStore) -> None:
        self._transport = transport
        self._store = store

    @property
    def store(self) -> CredentialStore:
        return self._store

    async def _get_json(self, path: str, credentials: Credentials | None = None) -> Any:
        credentials = credentials or self._store.snapshot()
        headers = build_headers(credentials)
        response = await self._transport.get(backend_url(credentials, path), headers=headers)
        expect_status(response, 200)
        return decode_json(response)

    async def _post_json(
        self,
        path: str,
        body: dict[str, Any],
        *,
        expected_status: int = 201,
        credentials: Credentials | None = None,
    ) -> Any:
        credentials = credentials or self._store.snapshot()
        headers = build_headers(credentials)
        response = await self._transport.post(
            backend_url(credentials, path),
            headers=headers,
            content=json.dumps(body).encode("utf-8"),
        )
        expect_status(response, expected_status)
        return decode_json(response)


def decode_metadata(payload: Any, decoder: Callable[[Any], M], *, label: str) -> M:
    try:
        return decoder(payload)
    except ValidationError as exc:
        msg = f"Could not decode {label} metadata: {exc}"
        raise ProtocolError(msg) from exc


__all__ = ["CatalogProvider", "decode_items", "decode_json", "decode_metadata"]
