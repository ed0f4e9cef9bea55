"""Async HTTP transport with per-request timeout and bounded I/O retries."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

import httpx

from aixplain_client.config import NetworkSettings

from .exceptions import MaxRetriesReachedError, UnexpectedStatusError

logger = logging.getLogger(__name__)


class Transport:
    """The only component that talks to the network.

    Raw I/O failures (connection resets, timeouts) are retried up to
    ``max_retries`` times with a fixed delay equal to the request timeout.
    Responses are returned whatever their status code; callers decide which
    code they expect via :func:`expect_status`.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        settings: NetworkSettings | None = None,
    ) -> None:
        self._client = client
        self._settings = settings or NetworkSettings()

    @property
    def settings(self) -> NetworkSettings:
        return self._settings

    async def get(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        settings: NetworkSettings | None = None,
    ) -> httpx.Response:
        return await self.request("GET", url, headers=headers, settings=settings)

    async def post(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
        settings: NetworkSettings | None = None,
    ) -> httpx.Response:
        return await self.request("POST", url, headers=headers, content=content, settings=settings)

    async def put(
        self,
        url: str,
        *,
        content: bytes,
        headers: Mapping[str, str] | None = None,
        settings: NetworkSettings | None = None,
    ) -> httpx.Response:
        return await self.request("PUT", url, headers=headers, content=content, settings=settings)

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
        settings: NetworkSettings | None = None,
    ) -> httpx.Response:
        resolved = settings or self._settings
        attempts = max(0, resolved.max_retries) + 1
        async with self._client_scope(resolved) as client:
            for attempt in range(1, attempts + 1):
                try:
                    logger.debug("%s request to %s", method, url)
                    return await client.request(
                        method,
                        url,
                        headers=dict(headers or {}),
                        content=content,
                        timeout=resolved.timeout_seconds,
                    )
                except httpx.TransportError as exc:
                    logger.warning(
                        "%s %s failed (%s/%s): %s",
                        method,
                        url,
                        attempt,
                        attempts,
                        exc,
                        extra={"method": method, "url": url, "attempt": attempt},
                    )
                    if attempt < attempts:
                        await asyncio.sleep(resolved.timeout_seconds)
        raise MaxRetriesReachedError(method, url, attempts)

    @asynccontextmanager
    async def _client_scope(self, settings: NetworkSettings) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=settings.timeout_seconds) as client:
            yield client


def expect_status(response: httpx.Response, *expected: int) -> None:
    """Raise :class:`UnexpectedStatusError` unless the response carries an expected code."""

    if response.status_code in expected:
        return
    try:
        url: str | None = str(response.request.url)
    except RuntimeError:
        url = None
    raise UnexpectedStatusError(response.status_code, url=url, body=response.text)


def json_object(response: httpx.Response) -> dict[str, Any] | None:
    """Decode a JSON object body, returning ``None`` for anything else."""

    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        return payload
    return None


__all__ = ["Transport", "expect_status", "json_object"]
