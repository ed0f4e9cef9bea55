"""Submit → poll → decode execution engine shared by every asset kind."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Generic, TypeVar

from aixplain_client.config import NetworkSettings
from aixplain_client.endpoints import ensure_absolute
from aixplain_client.errors import InvalidURLError
from aixplain_client.inputs import InputPayload
from aixplain_client.transport import Transport, expect_status, json_object

from .exceptions import PollingDecodeError, SubmitDecodeError
from .models import (
    Completed,
    ExecutionHandle,
    ExecutionResult,
    PollingConfig,
    SupplierFailed,
    TimedOut,
)
from .schemas import ResponseSchema

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExecutionEngine(Generic[T]):
    """Runs one asset kind's jobs to a terminal state.

    The engine holds no per-run state, so one instance serves any number of
    concurrent runs. Polls for a handle are strictly sequential.
    """

    def __init__(self, transport: Transport, schema: ResponseSchema[T]) -> None:
        self._transport = transport
        self._schema = schema

    @property
    def schema(self) -> ResponseSchema[T]:
        return self._schema

    async def submit(
        self,
        url: str,
        payload: InputPayload,
        *,
        headers: Mapping[str, str],
        network: NetworkSettings | None = None,
    ) -> ExecutionHandle | Completed[T]:
        """POST ``payload`` and return a polling handle, or the inline result."""

        ensure_absolute(url)
        response = await self._transport.post(
            url,
            headers={**headers, **payload.headers},
            content=payload.content,
            settings=network,
        )
        expect_status(response, self._schema.success_status)
        body = json_object(response)
        if body is None:
            msg = f"The {self._schema.name} submit response is not a JSON object"
            raise SubmitDecodeError(msg)

        if self._schema.inline_output and body.get("completed") is True:
            try:
                value = self._schema.decode_output(body)
            except (ValueError, TypeError, KeyError) as exc:
                msg = f"Could not decode the inline {self._schema.name} output: {exc}"
                raise SubmitDecodeError(msg) from exc
            logger.info("%s run completed inline", self._schema.name)
            return Completed(value)

        handle_url = self._schema.locate_handle(body)
        if handle_url is None:
            msg = f"The {self._schema.name} submit response carries no polling URL"
            raise SubmitDecodeError(msg)
        try:
            ensure_absolute(handle_url)
        except InvalidURLError as exc:
            msg = f"The {self._schema.name} submit response carries a malformed polling URL"
            raise SubmitDecodeError(msg) from exc

        logger.info(
            "%s run accepted",
            self._schema.name,
            extra={"asset_kind": self._schema.name, "request_id": body.get("requestId")},
        )
        return ExecutionHandle(url=handle_url)

    async def poll_until_complete(
        self,
        handle: ExecutionHandle,
        config: PollingConfig,
        *,
        headers: Mapping[str, str],
        network: NetworkSettings | None = None,
    ) -> ExecutionResult[T]:
        """Poll ``handle`` until it reaches a terminal state or the budget runs out."""

        for attempt in range(1, config.max_attempts + 1):
            response = await self._transport.get(handle.url, headers=headers, settings=network)
            body = json_object(response)
            if body is not None:
                error = body.get("error")
                supplier_error = body.get("supplierError")
                if isinstance(error, str) and isinstance(supplier_error, str):
                    logger.warning(
                        "%s run failed on the supplier side: %s",
                        self._schema.name,
                        supplier_error,
                        extra={"asset_kind": self._schema.name, "url": handle.url},
                    )
                    return SupplierFailed(supplier_error)
                if body.get("completed") is True:
                    try:
                        value = self._schema.decode_output(body)
                    except (ValueError, TypeError, KeyError) as exc:
                        msg = f"Could not decode the completed {self._schema.name} output: {exc}"
                        raise PollingDecodeError(msg) from exc
                    logger.info(
                        "%s run completed after %s polls",
                        self._schema.name,
                        attempt,
                        extra={"asset_kind": self._schema.name, "attempts": attempt},
                    )
                    return Completed(value)

            logger.debug(
                "Polling %s (%s/%s)",
                handle.url,
                attempt,
                config.max_attempts,
                extra={"asset_kind": self._schema.name, "attempt": attempt},
            )
            if attempt < config.max_attempts:
                await asyncio.sleep(config.wait_interval)

        logger.warning(
            "%s run did not complete within %s polls",
            self._schema.name,
            config.max_attempts,
            extra={"asset_kind": self._schema.name, "url": handle.url},
        )
        return TimedOut(handle)

    async def run(
        self,
        url: str,
        payload: InputPayload,
        *,
        headers: Mapping[str, str],
        polling: PollingConfig,
        network: NetworkSettings | None = None,
    ) -> ExecutionResult[T]:
        outcome = await self.submit(url, payload, headers=headers, network=network)
        if isinstance(outcome, Completed):
            return outcome
        return await self.poll_until_complete(
            outcome, polling, headers=headers, network=network
        )


__all__ = ["ExecutionEngine"]
