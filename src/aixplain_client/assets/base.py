"""Shared run machinery for runnable asset entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from aixplain_client.config import Credentials, CredentialStore
from aixplain_client.domain import AssetKind
from aixplain_client.execution import (
    ExecutionEngine,
    ExecutionHandle,
    ModelRunParameters,
)
from aixplain_client.inputs import InputPayload, PayloadEncoder, as_input
from aixplain_client.transport import build_headers

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AssetRuntime(Generic[T]):
    """Collaborators an entity needs to run: credentials, encoder and engine."""

    store: CredentialStore
    encoder: PayloadEncoder
    engine: ExecutionEngine[T]


class RunnableAsset(ABC, Generic[T]):
    """Base for entities whose ``run`` goes through the execution engine.

    Each call takes one credential snapshot up front and uses it for
    encoding, uploads, submit and polling.
    """

    kind: ClassVar[AssetKind]

    def __init__(self, runtime: AssetRuntime[T]) -> None:
        self._runtime = runtime

    @property
    @abstractmethod
    def id(self) -> str: ...

    @abstractmethod
    def run_url(self, credentials: Credentials) -> str: ...

    async def resume(
        self,
        handle: ExecutionHandle,
        parameters: ModelRunParameters | None = None,
    ) -> T:
        """Continue polling a handle left behind by a timed-out run."""

        params = parameters or ModelRunParameters()
        credentials = self._runtime.store.snapshot()
        result = await self._runtime.engine.poll_until_complete(
            handle,
            params.polling,
            headers=build_headers(credentials),
            network=params.network,
        )
        return result.unwrap()

    async def _execute(
        self,
        value: Any,
        params: ModelRunParameters,
        *,
        session_id: str | None = None,
        credentials: Credentials | None = None,
    ) -> T:
        credentials = credentials or self._runtime.store.snapshot()
        headers = build_headers(credentials)
        url = self.run_url(credentials)
        payload = await self._runtime.encoder.encode(
            as_input(value),
            self.kind,
            credentials=credentials,
            parameters=params.payload_fields(),
            session_id=session_id,
        )
        return await self._submit(url, payload, headers, params)

    async def _submit(
        self,
        url: str,
        payload: InputPayload,
        headers: Mapping[str, str],
        params: ModelRunParameters,
    ) -> T:
        result = await self._runtime.engine.run(
            url,
            payload,
            headers=headers,
            polling=params.polling,
            network=params.network,
        )
        return result.unwrap()


__all__ = ["AssetRuntime", "RunnableAsset"]
