"""Agent catalog."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from aixplain_client.assets import Agent, AssetRuntime
from aixplain_client.config import CredentialStore
from aixplain_client.domain import AgentMetadata
from aixplain_client.endpoints import Endpoint
from aixplain_client.execution import AGENT_SCHEMA, ExecutionEngine
from aixplain_client.inputs import PayloadEncoder
from aixplain_client.transport import Transport

from .base import CatalogProvider, decode_items, decode_metadata

logger = logging.getLogger(__name__)


class AgentProvider(CatalogProvider):
    def __init__(
        self,
        transport: Transport,
        store: CredentialStore,
        encoder: PayloadEncoder,
    ) -> None:
        super().__init__(transport, store)
        self._runtime = AssetRuntime(
            store=store,
            encoder=encoder,
            engine=ExecutionEngine(transport, AGENT_SCHEMA),
        )

    async def get(self, agent_id: str) -> Agent:
        payload = await self._get_json(Endpoint.agent(agent_id))
        metadata = decode_metadata(payload, AgentMetadata.model_validate, label="agent")
        if not metadata.id:
            metadata = metadata.model_copy(update={"id": agent_id})
        logger.info("Fetched agent %s", metadata.name, extra={"agent_id": metadata.id})
        return Agent(metadata, self._runtime)

    async def list(self) -> Sequence[Agent]:
        payload = await self._get_json(Endpoint.AGENTS)
        items = payload if isinstance(payload, list) else []
        metadata = decode_items(items, AgentMetadata.model_validate, label="agent")
        logger.info("Fetched %s agents", len(metadata))
        return [Agent(item, self._runtime) for item in metadata]


__all__ = ["AgentProvider"]
