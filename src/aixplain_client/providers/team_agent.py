"""Team agent catalog."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from aixplain_client.assets import AssetRuntime, TeamAgent
from aixplain_client.config import CredentialStore
from aixplain_client.domain import TeamAgentMetadata
from aixplain_client.endpoints import Endpoint
from aixplain_client.execution import AGENT_SCHEMA, ExecutionEngine
from aixplain_client.inputs import PayloadEncoder
from aixplain_client.transport import Transport

from .base import CatalogProvider, decode_items, decode_metadata

logger = logging.getLogger(__name__)


class TeamAgentProvider(CatalogProvider):
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

    async def get(self, team_agent_id: str) -> TeamAgent:
        payload = await self._get_json(Endpoint.team_agent(team_agent_id))
        metadata = decode_metadata(payload, TeamAgentMetadata.model_validate, label="team agent")
        if not metadata.id:
            metadata = metadata.model_copy(update={"id": team_agent_id})
        logger.info("Fetched team agent %s", metadata.name, extra={"team_agent_id": metadata.id})
        return TeamAgent(metadata, self._runtime)

    async def list(self) -> Sequence[TeamAgent]:
        payload = await self._get_json(Endpoint.TEAM_AGENTS)
        items = payload if isinstance(payload, list) else []
        metadata = decode_items(items, TeamAgentMetadata.model_validate, label="team agent")
        return [TeamAgent(item, self._runtime) for item in metadata]


__all__ = ["TeamAgentProvider"]
