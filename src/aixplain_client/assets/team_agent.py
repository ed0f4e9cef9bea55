"""Team agent entity."""

from __future__ import annotations

from aixplain_client.config import Credentials
from aixplain_client.domain import AgentOutput, AssetKind, TeamAgentMetadata
from aixplain_client.endpoints import Endpoint, backend_url

from .agent import ConversationalAsset
from .base import AssetRuntime


class TeamAgent(ConversationalAsset):
    """A supervised group of agents addressed as one."""

    kind = AssetKind.TEAM_AGENT

    def __init__(
        self,
        metadata: TeamAgentMetadata,
        runtime: AssetRuntime[AgentOutput],
    ) -> None:
        super().__init__(runtime)
        self.metadata = metadata

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def member_ids(self) -> tuple[str, ...]:
        return self.metadata.agents

    def run_url(self, credentials: Credentials) -> str:
        return backend_url(credentials, Endpoint.team_agent_run(self.id))

    def __repr__(self) -> str:
        return f"TeamAgent(id={self.id!r}, name={self.name!r})"


__all__ = ["TeamAgent"]
