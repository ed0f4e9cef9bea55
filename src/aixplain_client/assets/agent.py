"""Agent entity and the query-style run shared with team agents."""

from __future__ import annotations

from typing import Any

from aixplain_client.config import Credentials
from aixplain_client.domain import AgentMetadata, AgentOutput, AssetKind
from aixplain_client.endpoints import Endpoint, backend_url
from aixplain_client.execution import AgentRunParameters
from aixplain_client.inputs import QueryContent, TextInput, validate_query

from .base import AssetRuntime, RunnableAsset


class ConversationalAsset(RunnableAsset[AgentOutput]):
    """Assets that answer a query, optionally within a session."""

    async def run(
        self,
        value: Any,
        *,
        session_id: str | None = None,
        parameters: AgentRunParameters | None = None,
    ) -> AgentOutput:
        return await self._execute(
            value, parameters or AgentRunParameters(), session_id=session_id
        )

    async def run_query(
        self,
        query: str,
        *,
        content: QueryContent | None = None,
        session_id: str | None = None,
        parameters: AgentRunParameters | None = None,
    ) -> AgentOutput:
        """Run ``query`` after substituting ``content`` into its ``{{key}}`` placeholders.

        At most three content items are accepted. Local files among them are
        uploaded and replaced by their URI before substitution.
        """

        validate_query(query, content)
        credentials = self._runtime.store.snapshot()
        rendered = await self._runtime.encoder.render_query(
            query, content, credentials=credentials
        )
        return await self._execute(
            TextInput(rendered),
            parameters or AgentRunParameters(),
            session_id=session_id,
            credentials=credentials,
        )


class Agent(ConversationalAsset):
    kind = AssetKind.AGENT

    def __init__(self, metadata: AgentMetadata, runtime: AssetRuntime[AgentOutput]) -> None:
        super().__init__(runtime)
        self.metadata = metadata

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def name(self) -> str:
        return self.metadata.name

    def run_url(self, credentials: Credentials) -> str:
        return backend_url(credentials, Endpoint.agent_run(self.id))

    def __repr__(self) -> str:
        return f"Agent(id={self.id!r}, name={self.name!r})"


__all__ = ["Agent", "ConversationalAsset"]
