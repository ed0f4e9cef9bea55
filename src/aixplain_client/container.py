"""Service container wiring the client components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from aixplain_client.config import CredentialStore, NetworkSettings
from aixplain_client.config import credentials as default_store
from aixplain_client.inputs import PayloadEncoder
from aixplain_client.providers import (
    AgentProvider,
    IndexProvider,
    ModelProvider,
    PipelineProvider,
    TeamAgentProvider,
)
from aixplain_client.transport import Transport
from aixplain_client.uploads import FileUploader

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the providers and their shared collaborators."""

    store: CredentialStore
    network: NetworkSettings
    transport: Transport
    uploader: FileUploader
    encoder: PayloadEncoder
    models: ModelProvider
    pipelines: PipelineProvider
    agents: AgentProvider
    team_agents: TeamAgentProvider
    indexes: IndexProvider


def build_container(
    store: CredentialStore | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    network: NetworkSettings | None = None,
) -> ServiceContainer:
    """Construct the primary service container.

    ``client`` is shared by every call when given; otherwise each request
    opens its own ``httpx.AsyncClient``.
    """

    resolved_store = store or default_store
    resolved_network = network or NetworkSettings()
    transport = Transport(client=client, settings=resolved_network)
    uploader = FileUploader(transport)
    encoder = PayloadEncoder(uploader)
    models = ModelProvider(transport, resolved_store, encoder)

    logger.debug(
        "Built service container",
        extra={
            "timeout_seconds": resolved_network.timeout_seconds,
            "max_retries": resolved_network.max_retries,
        },
    )
    return ServiceContainer(
        store=resolved_store,
        network=resolved_network,
        transport=transport,
        uploader=uploader,
        encoder=encoder,
        models=models,
        pipelines=PipelineProvider(transport, resolved_store, encoder),
        agents=AgentProvider(transport, resolved_store, encoder),
        team_agents=TeamAgentProvider(transport, resolved_store, encoder),
        indexes=IndexProvider(transport, models),
    )


__all__ = ["ServiceContainer", "build_container"]
