"""Pipeline catalog."""

from __future__ import annotations

import logging

from aixplain_client.assets import AssetRuntime, Pipeline
from aixplain_client.config import CredentialStore
from aixplain_client.domain import PipelineMetadata
from aixplain_client.endpoints import Endpoint
from aixplain_client.execution import PIPELINE_SCHEMA, ExecutionEngine
from aixplain_client.inputs import PayloadEncoder
from aixplain_client.transport import Transport

from .base import CatalogProvider, decode_metadata

logger = logging.getLogger(__name__)


class PipelineProvider(CatalogProvider):
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
            engine=ExecutionEngine(transport, PIPELINE_SCHEMA),
        )

    async def get(self, pipeline_id: str) -> Pipeline:
        payload = await self._get_json(Endpoint.pipeline(pipeline_id))
        metadata = decode_metadata(payload, PipelineMetadata.model_validate, label="pipeline")
        if not metadata.id:
            metadata = metadata.model_copy(update={"id": pipeline_id})
        logger.info("Fetched pipeline %s", metadata.name, extra={"pipeline_id": metadata.id})
        return Pipeline(metadata, self._runtime)


__all__ = ["PipelineProvider"]
