"""Model catalog: fetch, paginate and list functions."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import Field

from aixplain_client.assets import AssetRuntime, Model
from aixplain_client.config import CredentialStore
from aixplain_client.domain import DomainModel, FunctionList, ModelMetadata, ModelOutput
from aixplain_client.endpoints import Endpoint
from aixplain_client.execution import MODEL_SCHEMA, ExecutionEngine
from aixplain_client.inputs import PayloadEncoder
from aixplain_client.transport import Transport

from .base import CatalogProvider, decode_items, decode_metadata

logger = logging.getLogger(__name__)


class ModelQuery(DomainModel):
    """Filter for the paginated model catalog."""

    query: str | None = None
    page_number: int = Field(default=0, ge=0)
    page_size: int = Field(default=20, ge=1)
    functions: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        body: dict[str, Any] = {"pageNumber": self.page_number, "pageSize": self.page_size}
        if self.functions:
            body["functions"] = list(self.functions)
        if self.query is not None:
            body["q"] = self.query
        return body


class ModelProvider(CatalogProvider):
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
            engine=ExecutionEngine(transport, MODEL_SCHEMA),
        )

    @property
    def runtime(self) -> AssetRuntime[ModelOutput]:
        return self._runtime

    async def get_metadata(self, model_id: str) -> ModelMetadata:
        payload = await self._get_json(Endpoint.model(model_id))
        metadata = decode_metadata(payload, ModelMetadata.model_validate, label="model")
        if not metadata.id:
            metadata = metadata.model_copy(update={"id": model_id})
        logger.info("Fetched model %s", metadata.name, extra={"model_id": metadata.id})
        return metadata

    async def get(self, model_id: str) -> Model:
        return Model(await self.get_metadata(model_id), self._runtime)

    async def list(self, query: ModelQuery | None = None) -> Sequence[Model]:
        body = (query or ModelQuery()).to_payload()
        payload = await self._post_json(Endpoint.PAGINATE_MODELS, body)
        items = payload.get("items") if isinstance(payload, dict) else None
        metadata = decode_items(items or [], ModelMetadata.model_validate, label="model")
        return [Model(item, self._runtime) for item in metadata]

    async def list_functions(self) -> FunctionList:
        payload = await self._get_json(Endpoint.FUNCTIONS)
        return decode_metadata(payload, FunctionList.model_validate, label="function list")


__all__ = ["ModelProvider", "ModelQuery"]
