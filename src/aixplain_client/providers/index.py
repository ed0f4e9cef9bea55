"""Index lookup and creation."""

from __future__ import annotations

import logging

from aixplain_client.assets import IndexModel, IndexOperationError
from aixplain_client.domain import EmbeddingModel, IndexEngine
from aixplain_client.errors import AiXplainError, ConfigurationError
from aixplain_client.execution import INDEX_SEARCH_SCHEMA, ExecutionEngine
from aixplain_client.transport import Transport

from .model import ModelProvider

logger = logging.getLogger(__name__)

SEARCH_FUNCTION_ID = "search"


class IndexProvider:
    """Indexes are models with the ``search`` function; creation runs an indexing engine."""

    def __init__(self, transport: Transport, models: ModelProvider) -> None:
        self._models = models
        self._search_engine = ExecutionEngine(transport, INDEX_SEARCH_SCHEMA)

    async def get(self, index_id: str) -> IndexModel:
        metadata = await self._models.get_metadata(index_id)
        function_id = metadata.function.id if metadata.function else None
        if function_id != SEARCH_FUNCTION_ID:
            raise IndexOperationError("The provided ID does not correspond to an index model.")
        return IndexModel(metadata, self._models.runtime, self._search_engine)

    async def create(
        self,
        name: str,
        description: str,
        *,
        embedding: EmbeddingModel = EmbeddingModel.OPENAI_ADA002,
        engine: IndexEngine = IndexEngine.AIR,
    ) -> IndexModel:
        try:
            engine_model = await self._models.get(engine.value)
            output = await engine_model.run(
                {"data": name, "description": description, "model": embedding.value}
            )
            index = await self.get(output.output)
        except (IndexOperationError, ConfigurationError):
            raise
        except AiXplainError as exc:
            raise IndexOperationError(str(exc)) from exc
        logger.info("Created index %s", name, extra={"index_id": index.id})
        return index


__all__ = ["SEARCH_FUNCTION_ID", "IndexProvider"]
