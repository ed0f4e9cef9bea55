"""Vector index entity: search, ingest, lookup and count."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from aixplain_client.config import Credentials
from aixplain_client.domain import (
    IndexFilter,
    IndexSearchOutput,
    ModelMetadata,
    ModelOutput,
    Record,
    RecordDataType,
)
from aixplain_client.execution import ExecutionEngine, ModelRunParameters
from aixplain_client.inputs import InputPayload, InvalidInputError, LocalFile, RawRecord, url_input
from aixplain_client.transport import build_headers
from aixplain_client.uploads import mime_type_for

from .base import AssetRuntime
from .model import Model

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 10


class IndexModel(Model):
    """A model whose function is ``search``, backed by a vector store.

    Every operation is a model run carrying an ``action`` field. Searches
    decode into :class:`IndexSearchOutput`; the other actions read the plain
    model output.
    """

    def __init__(
        self,
        metadata: ModelMetadata,
        runtime: AssetRuntime[ModelOutput],
        search_engine: ExecutionEngine[IndexSearchOutput],
    ) -> None:
        super().__init__(metadata, runtime)
        self._search_engine = search_engine

    async def search(
        self,
        query: str,
        *,
        top_k: int = DEFAULT_TOP_K,
        filters: Sequence[IndexFilter] = (),
        parameters: ModelRunParameters | None = None,
    ) -> IndexSearchOutput:
        body = self._search_body(query, RecordDataType.TEXT, "", top_k, filters)
        return await self._run_search(body, parameters)

    async def search_image(
        self,
        image: str | Path,
        *,
        top_k: int = DEFAULT_TOP_K,
        filters: Sequence[IndexFilter] = (),
        parameters: ModelRunParameters | None = None,
    ) -> IndexSearchOutput:
        """Search by image; a local image is uploaded first."""

        source = LocalFile(image) if isinstance(image, Path) else url_input(image)
        name = source.path.name if isinstance(source, LocalFile) else urlsplit(source.uri).path
        if not mime_type_for(name).startswith("image/"):
            msg = f"Not an image: {image}"
            raise InvalidInputError(msg)
        credentials = self._runtime.store.snapshot()
        uri = await self._runtime.encoder.resolve(source, credentials=credentials)
        body = self._search_body("", RecordDataType.IMAGE, uri, top_k, filters)
        return await self._run_search(body, parameters, credentials=credentials)

    async def upsert(
        self,
        records: Iterable[Record],
        parameters: ModelRunParameters | None = None,
    ) -> bool:
        """Ingest ``records``; an existing document with the same id is replaced."""

        body = {"action": "ingest", "data": [record.to_payload() for record in records]}
        output = await self.run(RawRecord.from_json(body), parameters)
        return output.output == "success"

    async def get_document(
        self,
        document_id: str,
        parameters: ModelRunParameters | None = None,
    ) -> Record | None:
        output = await self.run({"action": "get_document", "data": document_id}, parameters)
        if not output.output:
            return None
        return Record.text(output.output, id=document_id)

    async def count(self, parameters: ModelRunParameters | None = None) -> int:
        """Number of documents in the index, or -1 if the answer is not numeric."""

        output = await self.run({"action": "count", "data": ""}, parameters)
        try:
            return int(output.output)
        except ValueError:
            logger.warning("Unexpected count output from index %s: %r", self.id, output.output)
            return -1

    @staticmethod
    def _search_body(
        data: str,
        data_type: RecordDataType,
        uri: str,
        top_k: int,
        filters: Sequence[IndexFilter],
    ) -> dict[str, Any]:
        return {
            "action": "search",
            "data": data,
            "data_type": data_type.value,
            "filters": [item.to_payload() for item in filters],
            "payload": {"uri": uri, "top_k": top_k, "value_type": data_type.value},
        }

    async def _run_search(
        self,
        body: Mapping[str, Any],
        parameters: ModelRunParameters | None,
        *,
        credentials: Credentials | None = None,
    ) -> IndexSearchOutput:
        params = parameters or ModelRunParameters()
        credentials = credentials or self._runtime.store.snapshot()
        headers = build_headers(credentials)
        url = self.run_url(credentials)
        payload = InputPayload(RawRecord.from_json(dict(body)).content)
        result = await self._search_engine.run(
            url,
            payload,
            headers=headers,
            polling=params.polling,
            network=params.network,
        )
        return result.unwrap()

    def __repr__(self) -> str:
        return f"IndexModel(id={self.id!r}, name={self.name!r})"


__all__ = ["DEFAULT_TOP_K", "IndexModel"]
