"""Pipeline entity."""

from __future__ import annotations

from typing import Any

from aixplain_client.config import Credentials
from aixplain_client.domain import AssetKind, PipelineMetadata, PipelineOutput
from aixplain_client.endpoints import Endpoint, backend_url
from aixplain_client.execution import PipelineRunParameters

from .base import AssetRuntime, RunnableAsset


class Pipeline(RunnableAsset[PipelineOutput]):
    """A pipeline of connected nodes.

    A mapping input is keyed by input node label or number; a single value
    feeds the pipeline's only input node.
    """

    kind = AssetKind.PIPELINE

    def __init__(
        self,
        metadata: PipelineMetadata,
        runtime: AssetRuntime[PipelineOutput],
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
    def input_labels(self) -> tuple[str, ...]:
        return tuple(node.label for node in self.metadata.input_nodes)

    def run_url(self, credentials: Credentials) -> str:
        return backend_url(credentials, Endpoint.pipeline_run(self.id))

    async def run(
        self,
        value: Any,
        parameters: PipelineRunParameters | None = None,
    ) -> PipelineOutput:
        return await self._execute(value, parameters or PipelineRunParameters())

    def __repr__(self) -> str:
        return f"Pipeline(id={self.id!r}, name={self.name!r})"


__all__ = ["Pipeline"]
