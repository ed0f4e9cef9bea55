"""Hosted model entity."""

from __future__ import annotations

from typing import Any

from aixplain_client.config import Credentials
from aixplain_client.domain import AssetKind, ModelMetadata, ModelOutput
from aixplain_client.endpoints import model_run_url
from aixplain_client.execution import ModelRunParameters

from .base import AssetRuntime, RunnableAsset


class Model(RunnableAsset[ModelOutput]):
    """A hosted model; ``run`` submits one input and waits for the output."""

    kind = AssetKind.MODEL

    def __init__(self, metadata: ModelMetadata, runtime: AssetRuntime[ModelOutput]) -> None:
        super().__init__(runtime)
        self.metadata = metadata

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def name(self) -> str:
        return self.metadata.name

    def run_url(self, credentials: Credentials) -> str:
        return model_run_url(credentials, self.id)

    async def run(self, value: Any, parameters: ModelRunParameters | None = None) -> ModelOutput:
        return await self._execute(value, parameters or ModelRunParameters())

    def __repr__(self) -> str:
        return f"Model(id={self.id!r}, name={self.name!r})"


__all__ = ["Model"]
