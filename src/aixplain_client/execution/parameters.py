"""Per-asset run parameters."""

from __future__ import annotations

import json
from typing import Any

from pydantic import Field

from aixplain_client.config import NetworkSettings
from aixplain_client.domain import DomainModel

from .models import PollingConfig


class ModelRunParameters(DomainModel):
    polling_wait_seconds: float = Field(default=0.5, ge=0)
    max_polling_retries: int = Field(default=300, ge=1)
    network_timeout_seconds: float = Field(default=10.0, gt=0)
    max_network_retries: int = Field(default=2, ge=0)

    @property
    def polling(self) -> PollingConfig:
        return PollingConfig(
            wait_interval=self.polling_wait_seconds,
            max_attempts=self.max_polling_retries,
        )

    @property
    def network(self) -> NetworkSettings:
        return NetworkSettings(
            timeout_seconds=self.network_timeout_seconds,
            max_retries=self.max_network_retries,
        )

    def payload_fields(self) -> dict[str, str]:
        """Top-level string fields merged into the submit body."""

        return {}


class PipelineRunParameters(ModelRunParameters):
    pass


class AgentRunParameters(ModelRunParameters):
    """Run parameters for agents and team agents.

    The agent-specific values travel as top-level string fields of the
    submit body; unset values are left out.
    """

    history: list[dict[str, str]] | None = None
    name: str = "model_process"
    timeout: float = 300.0
    parameters: dict[str, Any] | None = None
    max_tokens: int = 2500
    max_iterations: int = 10

    def payload_fields(self) -> dict[str, str]:
        fields = {
            "name": self.name,
            "timeout": str(self.timeout),
            "max_tokens": str(self.max_tokens),
            "max_iterations": str(self.max_iterations),
        }
        if self.history is not None:
            fields["history"] = json.dumps(self.history)
        if self.parameters is not None:
            fields["parameters"] = json.dumps(self.parameters)
        return fields


__all__ = ["AgentRunParameters", "ModelRunParameters", "PipelineRunParameters"]
