"""Typed results decoded from terminal polling responses."""

from __future__ import annotations

import json
from typing import Any

from pydantic import Field, field_validator

from .base import WireModel


def _as_text(value: Any) -> Any:
    # Some suppliers return structured data where text is expected
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


class ModelOutput(WireModel):
    """Terminal result of a model run."""

    output: str = Field(alias="data")
    stdout: str | None = None
    stderr: str | None = None
    used_credits: float = Field(default=0.0, alias="usedCredits")
    run_time: float = Field(default=0.0, alias="runTime")

    @field_validator("output", mode="before")
    @classmethod
    def coerce_output(cls, value: Any) -> Any:
        return _as_text(value)


class PipelineOutput(WireModel):
    """Terminal result of a pipeline run.

    Pipelines return heterogeneous ``data`` payloads, so the decoded body is
    kept verbatim next to the accounting fields.
    """

    raw: dict[str, Any] = Field(default_factory=dict)
    data: Any = None
    used_credits: float = 0.0
    elapsed_time: float = 0.0

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> PipelineOutput:
        return cls(
            raw=body,
            data=body.get("data"),
            used_credits=body.get("used_credits") or 0.0,
            elapsed_time=body.get("elapsed_time") or 0.0,
        )


class ToolStep(WireModel):
    tool: str
    input: str | None = None
    output: str | None = None
    run_time: float | None = Field(default=None, alias="runTime")
    used_credits: float | None = Field(default=None, alias="usedCredits")

    @field_validator("input", "output", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class IntermediateStep(WireModel):
    agent: str
    input: str | None = None
    output: str | None = None
    tool_steps: tuple[ToolStep, ...] | None = None
    thought: str | None = None
    run_time: float = Field(default=0.0, alias="runTime")
    used_credits: float = Field(default=0.0, alias="usedCredits")

    @field_validator("input", "output", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class AgentResponseData(WireModel):
    input: str
    output: str
    session_id: str | None = None
    intermediate_steps: tuple[IntermediateStep, ...] = ()

    @field_validator("input", "output", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class AgentOutput(WireModel):
    """Terminal result of an agent or team agent run."""

    completed: bool
    status: str
    data: AgentResponseData


class SearchDetail(WireModel):
    score: float
    data: str
    document: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class IndexSearchOutput(WireModel):
    """Terminal result of an index search."""

    details: tuple[SearchDetail, ...] = ()
    status: str
    completed: bool
    data: str = ""
    run_time: float = Field(default=0.0, alias="runTime")
    used_credits: float = Field(default=0.0, alias="usedCredits")


class FunctionInfo(WireModel):
    id: str
    name: str


class FunctionList(WireModel):
    results: tuple[FunctionInfo, ...] = ()


__all__ = [
    "AgentOutput",
    "AgentResponseData",
    "FunctionInfo",
    "FunctionList",
    "IndexSearchOutput",
    "IntermediateStep",
    "ModelOutput",
    "PipelineOutput",
    "SearchDetail",
    "ToolStep",
]
