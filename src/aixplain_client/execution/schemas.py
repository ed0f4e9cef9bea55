"""Per-asset submit and terminal response shapes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from aixplain_client.domain import (
    AgentOutput,
    IndexSearchOutput,
    ModelOutput,
    PipelineOutput,
)

T = TypeVar("T")

Body = dict[str, Any]


def _string_field(name: str) -> Callable[[Body], str | None]:
    def locate(body: Body) -> str | None:
        value = body.get(name)
        return value if isinstance(value, str) and value else None

    return locate


@dataclass(frozen=True, slots=True)
class ResponseSchema(Generic[T]):
    """How one asset kind answers a submit and a completed poll.

    ``locate_handle`` pulls the polling URL out of a submit body.
    ``decode_output`` turns a completed polling body into ``T``.
    When ``inline_output`` is set, a submit body with ``completed: true``
    already carries the result and no polling happens.
    """

    name: str
    locate_handle: Callable[[Body], str | None]
    decode_output: Callable[[Body], T]
    success_status: int = 201
    inline_output: bool = False


MODEL_SCHEMA: ResponseSchema[ModelOutput] = ResponseSchema(
    name="model",
    locate_handle=_string_field("data"),
    decode_output=ModelOutput.model_validate,
    inline_output=True,
)

PIPELINE_SCHEMA: ResponseSchema[PipelineOutput] = ResponseSchema(
    name="pipeline",
    locate_handle=_string_field("url"),
    decode_output=PipelineOutput.from_body,
)

AGENT_SCHEMA: ResponseSchema[AgentOutput] = ResponseSchema(
    name="agent",
    locate_handle=_string_field("data"),
    decode_output=AgentOutput.model_validate,
)

INDEX_SEARCH_SCHEMA: ResponseSchema[IndexSearchOutput] = ResponseSchema(
    name="index",
    locate_handle=_string_field("data"),
    decode_output=IndexSearchOutput.model_validate,
)


__all__ = [
    "AGENT_SCHEMA",
    "INDEX_SEARCH_SCHEMA",
    "MODEL_SCHEMA",
    "PIPELINE_SCHEMA",
    "ResponseSchema",
]
