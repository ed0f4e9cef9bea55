"""Polling configuration, execution handles and tagged run outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeAlias, TypeVar

from pydantic import Field, field_validator

from aixplain_client.domain import DomainModel

from .exceptions import PollingTimeoutError, SupplierError

MIN_WAIT_INTERVAL_SECONDS = 0.2

T = TypeVar("T")


class PollingConfig(DomainModel):
    """Pace and budget of a polling loop; the interval never drops below 0.2s."""

    wait_interval: float = 0.5
    max_attempts: int = Field(default=300, ge=1)

    @field_validator("wait_interval", mode="after")
    @classmethod
    def clamp_interval(cls, value: float) -> float:
        return max(MIN_WAIT_INTERVAL_SECONDS, value)


class ExecutionHandle(DomainModel):
    """URL returned by a submit call and polled until a terminal state."""

    url: str


@dataclass(frozen=True, slots=True)
class Completed(Generic[T]):
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class SupplierFailed:
    reason: str

    def unwrap(self) -> NoReturn:
        raise SupplierError(self.reason)


@dataclass(frozen=True, slots=True)
class TimedOut:
    handle: ExecutionHandle

    def unwrap(self) -> NoReturn:
        raise PollingTimeoutError(self.handle)


ExecutionResult: TypeAlias = Completed[T] | SupplierFailed | TimedOut


__all__ = [
    "MIN_WAIT_INTERVAL_SECONDS",
    "Completed",
    "ExecutionHandle",
    "ExecutionResult",
    "PollingConfig",
    "SupplierFailed",
    "TimedOut",
]
