"""Core base classes for domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable client-side value with strict validation."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)


class WireModel(BaseModel):
    """Immutable view over a platform response.

    Unknown keys are ignored and fields may be populated by either their
    Python name or their wire alias.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
