"""Asset metadata returned by the platform catalog endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator

from .base import WireModel


class Supplier(WireModel):
    id: int | str | None = None
    name: str = "unknown"
    code: str = "unknown"


class Pricing(WireModel):
    price: float = 0.0
    unit_type: str | None = Field(default=None, alias="unitType")
    unit_scale: str | None = Field(default=None, alias="unitScale")


class License(WireModel):
    name: str
    identifier: str | None = None


class FunctionRef(WireModel):
    id: str
    name: str | None = None


class ModelParameter(WireModel):
    """Declared run parameter of a hosted model."""

    name: str
    required: bool = False
    is_fixed: bool = Field(default=False, alias="isFixed")
    values: tuple[Any, ...] = ()
    default_values: tuple[Any, ...] = Field(default=(), alias="defaultValues")
    available_options: tuple[str, ...] = Field(default=(), alias="availableOptions")
    data_type: str = Field(default="text", alias="dataType")
    data_sub_type: str | None = Field(default=None, alias="dataSubType")
    multiple_values: bool = Field(default=False, alias="multipleValues")


class ModelMetadata(WireModel):
    """Descriptive record of a hosted model."""

    id: str = ""
    name: str
    description: str = "An ML Model"
    supplier: Supplier = Field(default_factory=Supplier)
    version: str = "-"
    pricing: Pricing = Field(default_factory=Pricing)
    hosted_by: str = Field(default="", alias="hostedBy")
    developed_by: str = Field(default="", alias="developedBy")
    function: FunctionRef | None = None
    license: License | None = None
    parameters: tuple[ModelParameter, ...] = Field(default=(), alias="params")

    @field_validator("version", mode="before")
    @classmethod
    def flatten_version(cls, value: Any) -> Any:
        # The catalog nests the version as {"id": ...}
        if isinstance(value, dict):
            return value.get("id") or "-"
        return value if value is not None else "-"

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, value: Any) -> Any:
        return value or "An ML Model"


class PipelineNode(WireModel):
    number: int
    label: str
    type: str
    data_type: tuple[str, ...] = Field(default=(), alias="dataType")


class PipelineMetadata(WireModel):
    """Pipeline definition; only the input and output nodes are kept."""

    id: str = ""
    name: str = ""
    api_key: str | None = None
    input_nodes: tuple[PipelineNode, ...] = ()
    output_nodes: tuple[PipelineNode, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def split_nodes(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "nodes" not in data:
            return data
        nodes = data.get("nodes") or []
        subscription = data.get("subscription") or {}
        return {
            "id": subscription.get("id") or data.get("id") or "",
            "name": data.get("name") or "",
            "api_key": subscription.get("apiKey"),
            "input_nodes": [node for node in nodes if node.get("type") == "INPUT"],
            "output_nodes": [node for node in nodes if node.get("type") == "OUTPUT"],
        }


class AgentTool(WireModel):
    type: str | None = None
    asset_id: str | None = Field(default=None, alias="assetId")
    function: str | None = None
    supplier: Any = None
    description: str = ""


class AgentMetadata(WireModel):
    id: str
    name: str
    status: str = "draft"
    team_id: int | None = Field(default=None, alias="teamId")
    description: str | None = "No description"
    llm_id: str | None = Field(default=None, alias="llmId")
    instructions: str = ""
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    assets: tuple[AgentTool, ...] = ()

    @field_validator("instructions", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class TeamAgentMetadata(WireModel):
    id: str
    name: str
    agents: tuple[str, ...] = ()
    description: str | None = None
    llm_id: str | None = Field(default=None, validation_alias=AliasChoices("llmId", "llm_id"))
    status: str = "draft"
    supervisor_id: str | None = Field(
        default=None, validation_alias=AliasChoices("supervisorId", "supervisor_id")
    )
    planner_id: str | None = Field(
        default=None, validation_alias=AliasChoices("plannerId", "planner_id")
    )

    @field_validator("agents", mode="before")
    @classmethod
    def member_ids(cls, value: Any) -> Any:
        # Members come back as node records; only their asset ids are kept
        if not isinstance(value, list):
            return value
        return [item.get("assetId") if isinstance(item, dict) else item for item in value]


__all__ = [
    "AgentMetadata",
    "AgentTool",
    "FunctionRef",
    "License",
    "ModelMetadata",
    "ModelParameter",
    "PipelineMetadata",
    "PipelineNode",
    "Pricing",
    "Supplier",
    "TeamAgentMetadata",
]
