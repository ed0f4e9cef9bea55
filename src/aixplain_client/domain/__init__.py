"""Domain models shared by the execution core and the asset entities."""

from .assets import (
    AgentMetadata,
    AgentTool,
    FunctionRef,
    License,
    ModelMetadata,
    ModelParameter,
    PipelineMetadata,
    PipelineNode,
    Pricing,
    Supplier,
    TeamAgentMetadata,
)
from .base import DomainModel, WireModel
from .enums import AssetKind, EmbeddingModel, IndexEngine, IndexFieldOperator, RecordDataType
from .outputs import (
    AgentOutput,
    AgentResponseData,
    FunctionInfo,
    FunctionList,
    IndexSearchOutput,
    IntermediateStep,
    ModelOutput,
    PipelineOutput,
    SearchDetail,
    ToolStep,
)
from .records import IndexFilter, Record

__all__ = [
    "AgentMetadata",
    "AgentOutput",
    "AgentResponseData",
    "AgentTool",
    "AssetKind",
    "DomainModel",
    "EmbeddingModel",
    "FunctionInfo",
    "FunctionList",
    "FunctionRef",
    "IndexEngine",
    "IndexFieldOperator",
    "IndexFilter",
    "IndexSearchOutput",
    "IntermediateStep",
    "License",
    "ModelMetadata",
    "ModelOutput",
    "ModelParameter",
    "PipelineMetadata",
    "PipelineNode",
    "PipelineOutput",
    "Pricing",
    "Record",
    "RecordDataType",
    "SearchDetail",
    "Supplier",
    "TeamAgentMetadata",
    "ToolStep",
    "WireModel",
]
