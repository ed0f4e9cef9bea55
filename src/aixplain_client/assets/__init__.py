"""Runnable asset entities."""

from .agent import Agent, ConversationalAsset
from .base import AssetRuntime, RunnableAsset
from .exceptions import IndexOperationError
from .index import DEFAULT_TOP_K, IndexModel
from .model import Model
from .pipeline import Pipeline
from .team_agent import TeamAgent

__all__ = [
    "DEFAULT_TOP_K",
    "Agent",
    "AssetRuntime",
    "ConversationalAsset",
    "IndexModel",
    "IndexOperationError",
    "Model",
    "Pipeline",
    "RunnableAsset",
    "TeamAgent",
]
