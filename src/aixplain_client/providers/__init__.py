"""Asset catalogs; each provider owns the engine bound to its response schema."""

from .agent import AgentProvider
from .base import CatalogProvider
from .index import SEARCH_FUNCTION_ID, IndexProvider
from .model import ModelProvider, ModelQuery
from .pipeline import PipelineProvider
from .team_agent import TeamAgentProvider

__all__ = [
    "SEARCH_FUNCTION_ID",
    "AgentProvider",
    "CatalogProvider",
    "IndexProvider",
    "ModelProvider",
    "ModelQuery",
    "PipelineProvider",
    "TeamAgentProvider",
]
