"""Async client for running aiXplain models, pipelines, agents and indexes."""

from .assets import Agent, IndexModel, Model, Pipeline, TeamAgent
from .config import Credentials, CredentialStore, NetworkSettings, credentials
from .container import ServiceContainer, build_container
from .errors import AiXplainError

__version__ = "0.1.0"

__all__ = [
    "Agent",
    "AiXplainError",
    "CredentialStore",
    "Credentials",
    "IndexModel",
    "Model",
    "NetworkSettings",
    "Pipeline",
    "ServiceContainer",
    "TeamAgent",
    "__version__",
    "build_container",
    "credentials",
]
