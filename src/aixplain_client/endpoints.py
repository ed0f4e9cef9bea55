"""Platform endpoint paths and absolute URL construction."""

from __future__ import annotations

from urllib.parse import quote, urlsplit

from aixplain_client.config import Credentials
from aixplain_client.errors import InvalidURLError, MissingURLError


class Endpoint:
    """Paths relative to the backend base URL."""

    FUNCTIONS = "/sdk/functions"
    PAGINATE_MODELS = "/sdk/models/paginate"
    AGENTS = "/sdk/agents"
    TEAM_AGENTS = "/sdk/agent-communities"
    TEMPORARY_UPLOAD = "/sdk/file/upload/temp-url"
    PERMANENT_UPLOAD = "/sdk/file/upload-url"

    @staticmethod
    def model(model_id: str) -> str:
        return f"/sdk/models/{quote(model_id, safe='')}"

    @staticmethod
    def pipeline(pipeline_id: str) -> str:
        return f"/sdk/pipelines/{quote(pipeline_id, safe='')}"

    @staticmethod
    def pipeline_run(pipeline_id: str) -> str:
        return f"/assets/pipeline/execution/run/{quote(pipeline_id, safe='')}"

    @staticmethod
    def agent(agent_id: str) -> str:
        return f"{Endpoint.AGENTS}/{quote(agent_id, safe='')}"

    @staticmethod
    def agent_run(agent_id: str) -> str:
        return f"{Endpoint.agent(agent_id)}/run"

    @staticmethod
    def team_agent(team_agent_id: str) -> str:
        return f"{Endpoint.TEAM_AGENTS}/{quote(team_agent_id, safe='')}"

    @staticmethod
    def team_agent_run(team_agent_id: str) -> str:
        return f"{Endpoint.team_agent(team_agent_id)}/run"

    @staticmethod
    def file_upload(*, temporary: bool) -> str:
        return Endpoint.TEMPORARY_UPLOAD if temporary else Endpoint.PERMANENT_UPLOAD


def ensure_absolute(url: str) -> str:
    """Return ``url`` unchanged if it is an absolute http(s) URL."""

    parts = urlsplit(url)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise InvalidURLError(url)
    return url


def backend_url(credentials: Credentials, path: str) -> str:
    if not credentials.backend_url:
        raise MissingURLError("BACKEND_URL")
    return ensure_absolute(credentials.backend_url.rstrip("/") + path)


def model_run_url(credentials: Credentials, asset_id: str) -> str:
    if not credentials.models_run_url:
        raise MissingURLError("MODELS_RUN_URL")
    base = credentials.models_run_url.rstrip("/")
    return ensure_absolute(f"{base}/{quote(asset_id, safe='')}")


__all__ = ["Endpoint", "backend_url", "ensure_absolute", "model_run_url"]
