"""Authentication headers derived from a credential snapshot."""

from __future__ import annotations

from aixplain_client.config import Credentials
from aixplain_client.errors import MissingAPIKeyError

JSON_CONTENT_TYPE = "application/json"


def build_headers(credentials: Credentials) -> dict[str, str]:
    """Return auth headers for platform calls; the team key wins over the aiXplain key."""

    if credentials.team_api_key:
        return {
            "Authorization": f"Token {credentials.team_api_key}",
            "Content-Type": JSON_CONTENT_TYPE,
        }
    if credentials.aixplain_api_key:
        return {
            "x-aixplain-key": credentials.aixplain_api_key,
            "Content-Type": JSON_CONTENT_TYPE,
        }
    raise MissingAPIKeyError()


__all__ = ["JSON_CONTENT_TYPE", "build_headers"]
