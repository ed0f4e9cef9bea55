"""HTTP transport and authentication headers."""

from .exceptions import MaxRetriesReachedError, TransportError, UnexpectedStatusError
from .headers import JSON_CONTENT_TYPE, build_headers
from .http import Transport, expect_status, json_object

__all__ = [
    "JSON_CONTENT_TYPE",
    "MaxRetriesReachedError",
    "Transport",
    "TransportError",
    "UnexpectedStatusError",
    "build_headers",
    "expect_status",
    "json_object",
]
