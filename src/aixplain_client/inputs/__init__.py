"""Input variants and payload encoding."""

from .encoder import InputPayload, PayloadEncoder
from .exceptions import (
    InputEncodingError,
    InputError,
    InvalidInputError,
    TypeNotRecognizedError,
)
from .models import (
    InputValue,
    KeyValue,
    KeyValueInput,
    LocalFile,
    RawRecord,
    RemoteURI,
    TextInput,
    as_input,
    is_remote_uri,
    url_input,
)
from .templating import MAX_CONTENT_ITEMS, QueryContent, substitute, validate_query

__all__ = [
    "MAX_CONTENT_ITEMS",
    "InputEncodingError",
    "InputError",
    "InputPayload",
    "InputValue",
    "InvalidInputError",
    "KeyValue",
    "KeyValueInput",
    "LocalFile",
    "PayloadEncoder",
    "QueryContent",
    "RawRecord",
    "RemoteURI",
    "TextInput",
    "TypeNotRecognizedError",
    "as_input",
    "is_remote_uri",
    "substitute",
    "url_input",
    "validate_query",
]
