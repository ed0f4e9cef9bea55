"""``{{key}}`` placeholder substitution for agent queries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeAlias

from .exceptions import InvalidInputError
from .models import KeyValue

MAX_CONTENT_ITEMS = 3

QueryContent: TypeAlias = Mapping[str, KeyValue] | Sequence[KeyValue]


def validate_query(query: str, content: QueryContent | None) -> None:
    """Fail fast on input the platform would reject, before any upload or submit."""

    if not query or not query.strip():
        msg = "The query must not be empty."
        raise InvalidInputError(msg)
    if isinstance(content, str):
        content = [content]
    if content is not None and len(content) > MAX_CONTENT_ITEMS:
        msg = (
            f"Only up to {MAX_CONTENT_ITEMS} content inputs are allowed; "
            f"got {len(content)}."
        )
        raise InvalidInputError(msg)


def substitute(query: str, content: Mapping[str, str] | Sequence[str]) -> str:
    """Replace ``{{key}}`` placeholders with their values.

    A value whose placeholder does not occur in the query is appended to it,
    separated by a space. Sequence content has no keys and is always appended.
    """

    result = query
    if isinstance(content, str):
        content = [content]
    if isinstance(content, Mapping):
        for key, value in content.items():
            placeholder = "{{" + str(key) + "}}"
            if placeholder in result:
                result = result.replace(placeholder, value)
            else:
                result = f"{result} {value}"
    else:
        for value in content:
            result = f"{result} {value}"
    return result.strip()


__all__ = ["MAX_CONTENT_ITEMS", "QueryContent", "substitute", "validate_query"]
