"""Closed set of input variants accepted by asset runs."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeAlias
from urllib.parse import urlsplit

from aixplain_client.domain import Record

from .exceptions import InputEncodingError, TypeNotRecognizedError

REMOTE_SCHEMES = frozenset({"s3", "http", "https"})


@dataclass(frozen=True, slots=True)
class TextInput:
    text: str


@dataclass(frozen=True, slots=True)
class RemoteURI:
    """A reference the platform can fetch by itself; never uploaded."""

    uri: str


@dataclass(frozen=True, slots=True)
class LocalFile:
    """A local file that must be uploaded before submission."""

    path: Path
    temporary: bool = True
    tags: Mapping[str, str] = field(default_factory=dict)
    license: str | None = None


KeyValue: TypeAlias = str | RemoteURI | LocalFile


@dataclass(frozen=True, slots=True)
class KeyValueInput:
    """Named inputs; pipelines treat keys as node ids."""

    values: Mapping[str, KeyValue]


@dataclass(frozen=True, slots=True)
class RawRecord:
    """Pre-serialised bytes sent without further transformation."""

    content: bytes

    @classmethod
    def from_json(cls, payload: Any) -> RawRecord:
        try:
            return cls(json.dumps(payload, ensure_ascii=False).encode("utf-8"))
        except (TypeError, ValueError) as exc:
            msg = f"Could not serialise record payload: {exc}"
            raise InputEncodingError(msg) from exc

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> RawRecord:
        return cls.from_json([record.to_payload() for record in records])


InputValue: TypeAlias = TextInput | RemoteURI | LocalFile | KeyValueInput | RawRecord


def is_remote_uri(value: str) -> bool:
    return urlsplit(value).scheme.lower() in REMOTE_SCHEMES


def url_input(value: str) -> RemoteURI | LocalFile:
    """Classify a URL-like string as remote or as a local path."""

    if is_remote_uri(value):
        return RemoteURI(value)
    parts = urlsplit(value)
    if parts.scheme == "file":
        return LocalFile(Path(parts.path))
    return LocalFile(Path(value))


def _key_value(value: Any) -> KeyValue:
    if isinstance(value, (str, RemoteURI, LocalFile)):
        return value
    if isinstance(value, Path):
        return LocalFile(value)
    raise TypeNotRecognizedError(value)


def as_input(value: Any) -> InputValue:
    """Coerce a plain Python value into an input variant.

    Strings are text, ``Path`` objects are local files, mappings become named
    inputs and records or bytes are passed through.
    """

    if isinstance(value, (TextInput, RemoteURI, LocalFile, KeyValueInput, RawRecord)):
        return value
    if isinstance(value, str):
        return TextInput(value)
    if isinstance(value, Path):
        return LocalFile(value)
    if isinstance(value, (bytes, bytearray)):
        return RawRecord(bytes(value))
    if isinstance(value, Record):
        return RawRecord.from_records([value])
    if isinstance(value, Mapping):
        return KeyValueInput({str(key): _key_value(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)) and all(isinstance(item, Record) for item in value):
        return RawRecord.from_records(value)
    raise TypeNotRecognizedError(value)


__all__ = [
    "REMOTE_SCHEMES",
    "InputValue",
    "KeyValue",
    "KeyValueInput",
    "LocalFile",
    "RawRecord",
    "RemoteURI",
    "TextInput",
    "as_input",
    "is_remote_uri",
    "url_input",
]
