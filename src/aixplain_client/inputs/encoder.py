"""Conversion of input variants into submit payloads."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import unquote

from aixplain_client.config import Credentials
from aixplain_client.domain import AssetKind
from aixplain_client.transport import JSON_CONTENT_TYPE
from aixplain_client.uploads import FileUploader, UploadDescriptor

from .exceptions import InputEncodingError, TypeNotRecognizedError
from .models import (
    InputValue,
    KeyValue,
    KeyValueInput,
    LocalFile,
    RawRecord,
    RemoteURI,
    TextInput,
)
from .templating import QueryContent, substitute, validate_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InputPayload:
    """Encoded submit body and the content headers it declares."""

    content: bytes
    headers: Mapping[str, str] = field(
        default_factory=lambda: {"Content-Type": JSON_CONTENT_TYPE}
    )

    def json(self) -> Any:
        return json.loads(self.content)


class PayloadEncoder:
    """Maps each input variant to the wire shape of the target asset kind.

    Local files are uploaded through ``uploader`` and replaced by their
    ``s3://`` URI. The caller's value is never modified; every call builds
    fresh containers.
    """

    def __init__(self, uploader: FileUploader) -> None:
        self._uploader = uploader

    async def encode(
        self,
        value: InputValue,
        kind: AssetKind,
        *,
        credentials: Credentials,
        parameters: Mapping[str, str] | None = None,
        session_id: str | None = None,
    ) -> InputPayload:
        match value:
            case RawRecord(content=content):
                return InputPayload(content)
            case TextInput(text=text):
                body = self._single(kind, text, parameters, session_id)
            case RemoteURI() | LocalFile():
                resolved = await self.resolve(value, credentials=credentials)
                body = self._single(kind, resolved, parameters, session_id)
            case KeyValueInput(values=values):
                resolved_values: dict[str, str] = {}
                for key, item in values.items():
                    resolved = await self.resolve(item, credentials=credentials)
                    # Only URL values are percent-decoded; typed text goes out as given
                    if kind is AssetKind.PIPELINE and not isinstance(item, str):
                        resolved = unquote(resolved)
                    resolved_values[key] = resolved
                body = self._named(kind, resolved_values, parameters, session_id)
            case _:
                raise TypeNotRecognizedError(value)
        return InputPayload(self._dump(body))

    async def resolve(self, value: KeyValue, *, credentials: Credentials) -> str:
        """Return the string the platform should receive for ``value``."""

        match value:
            case str():
                return value
            case RemoteURI(uri=uri):
                return uri
            case LocalFile():
                descriptor = UploadDescriptor.from_path(
                    value.path,
                    temporary=value.temporary,
                    tags=value.tags,
                    license=value.license,
                )
                return await self._uploader.upload(descriptor, credentials=credentials)
            case _:
                raise TypeNotRecognizedError(value)

    async def render_query(
        self,
        query: str,
        content: QueryContent | None,
        *,
        credentials: Credentials,
    ) -> str:
        """Validate, upload and substitute ``content`` into an agent query."""

        validate_query(query, content)
        if not content:
            return query.strip()
        if isinstance(content, str):
            content = [content]
        if isinstance(content, Mapping):
            resolved: Mapping[str, str] | list[str] = {
                key: await self.resolve(item, credentials=credentials)
                for key, item in content.items()
            }
        else:
            resolved = [await self.resolve(item, credentials=credentials) for item in content]
        return substitute(query, resolved)

    @staticmethod
    def _single(
        kind: AssetKind,
        data: str,
        parameters: Mapping[str, str] | None,
        session_id: str | None,
    ) -> dict[str, Any]:
        key = "query" if kind.uses_query_key else "data"
        body: dict[str, Any] = {key: data}
        body.update(parameters or {})
        if session_id:
            body["sessionId"] = session_id
        return body

    @staticmethod
    def _named(
        kind: AssetKind,
        values: Mapping[str, str],
        parameters: Mapping[str, str] | None,
        session_id: str | None,
    ) -> dict[str, Any]:
        if kind is AssetKind.PIPELINE:
            return {
                "data": [
                    {"nodeId": key, "value": value} for key, value in values.items()
                ]
            }
        body: dict[str, Any] = dict(parameters or {})
        if session_id:
            body["sessionId"] = session_id
        body.update(values)
        return body

    @staticmethod
    def _dump(body: dict[str, Any]) -> bytes:
        try:
            return json.dumps(body, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            logger.error("Payload serialisation failed: %s", exc)
            msg = f"Could not encode the input payload: {exc}"
            raise InputEncodingError(msg) from exc


__all__ = ["InputPayload", "PayloadEncoder"]
