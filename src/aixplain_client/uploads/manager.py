"""Upload protocol: size check, pre-signed URL negotiation, PUT, S3 URI derivation."""

from __future__ import annotations

import asyncio
import json
import logging
import re
from pathlib import Path
from urllib.parse import unquote, urlsplit

from aixplain_client.config import Credentials, NetworkSettings
from aixplain_client.endpoints import Endpoint, backend_url, ensure_absolute
from aixplain_client.errors import InvalidURLError
from aixplain_client.transport import Transport, build_headers, expect_status, json_object

from .exceptions import (
    BucketNameNotFoundError,
    FileSizeExceedsLimitError,
    FileUploadError,
    PreSignedURLError,
)
from .limits import size_limit_for
from .models import UploadDescriptor

logger = logging.getLogger(__name__)

_BUCKET_PATTERN = re.compile(r"https://(.*?)\.s3\.amazonaws\.com")


def check_size(descriptor: UploadDescriptor) -> None:
    limit = size_limit_for(descriptor.mime_type)
    if descriptor.size_bytes > limit:
        raise FileSizeExceedsLimitError(str(descriptor.local_path), descriptor.size_bytes, limit)


def derive_s3_uri(presigned_url: str) -> str:
    """Rebuild ``s3://<bucket>/<key>`` from a virtual-hosted pre-signed URL."""

    match = _BUCKET_PATTERN.match(presigned_url)
    if match is None or not match.group(1):
        raise BucketNameNotFoundError(presigned_url)
    key = unquote(urlsplit(presigned_url).path).lstrip("/")
    return f"s3://{match.group(1)}/{key}"


class FileUploader:
    """Moves local files to platform storage.

    Every call performs a fresh upload; nothing is cached between calls.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        network: NetworkSettings | None = None,
    ) -> None:
        self._transport = transport
        self._network = network

    async def upload(self, descriptor: UploadDescriptor, *, credentials: Credentials) -> str:
        """Upload ``descriptor`` and return its ``s3://`` URI."""

        check_size(descriptor)
        upload_url = await self.negotiate_url(descriptor, credentials=credentials)
        content = await asyncio.to_thread(self._read_bytes, descriptor.local_path)
        response = await self._transport.put(
            upload_url,
            content=content,
            headers={"Content-Type": descriptor.mime_type},
            settings=self._network,
        )
        expect_status(response, 200)
        logger.info(
            "Uploaded %s to cloud storage",
            descriptor.original_name,
            extra={"mime_type": descriptor.mime_type, "size_bytes": descriptor.size_bytes},
        )
        return derive_s3_uri(upload_url)

    async def upload_path(
        self,
        path: Path | str,
        *,
        credentials: Credentials,
        temporary: bool = True,
        tags: dict[str, str] | None = None,
        license: str | None = None,
    ) -> str:
        descriptor = UploadDescriptor.from_path(
            path, temporary=temporary, tags=tags, license=license
        )
        return await self.upload(descriptor, credentials=credentials)

    async def negotiate_url(self, descriptor: UploadDescriptor, *, credentials: Credentials) -> str:
        headers = build_headers(credentials)
        url = backend_url(credentials, Endpoint.file_upload(temporary=descriptor.temporary))
        body = json.dumps(descriptor.negotiation_payload()).encode("utf-8")
        logger.debug("Requesting pre-signed URL for %s", descriptor.original_name)
        response = await self._transport.post(
            url, headers=headers, content=body, settings=self._network
        )
        expect_status(response, 200)
        payload = json_object(response)
        if payload is None:
            raise PreSignedURLError("The response body is not a JSON object.")
        upload_url = payload.get("uploadUrl")
        if not isinstance(upload_url, str) or not upload_url:
            raise PreSignedURLError("The response carries no uploadUrl.")
        try:
            return ensure_absolute(upload_url)
        except InvalidURLError as exc:
            raise PreSignedURLError(f"Malformed uploadUrl: {upload_url}") from exc

    @staticmethod
    def _read_bytes(path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            msg = f"Cannot read local file {path}"
            raise FileUploadError(msg) from exc


__all__ = ["FileUploader", "check_size", "derive_s3_uri"]
