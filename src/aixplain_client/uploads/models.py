"""Descriptors consumed by the upload protocol."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import Field

from aixplain_client.domain import DomainModel

from .exceptions import FileUploadError
from .limits import mime_type_for


class UploadDescriptor(DomainModel):
    """A local file about to be uploaded; discarded once its remote URI is known."""

    local_path: Path
    mime_type: str
    size_bytes: int = Field(ge=0)
    temporary: bool = True
    tags: dict[str, str] = Field(default_factory=dict)
    license: str | None = None

    @classmethod
    def from_path(
        cls,
        path: Path | str,
        *,
        temporary: bool = True,
        tags: Mapping[str, str] | None = None,
        license: str | None = None,
    ) -> UploadDescriptor:
        local_path = Path(path).expanduser()
        try:
            size = local_path.stat().st_size
        except OSError as exc:
            msg = f"Cannot read local file {local_path}"
            raise FileUploadError(msg) from exc
        return cls(
            local_path=local_path,
            mime_type=mime_type_for(local_path),
            size_bytes=size,
            temporary=temporary,
            tags=dict(tags or {}),
            license=license,
        )

    @property
    def original_name(self) -> str:
        return self.local_path.name

    def negotiation_payload(self) -> dict[str, str]:
        """JSON body sent to the pre-signed URL endpoint."""

        payload = {"contentType": self.mime_type, "originalName": self.original_name}
        if not self.temporary:
            payload["tags"] = "\n".join(f"{key},{value}" for key, value in self.tags.items())
            payload["license"] = self.license or ""
        return payload


__all__ = ["UploadDescriptor"]
