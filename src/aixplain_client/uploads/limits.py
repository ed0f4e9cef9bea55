"""MIME detection and per-category upload size ceilings."""

from __future__ import annotations

import mimetypes
from enum import StrEnum
from pathlib import Path

DEFAULT_MIME_TYPE = "application/octet-stream"

_MB25 = 26_214_400
_MB50 = 52_428_800
_MB300 = 314_572_800


class FileCategory(StrEnum):
    """Top-level MIME categories with distinct size ceilings."""

    AUDIO = "audio"
    APPLICATION = "application"
    VIDEO = "video"
    IMAGE = "image"
    OTHER = "other"

    @property
    def limit_bytes(self) -> int:
        return _LIMITS[self]

    @classmethod
    def for_mime_type(cls, mime_type: str) -> FileCategory:
        top_level = mime_type.split("/", 1)[0].strip().lower()
        try:
            return cls(top_level)
        except ValueError:
            return cls.OTHER


_LIMITS = {
    FileCategory.AUDIO: _MB50,
    FileCategory.APPLICATION: _MB25,
    FileCategory.VIDEO: _MB300,
    FileCategory.IMAGE: _MB25,
    FileCategory.OTHER: _MB50,
}


def mime_type_for(path: Path | str) -> str:
    """Guess a MIME type from the file extension."""

    guessed, _ = mimetypes.guess_type(Path(path).name)
    return guessed or DEFAULT_MIME_TYPE


def size_limit_for(mime_type: str) -> int:
    return FileCategory.for_mime_type(mime_type).limit_bytes


def within_limit(size_bytes: int, mime_type: str) -> bool:
    return size_bytes <= size_limit_for(mime_type)


__all__ = [
    "DEFAULT_MIME_TYPE",
    "FileCategory",
    "mime_type_for",
    "size_limit_for",
    "within_limit",
]
