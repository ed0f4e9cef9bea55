"""File upload failures."""

from __future__ import annotations

from aixplain_client.errors import AiXplainError


class FileUploadError(AiXplainError):
    """Base class for failures of the upload protocol."""


class FileSizeExceedsLimitError(FileUploadError):
    """Raised when a local file is larger than its MIME category allows."""

    def __init__(self, path: str, size_bytes: int, limit_bytes: int) -> None:
        super().__init__(
            f"The file size of {path} ({size_bytes} bytes) exceeds the maximum "
            f"allowed limit of {limit_bytes} bytes."
        )
        self.path = path
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes


class PreSignedURLError(FileUploadError):
    """Raised when the backend does not hand out a usable pre-signed URL."""

    def __init__(self, detail: str | None = None) -> None:
        message = "Failed to obtain the pre-signed URL for uploading the file to S3."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class BucketNameNotFoundError(FileUploadError):
    """Raised when the pre-signed URL host does not name an S3 bucket."""

    def __init__(self, url: str) -> None:
        super().__init__(f"The bucket name for the S3 upload was not found in {url}")
        self.url = url


__all__ = [
    "BucketNameNotFoundError",
    "FileSizeExceedsLimitError",
    "FileUploadError",
    "PreSignedURLError",
]
