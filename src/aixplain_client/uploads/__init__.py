"""Local file upload protocol."""

from .exceptions import (
    BucketNameNotFoundError,
    FileSizeExceedsLimitError,
    FileUploadError,
    PreSignedURLError,
)
from .limits import FileCategory, mime_type_for, size_limit_for, within_limit
from .manager import FileUploader, check_size, derive_s3_uri
from .models import UploadDescriptor

__all__ = [
    "BucketNameNotFoundError",
    "FileCategory",
    "FileSizeExceedsLimitError",
    "FileUploadError",
    "FileUploader",
    "PreSignedURLError",
    "UploadDescriptor",
    "check_size",
    "derive_s3_uri",
    "mime_type_for",
    "size_limit_for",
    "within_limit",
]
