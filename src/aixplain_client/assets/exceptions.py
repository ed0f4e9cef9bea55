"""Asset-level failures."""

from __future__ import annotations

from aixplain_client.errors import AiXplainError


class IndexOperationError(AiXplainError):
    """Raised when an index cannot be created or the asset is not an index."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Index operation failed: {reason}")
        self.reason = reason


__all__ = ["IndexOperationError"]
