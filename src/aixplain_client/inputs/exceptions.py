"""Input construction failures; local and never retried."""

from __future__ import annotations

from aixplain_client.errors import ConstructionError


class InputError(ConstructionError):
    """Base class for invalid caller input."""


class TypeNotRecognizedError(InputError):
    """Raised when a value cannot be mapped to any supported input variant."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Input type not recognized: {type(value).__name__}")
        self.type_name = type(value).__name__


class InputEncodingError(InputError):
    """Raised when an encoded payload cannot be serialised to JSON."""


class InvalidInputError(InputError):
    """Raised when input violates a documented precondition."""


__all__ = ["InputEncodingError", "InputError", "InvalidInputError", "TypeNotRecognizedError"]
