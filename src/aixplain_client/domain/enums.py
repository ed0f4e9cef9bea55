"""Enumerations used across the client domain layer."""

from __future__ import annotations

from enum import StrEnum


class AssetKind(StrEnum):
    """Kinds of runnable assets; each has its own submit payload shape."""

    MODEL = "model"
    PIPELINE = "pipeline"
    AGENT = "agent"
    TEAM_AGENT = "team_agent"
    INDEX = "index"

    @property
    def uses_query_key(self) -> bool:
        return self in {AssetKind.AGENT, AssetKind.TEAM_AGENT}


class RecordDataType(StrEnum):
    TEXT = "text"
    IMAGE = "image"


class IndexFieldOperator(StrEnum):
    """Comparison operators accepted by index search filters."""

    EQUALS = "=="
    NOT_EQUALS = "!="
    CONTAINS = "in"
    NOT_CONTAINS = "not in"
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_THAN_OR_EQUALS = ">="
    LESS_THAN_OR_EQUALS = "<="


class EmbeddingModel(StrEnum):
    """Hosted embedding models an index can be built with."""

    SNOWFLAKE_ARCTIC_EMBED_M_LONG = "6658d40729985c2cf72f42ec"
    OPENAI_ADA002 = "6734c55df127847059324d9e"
    SNOWFLAKE_ARCTIC_EMBED_L_V2_0 = "678a4f8547f687504744960a"
    JINA_CLIP_V2_MULTIMODAL = "67c5f705d8f6a65d6f74d732"
    MULTILINGUAL_E5_LARGE = "67efd0772a0a850afa045af3"
    BGE_M3 = "67efd4f92a0a850afa045af7"
    AIXPLAIN_LEGAL_EMBEDDINGS = "681254b668e47e7844c1f15a"


class IndexEngine(StrEnum):
    """Indexing engines; each is itself a runnable model."""

    AIR = "66eae6656eb56311f2595011"


__all__ = [
    "AssetKind",
    "EmbeddingModel",
    "IndexEngine",
    "IndexFieldOperator",
    "RecordDataType",
]
