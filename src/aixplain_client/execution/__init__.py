"""Asynchronous submit/poll execution protocol."""

from .engine import ExecutionEngine
from .exceptions import (
    PollingDecodeError,
    PollingTimeoutError,
    ProtocolError,
    SubmitDecodeError,
    SupplierError,
)
from .models import (
    MIN_WAIT_INTERVAL_SECONDS,
    Completed,
    ExecutionHandle,
    ExecutionResult,
    PollingConfig,
    SupplierFailed,
    TimedOut,
)
from .parameters import AgentRunParameters, ModelRunParameters, PipelineRunParameters
from .schemas import (
    AGENT_SCHEMA,
    INDEX_SEARCH_SCHEMA,
    MODEL_SCHEMA,
    PIPELINE_SCHEMA,
    ResponseSchema,
)

__all__ = [
    "AGENT_SCHEMA",
    "INDEX_SEARCH_SCHEMA",
    "MIN_WAIT_INTERVAL_SECONDS",
    "MODEL_SCHEMA",
    "PIPELINE_SCHEMA",
    "AgentRunParameters",
    "Completed",
    "ExecutionEngine",
    "ExecutionHandle",
    "ExecutionResult",
    "ModelRunParameters",
    "PipelineRunParameters",
    "PollingConfig",
    "PollingDecodeError",
    "PollingTimeoutError",
    "ProtocolError",
    "ResponseSchema",
    "SubmitDecodeError",
    "SupplierError",
    "SupplierFailed",
    "TimedOut",
]
