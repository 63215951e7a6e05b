# src/stream_dataflow/core/exceptions.py
"""
Exceções tipadas do Stream DataFlow.

Cada classe carrega o código estável (`code`) que o Engine grava no
payload de erro, de modo que levantar a exceção certa já define como a
falha aparece no resultado da run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional

from .errors import (
    ENGINE_CONFIGURATION_ERROR,
    ENGINE_EXECUTION_ERROR,
    STREAM_ARTIFACT_NOT_FOUND,
    StreamErrorPayload,
)


@dataclass(frozen=True)
class StreamException(Exception):
    code: ClassVar[str] = ENGINE_EXECUTION_ERROR

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None
    decision_required: bool = False

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_payload(cls, payload: StreamErrorPayload) -> "StreamException":
        return cls(
            message=payload.message,
            details=dict(payload.details),
            hint=payload.hint,
            decision_required=payload.decision_required,
        )

    def to_payload(self, step_id: str) -> StreamErrorPayload:
        details = dict(self.details)
        details.setdefault("step", step_id)
        return StreamErrorPayload(
            type=self.code,
            message=self.message,
            details=details,
            hint=self.hint,
            decision_required=self.decision_required,
        )


@dataclass(frozen=True)
class StreamArtifactNotFound(StreamException):
    """Um estágio esperava `stream.current` e nada foi publicado."""

    code: ClassVar[str] = STREAM_ARTIFACT_NOT_FOUND


@dataclass(frozen=True)
class EngineConfigurationError(StreamException):
    code: ClassVar[str] = ENGINE_CONFIGURATION_ERROR


@dataclass(frozen=True)
class EngineExecutionError(StreamException):
    """Falha de run relançada ao chamador por `RunResult.raise_for_failure`."""
