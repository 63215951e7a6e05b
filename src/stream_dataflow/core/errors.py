# src/stream_dataflow/core/errors.py
"""
Payload de erro serializável do Stream DataFlow.

Quando um estágio falha, o Engine não propaga a exceção no meio da run:
ele grava um `StreamErrorPayload` em `StepResult.payload["error"]`. O
payload identifica a falha por um código estável e diz ao operador onde
agir (`hint`), sem stack trace.

Códigos (v1):
    - STREAM_ARTIFACT_NOT_FOUND: estágio sem stream de entrada publicado
    - ENGINE_CONFIGURATION_ERROR: Step devolveu algo que não é StepResult
    - ENGINE_EXECUTION_ERROR: qualquer outra exceção levantada ao executar
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

STREAM_ARTIFACT_NOT_FOUND = "STREAM_ARTIFACT_NOT_FOUND"
ENGINE_CONFIGURATION_ERROR = "ENGINE_CONFIGURATION_ERROR"
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"


@dataclass(frozen=True)
class StreamErrorPayload:
    """
    Descrição estruturada de uma falha de estágio.

    `decision_required` sinaliza que a run não deve ser reexecutada sem
    intervenção (ex.: configuração a corrigir).
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StreamErrorPayload":
        return cls(
            type=str(data.get("type") or ENGINE_EXECUTION_ERROR),
            message=str(data.get("message") or ""),
            details=dict(data.get("details") or {}),
            hint=data.get("hint"),
            decision_required=bool(data.get("decision_required")),
        )


def stream_artifact_not_found(
    *,
    expected_artifact: str = "stream.current",
    step: Optional[str] = None,
) -> StreamErrorPayload:
    return StreamErrorPayload(
        type=STREAM_ARTIFACT_NOT_FOUND,
        message=f"Nenhum stream publicado em '{expected_artifact}'",
        details={"expected_artifact": expected_artifact, "step": step},
        hint=(
            "Inclua um estágio de origem (stream.source) upstream deste Step "
            "e não o desabilite em steps.stream.source.enabled."
        ),
    )


def engine_execution_error(
    *,
    step: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
) -> StreamErrorPayload:
    return StreamErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message=exc_message or f"{exc_type or 'Exception'} durante a execução do estágio",
        details={"step": step, "exc_type": exc_type, "exc_message": exc_message},
        hint=(
            "Lembre que predicados e transformações rodam quando o estágio "
            "terminal consome o stream; consulte RunContext.events."
        ),
    )


def engine_configuration_error(
    *,
    step: Optional[str] = None,
    received: Optional[str] = None,
) -> StreamErrorPayload:
    return StreamErrorPayload(
        type=ENGINE_CONFIGURATION_ERROR,
        message="Step retornou um valor que não é StepResult",
        details={"step": step, "expected": "StepResult", "received": received},
        hint="Faça Step.run devolver um StepResult.",
        decision_required=True,
    )
