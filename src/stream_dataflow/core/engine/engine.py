# src/stream_dataflow/core/engine/engine.py
"""
Execução dos estágios de uma run.

Para cada estágio, na ordem do planner, o Engine decide um entre três
caminhos:

    desabilitado (`steps.<id>.enabled: false`) → SKIPPED, sem executar;
        o stream corrente segue intacto para o próximo estágio
    upstream bloqueado (falhou ou foi pulado por falha) → SKIPPED
    caso contrário → `run(ctx)`; exceções viram FAILED com
        `payload["error"]` e, com `engine.fail_fast` (padrão), encerram a run

StepResult é imutável: warnings acumulados no RunContext são anexados
criando uma nova instância (`dataclasses.replace`).

Operadores são lazy. Uma exceção dentro de um predicado ou transformação
só acontece quando o estágio terminal consome o stream, e é atribuída a
ele.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Sequence, Set

from stream_dataflow.core.errors import (
    StreamErrorPayload,
    engine_configuration_error,
    engine_execution_error,
)
from stream_dataflow.core.exceptions import (
    EngineConfigurationError,
    EngineExecutionError,
    StreamException,
)
from stream_dataflow.core.pipeline.context import RunContext
from stream_dataflow.core.pipeline.step import Step
from stream_dataflow.core.pipeline.types import StepKind, StepResult, StepStatus

from .planner import plan_execution


@dataclass(frozen=True)
class RunResult:
    steps: Dict[str, StepResult] = field(default_factory=dict)
    errors: Dict[str, BaseException] = field(default_factory=dict, repr=False, compare=False)

    def failed(self) -> List[str]:
        return [sid for sid, r in self.steps.items() if r.status == StepStatus.FAILED]

    @property
    def ok(self) -> bool:
        return not self.failed()

    def raise_for_failure(self) -> None:
        """
        Relança a primeira falha da run.

        A exceção levantada é sempre `EngineExecutionError`, montada a
        partir do payload do estágio; a exceção que o estágio levantou de
        fato fica encadeada em `__cause__`. Para o processo, o efeito é o
        mesmo de propagá-la: saída com código diferente de zero.
        """
        failed = self.failed()
        if not failed:
            return
        sid = failed[0]
        payload = StreamErrorPayload.from_dict(self.steps[sid].payload.get("error") or {})
        exc = EngineExecutionError.from_payload(payload)
        exc.details.setdefault("step", sid)
        exc.details["error_type"] = payload.type
        if not exc.message:
            exc = replace(exc, message=f"stage '{sid}' failed")
        raise exc from self.errors.get(sid)


class Engine:
    def __init__(self, *, steps: Sequence[Step], ctx: RunContext):
        self.steps: List[Step] = list(steps)
        self.ctx = ctx

    # políticas declaradas em config
    def _section(self, name: str) -> Dict[str, Any]:
        value = (self.ctx.config or {}).get(name)
        return value if isinstance(value, dict) else {}

    def _enabled(self, step_id: str) -> bool:
        return bool((self._section("steps").get(step_id) or {}).get("enabled", True))

    @property
    def fail_fast(self) -> bool:
        return bool(self._section("engine").get("fail_fast", True))

    # construção de resultados
    def _with_context_warnings(self, step: Step, result: StepResult) -> StepResult:
        merged = list(dict.fromkeys([*result.warnings, *self.ctx.warnings.get(step.id, [])]))
        kind = result.kind or getattr(step, "kind", None) or StepKind.TRANSFORM
        return replace(result, step_id=step.id, kind=kind, warnings=merged)

    def _engine_result(self, step: Step, status: StepStatus, summary: str, **payload: Any) -> StepResult:
        result = StepResult(
            step_id=step.id,
            kind=getattr(step, "kind", None) or StepKind.TRANSFORM,
            status=status,
            summary=summary,
            payload=payload,
        )
        return self._with_context_warnings(step, result)

    @staticmethod
    def _describe(step_id: str, exc: Exception) -> StreamErrorPayload:
        if isinstance(exc, StreamException):
            return exc.to_payload(step_id)
        return engine_execution_error(
            step=step_id,
            exc_type=type(exc).__name__,
            exc_message=str(exc) or None,
        )

    def _execute(self, step: Step) -> StepResult:
        outcome = step.run(self.ctx)
        if not isinstance(outcome, StepResult):
            raise EngineConfigurationError.from_payload(
                engine_configuration_error(step=step.id, received=type(outcome).__name__)
            )
        return self._with_context_warnings(step, outcome)

    def run(self) -> RunResult:
        results: Dict[str, StepResult] = {}
        errors: Dict[str, BaseException] = {}
        blocked: Set[str] = set()

        for step in plan_execution(self.steps):
            sid = step.id

            if not self._enabled(sid):
                self.ctx.log(step_id=sid, level="info", message="step skipped by config")
                results[sid] = self._engine_result(step, StepStatus.SKIPPED, "skipped by config")
                continue

            if blocked.intersection(getattr(step, "depends_on", None) or ()):
                blocked.add(sid)
                self.ctx.log(step_id=sid, level="warning", message="step skipped due to failed dependency")
                results[sid] = self._engine_result(step, StepStatus.SKIPPED, "skipped due to failed dependency")
                continue

            try:
                results[sid] = self._execute(step)
            except Exception as exc:
                error = self._describe(sid, exc)
                errors[sid] = exc
                self.ctx.log(
                    step_id=sid,
                    level="error",
                    message="step failed",
                    error_type=error.type,
                    error_message=error.message,
                )
                results[sid] = self._engine_result(
                    step, StepStatus.FAILED, error.message, error=error.to_dict()
                )

            if results[sid].status == StepStatus.FAILED:
                blocked.add(sid)
                if self.fail_fast:
                    break

        return RunResult(steps=results, errors=errors)
