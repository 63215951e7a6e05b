# src/stream_dataflow/steps/terminal.py
"""
stream.for_each: o único estágio que consome o stream.

Cada valor vai para o sink (padrão `print`, uma linha por valor). O
payload guarda os valores emitidos, em ordem, e `cancelled`.

`cancelled` é True só quando algum estágio ficou com um elemento na mão
depois que o escopo encerrou (`StreamScope.truncated`). Um stream que
esgota a fonte antes do deadline termina com `cancelled = False`, mesmo
que o deadline passe logo em seguida. Truncar não é falha: o status é
SUCCESS e um warning é registrado.

    payload:
      values: [int]
      cancelled: bool
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from stream_dataflow.core.pipeline.context import RunContext
from stream_dataflow.core.pipeline.step import Step
from stream_dataflow.core.pipeline.types import StepKind, StepResult, StepStatus
from stream_dataflow.core.stream.operators import for_each

from ._common import require_stream

TRUNCATED_WARNING = "stream closed by scope before exhaustion"


@dataclass
class ForEachStep(Step):
    sink: Optional[Callable[[Any], Any]] = None
    id: str = "stream.for_each"
    kind: StepKind = StepKind.TERMINAL
    depends_on: List[str] = field(default_factory=list)

    def run(self, ctx: RunContext) -> StepResult:
        upstream = require_stream(ctx, self.id)
        emit = print if self.sink is None else self.sink
        values: List[Any] = []

        def collect_and_emit(value: Any) -> None:
            values.append(value)
            emit(value)

        emitted = for_each(upstream, collect_and_emit)
        truncated = ctx.scope.truncated
        if truncated:
            ctx.add_warning(step_id=self.id, message=TRUNCATED_WARNING)

        ctx.log(
            step_id=self.id,
            level="info",
            message="stream drained",
            emitted=emitted,
            cancelled=truncated,
            truncated_by=ctx.scope.truncated_by,
            closed_stages=ctx.scope.closed_stages,
        )
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"emitted {emitted} values",
            metrics={"emitted": emitted},
            warnings=[TRUNCATED_WARNING] if truncated else [],
            payload={"values": values, "cancelled": truncated},
        )
