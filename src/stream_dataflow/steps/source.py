# src/stream_dataflow/steps/source.py
"""
stream.source: publica a fonte finita em `stream.current`.

A lista `stream.source` da config, quando presente, tem precedência sobre
os itens passados ao construtor. Nada é avaliado aqui; os itens só são
puxados quando o estágio terminal consome o stream.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from stream_dataflow.core.pipeline.context import RunContext
from stream_dataflow.core.pipeline.step import Step
from stream_dataflow.core.pipeline.types import StepKind, StepResult, StepStatus
from stream_dataflow.core.stream.operators import stream_of

from ._common import STREAM_KEY, get_stream_cfg


@dataclass
class StreamSourceStep(Step):
    items: Sequence[int] = ()
    id: str = "stream.source"
    kind: StepKind = StepKind.SOURCE
    depends_on: List[str] = field(default_factory=list)

    def _resolve_items(self, ctx: RunContext) -> Tuple[Tuple[int, ...], str]:
        configured = get_stream_cfg(ctx).get("source")
        if configured is None:
            return tuple(self.items), "step"
        return tuple(configured), "config"

    def run(self, ctx: RunContext) -> StepResult:
        items, origin = self._resolve_items(ctx)
        ctx.set_artifact(STREAM_KEY, stream_of(*items, scope=ctx.scope))
        ctx.log(
            step_id=self.id,
            level="info",
            message="source stream published",
            size=len(items),
            origin=origin,
        )
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"source of {len(items)} items",
            metrics={"source_size": len(items)},
            artifacts={"stream": STREAM_KEY},
            payload={"origin": origin, "items": list(items)},
        )
