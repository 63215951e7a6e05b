# src/stream_dataflow/steps/transform.py
"""
Estágios intermediários que reescrevem cada elemento ou o ritmo do stream.

    MapStep    → `map_op(transform)`; id padrão `stream.map.<nome da função>`
    DelayStep  → `delay_op(seconds)`; sem `seconds`, lê `stream.delay_seconds`

Exemplo de config lida pelo DelayStep:

    stream:
      delay_seconds: 0.05
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from stream_dataflow.core.pipeline.context import RunContext
from stream_dataflow.core.pipeline.step import Step
from stream_dataflow.core.pipeline.types import StepKind, StepResult, StepStatus
from stream_dataflow.core.stream.operators import callable_name, delay_op, map_op

from ._common import STREAM_KEY, get_stream_cfg, require_stream


@dataclass
class MapStep(Step):
    transform: Callable[[int], int]
    id: str = ""
    kind: StepKind = StepKind.TRANSFORM
    depends_on: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.id = self.id or f"stream.map.{callable_name(self.transform)}"

    def run(self, ctx: RunContext) -> StepResult:
        upstream = require_stream(ctx, self.id)
        name = callable_name(self.transform)
        ctx.set_artifact(STREAM_KEY, map_op(self.transform)(upstream, ctx.scope))
        ctx.log(step_id=self.id, level="info", message="map attached", transform=name)
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"map with {name}",
            artifacts={"stream": STREAM_KEY},
            payload={"transform": name},
        )


@dataclass
class DelayStep(Step):
    """Uma pausa antes de repassar cada elemento; nenhuma ao fim do stream."""

    seconds: Optional[float] = None
    sleep: Callable[[float], Any] = time.sleep
    id: str = "stream.delay"
    kind: StepKind = StepKind.TRANSFORM
    depends_on: List[str] = field(default_factory=lambda: ["stream.source"])

    def _resolve_seconds(self, ctx: RunContext) -> float:
        if self.seconds is not None:
            return float(self.seconds)
        return float(get_stream_cfg(ctx).get("delay_seconds") or 0)

    def run(self, ctx: RunContext) -> StepResult:
        seconds = self._resolve_seconds(ctx)
        upstream = require_stream(ctx, self.id)
        ctx.set_artifact(STREAM_KEY, delay_op(seconds, sleep=self.sleep)(upstream, ctx.scope))
        ctx.log(step_id=self.id, level="info", message="delay attached", seconds=seconds)
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"delay of {seconds}s per item",
            metrics={"delay_seconds": seconds},
            artifacts={"stream": STREAM_KEY},
        )
