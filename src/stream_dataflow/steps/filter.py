# src/stream_dataflow/steps/filter.py
"""
stream.filter: mantém no stream só os elementos aceitos pelo predicado.

Com `steps.stream.filter.enabled: false` o Engine pula o estágio e todos
os elementos da fonte seguem adiante.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from stream_dataflow.core.pipeline.context import RunContext
from stream_dataflow.core.pipeline.step import Step
from stream_dataflow.core.pipeline.types import StepKind, StepResult, StepStatus
from stream_dataflow.core.stream.operators import callable_name, filter_op, is_odd

from ._common import STREAM_KEY, require_stream


@dataclass
class FilterStep(Step):
    predicate: Callable[[int], bool] = is_odd
    id: str = "stream.filter"
    kind: StepKind = StepKind.FILTER
    depends_on: List[str] = field(default_factory=lambda: ["stream.source"])

    def run(self, ctx: RunContext) -> StepResult:
        upstream = require_stream(ctx, self.id)
        name = callable_name(self.predicate)
        ctx.set_artifact(STREAM_KEY, filter_op(self.predicate)(upstream, ctx.scope))
        ctx.log(step_id=self.id, level="info", message="filter attached", predicate=name)
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"filter by {name}",
            artifacts={"stream": STREAM_KEY},
            payload={"predicate": name},
        )
