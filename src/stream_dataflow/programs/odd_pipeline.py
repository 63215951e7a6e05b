# src/stream_dataflow/programs/odd_pipeline.py
"""
Programa de exemplo: ímpares de 1..5, triplicados e incrementados.

    stream.source (1, 2, 3, 4, 5)
      [→ stream.delay, se stream.delay_seconds > 0]
      → stream.filter (is_odd)
      → stream.map.triple
      → stream.map.successor
      → stream.for_each (print)

Com a config padrão a saída em stdout é exatamente `4\\n10\\n16\\n`.
Eventos de execução ficam em `RunContext.events`, nunca em stdout.

`clock` e `sleep` são injetáveis para que deadline e atraso possam ser
exercitados sem tempo real.
"""

from __future__ import annotations

import copy
import time
from typing import Any, Callable, Dict, List, Optional

from stream_dataflow.core.config.hashing import compute_config_hash
from stream_dataflow.core.config.loader import validate_stream_config
from stream_dataflow.core.engine.engine import Engine, RunResult
from stream_dataflow.core.engine.planner import check_linear_chain, plan_execution
from stream_dataflow.core.pipeline.context import new_run_context
from stream_dataflow.core.pipeline.registry import StepRegistry
from stream_dataflow.core.pipeline.step import Step
from stream_dataflow.core.stream.operators import is_odd, successor, triple
from stream_dataflow.steps import DelayStep, FilterStep, ForEachStep, MapStep, StreamSourceStep

SOURCE = (1, 2, 3, 4, 5)

DEFAULT_CONFIG: Dict[str, Any] = {
    "engine": {"fail_fast": True, "log_level": "info"},
    "steps": {},
    "stream": {"delay_seconds": 0, "timeout_seconds": None},
}


def build_steps(
    sink: Optional[Callable[[Any], Any]] = None,
    delay_seconds: float = 0,
    sleep: Callable[[float], Any] = time.sleep,
) -> List[Step]:
    """Cadeia do programa, já validada como stream linear."""
    chain: List[Step] = [StreamSourceStep(items=SOURCE)]
    if delay_seconds > 0:
        chain.append(DelayStep(seconds=delay_seconds, sleep=sleep, depends_on=["stream.source"]))
    chain += [
        FilterStep(predicate=is_odd, depends_on=[chain[-1].id]),
        MapStep(transform=triple, depends_on=["stream.filter"]),
        MapStep(transform=successor, depends_on=["stream.map.triple"]),
        ForEachStep(sink=sink, depends_on=["stream.map.successor"]),
    ]

    registry = StepRegistry()
    registry.extend(chain)
    steps = registry.list()
    check_linear_chain(plan_execution(steps))
    return steps


def run_odd_pipeline(
    sink: Optional[Callable[[Any], Any]] = None,
    config: Optional[Dict[str, Any]] = None,
    run_id: Optional[str] = None,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], Any] = time.sleep,
) -> RunResult:
    cfg = validate_stream_config(copy.deepcopy(DEFAULT_CONFIG if config is None else config))
    stream_cfg = cfg.get("stream") or {}
    ctx = new_run_context(
        config=cfg,
        run_id=run_id,
        meta={"program": "odd_pipeline", "config_hash": compute_config_hash(cfg)},
        clock=clock,
    )
    steps = build_steps(sink, delay_seconds=stream_cfg.get("delay_seconds") or 0, sleep=sleep)
    return Engine(steps=steps, ctx=ctx).run()


def main() -> int:
    run_odd_pipeline().raise_for_failure()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
