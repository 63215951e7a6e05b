# src/stream_dataflow/core/engine/planner.py
"""
Planejamento da ordem dos estágios.

`plan_execution` ordena estágios por dependência (ordenação topológica
com heap; entre estágios prontos ao mesmo tempo vence o menor `id`).
Para uma cadeia de stream o resultado é a própria cadeia declarada.

`check_linear_chain` valida a forma que um stream exige depois de
ordenado: exatamente uma fonte, no início; no máximo um upstream por
estágio, que deve ser o estágio imediatamente anterior; terminal, se
houver, por último.
"""

from __future__ import annotations

import heapq
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Set

from stream_dataflow.core.pipeline.step import Step
from stream_dataflow.core.pipeline.types import StepKind


class UnknownDependencyError(ValueError):
    pass


class CycleDetectedError(ValueError):
    pass


class NonLinearChainError(ValueError):
    """A ordem planejada não forma uma cadeia fonte → ... → terminal."""


def _index(steps: Iterable[Step]) -> Dict[str, Step]:
    by_id: Dict[str, Step] = {}
    for step in steps:
        sid = getattr(step, "id", None)
        if not isinstance(sid, str) or not sid.strip():
            raise ValueError(f"invalid step id: {sid!r}")
        if sid in by_id:
            raise ValueError(f"step id '{sid}' declared twice")
        by_id[sid] = step
    return by_id


def plan_execution(steps: Iterable[Step]) -> List[Step]:
    """
    Raises:
        ValueError: id vazio ou repetido.
        UnknownDependencyError: `depends_on` cita um id inexistente.
        CycleDetectedError: nenhum estágio restante está pronto.
    """
    by_id = _index(steps)

    pending: Dict[str, Set[str]] = {}
    downstream: Dict[str, List[str]] = defaultdict(list)
    for sid, step in by_id.items():
        upstream = set(getattr(step, "depends_on", None) or ())
        unknown = sorted(upstream.difference(by_id))
        if unknown:
            raise UnknownDependencyError(f"'{sid}' depends on undeclared stage(s): {', '.join(unknown)}")
        pending[sid] = upstream
        for dep in upstream:
            downstream[dep].append(sid)

    ready = [sid for sid, upstream in pending.items() if not upstream]
    heapq.heapify(ready)

    planned: List[Step] = []
    while ready:
        sid = heapq.heappop(ready)
        planned.append(by_id[sid])
        for child in downstream[sid]:
            pending[child].discard(sid)
            if not pending[child]:
                heapq.heappush(ready, child)

    if len(planned) != len(by_id):
        stuck = sorted(sid for sid, upstream in pending.items() if upstream)
        raise CycleDetectedError(f"dependency cycle among: {', '.join(stuck)}")
    return planned


def check_linear_chain(planned: Sequence[Step]) -> None:
    """Valida, sobre a ordem já planejada, a forma de um stream linear."""
    if not planned:
        raise NonLinearChainError("empty chain")

    sources = [s.id for s in planned if s.kind == StepKind.SOURCE]
    if sources != [planned[0].id]:
        raise NonLinearChainError(f"chain needs exactly one leading source, got {sources}")

    for previous, step in zip(planned, planned[1:]):
        upstream = list(getattr(step, "depends_on", None) or [])
        if len(upstream) > 1:
            raise NonLinearChainError(f"'{step.id}' has {len(upstream)} upstream stages")
        if upstream and upstream[0] != previous.id:
            raise NonLinearChainError(
                f"'{step.id}' reads from '{upstream[0]}', not from the previous stage '{previous.id}'"
            )

    terminals = [i for i, s in enumerate(planned) if s.kind == StepKind.TERMINAL]
    if terminals and terminals != [len(planned) - 1]:
        raise NonLinearChainError("terminal stage must be unique and last")
