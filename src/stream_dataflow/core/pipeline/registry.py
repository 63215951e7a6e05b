# src/stream_dataflow/core/pipeline/registry.py
"""
Registro de estágios em ordem de declaração.

Rejeita ids vazios ou repetidos no momento do registro, antes de
qualquer planejamento. Duas transformações com a mesma função geram o
mesmo id (`stream.map.<nome>`) e precisam de um id explícito.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from .step import Step


class DuplicateStepIdError(ValueError):
    pass


class StepRegistry:
    def __init__(self) -> None:
        self._by_id: Dict[str, Step] = {}

    def add(self, step: Step) -> None:
        sid = getattr(step, "id", None)
        if not isinstance(sid, str) or not sid.strip():
            raise ValueError(f"invalid step id: {sid!r}")
        if sid in self._by_id:
            raise DuplicateStepIdError(
                f"step id '{sid}' already registered; give one of the stages an explicit id"
            )
        self._by_id[sid] = step

    def extend(self, steps: Iterable[Step]) -> None:
        for step in steps:
            self.add(step)

    def get(self, step_id: str) -> Step:
        return self._by_id[step_id]

    def list(self) -> List[Step]:
        return list(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)
