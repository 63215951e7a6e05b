# src/stream_dataflow/core/pipeline/step.py
"""
Protocolo de estágio.

Qualquer objeto com `id`, `kind`, `depends_on` e `run(ctx)` é um estágio;
herança é opcional. Estágios de stream não retornam dados: eles
republicam `stream.current` no RunContext e devolvem um StepResult.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from .context import RunContext
from .types import StepKind, StepResult


@runtime_checkable
class Step(Protocol):
    id: str
    kind: StepKind
    depends_on: List[str]

    def run(self, ctx: RunContext) -> StepResult:
        """Executado no máximo uma vez por run, na ordem definida pelo planner."""
        ...
