# src/stream_dataflow/core/pipeline/types.py
"""
Vocabulário compartilhado entre estágios e Engine.

    StepKind   papel do estágio na cadeia (fonte, filtro, transformação, terminal)
    StepStatus desfecho do estágio em uma run
    StepResult relato imutável do que o estágio fez

`StepKind` também define a forma válida de uma cadeia linear: uma única
fonte no início e um único terminal no fim (ver `core.engine.planner`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class StepKind(str, Enum):
    SOURCE = "source"
    FILTER = "filter"
    TRANSFORM = "transform"
    TERMINAL = "terminal"


class StepStatus(str, Enum):
    """SKIPPED cobre tanto `enabled: false` quanto dependência bloqueada."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """
    Relato de um estágio após a run.

    `artifacts` mapeia nomes lógicos para chaves do RunContext
    (ex.: {"stream": "stream.current"}); `payload` guarda dados
    específicos do estágio, incluindo `payload["error"]` em falhas.
    """

    step_id: str
    kind: StepKind
    status: StepStatus
    summary: str
    metrics: Dict[str, float] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    artifacts: Dict[str, str] = field(default_factory=dict)
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is not StepStatus.FAILED
