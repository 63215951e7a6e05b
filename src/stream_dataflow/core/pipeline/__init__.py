# src/stream_dataflow/core/pipeline/__init__.py
"""
Contratos entre estágios e Engine.

Um estágio declara `id`, `kind` e `depends_on` e devolve um `StepResult`.
O stream corrente passa de um estágio ao outro só pelo artefato
`stream.current` do `RunContext`.
"""

from .context import RunContext, new_run_context
from .registry import DuplicateStepIdError, StepRegistry
from .step import Step
from .types import StepKind, StepResult, StepStatus

__all__ = [
    "DuplicateStepIdError",
    "RunContext",
    "Step",
    "StepKind",
    "StepRegistry",
    "StepResult",
    "StepStatus",
    "new_run_context",
]
