# src/stream_dataflow/core/engine/__init__.py
"""
Planejamento e execução de estágios.

    planner → ordem por dependência e forma de cadeia linear
    engine  → executa cada estágio uma vez, aplicando skip e fail-fast
"""

from .engine import Engine, RunResult
from .planner import (
    CycleDetectedError,
    NonLinearChainError,
    UnknownDependencyError,
    check_linear_chain,
    plan_execution,
)

__all__ = [
    "CycleDetectedError",
    "Engine",
    "NonLinearChainError",
    "RunResult",
    "UnknownDependencyError",
    "check_linear_chain",
    "plan_execution",
]
