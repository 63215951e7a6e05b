# src/stream_dataflow/report/__init__.py
"""Relatórios diagnósticos (pandas); nenhum deles escreve em stdout."""

from .trace import emitted_values, trace_frame

__all__ = ["emitted_values", "trace_frame"]
