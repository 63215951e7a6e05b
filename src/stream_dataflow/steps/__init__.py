# src/stream_dataflow/steps/__init__.py
"""Estágios prontos: fonte, filtro, map, delay e terminal."""

from .filter import FilterStep
from .source import StreamSourceStep
from .terminal import ForEachStep
from .transform import DelayStep, MapStep

__all__ = ["DelayStep", "FilterStep", "ForEachStep", "MapStep", "StreamSourceStep"]
