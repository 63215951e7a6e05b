# src/stream_dataflow/programs/__init__.py
"""Programas executáveis montados com os estágios de `stream_dataflow.steps`."""
