# src/stream_dataflow/steps/_common.py
"""Acesso ao stream corrente e às seções de config usadas pelos estágios."""

from __future__ import annotations

from typing import Any, Dict, Iterator

from stream_dataflow.core.errors import stream_artifact_not_found
from stream_dataflow.core.exceptions import StreamArtifactNotFound
from stream_dataflow.core.pipeline.context import RunContext

STREAM_KEY = "stream.current"

def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}

def get_stream_cfg(ctx: RunContext) -> Dict[str, Any]:
    return _mapping(_mapping(ctx.config).get("stream"))

def require_stream(ctx: RunContext, step_id: str) -> Iterator[Any]:
    """Stream publicado pelo estágio anterior; sem ele, StreamArtifactNotFound."""
    if ctx.has_artifact(STREAM_KEY):
        return ctx.get_artifact(STREAM_KEY)
    raise StreamArtifactNotFound.from_payload(
        stream_artifact_not_found(expected_artifact=STREAM_KEY, step=step_id)
    )
