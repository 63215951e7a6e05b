# src/stream_dataflow/core/pipeline/context.py
"""
Estado de uma run do pipeline.

`RunContext` é o único canal entre estágios. Ele guarda:
    - o stream corrente, republicado por cada estágio em `stream.current`
    - eventos estruturados (dicts) em `events`, filtrados por
      `engine.log_level`; nada vai para stdout
    - warnings por estágio
    - o `StreamScope` compartilhado pelos operadores da run

Cada run recebe um contexto novo (`new_run_context`), o que torna
execuções repetidas independentes entre si.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from stream_dataflow.core.stream.scope import StreamScope

LOG_LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40}


def _level_value(name: Any, fallback: str) -> int:
    return LOG_LEVELS.get(str(name).lower(), LOG_LEVELS[fallback])


@dataclass
class RunContext:
    run_id: str
    created_at: datetime
    config: Dict[str, Any]
    meta: Dict[str, Any] = field(default_factory=dict)
    scope: StreamScope = field(default_factory=StreamScope)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)
    _store: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)

    # artefatos
    def set_artifact(self, key: str, value: Any) -> None:
        self._store[key] = value

    def has_artifact(self, key: str) -> bool:
        return key in self._store

    def get_artifact(self, key: str) -> Any:
        try:
            return self._store[key]
        except KeyError:
            raise KeyError(key) from None

    # observabilidade
    @property
    def log_threshold(self) -> int:
        engine = (self.config or {}).get("engine") or {}
        return _level_value(engine.get("log_level", "debug"), "debug")

    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        """Registra um evento; níveis desconhecidos contam como `info`."""
        if _level_value(level, "info") < self.log_threshold:
            return
        self.events.append(
            {
                "run_id": self.run_id,
                "step_id": step_id,
                "level": level,
                "message": message,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                **extra,
            }
        )

    def add_warning(self, *, step_id: str, message: str) -> None:
        self.warnings.setdefault(step_id, []).append(message)


def new_run_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    run_id: Optional[str] = None,
    meta: Optional[Dict[str, Any]] = None,
    clock: Callable[[], float] = time.monotonic,
) -> RunContext:
    """Contexto isolado cujo deadline vem de `stream.timeout_seconds`."""
    cfg = dict(config or {})
    timeout = (cfg.get("stream") or {}).get("timeout_seconds")
    return RunContext(
        run_id=run_id or f"run-{uuid.uuid4().hex[:12]}",
        created_at=datetime.now(timezone.utc),
        config=cfg,
        meta=dict(meta or {}),
        scope=StreamScope(timeout=timeout, clock=clock),
    )
