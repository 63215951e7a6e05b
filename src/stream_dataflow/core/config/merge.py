# src/stream_dataflow/core/config/merge.py
"""
Deep-merge de defaults com overrides locais.

    mapa + mapa       → merge chave a chave
    qualquer + lista  → a lista do override substitui (ex.: `stream.source`)
    None + qualquer   → o override preenche a chave
    int ↔ float       → compatíveis (ex.: `delay_seconds: 0` → `0.05`)
    bool ↔ outro      → conflito (`fail_fast: 1` não é bool)
    demais diferenças → ConfigTypeConflictError

As entradas nunca são mutadas.
"""

from copy import deepcopy
from typing import Any, Dict, List

from .errors import ConfigTypeConflictError


def _compatible(current: Any, incoming: Any) -> bool:
    if isinstance(current, bool) or isinstance(incoming, bool):
        return isinstance(current, bool) and isinstance(incoming, bool)
    numbers = (int, float)
    if isinstance(current, numbers) and isinstance(incoming, numbers):
        return True
    return type(current) is type(incoming)


def _merge_value(path: List[str], current: Any, incoming: Any) -> Any:
    if current is None or isinstance(incoming, list):
        return deepcopy(incoming)
    if isinstance(current, dict) and isinstance(incoming, dict):
        merged = deepcopy(current)
        for key, value in incoming.items():
            merged[key] = _merge_value(path + [str(key)], merged.get(key), value)
        return merged
    if not _compatible(current, incoming):
        raise ConfigTypeConflictError(
            f"'{'.'.join(path)}': {type(current).__name__} cannot be overridden "
            f"by {type(incoming).__name__}"
        )
    return deepcopy(incoming)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    if not (isinstance(base, dict) and isinstance(override, dict)):
        raise ConfigTypeConflictError(
            f"both config roots must be mappings (got {type(base).__name__} "
            f"and {type(override).__name__})"
        )
    return _merge_value([], base, override)
