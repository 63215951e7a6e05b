# src/stream_dataflow/core/config/hashing.py
"""
Identidade da configuração efetiva de uma run.

O hash vai para `RunContext.meta["config_hash"]`: runs com o mesmo hash
recebem a mesma configuração e, portanto, emitem a mesma saída.
"""

import hashlib
import json
from typing import Any, Dict


def canonical_json(config: Dict[str, Any]) -> str:
    """Forma textual estável: chaves ordenadas, sem espaços, UTF-8 literal."""
    if not isinstance(config, dict):
        raise TypeError(f"config must be a dict, got {type(config).__name__}")
    return json.dumps(config, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def compute_config_hash(config: Dict[str, Any]) -> str:
    """SHA-256 (hex, 64 caracteres) de `canonical_json(config)`."""
    return hashlib.sha256(canonical_json(config).encode("utf-8")).hexdigest()
