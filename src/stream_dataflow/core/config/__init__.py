# src/stream_dataflow/core/config/__init__.py
"""
Configuração da run: defaults em YAML/JSON, override local opcional,
validação das seções `engine`, `steps` e `stream` e hash da forma canônica.
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidStreamConfigError,
    UnsupportedConfigFormatError,
)
from .hashing import canonical_json, compute_config_hash
from .loader import LOG_LEVEL_NAMES, load_config, validate_stream_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidStreamConfigError",
    "LOG_LEVEL_NAMES",
    "UnsupportedConfigFormatError",
    "canonical_json",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "validate_stream_config",
]
