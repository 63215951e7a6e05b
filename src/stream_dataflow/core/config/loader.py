# src/stream_dataflow/core/config/loader.py
"""
Carregamento e validação da configuração do pipeline.

A configuração efetiva é `deep_merge(defaults, local)`, validada por
`validate_stream_config`. Chaves reconhecidas:

    engine:
      fail_fast: bool                 # padrão: true
      log_level: debug|info|warning|error
    steps:
      <step_id>:
        enabled: bool                 # padrão: true
    stream:
      source: [int, ...]              # substitui a fonte do programa
      delay_seconds: número >= 0      # insere stream.delay após a fonte
      timeout_seconds: número >= 0 | null

Chaves ausentes são válidas; cada estágio aplica o próprio padrão.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidStreamConfigError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge

LOG_LEVEL_NAMES = ("debug", "info", "warning", "error")

_READERS: Dict[str, Callable[[Any], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def _read_mapping(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise DefaultsNotFoundError(f"config file not found: {path}")
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise UnsupportedConfigFormatError(
            f"{path.name}: expected one of {', '.join(sorted(_READERS))}"
        )
    with path.open("r", encoding="utf-8") as fh:
        data = reader(fh)
    data = {} if data is None else data
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(f"{path.name}: root is {type(data).__name__}, not a mapping")
    return data


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = config.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidStreamConfigError(f"'{name}' must be a mapping")
    return value


def _non_negative(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0


def _check_engine(engine: Dict[str, Any]) -> None:
    if "fail_fast" in engine and not isinstance(engine["fail_fast"], bool):
        raise InvalidStreamConfigError("engine.fail_fast must be true or false")
    level = engine.get("log_level")
    if level is not None and str(level).lower() not in LOG_LEVEL_NAMES:
        raise InvalidStreamConfigError(
            f"engine.log_level {level!r} not in {', '.join(LOG_LEVEL_NAMES)}"
        )


def _check_steps(steps: Dict[str, Any]) -> None:
    for step_id, options in steps.items():
        if options is None:
            continue
        if not isinstance(options, dict):
            raise InvalidStreamConfigError(f"steps.{step_id} must be a mapping")
        if not isinstance(options.get("enabled", True), bool):
            raise InvalidStreamConfigError(f"steps.{step_id}.enabled must be true or false")


def _check_stream(stream: Dict[str, Any]) -> None:
    source = stream.get("source")
    if source is not None and not (
        isinstance(source, list)
        and all(isinstance(v, int) and not isinstance(v, bool) for v in source)
    ):
        raise InvalidStreamConfigError("stream.source must be a list of integers")
    for key in ("delay_seconds", "timeout_seconds"):
        value = stream.get(key)
        if value is not None and not _non_negative(value):
            raise InvalidStreamConfigError(f"stream.{key} must be a number >= 0")


def validate_stream_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Levanta InvalidStreamConfigError no primeiro valor inválido; devolve `config`."""
    _check_engine(_section(config, "engine"))
    _check_steps(_section(config, "steps"))
    _check_stream(_section(config, "stream"))
    return config


def load_config(*, defaults_path: str, local_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Lê defaults (obrigatório) e, se o arquivo existir, aplica o local por cima.

    Raises:
        DefaultsNotFoundError, UnsupportedConfigFormatError,
        InvalidConfigRootTypeError, ConfigTypeConflictError,
        InvalidStreamConfigError
    """
    effective = _read_mapping(Path(defaults_path))
    if local_path is not None and Path(local_path).exists():
        effective = deep_merge(effective, _read_mapping(Path(local_path)))
    return validate_stream_config(effective)
