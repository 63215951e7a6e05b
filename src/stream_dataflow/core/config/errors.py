# src/stream_dataflow/core/config/errors.py
"""Erros de configuração: sempre fatais, levantados antes de qualquer estágio rodar."""


class ConfigError(Exception):
    pass


class DefaultsNotFoundError(ConfigError):
    """Sem o arquivo de defaults não há configuração efetiva."""


class UnsupportedConfigFormatError(ConfigError):
    """Extensão diferente de .yaml, .yml ou .json."""


class InvalidConfigRootTypeError(ConfigError):
    """O documento carregado não é um mapa (ex.: uma lista YAML)."""


class ConfigTypeConflictError(ConfigError):
    """Override incompatível com o tipo do default (ex.: `stream: fast` sobre um mapa)."""


class InvalidStreamConfigError(ConfigError):
    """Valor fora do domínio aceito para `engine`, `steps` ou `stream`."""
