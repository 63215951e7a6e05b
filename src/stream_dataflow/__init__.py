# src/stream_dataflow/__init__.py
"""
Stream DataFlow: pipelines funcionais sequenciais sobre streams lazy.

Um pipeline é uma cadeia linear de estágios aplicada, em ordem fixa, a
cada elemento de uma fonte:

    fonte → predicado → transformações → terminal

Cada elemento percorre a cadeia inteira antes que o próximo seja puxado
da fonte. A mesma cadeia pode ser escrita diretamente com operadores
(`core.stream`) ou declarada como Steps executados pelo Engine
(`core.pipeline`, `core.engine`, `steps`).

Arquitetura em alto nível:
    - core.stream   → operadores lazy, escopo de cancelamento, geradores
    - core.config   → carregamento, merge, validação e hashing de configuração
    - core.pipeline → protocolos, contexto de execução e registro de Steps
    - core.engine   → planejamento (DAG) e execução dos estágios
    - steps         → estágios canônicos (source, filter, map, delay, for_each)
    - programs      → programa de exemplo (ímpares × 3 + 1)
    - report        → tabela de rastreamento por elemento (pandas)

Limites explícitos:
    - Execução síncrona, em um único fluxo de controle
    - Nenhum estado persiste entre runs
"""

from .core.stream import (
    StreamScope,
    compose_pipeline,
    delay_op,
    filter_op,
    for_each,
    map_op,
    stream_of,
)

__version__ = "0.1.0"

__all__ = [
    "StreamScope",
    "compose_pipeline",
    "delay_op",
    "filter_op",
    "for_each",
    "map_op",
    "stream_of",
]
