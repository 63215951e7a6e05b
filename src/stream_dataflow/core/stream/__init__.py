# src/stream_dataflow/core/stream/__init__.py
"""
# Stream Core (Stream DataFlow)

Operadores lazy sobre iteradores Python e o escopo de cancelamento que
os coordena.

## Componentes

- **operators**: `stream_of`, `filter_op`, `map_op`, `delay_op`,
  `compose_pipeline`, `for_each` e os predicados/transformações canônicos
- **scope**: `StreamScope` (cancelamento e deadline cooperativos)
- **generators**: `fibonacci`, `take`

## Invariantes

- A ordem relativa dos elementos é preservada por todos os operadores
- Nenhum item é emitido depois que o escopo encerra
"""

from .generators import fibonacci, take
from .operators import (
    callable_name,
    compose_pipeline,
    delay_op,
    filter_op,
    for_each,
    is_even,
    is_odd,
    map_op,
    stream_of,
    successor,
    triple,
)
from .scope import StreamScope

__all__ = [
    "StreamScope",
    "callable_name",
    "compose_pipeline",
    "delay_op",
    "fibonacci",
    "filter_op",
    "for_each",
    "is_even",
    "is_odd",
    "map_op",
    "stream_of",
    "successor",
    "take",
    "triple",
]
