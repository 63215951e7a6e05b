# src/stream_dataflow/core/stream/generators.py
"""
Fontes ilimitadas de stream.

Um gerador infinito só é seguro quando algo o limita: `take`, um escopo
cancelado ou um deadline vencido.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator, Optional, TypeVar

from .scope import StreamScope

T = TypeVar("T")


def fibonacci(scope: Optional[StreamScope] = None) -> Iterator[int]:
    """Sequência de Fibonacci (0, 1, 1, 2, 3, ...) até o escopo encerrar."""
    a, b = 0, 1
    try:
        while True:
            if scope is not None and scope.done:
                # a fonte nunca se esgota: parar é sempre truncamento
                scope.mark_truncated("fibonacci")
                return
            yield a
            a, b = b, a + b
    finally:
        if scope is not None:
            scope.mark_closed("fibonacci")


def take(stream: Iterable[T], n: int) -> Iterator[T]:
    if n < 0:
        raise ValueError("n must be >= 0")
    return islice(stream, n)
