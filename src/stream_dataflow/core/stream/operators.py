# src/stream_dataflow/core/stream/operators.py
"""
Operadores canônicos de stream lazy.

Blocos de construção de um pipeline funcional sequencial:

    stream_of → filter_op / map_op / delay_op → for_each
                  (encadeados por compose_pipeline)

Streams são iteradores Python. Um operador recebe o stream de entrada e
o escopo da execução e devolve um novo iterador; nada é avaliado até que
o operador terminal comece a puxar. Cada elemento percorre a cadeia
inteira (predicado, transformações, emissão) antes que o próximo saia
da fonte.

Invariantes:
    - Um operador nunca reordena nem duplica elementos
    - Após `scope.done`, nenhum operador entrega o item que tem em mãos;
      nesse caso o estágio é registrado em `scope.truncated_by`
    - Todo estágio vinculado a um escopo registra seu encerramento

Limites explícitos:
    - Não conhece Steps nem o Engine
    - Só escreve em stdout pelo sink padrão do operador terminal
"""

from __future__ import annotations

import time
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from .scope import StreamScope

T = TypeVar("T")

Predicate = Callable[[T], bool]
Transform = Callable[[T], T]
Operator = Callable[[Iterable[T], Optional[StreamScope]], Iterator[T]]
Sink = Callable[[Any], Any]


def callable_name(fn: Any) -> str:
    """Nome legível de um predicado/transformação (usado em ids e relatórios)."""
    return getattr(fn, "__name__", None) or type(fn).__name__


def _halted(scope: Optional[StreamScope], stage: str) -> bool:
    # chamado apenas com um item pendente: parar aqui é truncamento
    if scope is None or not scope.done:
        return False
    scope.mark_truncated(stage)
    return True


def _closed(scope: Optional[StreamScope], stage: str) -> None:
    if scope is not None:
        scope.mark_closed(stage)


def stream_of(*items: T, scope: Optional[StreamScope] = None) -> Iterator[T]:
    """Fonte finita com os itens fornecidos, na ordem dada."""
    try:
        for item in items:
            if _halted(scope, "stream_of"):
                return
            yield item
    finally:
        _closed(scope, "stream_of")


def filter_op(predicate: Predicate) -> Operator:
    """Deixa passar apenas os itens para os quais `predicate` é verdadeiro."""

    def _filter(stream: Iterable[T], scope: Optional[StreamScope] = None) -> Iterator[T]:
        try:
            for item in stream:
                if _halted(scope, "filter"):
                    return
                if predicate(item):
                    yield item
        finally:
            _closed(scope, "filter")

    return _filter


def map_op(transform: Transform) -> Operator:
    def _map(stream: Iterable[T], scope: Optional[StreamScope] = None) -> Iterator[T]:
        try:
            for item in stream:
                if _halted(scope, "map"):
                    return
                yield transform(item)
        finally:
            _closed(scope, "map")

    return _map


def delay_op(seconds: float, *, sleep: Callable[[float], Any] = time.sleep) -> Operator:
    """
    Atrasa a entrega de cada item em `seconds`.

    O item é puxado antes da espera: o fim da fonte é detectado sem
    esperar. Após a espera o escopo é consultado de novo, e um item cujo
    deadline venceu durante a espera não é entregue.
    """
    if seconds < 0:
        raise ValueError("delay seconds must be >= 0")

    def _delay(stream: Iterable[T], scope: Optional[StreamScope] = None) -> Iterator[T]:
        try:
            for item in stream:
                if seconds and not (scope is not None and scope.done):
                    sleep(seconds)
                if _halted(scope, "delay"):
                    return
                yield item
        finally:
            _closed(scope, "delay")

    return _delay


def compose_pipeline(
    source: Iterable[T],
    *operators: Operator,
    scope: Optional[StreamScope] = None,
) -> Iterator[T]:
    """Encadeia `operators` sobre `source`, da esquerda para a direita."""
    stream: Iterable[T] = source
    for operator in operators:
        stream = operator(stream, scope)
    return iter(stream)


def for_each(stream: Iterable[T], sink: Optional[Sink] = None) -> int:
    """
    Operador terminal: entrega cada item ao `sink` (padrão: `print`).

    Retorna quantos itens foram consumidos.
    """
    emit = print if sink is None else sink
    count = 0
    for item in stream:
        emit(item)
        count += 1
    return count


# predicados e transformações do programa canônico
def is_odd(n: int) -> bool:
    return n % 2 == 1


def is_even(n: int) -> bool:
    return n % 2 == 0


def triple(n: int) -> int:
    return n * 3


def successor(n: int) -> int:
    return n + 1
