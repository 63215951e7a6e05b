# src/stream_dataflow/core/stream/scope.py
"""
Escopo de cancelamento compartilhado pelos operadores de stream.

`StreamScope` coordena o encerramento antecipado de um stream lazy:
cancelamento explícito e deadline opcional. Como quem puxa os itens é o
operador terminal, em um único fluxo de controle, não há threads nem
sinais envolvidos; cada operador consulta `scope.done` antes de entregar
o item que tem em mãos.

O escopo distingue dois desfechos:
    - esgotamento natural: a fonte acabou, nenhum item foi descartado
    - truncamento: algum estágio parou com um item pendente porque o
      escopo já estava encerrado (`truncated`)

Invariantes:
    - `done` é irreversível (expiração também conta como cancelamento)
    - Nenhum operador vinculado ao escopo entrega itens após `done`
    - `closed_stages` e `truncated_by` preservam a ordem dos registros

Limites explícitos:
    - A checagem é cooperativa: código bloqueado não é interrompido
    - Encerramentos são registrados, nunca impressos
"""

from __future__ import annotations

import time
from typing import Callable, List, Optional


class StreamScope:
    """
    Cancelamento cooperativo e deadline de uma execução de stream.

    Args:
        timeout: segundos até o deadline; None desativa o deadline.
        clock: fonte de tempo monotônica (substituível em testes).
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if timeout is not None and timeout < 0:
            raise ValueError("timeout must be >= 0")
        self._clock = clock
        self._deadline = None if timeout is None else clock() + timeout
        self._cancelled = False
        self._closed: List[str] = []
        self._truncated_by: List[str] = []

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def expired(self) -> bool:
        return self._deadline is not None and self._clock() >= self._deadline

    @property
    def done(self) -> bool:
        if self.expired:
            self._cancelled = True
        return self._cancelled

    def remaining(self) -> Optional[float]:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())

    # -----------------------------
    # Registro de estágios
    # -----------------------------
    def mark_closed(self, stage: str) -> None:
        self._closed.append(stage)

    def mark_truncated(self, stage: str) -> None:
        self._truncated_by.append(stage)

    @property
    def closed_stages(self) -> List[str]:
        return list(self._closed)

    @property
    def truncated_by(self) -> List[str]:
        return list(self._truncated_by)

    @property
    def truncated(self) -> bool:
        """True quando algum estágio descartou trabalho pendente por causa do escopo."""
        return bool(self._truncated_by)
