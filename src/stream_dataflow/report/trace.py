# src/stream_dataflow/report/trace.py
"""
Tabela de rastreamento elemento a elemento de um pipeline.

Reproduz, como DataFrame, o caminho de cada elemento da fonte:

| input | kept | triple | successor | emitted |
|-------|------|--------|-----------|---------|
| 1     | True | 3      | 4         | 4       |
| 2     | False| <NA>   | <NA>      | <NA>    |

Decisões:
    - Colunas de transformação usam dtype `Int64` (nullable); elementos
      descartados pelo predicado ficam como `<NA>`
    - O nome da coluna é o nome da função; repetições recebem sufixo `_2`, `_3`...
    - A tabela é diagnóstica: não escreve em stdout e não consome streams
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from stream_dataflow.core.stream.operators import callable_name, is_odd, successor, triple


def _column_names(transforms: Sequence[Callable[[Any], Any]]) -> List[str]:
    names: List[str] = []
    seen: Dict[str, int] = {}
    for fn in transforms:
        base = callable_name(fn)
        seen[base] = seen.get(base, 0) + 1
        names.append(base if seen[base] == 1 else f"{base}_{seen[base]}")
    return names


def trace_frame(
    source: Iterable[int],
    predicate: Callable[[int], bool] = is_odd,
    transforms: Optional[Sequence[Callable[[int], int]]] = None,
) -> pd.DataFrame:
    """Constrói a tabela de rastreamento (uma linha por elemento da fonte)."""
    fns = list(transforms) if transforms is not None else [triple, successor]
    names = _column_names(fns)

    inputs: List[int] = []
    kept: List[bool] = []
    columns: Dict[str, List[Optional[int]]] = {name: [] for name in names}

    for item in source:
        inputs.append(item)
        keep = bool(predicate(item))
        kept.append(keep)
        value: Optional[int] = item
        for name, fn in zip(names, fns):
            value = fn(value) if keep else None
            columns[name].append(value)

    df = pd.DataFrame({"input": pd.array(inputs, dtype="Int64"), "kept": kept})
    for name in names:
        df[name] = pd.array(columns[name], dtype="Int64")

    last = columns[names[-1]] if names else [i if k else None for i, k in zip(inputs, kept)]
    df["emitted"] = pd.array(last, dtype="Int64")
    return df


def emitted_values(frame: pd.DataFrame) -> List[int]:
    """Valores emitidos, na ordem da fonte."""
    return [int(v) for v in frame["emitted"].dropna().tolist()]
