# src/stream_dataflow/core/__init__.py
"""
Núcleo síncrono do Stream DataFlow.

    stream   → operadores lazy, StreamScope e geradores
    config   → leitura, merge, validação e hash da configuração
    pipeline → Step, StepResult, RunContext e StepRegistry
    engine   → ordem de execução e a execução em si

Nada aqui depende da CLI nem guarda estado entre runs.
"""
