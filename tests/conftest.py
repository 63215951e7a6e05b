# tests/conftest.py
"""
Fixtures compartilhados pela suíte.

    defaults_yaml / local_yaml → par de arquivos de config (base + override)
    run_config / run_ctx       → config resolvida e RunContext sem deadline
    sink                       → coletor de valores no lugar de `print`
    fake_time                  → relógio manual; `sleep` apenas avança o relógio
    StubStage                  → estágio mínimo, sem herdar de Step

Nenhuma fixture roda o pipeline de verdade.
"""

from datetime import datetime, timezone

import pytest

from stream_dataflow.core.pipeline.context import RunContext
from stream_dataflow.core.pipeline.types import StepKind, StepResult, StepStatus


@pytest.fixture
def defaults_yaml() -> str:
    return (
        "engine:\n"
        "  fail_fast: true\n"
        "  log_level: info\n"
        "steps:\n"
        "  stream.filter:\n"
        "    enabled: true\n"
        "stream:\n"
        "  source: [1, 2, 3, 4, 5]\n"
        "  delay_seconds: 0\n"
        "  timeout_seconds: null\n"
    )


@pytest.fixture
def local_yaml() -> str:
    """Override que troca a fonte, desliga o filtro e preenche o timeout."""
    return (
        "engine:\n"
        "  log_level: debug\n"
        "steps:\n"
        "  stream.filter:\n"
        "    enabled: false\n"
        "stream:\n"
        "  source: [10, 11, 12]\n"
        "  timeout_seconds: 0.5\n"
    )


@pytest.fixture
def run_config() -> dict:
    return {
        "engine": {"fail_fast": True, "log_level": "debug"},
        "steps": {"stream.source": {"enabled": True}},
        "stream": {},
    }


@pytest.fixture
def run_ctx(run_config) -> RunContext:
    return RunContext(
        run_id="run-fixture",
        created_at=datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc),
        config=run_config,
        meta={"origin": "pytest"},
    )


@pytest.fixture
def sink():
    class Sink(list):
        def __call__(self, value):
            self.append(value)

    return Sink()


class FakeTime:
    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps = []

    def clock(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def StubStage():
    """Fábrica de estágios que publicam `<id>.done` e terminam com SUCCESS."""

    class _Stage:
        def __init__(self, step_id="stream.source", kind=StepKind.SOURCE, depends_on=None):
            self.id = step_id
            self.kind = kind
            self.depends_on = list(depends_on or [])

        def run(self, ctx):
            ctx.set_artifact(f"{self.id}.done", True)
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary="stub",
                artifacts={"done": f"{self.id}.done"},
            )

    return _Stage
