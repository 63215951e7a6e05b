# tests/e2e/test_odd_pipeline_e2e.py
"""
Programa odd_pipeline de ponta a ponta: config YAML versionada, estágios
prontos, Engine e a saída exata `4\\n10\\n16\\n` em stdout.

Atraso e deadline usam relógio falso (`fake_time`); nenhum teste dorme.
"""

from __future__ import annotations

import runpy
from pathlib import Path

import pytest

from stream_dataflow.core.config.hashing import compute_config_hash
from stream_dataflow.core.config.loader import load_config
from stream_dataflow.core.pipeline.types import StepStatus
from stream_dataflow.programs.odd_pipeline import DEFAULT_CONFIG, SOURCE, build_steps, main, run_odd_pipeline

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "config" / "odd_pipeline.yaml"
CHAIN = ["stream.source", "stream.filter", "stream.map.triple", "stream.map.successor", "stream.for_each"]


def test_main_writes_exactly_three_lines(capsys) -> None:
    assert main() == 0
    out, err = capsys.readouterr()
    assert (out, err) == ("4\n10\n16\n", "")


def test_python_dash_m_exits_zero(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("stream_dataflow", run_name="__main__")

    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "4\n10\n16\n"


def test_versioned_yaml_config_reproduces_the_output(sink) -> None:
    config = load_config(defaults_path=str(FIXTURE))

    result = run_odd_pipeline(sink=sink, config=config, run_id="run-yaml")

    assert list(result.steps) == CHAIN
    assert {r.status for r in result.steps.values()} == {StepStatus.SUCCESS}
    assert sink == [4, 10, 16]
    assert result.steps["stream.for_each"].payload == {"values": [4, 10, 16], "cancelled": False}


def test_outputs_are_odd_inputs_tripled_plus_one(sink) -> None:
    run_odd_pipeline(sink=sink)

    assert sink == [3 * n + 1 for n in SOURCE if n % 2]


def test_back_to_back_runs_print_the_same(capsys) -> None:
    outputs = []
    for _ in range(3):
        run_odd_pipeline()
        outputs.append(capsys.readouterr().out)

    assert outputs == ["4\n10\n16\n"] * 3


def test_default_config_survives_a_run(sink) -> None:
    digest = compute_config_hash(DEFAULT_CONFIG)

    assert run_odd_pipeline(sink=sink).ok
    assert compute_config_hash(DEFAULT_CONFIG) == digest


def test_config_source_replaces_the_program_source(sink) -> None:
    run_odd_pipeline(sink=sink, config={"stream": {"source": [7, 8, 9]}})

    assert sink == [22, 28]


def test_delay_without_deadline_keeps_full_output(sink, fake_time) -> None:
    config = {"stream": {"delay_seconds": 0.5}}

    result = run_odd_pipeline(sink=sink, config=config, clock=fake_time.clock, sleep=fake_time.sleep)

    assert list(result.steps) == CHAIN[:1] + ["stream.delay"] + CHAIN[1:]
    assert sink == [4, 10, 16]
    assert fake_time.sleeps == [0.5] * 5
    assert result.steps["stream.for_each"].payload["cancelled"] is False


def test_delay_with_deadline_truncates_the_output(sink, fake_time) -> None:
    config = {"stream": {"delay_seconds": 1, "timeout_seconds": 4}}

    result = run_odd_pipeline(sink=sink, config=config, clock=fake_time.clock, sleep=fake_time.sleep)

    terminal = result.steps["stream.for_each"]
    assert result.ok
    assert sink == [4, 10]
    assert terminal.payload == {"values": [4, 10], "cancelled": True}
    assert terminal.warnings == ["stream closed by scope before exhaustion"]


def test_no_delay_stage_when_delay_is_zero() -> None:
    assert [s.id for s in build_steps(delay_seconds=0)] == CHAIN


def test_each_stage_reads_from_the_one_before() -> None:
    steps = build_steps(delay_seconds=1)

    assert steps[0].depends_on == []
    assert all(after.depends_on == [before.id] for before, after in zip(steps, steps[1:]))
