# tests/core/engine/test_planner_linear_chain.py
"""check_linear_chain: fonte única no início, um upstream por estágio, terminal no fim."""

import pytest

from stream_dataflow.core.engine.planner import NonLinearChainError, check_linear_chain, plan_execution
from stream_dataflow.core.pipeline.types import StepKind
from stream_dataflow.programs.odd_pipeline import build_steps


def test_program_chain_is_linear():
    check_linear_chain(plan_execution(build_steps()))


def test_program_chain_with_delay_is_linear():
    steps = build_steps(delay_seconds=0.5, sleep=lambda _: None)

    check_linear_chain(plan_execution(steps))
    assert [s.id for s in plan_execution(steps)][:3] == ["stream.source", "stream.delay", "stream.filter"]


def test_empty_chain_is_rejected():
    with pytest.raises(NonLinearChainError):
        check_linear_chain([])


def test_chain_must_start_at_its_only_source(StubStage):
    two_sources = [
        StubStage("stream.source"),
        StubStage("stream.source.extra", depends_on=["stream.source"]),
    ]
    with pytest.raises(NonLinearChainError, match="source"):
        check_linear_chain(two_sources)

    with pytest.raises(NonLinearChainError):
        check_linear_chain([StubStage("stream.filter", kind=StepKind.FILTER)])


def test_fan_in_is_rejected(StubStage):
    stages = plan_execution(
        [
            StubStage("stream.source"),
            StubStage("stream.filter", kind=StepKind.FILTER, depends_on=["stream.source"]),
            StubStage(
                "stream.map.triple",
                kind=StepKind.TRANSFORM,
                depends_on=["stream.source", "stream.filter"],
            ),
        ]
    )
    with pytest.raises(NonLinearChainError, match="2 upstream"):
        check_linear_chain(stages)


def test_branch_reading_from_earlier_stage_is_rejected(StubStage):
    stages = plan_execution(
        [
            StubStage("stream.source"),
            StubStage("stream.filter", kind=StepKind.FILTER, depends_on=["stream.source"]),
            StubStage("stream.map.triple", kind=StepKind.TRANSFORM, depends_on=["stream.source"]),
        ]
    )
    with pytest.raises(NonLinearChainError, match="previous stage"):
        check_linear_chain(stages)


def test_terminal_must_be_last(StubStage):
    stages = [
        StubStage("stream.source"),
        StubStage("stream.for_each", kind=StepKind.TERMINAL, depends_on=["stream.source"]),
        StubStage("stream.map.triple", kind=StepKind.TRANSFORM, depends_on=["stream.for_each"]),
    ]
    with pytest.raises(NonLinearChainError, match="terminal"):
        check_linear_chain(stages)
