# tests/core/pipeline/test_step_protocol.py
"""Protocolo Step (duck typing) e o StepResult imutável."""

import dataclasses

import pytest

from stream_dataflow.core.pipeline.step import Step
from stream_dataflow.core.pipeline.types import StepKind, StepResult, StepStatus
from stream_dataflow.steps import DelayStep, FilterStep, ForEachStep, MapStep, StreamSourceStep


def test_plain_class_with_the_right_members_is_a_step(StubStage, run_ctx):
    stage = StubStage("stream.filter", kind=StepKind.FILTER)

    assert isinstance(stage, Step)
    assert stage.run(run_ctx).status == StepStatus.SUCCESS


def test_object_without_run_is_not_a_step():
    class NoRun:
        id = "stream.filter"
        kind = StepKind.FILTER
        depends_on = []

    assert not isinstance(NoRun(), Step)


def test_builtin_stages_declare_their_kind():
    stages = [StreamSourceStep(), DelayStep(seconds=0), FilterStep(), MapStep(transform=abs), ForEachStep()]

    assert all(isinstance(s, Step) for s in stages)
    assert [(s.id, s.kind) for s in stages] == [
        ("stream.source", StepKind.SOURCE),
        ("stream.delay", StepKind.TRANSFORM),
        ("stream.filter", StepKind.FILTER),
        ("stream.map.abs", StepKind.TRANSFORM),
        ("stream.for_each", StepKind.TERMINAL),
    ]


def test_step_result_cannot_be_mutated():
    result = StepResult(step_id="stream.source", kind=StepKind.SOURCE, status=StepStatus.SUCCESS, summary="ok")

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.summary = "changed"  # type: ignore[misc]


@pytest.mark.parametrize(
    "status, ok",
    [(StepStatus.SUCCESS, True), (StepStatus.SKIPPED, True), (StepStatus.FAILED, False)],
)
def test_step_result_ok_is_false_only_on_failure(status, ok):
    result = StepResult(step_id="stream.filter", kind=StepKind.FILTER, status=status, summary="")

    assert result.ok is ok
    assert result.metrics == {} and result.payload == {}
