"""Tests for resolution and snapshot types.

Tests cover:
- Resolution discriminants and equality
- Task construction validation
- Snapshot accessors (description, result, steps, subtasks, walk)
- to_dict() output
"""

import dataclasses
import json

import pytest

from task_recorder.types import (
    EmptyTaskError,
    ItemKind,
    ResolutionKind,
    Step,
    StepFailed,
    StepSucceeded,
    Task,
    TaskFailed,
    TaskRecorderError,
    TaskSucceeded,
    TaskUnresolvedError,
    RecorderClosedError,
    cause_to_dict,
)


def _sample_task() -> Task:
    inner = Task(
        [Step("inner", StepSucceeded("")), Step("inner step", StepFailed("bad"))],
        TaskFailed("inner failed", KeyError("k")),
    )
    return Task(
        [
            Step("outer", StepSucceeded("")),
            Step("first", StepSucceeded("ok")),
            inner,
            Step("last", StepSucceeded("")),
        ],
        TaskSucceeded("done", {"count": 2}),
    )


class TestResolutions:
    """Tests for step and task resolutions."""

    def test_kinds(self):
        assert StepSucceeded().kind is ResolutionKind.SUCCEEDED
        assert StepFailed("x").kind is ResolutionKind.FAILED
        assert TaskSucceeded("x", 1).kind is ResolutionKind.SUCCEEDED
        assert TaskFailed("x").kind is ResolutionKind.FAILED

    def test_kind_values(self):
        assert ResolutionKind.SUCCEEDED.value == "succeeded"
        assert ResolutionKind.FAILED.value == "failed"

    def test_step_succeeded_default_message(self):
        assert StepSucceeded().message == ""

    def test_failed_cause_identity(self):
        cause = IOError("x")
        assert StepFailed("m", cause).cause is cause
        assert StepFailed("m", cause) == StepFailed("m", cause)
        assert StepFailed("m", cause) != StepFailed("m", IOError("x"))

    def test_resolutions_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            StepSucceeded("a").message = "b"
        with pytest.raises(dataclasses.FrozenInstanceError):
            TaskSucceeded("a", 1).result = 2

    def test_step_and_task_variants_differ(self):
        assert StepFailed("x") != TaskFailed("x")

    def test_to_dict(self):
        assert StepSucceeded("ok").to_dict() == {"kind": "succeeded", "message": "ok"}
        assert TaskSucceeded("ok", 3).to_dict() == {
            "kind": "succeeded",
            "message": "ok",
            "result": 3,
        }
        assert TaskFailed("no", ValueError("v")).to_dict() == {
            "kind": "failed",
            "message": "no",
            "cause": {"type": "ValueError", "message": "v"},
        }

    def test_cause_to_dict_none(self):
        assert cause_to_dict(None) is None


class TestTask:
    """Tests for the Task snapshot."""

    def test_empty_items_rejected(self):
        with pytest.raises(EmptyTaskError):
            Task([], TaskFailed("WHAT?"))

    def test_empty_generator_rejected(self):
        with pytest.raises(EmptyTaskError):
            Task(iter([]), TaskSucceeded("", 1))
        with pytest.raises(EmptyTaskError):
            Task((item for item in []), TaskSucceeded("", 1))

    def test_generator_items_frozen(self):
        task = Task((Step(name, StepSucceeded()) for name in ["a", "b"]), TaskSucceeded("", 1))
        assert task.items == (Step("a", StepSucceeded()), Step("b", StepSucceeded()))
        assert task.description == "a"

    def test_none_items_rejected_with_type_error(self):
        with pytest.raises(TypeError):
            Task(None, TaskSucceeded("", 1))

    def test_empty_task_error_is_value_error(self):
        with pytest.raises(ValueError):
            Task((), TaskFailed("WHAT?"))

    def test_description_from_first_item(self):
        task = Task([Step("first", StepSucceeded())], TaskSucceeded("", 1))
        assert task.description == "first"
        assert task.kind is ItemKind.TASK

    def test_items_frozen_to_tuple(self):
        items = [Step("first", StepSucceeded())]
        task = Task(items, TaskSucceeded("", 1))
        items.append(Step("second", StepSucceeded()))
        assert isinstance(task.items, tuple)
        assert len(task.items) == 1

    def test_result_and_cause(self):
        ok = Task([Step("a", StepSucceeded())], TaskSucceeded("", 7))
        err = RuntimeError("r")
        bad = Task([Step("a", StepSucceeded())], TaskFailed("no", err))
        assert ok.result == 7 and ok.cause is None and ok.succeeded
        assert bad.result is None and bad.cause is err and not bad.succeeded
        assert bad.message == "no"

    def test_steps_and_subtasks(self):
        task = _sample_task()
        assert [s.description for s in task.steps()] == ["outer", "first", "last"]
        assert [t.description for t in task.subtasks()] == ["inner"]

    def test_walk(self):
        walked = [(depth, item.description) for depth, item in _sample_task().walk()]
        assert walked == [
            (0, "outer"),
            (1, "first"),
            (1, "inner"),
            (2, "inner step"),
            (1, "last"),
        ]

    def test_to_dict_is_json_compatible(self):
        data = _sample_task().to_dict()
        parsed = json.loads(json.dumps(data))
        assert parsed["description"] == "outer"
        assert parsed["resolution"]["result"] == {"count": 2}
        inner = parsed["items"][2]
        assert inner["kind"] == "task"
        assert inner["resolution"]["cause"]["type"] == "KeyError"
        assert inner["items"][1]["resolution"]["kind"] == "failed"


class TestStep:
    """Tests for the Step snapshot."""

    def test_step_fields(self):
        step = Step("s", StepFailed("no"))
        assert step.kind is ItemKind.STEP
        assert step.description == "s"
        assert not step.succeeded

    def test_step_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Step("s", StepSucceeded()).description = "t"


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(EmptyTaskError, TaskRecorderError)
        assert issubclass(TaskUnresolvedError, RuntimeError)
        assert issubclass(RecorderClosedError, TaskRecorderError)

    def test_unresolved_message(self):
        err = TaskUnresolvedError("Build")
        assert str(err) == "No resolution was set for task 'Build'"
        assert err.description == "Build"
