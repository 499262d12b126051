"""Task Recorder - Resolution Types.

Resolutions are the recorded outcome of a step or a task. Each level has
exactly two variants:

    Step:  StepSucceeded(message)          | StepFailed(message, cause)
    Task:  TaskSucceeded(message, result)  | TaskFailed(message, cause)

All variants are frozen dataclasses carrying a ``kind`` discriminant so
consumers can switch over them without isinstance chains.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ResolutionKind(str, Enum):
    """Outcome discriminant shared by step and task resolutions."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


def cause_to_dict(cause: Optional[BaseException]) -> Optional[dict]:
    """Describe an exception as a plain dictionary (None stays None)."""
    if cause is None:
        return None
    return {
        "type": type(cause).__name__,
        "message": str(cause),
    }


# =============================================================================
# Step Resolutions
# =============================================================================


@dataclass(frozen=True)
class StepSucceeded:
    """A step completed successfully.

    Attributes:
        message: Optional message; the empty string means "no message"
    """

    message: str = ""

    @property
    def kind(self) -> ResolutionKind:
        return ResolutionKind.SUCCEEDED

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"kind": self.kind.value, "message": self.message}


@dataclass(frozen=True)
class StepFailed:
    """A step failed.

    Attributes:
        message: Failure message
        cause: Underlying exception, if any
    """

    message: str
    cause: Optional[BaseException] = None

    @property
    def kind(self) -> ResolutionKind:
        return ResolutionKind.FAILED

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "cause": cause_to_dict(self.cause),
        }


StepResolution = Union[StepSucceeded, StepFailed]


# =============================================================================
# Task Resolutions
# =============================================================================


@dataclass(frozen=True)
class TaskSucceeded(Generic[T]):
    """A task completed successfully and produced a result.

    Attributes:
        message: Optional message
        result: The value produced by the task
    """

    message: str
    result: T

    @property
    def kind(self) -> ResolutionKind:
        return ResolutionKind.SUCCEEDED

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "result": self.result,
        }


@dataclass(frozen=True)
class TaskFailed(Generic[T]):
    """A task failed.

    Attributes:
        message: Failure message
        cause: Underlying exception, if any
    """

    message: str
    cause: Optional[BaseException] = None

    @property
    def kind(self) -> ResolutionKind:
        return ResolutionKind.FAILED

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "cause": cause_to_dict(self.cause),
        }


TaskResolution = Union[TaskSucceeded[Any], TaskFailed[Any]]

STEP_RESOLUTION_TYPES = (StepSucceeded, StepFailed)
TASK_RESOLUTION_TYPES = (TaskSucceeded, TaskFailed)
