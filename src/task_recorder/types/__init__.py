"""Task Recorder Types - Immutable values shared by the recorder and its consumers.

Package Structure:
    - resolutions.py: Step and task resolutions (Succeeded/Failed variants)
    - items.py: Snapshot tree (Step, Task)
    - exceptions.py: Exception classes (TaskRecorderError and subclasses)

Usage:
    >>> from task_recorder.types import Task, Step, StepSucceeded, TaskSucceeded
    >>> from task_recorder.types import TaskRecorderError, TaskUnresolvedError
"""

from .exceptions import (
    EmptyTaskError,
    InvalidConfigError,
    RecorderClosedError,
    TaskRecorderError,
    TaskUnresolvedError,
)
from .items import ItemKind, Step, Task, TaskItem
from .resolutions import (
    STEP_RESOLUTION_TYPES,
    TASK_RESOLUTION_TYPES,
    ResolutionKind,
    StepFailed,
    StepResolution,
    StepSucceeded,
    TaskFailed,
    TaskResolution,
    TaskSucceeded,
    cause_to_dict,
)

__all__ = [
    # Resolutions
    "ResolutionKind",
    "StepSucceeded",
    "StepFailed",
    "StepResolution",
    "TaskSucceeded",
    "TaskFailed",
    "TaskResolution",
    "STEP_RESOLUTION_TYPES",
    "TASK_RESOLUTION_TYPES",
    "cause_to_dict",
    # Snapshot items
    "ItemKind",
    "Step",
    "Task",
    "TaskItem",
    # Exceptions
    "TaskRecorderError",
    "EmptyTaskError",
    "TaskUnresolvedError",
    "RecorderClosedError",
    "InvalidConfigError",
]
