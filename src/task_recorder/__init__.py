"""Hierarchical task recording.

Narrate a multi-step operation (steps, nested subtasks, and a final
success/failure resolution) and obtain an immutable tree describing what
happened, for logging, diagnostics or audit trails.

Basic Usage:
    >>> import logging
    >>> from task_recorder import create
    >>> with create(logging.getLogger("build"), "Building project...") as rec:
    ...     rec.begin_step("Compiling")
    ...     rec.set_step_succeeded("12 modules")
    ...     rec.begin_step("Linking")
    ...     rec.set_step_failed("missing symbol", LookupError("main"))
    ...     rec.set_task_failed("Build failed")
    ...     task = rec.to_task()

Subtasks:
    >>> with create(logger, "Sum") as rec:
    ...     with rec.begin_subtask("Left") as left:
    ...         left.set_task_succeeded("", 10)
    ...     with rec.begin_subtask("Right") as right:
    ...         right.set_task_succeeded("", 15)
    ...     rec.set_task_succeeded("Done", 25)
    ...     task = rec.to_task()
    >>> [item.description for item in task.items]
    ['Sum', 'Left', 'Right']

Reports:
    >>> from task_recorder import render_text
    >>> print(render_text(task))
"""

__version__ = "0.1.0"

from task_recorder.types import (
    # Resolutions
    ResolutionKind,
    StepFailed,
    StepResolution,
    StepSucceeded,
    TaskFailed,
    TaskResolution,
    TaskSucceeded,
    # Snapshot
    ItemKind,
    Step,
    Task,
    TaskItem,
    # Exceptions
    EmptyTaskError,
    InvalidConfigError,
    RecorderClosedError,
    TaskRecorderError,
    TaskUnresolvedError,
)

from task_recorder.config import (
    DEFAULT_CONFIG,
    QUIET_CONFIG,
    TRACE,
    VERBOSE_CONFIG,
    RecorderConfig,
    resolve_level,
)

from task_recorder.recorder import (
    RecorderLogger,
    StepRecorder,
    StepResolutionSetters,
    TaskRecorder,
    create,
)

from task_recorder.report import (
    log_task,
    render_lines,
    render_markdown,
    render_text,
    render_yaml,
)

__all__ = [
    "__version__",
    # Entry point
    "create",
    # Recorders
    "TaskRecorder",
    "StepRecorder",
    "StepResolutionSetters",
    "RecorderLogger",
    # Config
    "RecorderConfig",
    "DEFAULT_CONFIG",
    "VERBOSE_CONFIG",
    "QUIET_CONFIG",
    "TRACE",
    "resolve_level",
    # Resolutions
    "ResolutionKind",
    "StepSucceeded",
    "StepFailed",
    "StepResolution",
    "TaskSucceeded",
    "TaskFailed",
    "TaskResolution",
    # Snapshot
    "ItemKind",
    "Step",
    "Task",
    "TaskItem",
    # Reports
    "render_text",
    "render_lines",
    "render_markdown",
    "render_yaml",
    "log_task",
    # Exceptions
    "TaskRecorderError",
    "EmptyTaskError",
    "TaskUnresolvedError",
    "RecorderClosedError",
    "InvalidConfigError",
]
