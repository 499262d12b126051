"""Task Recorder - the mutable side of the recording protocol.

A TaskRecorder narrates one task: callers begin steps and subtasks, set
resolutions as they go, set the task's own resolution, then finalize the
recorder into an immutable Task snapshot and close it.

Lifecycle:
    create() → begin_step()/begin_subtask()... → set_task_*() → to_task() → close()

    - The recorder starts with an implicit step carrying its own
      description, so the current step always exists.
    - Step resolution setters on the recorder target the most recently
      begun step. Subtasks never become the current step.
    - to_task() and close() fail with TaskUnresolvedError until a task
      resolution has been set.
    - close() is idempotent and thread-safe. Once closed, any mutation
      fails with RecorderClosedError.

Example:
    >>> with create(logging.getLogger("deploy"), "Deploying...") as rec:
    ...     rec.begin_step("Uploading")
    ...     rec.set_step_succeeded("3 files")
    ...     rec.set_task_succeeded("Deployed", 3)
    ...     task = rec.to_task()
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar, Union

from .config import DEFAULT_CONFIG, RecorderConfig
from .types import (
    STEP_RESOLUTION_TYPES,
    TASK_RESOLUTION_TYPES,
    ItemKind,
    RecorderClosedError,
    ResolutionKind,
    Step,
    StepFailed,
    StepResolution,
    StepSucceeded,
    Task,
    TaskFailed,
    TaskResolution,
    TaskSucceeded,
    TaskUnresolvedError,
)

T = TypeVar("T")


class RecorderLogger(Protocol):
    """The logging capability a recorder forwards its narrative to.

    A standard ``logging.Logger`` satisfies this protocol.
    """

    def isEnabledFor(self, level: int) -> bool:
        ...

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        ...


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


class StepResolutionSetters(ABC):
    """Convenience setters built on ``set_step_resolution``.

    Shared by StepRecorder (which resolves itself) and TaskRecorder
    (which resolves its current step).
    """

    @abstractmethod
    def set_step_resolution(self, resolution: StepResolution) -> None:
        """Set the resolution of the step."""

    def set_step_succeeded(self, message: str = "") -> None:
        """Mark the step as succeeded. The empty message means "no message"."""
        self.set_step_resolution(StepSucceeded(_require_str(message, "message")))

    def set_step_failed(
        self,
        message: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        """Mark the step as failed, optionally recording the exception behind it."""
        self.set_step_resolution(StepFailed(_require_str(message, "message"), cause))


class StepRecorder(StepResolutionSetters):
    """Records a single step. Created by TaskRecorder.begin_step().

    The resolution defaults to ``StepSucceeded("")`` until overwritten.
    """

    def __init__(
        self,
        description: str,
        logger: RecorderLogger,
        config: RecorderConfig = DEFAULT_CONFIG,
        guard: Optional[Callable[[], None]] = None,
    ):
        self._description = _require_str(description, "description")
        self._logger = logger
        self._config = config
        self._guard = guard
        self._resolution: StepResolution = StepSucceeded("")

    def __repr__(self) -> str:
        return f"[StepRecorder {self._description} {self._resolution}]"

    @property
    def kind(self) -> ItemKind:
        return ItemKind.STEP

    @property
    def description(self) -> str:
        return self._description

    @property
    def resolution(self) -> StepResolution:
        return self._resolution

    def set_step_resolution(self, resolution: StepResolution) -> None:
        if self._guard is not None:
            self._guard()
        if not isinstance(resolution, STEP_RESOLUTION_TYPES):
            raise TypeError(
                f"resolution must be StepSucceeded or StepFailed, got {type(resolution).__name__}"
            )

        self._log_resolution(resolution)
        self._resolution = resolution

    # Shorter names for callers holding the step itself
    def set_succeeded(self, message: str = "") -> None:
        self.set_step_succeeded(message)

    def set_failed(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.set_step_failed(message, cause)

    def to_step(self) -> Step:
        """Snapshot this step."""
        return Step(self._description, self._resolution)

    def to_item(self) -> Step:
        return self.to_step()

    def _log_resolution(self, resolution: StepResolution) -> None:
        level = self._config.debug_level
        if not self._logger.isEnabledFor(level):
            return

        if resolution.kind is ResolutionKind.SUCCEEDED:
            if resolution.message:
                self._logger.log(level, "succeeded: %s: %s", self._description, resolution.message)
            else:
                self._logger.log(level, "succeeded: %s", self._description)
        else:
            exc_info = resolution.cause if self._config.log_causes else None
            self._logger.log(
                level,
                "failure: %s: %s",
                self._description,
                resolution.message,
                exc_info=exc_info,
            )


class TaskRecorder(StepResolutionSetters, Generic[T]):
    """Records a task: its steps, its subtasks and its resolution.

    Use create() (or TaskRecorder.create()) for a root recorder and
    begin_subtask() for nested ones.

    Thread safety:
        One thread narrates a recorder at a time. close() alone may be
        called concurrently; exactly one caller performs the validation
        and the others return without effect.
    """

    def __init__(
        self,
        logger: RecorderLogger,
        description: str,
        config: Optional[RecorderConfig] = None,
    ):
        """Initialize a recorder.

        Args:
            logger: Receives the narrative as log messages
            description: Description of the task, used as its first step
            config: Log levels to use (default: DEFAULT_CONFIG)
        """
        if logger is None:
            raise TypeError("logger must not be None")

        self._logger = logger
        self._config = config or DEFAULT_CONFIG
        self._description = _require_str(description, "description")
        self._resolution: Optional[TaskResolution] = None

        self._closed = False
        self._close_lock = threading.Lock()

        self._step_current = StepRecorder(
            self._description, self._logger, self._config, guard=self._check_open
        )
        self._recorders: list[Union[StepRecorder, TaskRecorder[Any]]] = [self._step_current]

    @classmethod
    def create(
        cls,
        logger: RecorderLogger,
        description: str,
        config: Optional[RecorderConfig] = None,
    ) -> TaskRecorder[T]:
        """Create a new root task recorder."""
        return cls(logger, description, config)

    def __repr__(self) -> str:
        return f"[TaskRecorder ({self._description})]"

    def __enter__(self) -> TaskRecorder[T]:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.close()
            return

        # The body's exception stays the one that propagates
        try:
            self.close()
        except TaskUnresolvedError as e:
            level = self._config.debug_level
            if self._logger.isEnabledFor(level):
                self._logger.log(level, "close suppressed: %s: %s", self._description, e)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def kind(self) -> ItemKind:
        return ItemKind.TASK

    @property
    def description(self) -> str:
        return self._description

    @property
    def resolution(self) -> Optional[TaskResolution]:
        """The task resolution, or None if not set yet."""
        return self._resolution

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def config(self) -> RecorderConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------------

    def begin_subtask(self, description: str) -> TaskRecorder[Any]:
        """Begin recording a new subtask.

        The subtask shares this recorder's logger and config. It does not
        become the current step.
        """
        self._check_open()
        task: TaskRecorder[Any] = TaskRecorder(self._logger, description, self._config)
        level = self._config.trace_level
        if self._logger.isEnabledFor(level):
            self._logger.log(level, "beginSubtask: %s", description)

        self._recorders.append(task)
        return task

    def begin_step(self, description: str) -> StepRecorder:
        """Begin a new step and make it the current step."""
        self._check_open()
        step = StepRecorder(description, self._logger, self._config, guard=self._check_open)
        level = self._config.trace_level
        if self._logger.isEnabledFor(level):
            self._logger.log(level, "beginStep: %s", description)

        self._recorders.append(step)
        self._step_current = step
        return step

    def step_current(self) -> StepRecorder:
        """Return the most recently begun step (initially the task's own step)."""
        return self._step_current

    def set_step_resolution(self, resolution: StepResolution) -> None:
        """Set the resolution of the current step."""
        self._step_current.set_step_resolution(resolution)

    def set_task_resolution(self, resolution: TaskResolution) -> None:
        """Set the resolution of this task. The last call wins."""
        self._check_open()
        if not isinstance(resolution, TASK_RESOLUTION_TYPES):
            raise TypeError(
                f"resolution must be TaskSucceeded or TaskFailed, got {type(resolution).__name__}"
            )

        level = self._config.debug_level
        if self._logger.isEnabledFor(level):
            if resolution.kind is ResolutionKind.SUCCEEDED:
                self._logger.log(
                    level, "task succeeded: %s: %s", self._description, resolution.message
                )
            else:
                exc_info = resolution.cause if self._config.log_causes else None
                self._logger.log(
                    level,
                    "task failed: %s: %s",
                    self._description,
                    resolution.message,
                    exc_info=exc_info,
                )

        self._resolution = resolution

    def set_task_succeeded(self, message: str, result: T) -> None:
        """Set the task as having succeeded with a result."""
        self.set_task_resolution(TaskSucceeded(_require_str(message, "message"), result))

    def set_task_failed(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Set the task as having failed."""
        self.set_task_resolution(TaskFailed(_require_str(message, "message"), cause))

    # -------------------------------------------------------------------------
    # Finalization
    # -------------------------------------------------------------------------

    def to_task(self) -> Task[T]:
        """Snapshot this task and all its subtasks.

        Later changes to the recorder are not reflected in the result.

        Raises:
            TaskUnresolvedError: If this task, or any subtask, has no resolution
        """
        self._check_resolution()
        return Task([recorder.to_item() for recorder in self._recorders], self._resolution)

    def to_item(self) -> Task[T]:
        return self.to_task()

    def close(self) -> None:
        """Validate that the task was resolved and mark the recorder closed.

        Calling close() again after it succeeded has no effect. If the task
        is unresolved the recorder stays open, so the caller may set a
        resolution and close again.

        Raises:
            TaskUnresolvedError: If no task resolution was set
        """
        with self._close_lock:
            if self._closed:
                return
            self._check_resolution()
            self._closed = True

    def _check_resolution(self) -> None:
        if self._resolution is None:
            raise TaskUnresolvedError(self._description)

    def _check_open(self) -> None:
        if self._closed:
            raise RecorderClosedError(self._description)


def create(
    logger: RecorderLogger,
    description: str,
    config: Optional[RecorderConfig] = None,
) -> TaskRecorder[Any]:
    """Create a new root task recorder.

    Args:
        logger: Receives the narrative as log messages
        description: Description of the task
        config: Log levels to use (default: DEFAULT_CONFIG)

    Returns:
        A new, open TaskRecorder
    """
    return TaskRecorder.create(logger, description, config)
