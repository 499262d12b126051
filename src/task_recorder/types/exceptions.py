"""Task Recorder - Exception Classes.

This module defines all exceptions raised by the task recorder.
All exceptions inherit from TaskRecorderError for easy catching.

Usage:
    try:
        recorder.close()
    except TaskRecorderError as e:
        print(f"Recorder error: {e}")
"""

from __future__ import annotations


class TaskRecorderError(Exception):
    """Base exception for all task recorder errors."""
    pass


class EmptyTaskError(TaskRecorderError, ValueError):
    """Raised when a Task snapshot is built from an empty item list.

    Recorders always hold an implicit first step, so this indicates a
    defect rather than a caller mistake.
    """

    def __init__(self, message: str = "Task item lists cannot be empty."):
        super().__init__(message)


class TaskUnresolvedError(TaskRecorderError, RuntimeError):
    """Raised when a task is closed or finalized without a resolution."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"No resolution was set for task '{description}'")


class RecorderClosedError(TaskRecorderError, RuntimeError):
    """Raised when a closed recorder is mutated."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"Recorder is closed: '{description}'")


class InvalidConfigError(TaskRecorderError, ValueError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str):
        super().__init__(f"Invalid configuration: {message}")
