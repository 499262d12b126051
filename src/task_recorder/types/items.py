"""Task Recorder - Snapshot Items.

Immutable tree produced when a recorder is finalized. Every node is either
a Step (a leaf with a step resolution) or a Task (a nested snapshot with a
task resolution). Both expose ``description`` so a parent's items can be
listed without checking their type.

Invariant:
    A Task's ``items`` is never empty. ``items[0]`` is the synthetic step
    carrying the task's own description, so ``Task.description`` is
    always defined.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterator, Optional, Sequence, TypeVar, Union

from .exceptions import EmptyTaskError
from .resolutions import (
    ResolutionKind,
    StepResolution,
    TaskFailed,
    TaskResolution,
    TaskSucceeded,
)

T = TypeVar("T")


class ItemKind(str, Enum):
    """Discriminant for snapshot items."""

    STEP = "step"
    TASK = "task"


@dataclass(frozen=True)
class Step:
    """A resolved step.

    Attributes:
        description: What the step did
        resolution: How the step ended
    """

    description: str
    resolution: StepResolution

    @property
    def kind(self) -> ItemKind:
        return ItemKind.STEP

    @property
    def succeeded(self) -> bool:
        return self.resolution.kind is ResolutionKind.SUCCEEDED

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "description": self.description,
            "resolution": self.resolution.to_dict(),
        }


@dataclass(frozen=True)
class Task(Generic[T]):
    """An immutable record of a task.

    Attributes:
        items: Steps and subtasks in recording order (never empty)
        resolution: How the task ended

    Raises:
        EmptyTaskError: If ``items`` is empty
    """

    items: Sequence[TaskItem]
    resolution: TaskResolution

    def __post_init__(self) -> None:
        # Freeze first so iterators and generators are checked by content
        items = tuple(self.items)
        if not items:
            raise EmptyTaskError()
        object.__setattr__(self, "items", items)

    @property
    def kind(self) -> ItemKind:
        return ItemKind.TASK

    @property
    def description(self) -> str:
        return self.items[0].description

    @property
    def succeeded(self) -> bool:
        return self.resolution.kind is ResolutionKind.SUCCEEDED

    @property
    def message(self) -> str:
        return self.resolution.message

    @property
    def result(self) -> Optional[T]:
        """The task's result, or None if the task failed."""
        if isinstance(self.resolution, TaskSucceeded):
            return self.resolution.result
        return None

    @property
    def cause(self) -> Optional[BaseException]:
        """The failure cause, or None if the task succeeded or had no cause."""
        if isinstance(self.resolution, TaskFailed):
            return self.resolution.cause
        return None

    def steps(self) -> list[Step]:
        """Return the direct Step items, including the initial one."""
        return [item for item in self.items if item.kind is ItemKind.STEP]

    def subtasks(self) -> list[Task[Any]]:
        """Return the direct Task items."""
        return [item for item in self.items if item.kind is ItemKind.TASK]

    def walk(self, depth: int = 0) -> Iterator[tuple[int, TaskItem]]:
        """Yield ``(depth, item)`` pairs depth-first in recording order.

        The task itself is yielded first at ``depth``. Its initial step is
        skipped since it duplicates the task's description.
        """
        yield depth, self
        for item in self.items[1:]:
            if item.kind is ItemKind.TASK:
                yield from item.walk(depth + 1)
            else:
                yield depth + 1, item

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "description": self.description,
            "resolution": self.resolution.to_dict(),
            "items": [item.to_dict() for item in self.items],
        }


TaskItem = Union[Step, Task[Any]]
