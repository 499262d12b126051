"""Task snapshot report rendering.

Turns a finalized Task into something a person can read: an indented text
tree for logs, a markdown document for reports, or YAML for audit trails.
Rendering never mutates the snapshot.

Example:
    >>> task = recorder.to_task()
    >>> print(render_text(task))
    [OK] Started task... (OK!)
      [OK] Step 0 (OK 0)
      [FAILED] Step 1 (disk full) caused by OSError: [Errno 28] No space left
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import yaml

from .recorder import RecorderLogger
from .types import ItemKind, StepSucceeded, Task, TaskItem

_MARKERS = {True: "[OK]", False: "[FAILED]"}


def _cause_of(item: TaskItem) -> Optional[BaseException]:
    return getattr(item.resolution, "cause", None)


def _outcome(item: TaskItem) -> list[str]:
    parts = []
    message = item.resolution.message
    if message:
        parts.append(f"({message})")
    cause = _cause_of(item)
    if cause is not None:
        parts.append(f"caused by {type(cause).__name__}: {cause}")
    return parts


def _start_note(task: Task[Any]) -> Optional[str]:
    """Describe the task's initial step, unless it kept its default resolution."""
    start = task.items[0]
    if start.resolution == StepSucceeded(""):
        return None
    return " ".join([_MARKERS[start.succeeded], *_outcome(start)])


def _summary(item: TaskItem) -> str:
    parts = [_MARKERS[item.succeeded], item.description, *_outcome(item)]
    if item.kind is ItemKind.TASK:
        note = _start_note(item)
        if note is not None:
            parts.append(f"{{start {note}}}")
    return " ".join(parts)


def render_lines(task: Task[Any], indent: str = "  ") -> list[str]:
    """Render a task as one line per item, indented by depth."""
    return [f"{indent * depth}{_summary(item)}" for depth, item in task.walk()]


def render_text(task: Task[Any], indent: str = "  ") -> str:
    """Render a task as an indented text tree."""
    return "\n".join(render_lines(task, indent))


def render_markdown(task: Task[Any]) -> str:
    """Render a task as a markdown document.

    The task becomes a heading with its outcome; steps and subtasks become
    a nested bullet list. Task results are shown next to subtasks.
    """
    status = "Succeeded" if task.succeeded else "Failed"
    lines = [
        f"# {task.description}",
        "",
        f"**Status**: {status}",
    ]
    if task.message:
        lines.append(f"**Message**: {task.message}")
    if task.succeeded:
        lines.append(f"**Result**: `{task.result!r}`")
    elif task.cause is not None:
        lines.append(f"**Cause**: `{type(task.cause).__name__}: {task.cause}`")
    start = _start_note(task)
    if start is not None:
        lines.append(f"**Start**: {start}")

    walked = list(task.walk())[1:]
    if walked:
        lines.extend(["", "## Steps", ""])
        for depth, item in walked:
            bullet = f"{'  ' * (depth - 1)}- {_summary(item)}"
            if item.kind is ItemKind.TASK and item.succeeded:
                bullet += f" → `{item.result!r}`"
            lines.append(bullet)

    return "\n".join(lines) + "\n"


def _yaml_safe(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, dict):
        return {str(k): _yaml_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_yaml_safe(v) for v in value]
    return repr(value)


def render_yaml(task: Task[Any]) -> str:
    """Render a task as YAML.

    Results that are not plain data (numbers, strings, lists, dicts) are
    written as their repr().
    """
    return yaml.safe_dump(_yaml_safe(task.to_dict()), sort_keys=False, allow_unicode=True)


def log_task(
    logger: RecorderLogger,
    task: Task[Any],
    level: int = logging.INFO,
) -> None:
    """Emit a task's text rendering to a logger, one record per line."""
    if not logger.isEnabledFor(level):
        return
    for line in render_lines(task):
        logger.log(level, "%s", line)
