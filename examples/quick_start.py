"""Quick Start Example - Recording a Task.

This example narrates a small "deployment" with steps and subtasks, then
prints the resulting snapshot in the available report formats.
"""

import logging

from task_recorder import (
    VERBOSE_CONFIG,
    TaskUnresolvedError,
    create,
    log_task,
    render_markdown,
    render_text,
    render_yaml,
)


def upload(recorder, files):
    """Example subtask: returns the number of uploaded files."""
    with recorder.begin_subtask("Uploading files") as sub:
        for name in files:
            sub.begin_step(f"Upload {name}")
            if name.endswith(".tmp"):
                sub.set_step_failed("skipped temporary file")
            else:
                sub.set_step_succeeded()
        uploaded = [name for name in files if not name.endswith(".tmp")]
        sub.set_task_succeeded(f"{len(uploaded)} uploaded", len(uploaded))
    return len(uploaded)


def example_deploy(logger):
    """Example: Steps, a subtask and a failing step."""
    print("=== Deploy Example ===")

    with create(logger, "Deploying release...", config=VERBOSE_CONFIG) as rec:
        rec.begin_step("Checking configuration")
        rec.set_step_succeeded("config ok")

        count = upload(rec, ["app.py", "cache.tmp", "index.html"])

        rec.begin_step("Restarting service")
        try:
            raise ConnectionError("service did not answer")
        except ConnectionError as e:
            rec.set_step_failed("restart failed", e)
            rec.set_task_failed("Deployment incomplete", e)
        else:
            rec.set_task_succeeded("Deployed", count)

        task = rec.to_task()

    print(render_text(task))
    print()
    print(render_markdown(task))
    print(render_yaml(task))
    log_task(logger, task)


def example_unresolved(logger):
    """Example: Forgetting to resolve a task."""
    print("\n=== Unresolved Example ===")

    try:
        with create(logger, "Doing nothing") as rec:
            rec.begin_step("Thinking")
    except TaskUnresolvedError as e:
        print(f"Caught: {e}")


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(message)s")
    logger = logging.getLogger("quick_start")

    example_deploy(logger)
    example_unresolved(logger)


if __name__ == "__main__":
    main()
