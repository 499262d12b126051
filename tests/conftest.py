"""Test configuration for task-recorder."""
import logging
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from task_recorder import TRACE, TaskRecorder, create


@pytest.fixture
def logger():
    """Logger that lets every recorder message through."""
    log = logging.getLogger("task_recorder.tests")
    log.setLevel(TRACE)
    return log


@pytest.fixture
def recorder(logger) -> TaskRecorder:
    """Fresh root recorder."""
    return create(logger, "Started task...")
