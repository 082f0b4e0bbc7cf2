"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from services.crm_service import CRMService` to
work when running tests from a source checkout, matching the layout the
package is installed with (src/ is the import root).
"""

import os
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing."""
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from services.crm_service import CRMService  # noqa: E402
from utils.clock import FrozenClock  # noqa: E402
from utils.output import BufferedOutput  # noqa: E402

START = datetime(2024, 1, 15, 9, 30, 0)


@pytest.fixture
def clock() -> FrozenClock:
    """Clock that starts at START and ticks one minute per reading."""
    return FrozenClock(START, step=timedelta(minutes=1))


@pytest.fixture
def output() -> BufferedOutput:
    return BufferedOutput()


@pytest.fixture
def crm(clock, output) -> CRMService:
    return CRMService(clock=clock, output=output)
