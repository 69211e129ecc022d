"""Pytest configuration and fixtures for timeperiod tests."""

from __future__ import annotations

import sys
from datetime import timezone
from pathlib import Path

import pytest

# Add the parent directory to sys.path so timeperiod can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from timeperiod.config import set_default_timezone  # noqa: E402


@pytest.fixture(autouse=True)
def utc_default_timezone():
    """Run every test with UTC as the zone for naive input."""
    previous = set_default_timezone(timezone.utc)
    yield
    set_default_timezone(previous)
