"""Shared fixtures for vhost tests."""

from __future__ import annotations

import pytest

from vhost.testing import Recorder


@pytest.fixture
def handle() -> Recorder:
    """Recording handler that never continues the chain."""
    return Recorder(result="handled")


@pytest.fixture
def next_() -> Recorder:
    """Recording next-stage continuation."""
    return Recorder(result="next")
