"""Shared fixtures for the tic-tac-toe tests."""

import pytest

from tictactoe.debug import DebugLevel, debug


@pytest.fixture(autouse=True)
def reset_debug_manager():
    """Restore the shared debug manager after each test."""
    yield
    debug.configure(level=DebugLevel.INFO, enabled=True, log_file="", components=[])
