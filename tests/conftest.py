"""
Shared test fixtures for markdown-table tests.
Resets config state so tests never depend on the caller's environment.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with logging off."""
    from markdown_table import config

    monkeypatch.setattr(config, "LOG_ENABLED", False)
