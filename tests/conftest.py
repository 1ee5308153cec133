"""Shared fixtures for the treepick tests."""

import pytest


@pytest.fixture
def commands():
    """Nested command document with duplicated leaves under two branches."""
    return {
        "systemctl": {
            "--system": {
                "restart": ["signal", "firefox", "gmail"]
            },
            "--user": {
                "restart": ["signal", "firefox", "gmail"]
            }
        }
    }
