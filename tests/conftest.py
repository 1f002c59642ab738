"""Shared fixtures for cliprint tests."""

from __future__ import annotations

import pytest

from .payloads import CLAUDE_UA


@pytest.fixture
def claude_headers() -> dict[str, str]:
    return {
        "User-Agent": CLAUDE_UA,
        "x-app": "cli",
        "anthropic-beta": "claude-code-20250219",
        "anthropic-version": "2023-06-01",
    }
