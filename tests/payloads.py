"""Request payloads shared across tests."""

from __future__ import annotations

from typing import Any

CLAUDE_UA = "claude-cli/1.0.86 (external, cli)"
CLAUDE_SYSTEM_PROMPT = "You are Claude Code, Anthropic's official CLI for Claude."
USER_HASH = "d98385411c93cd074b2cefd5c9831fe77f24a53e4ecdcd1f830bba586fe62cb9"
CLAUDE_USER_ID = f"user_{USER_HASH}_account__session_abc-123"


def claude_body(user_id: str = CLAUDE_USER_ID, system: Any = None) -> dict[str, Any]:
    """Return a Claude Code /v1/messages body with the given overrides."""
    if system is None:
        system = [{"type": "text", "text": CLAUDE_SYSTEM_PROMPT}]
    return {
        "model": "claude-sonnet-4",
        "system": system,
        "messages": [{"role": "user", "content": "hello"}],
        "metadata": {"user_id": user_id},
    }
