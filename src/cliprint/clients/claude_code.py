"""Claude Code CLI client definition."""

from __future__ import annotations

import re

from cliprint.clients import register
from cliprint.models import ClientDefinition, ClientId

CLAUDE_CODE = ClientDefinition(
    id=ClientId.CLAUDE_CODE.value,
    name="Claude Code",
    display_name="Claude Code CLI",
    description="Claude Code command-line interface",
    # e.g. "claude-cli/1.0.86 (external, cli)"
    user_agent_pattern=re.compile(
        r"^claude-cli/[\d.]+([-\w]*)?\s+\(external,\s*cli\)\Z", re.I | re.ASCII
    ),
    required_headers=("x-app", "anthropic-beta", "anthropic-version"),
    restricted_paths=("/api/v1/messages", "/claude/v1/messages"),
    icon="🤖",
)

register(CLAUDE_CODE)
