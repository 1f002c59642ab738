"""Codex CLI client definition."""

from __future__ import annotations

import re

from cliprint.clients import register
from cliprint.models import ClientDefinition, ClientId

CODEX_CLI = ClientDefinition(
    id=ClientId.CODEX_CLI.value,
    name="Codex CLI",
    display_name="Codex Command Line Tool",
    description="Cursor/Codex command-line interface",
    user_agent_pattern=re.compile(r"^(codex_vscode|codex_cli_rs)/[\d.]+", re.I | re.ASCII),
    required_headers=("originator", "session_id"),
    restricted_paths=("/openai", "/azure"),
    icon="🔷",
)

register(CODEX_CLI)
