"""Gemini CLI client definition."""

from __future__ import annotations

import re

from cliprint.clients import register
from cliprint.models import ClientDefinition, ClientId

GEMINI_CLI = ClientDefinition(
    id=ClientId.GEMINI_CLI.value,
    name="Gemini CLI",
    display_name="Gemini Command Line Tool",
    description="Google Gemini API command-line interface",
    user_agent_pattern=re.compile(r"^GeminiCLI/v?[\d.]+", re.I | re.ASCII),
    required_paths=("/gemini",),
    validate_paths=("generateContent",),
    icon="💎",
)

register(GEMINI_CLI)
