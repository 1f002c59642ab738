"""Gemini CLI validator (declarative rules only)."""

from __future__ import annotations

from cliprint.clients.gemini_cli import GEMINI_CLI
from cliprint.validators import register_validator
from cliprint.validators.base import DefinitionValidator

GEMINI_CLI_VALIDATOR = DefinitionValidator(GEMINI_CLI)

register_validator(GEMINI_CLI_VALIDATOR)
