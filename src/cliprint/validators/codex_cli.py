"""Codex CLI validator (declarative rules only)."""

from __future__ import annotations

from cliprint.clients.codex_cli import CODEX_CLI
from cliprint.validators import register_validator
from cliprint.validators.base import DefinitionValidator

CODEX_CLI_VALIDATOR = DefinitionValidator(CODEX_CLI)

register_validator(CODEX_CLI_VALIDATOR)
