"""Claude Code CLI validator.

The User-Agent alone identifies Claude Code on most paths. Requests to
``messages`` endpoints must also carry the CLI's request signature:
a structured system prompt with a known opening, the app and version
headers, and a ``metadata.user_id`` in the CLI's account/session format.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from cliprint.clients.claude_code import CLAUDE_CODE
from cliprint.models import ValidationRequest
from cliprint.validators import register_validator
from cliprint.validators.base import DefinitionValidator, missing_headers

logger = logging.getLogger(__name__)

SENSITIVE_PATH_MARKER = "messages"

SYSTEM_PROMPT_PREFIXES = (
    "You are Claude Code, Anthropic's official CLI for Claude.",
    "Analyze if this message indicates a new conversation topic",
)

# user_{64 hex}_account__session_{session token}
USER_ID_PATTERN = re.compile(r"user_[a-fA-F0-9]{64}_account__session_[\w-]+", re.ASCII)
_USER_HASH_LENGTH = 64


def has_claude_code_system_prompt(body: Any) -> bool:
    """Return True if the body's system prompt opens like Claude Code's.

    A plain-string ``system`` is never a match: the CLI always sends a
    list of content blocks.

    Args:
        body: Decoded request body.

    Returns:
        True if the first system block is text with a known prefix.
    """
    if not isinstance(body, Mapping):
        return False
    system = body.get("system")
    if not system or isinstance(system, str):
        return False
    if not isinstance(system, list):
        return False

    first = system[0]
    if not isinstance(first, Mapping) or first.get("type") != "text":
        return False
    text = first.get("text")
    if not isinstance(text, str) or not text:
        return False
    return text.startswith(SYSTEM_PROMPT_PREFIXES)


def describe_user_id_problem(user_id: str) -> str:
    """Explain which part of a malformed ``user_id`` is wrong."""
    if not user_id.startswith("user_"):
        return 'user_id must start with "user_"'
    parts = user_id.split("_")
    if len(parts) < 4:
        return "user_id format is incomplete"
    if len(parts[1]) != _USER_HASH_LENGTH:
        return f"user hash must be {_USER_HASH_LENGTH} characters, got {len(parts[1])}"
    if parts[2] != "account" or parts[3] != "" or len(parts) < 5 or parts[4] != "session":
        return 'user_id must contain "_account__session_"'
    return "user_id does not match the expected format"


class ClaudeCodeValidator(DefinitionValidator):
    """Validator for requests sent by the Claude Code CLI."""

    def _evaluate(self, request: ValidationRequest) -> bool:
        user_agent = request.user_agent
        path = request.path or ""

        # e.g. "claude-cli/1.0.86 (external, cli)"
        if not self.matches_user_agent(request):
            return False

        if SENSITIVE_PATH_MARKER not in path:
            logger.debug("Claude Code detected for path: %s, allowing access", path)
            return True

        body = request.body
        if not has_claude_code_system_prompt(body):
            logger.debug(
                "Claude Code validation failed - missing or invalid Claude Code system prompt"
            )
            return False

        missing = missing_headers(request, self.definition.required_headers)
        if missing:
            logger.debug("Claude Code validation failed - missing or empty %s header", missing[0])
            return False

        logger.debug(
            "Claude Code headers - x-app: %s, anthropic-beta: %s, anthropic-version: %s",
            request.header("x-app"),
            request.header("anthropic-beta"),
            request.header("anthropic-version"),
        )

        metadata = body.get("metadata")
        user_id = metadata.get("user_id") if isinstance(metadata, Mapping) else None
        if not user_id:
            logger.debug("Claude Code validation failed - missing metadata.user_id in body")
            return False
        if not isinstance(user_id, str):
            logger.debug(
                "Claude Code validation failed - metadata.user_id is %s, not a string",
                type(user_id).__name__,
            )
            return False

        if not USER_ID_PATTERN.fullmatch(user_id):
            logger.debug("Claude Code validation failed - invalid user_id format: %s", user_id)
            logger.debug("%s", describe_user_id_problem(user_id))
            return False

        logger.debug("Claude Code validation passed - UA: %s, userId: %s", user_agent, user_id)
        return True


CLAUDE_CODE_VALIDATOR = ClaudeCodeValidator(CLAUDE_CODE)

register_validator(CLAUDE_CODE_VALIDATOR)
