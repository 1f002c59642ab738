"""Core data models for cliprint.

Client definitions are static descriptors registered at import time.
ValidationRequest is a read-only view over one inbound HTTP request.
ClientInfo and DetectionResult are the wire models served by the API.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_ICON = "🤖"


class ClientId(StrEnum):
    """Identifiers of the built-in client definitions.

    Attributes:
        CLAUDE_CODE: Claude Code command-line interface.
        GEMINI_CLI: Google Gemini command-line tool.
        CODEX_CLI: Codex command-line tool (Rust CLI and VS Code extension).
    """

    CLAUDE_CODE = "claude_code"
    GEMINI_CLI = "gemini_cli"
    CODEX_CLI = "codex_cli"


@dataclass(frozen=True)
class ClientDefinition:
    """Identifying traits of a known CLI client.

    Args:
        id: Unique identifier (e.g., "claude_code").
        name: Short human-readable name.
        display_name: Longer name for UI pickers.
        description: What the client is.
        user_agent_pattern: Compiled regex the User-Agent must match.
        required_headers: Header names that must be present and non-blank.
        restricted_paths: Path substrings that trigger strict checks.
        required_paths: Path substrings of which at least one must be present.
        validate_paths: Additional path substrings that trigger strict checks.
        icon: Glyph shown next to the client name.
    """

    id: str
    name: str
    display_name: str
    description: str
    user_agent_pattern: re.Pattern[str]
    required_headers: tuple[str, ...] = ()
    restricted_paths: tuple[str, ...] = ()
    required_paths: tuple[str, ...] = ()
    validate_paths: tuple[str, ...] = ()
    icon: str = DEFAULT_ICON


@dataclass
class ValidationRequest:
    """Read-only view of an inbound request.

    Header names are lower-cased on construction so lookups through
    ``header()`` are case-insensitive.

    Args:
        headers: Request headers.
        path: URL path of the request.
        body: Decoded JSON body, or None when absent or undecodable.
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    path: str = ""
    body: Any = None

    def __post_init__(self) -> None:
        self.headers = {str(k).lower(): v for k, v in self.headers.items()}

    def header(self, name: str) -> str | None:
        """Return a header value by case-insensitive name, or None."""
        return self.headers.get(name.lower())

    @property
    def user_agent(self) -> str:
        return self.header("user-agent") or ""

    @classmethod
    def from_raw(
        cls,
        headers: Mapping[str, str],
        path: str = "",
        raw_body: bytes | str | None = None,
    ) -> ValidationRequest:
        """Build a request from headers, a path, and an undecoded body.

        Args:
            headers: Request headers.
            path: URL path of the request.
            raw_body: Raw body bytes or text. Empty or non-JSON bodies
                decode to None.

        Returns:
            A ValidationRequest with the body decoded as JSON.
        """
        body = None
        if raw_body:
            try:
                body = json.loads(raw_body)
            except (ValueError, RecursionError):
                logger.debug("Request body for %s is not valid JSON, ignoring it", path)
        return cls(headers=headers, path=path, body=body)


class ClientInfo(BaseModel):
    """Public listing entry for one client.

    Attributes:
        id: Client identifier.
        name: Human-readable name.
        display_name: Longer name for UI pickers.
        description: What the client is.
        icon: Display glyph.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    display_name: str
    description: str
    icon: str = DEFAULT_ICON

    @classmethod
    def from_definition(cls, definition: ClientDefinition) -> ClientInfo:
        return cls(
            id=definition.id,
            name=definition.name,
            display_name=definition.display_name,
            description=definition.description,
            icon=definition.icon or DEFAULT_ICON,
        )


class DetectionResult(BaseModel):
    """Clients whose validators accepted an inspected request.

    Attributes:
        path: Path of the inspected request.
        matched: Matching client IDs, in registry order. May be empty or
            hold more than one ID.
    """

    path: str
    matched: list[str] = []
