"""Tests for the client definition registry."""

from __future__ import annotations

import re

import pytest

from cliprint.clients import get_client, is_valid_client_id, list_clients, register
from cliprint.clients.claude_code import CLAUDE_CODE
from cliprint.models import ClientDefinition, ClientId


class TestClientRegistry:
    def test_list_clients_returns_three_in_order(self) -> None:
        ids = [definition.id for definition in list_clients()]
        assert ids == ["claude_code", "codex_cli", "gemini_cli"]

    def test_ids_are_unique(self) -> None:
        ids = [definition.id for definition in list_clients()]
        assert len(ids) == len(set(ids))

    def test_every_client_id_is_registered(self) -> None:
        for client_id in ClientId:
            assert is_valid_client_id(client_id.value)

    def test_get_claude_code(self) -> None:
        definition = get_client("claude_code")
        assert definition is CLAUDE_CODE
        assert definition.name == "Claude Code"
        assert definition.display_name == "Claude Code CLI"
        assert definition.required_headers == ("x-app", "anthropic-beta", "anthropic-version")
        assert definition.restricted_paths == ("/api/v1/messages", "/claude/v1/messages")
        assert definition.icon == "🤖"

    def test_get_gemini_cli(self) -> None:
        definition = get_client("gemini_cli")
        assert definition is not None
        assert definition.required_paths == ("/gemini",)
        assert definition.validate_paths == ("generateContent",)
        assert definition.icon == "💎"

    def test_get_codex_cli(self) -> None:
        definition = get_client("codex_cli")
        assert definition is not None
        assert definition.required_headers == ("originator", "session_id")
        assert definition.restricted_paths == ("/openai", "/azure")
        assert definition.icon == "🔷"

    def test_get_unknown_returns_none(self) -> None:
        assert get_client("nonexistent") is None

    def test_is_valid_client_id_unknown(self) -> None:
        assert is_valid_client_id("nonexistent") is False
        assert is_valid_client_id("") is False

    def test_register_duplicate_raises(self) -> None:
        duplicate = ClientDefinition(
            id="claude_code",
            name="Impostor",
            display_name="Impostor",
            description="Same ID as Claude Code",
            user_agent_pattern=re.compile(r"^impostor/"),
        )
        with pytest.raises(ValueError, match="Duplicate client ID"):
            register(duplicate)
        assert get_client("claude_code") is CLAUDE_CODE


class TestUserAgentPatterns:
    @pytest.mark.parametrize(
        "user_agent",
        [
            "claude-cli/1.0.86 (external, cli)",
            "claude-cli/1.0.86-beta (external, cli)",
            "CLAUDE-CLI/2.0.0 (external,cli)",
        ],
    )
    def test_claude_code_matches(self, user_agent: str) -> None:
        assert CLAUDE_CODE.user_agent_pattern.search(user_agent)

    @pytest.mark.parametrize(
        "user_agent",
        [
            "claude-cli/1.0.86",
            "claude-cli/1.0.86 (external, sdk-ts)",
            "python-requests/2.31",
            "",
        ],
    )
    def test_claude_code_rejects(self, user_agent: str) -> None:
        assert not CLAUDE_CODE.user_agent_pattern.search(user_agent)

    @pytest.mark.parametrize(
        "user_agent",
        [
            "claude-cli/1.0.86 (external, cli)\n",
            "claude-cli/1.0.86\u00e9 (external, cli)",
            "claude-cli/1.0.86\u00a0(external, cli)",
            "claude-cli/\u0661.0.86 (external, cli)",
        ],
    )
    def test_claude_code_rejects_non_ascii_and_trailing_newline(self, user_agent: str) -> None:
        assert not CLAUDE_CODE.user_agent_pattern.search(user_agent)

    def test_gemini_and_codex_reject_non_ascii_digits(self) -> None:
        gemini = get_client("gemini_cli")
        codex = get_client("codex_cli")
        assert gemini is not None and codex is not None
        assert not gemini.user_agent_pattern.search("GeminiCLI/\u0661.2")
        assert not codex.user_agent_pattern.search("codex_cli_rs/\u0661.2")

    def test_gemini_and_codex_patterns(self) -> None:
        gemini = get_client("gemini_cli")
        codex = get_client("codex_cli")
        assert gemini is not None and codex is not None
        assert gemini.user_agent_pattern.search("GeminiCLI/v0.1.5 (darwin; arm64)")
        assert gemini.user_agent_pattern.search("geminicli/0.1.5")
        assert codex.user_agent_pattern.search("codex_cli_rs/0.20.0 (Mac OS 14.5)")
        assert codex.user_agent_pattern.search("codex_vscode/0.1.0")
        assert not codex.user_agent_pattern.search("codex/0.1.0")
