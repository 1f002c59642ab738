"""Client registry -- known CLI client definitions.

Definitions describe the fingerprint of each supported client.
Each definition module registers itself at import time.
"""

from __future__ import annotations

from cliprint.models import ClientDefinition

_registry: dict[str, ClientDefinition] = {}


def register(definition: ClientDefinition) -> None:
    """Register a client definition in the global registry.

    Args:
        definition: The client definition to register.

    Raises:
        ValueError: If a definition with the same ID is already registered.
    """
    if definition.id in _registry:
        raise ValueError(f"Duplicate client ID: {definition.id}")
    _registry[definition.id] = definition


def get_client(client_id: str) -> ClientDefinition | None:
    """Look up a client definition by ID.

    Args:
        client_id: The client identifier.

    Returns:
        The definition, or None if not found.
    """
    return _registry.get(client_id)


def list_clients() -> list[ClientDefinition]:
    """Return all registered client definitions in registration order.

    Returns:
        List of all definitions.
    """
    return list(_registry.values())


def is_valid_client_id(client_id: str) -> bool:
    """Return True if ``client_id`` names a registered client."""
    return client_id in _registry


# Auto-import to trigger registration
from cliprint.clients import (  # noqa: E402, F401
    claude_code,
    codex_cli,
    gemini_cli,
)
