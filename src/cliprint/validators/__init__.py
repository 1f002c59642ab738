"""Validator registry -- per-client request validators.

Each validator decides, independently of the others, whether a request
came from its client. Validator modules register themselves at import
time. A request may be claimed by any number of validators.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cliprint.models import ValidationRequest
from cliprint.validators.base import ClientValidator

logger = logging.getLogger(__name__)

_validators: dict[str, ClientValidator] = {}


def register_validator(validator: ClientValidator) -> None:
    """Register a validator in the global registry.

    Args:
        validator: The validator to register, keyed by its client ID.
    """
    _validators[validator.id] = validator


def get_validator(client_id: str) -> ClientValidator | None:
    """Look up the validator for a client.

    Args:
        client_id: The client identifier.

    Returns:
        The validator, or None if not found.
    """
    return _validators.get(client_id)


def list_validators() -> list[ClientValidator]:
    """Return all registered validators.

    Returns:
        List of all validators, in registration order.
    """
    return list(_validators.values())


def detect_clients(
    request: ValidationRequest, client_ids: Iterable[str] | None = None
) -> list[str]:
    """Run validators against a request and collect every match.

    Args:
        request: The request to inspect.
        client_ids: Optional subset of client IDs to check. Unknown IDs
            are skipped.

    Returns:
        IDs of all validators that accepted the request, in registry order.
    """
    wanted = set(client_ids) if client_ids is not None else None
    matched = [
        v.id
        for v in _validators.values()
        if (wanted is None or v.id in wanted) and v.validate(request)
    ]
    logger.debug("Request to %s matched clients: %s", request.path, matched or "none")
    return matched


# Auto-import to trigger registration
from cliprint.validators import (  # noqa: E402, F401
    claude_code,
    codex_cli,
    gemini_cli,
)
