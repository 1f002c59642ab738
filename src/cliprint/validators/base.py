"""Validator contract and the declarative, definition-driven validator.

Every validator answers one question: did this request plausibly come
from my client? ``validate`` returns a bool and never raises. Failures
inside a check are logged and treated as "no match" (fail-closed).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from cliprint.models import DEFAULT_ICON, ClientDefinition, ClientInfo, ValidationRequest

logger = logging.getLogger(__name__)


@runtime_checkable
class ClientValidator(Protocol):
    """Capability shared by all client validators."""

    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def icon(self) -> str: ...

    def info(self) -> ClientInfo: ...

    def validate(self, request: ValidationRequest) -> bool: ...


def missing_headers(request: ValidationRequest, names: Iterable[str]) -> list[str]:
    """Return the header names that are absent or blank in ``request``."""
    missing = []
    for name in names:
        value = request.header(name)
        if not isinstance(value, str) or not value.strip():
            missing.append(name)
    return missing


class DefinitionValidator:
    """Validator driven entirely by a ClientDefinition.

    Rules, in order:

    1. The User-Agent must match the definition's pattern.
    2. If ``required_paths`` is set, the path must contain one of them.
    3. If the path contains any ``restricted_paths`` or ``validate_paths``
       entry, every ``required_headers`` entry must be present and non-blank.

    Subclasses with client-specific logic override ``_evaluate``.

    Args:
        definition: The client definition to validate against.
    """

    def __init__(self, definition: ClientDefinition) -> None:
        self._definition = definition

    @property
    def definition(self) -> ClientDefinition:
        """The client definition this validator checks against."""
        return self._definition

    @property
    def id(self) -> str:
        return self._definition.id

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def description(self) -> str:
        return self._definition.description

    @property
    def icon(self) -> str:
        return self._definition.icon or DEFAULT_ICON

    def info(self) -> ClientInfo:
        """Return the public listing entry for this client."""
        return ClientInfo.from_definition(self._definition)

    def validate(self, request: ValidationRequest) -> bool:
        """Decide whether ``request`` came from this validator's client.

        Args:
            request: The request to inspect.

        Returns:
            True if every check passes. False on any failed check or
            unexpected error.
        """
        try:
            return self._evaluate(request)
        except Exception:  # noqa: BLE001
            logger.exception("Error in %s validator, rejecting request", self.name)
            return False

    def matches_user_agent(self, request: ValidationRequest) -> bool:
        """Return True if the request's User-Agent matches the client's pattern."""
        return bool(self._definition.user_agent_pattern.search(request.user_agent))

    def _evaluate(self, request: ValidationRequest) -> bool:
        definition = self._definition
        if not self.matches_user_agent(request):
            return False

        path = request.path or ""
        if definition.required_paths and not any(p in path for p in definition.required_paths):
            logger.debug(
                "%s validation failed - path %s is not one of %s",
                self.name,
                path,
                ", ".join(definition.required_paths),
            )
            return False

        strict_markers = definition.restricted_paths + definition.validate_paths
        if any(marker in path for marker in strict_markers):
            missing = missing_headers(request, definition.required_headers)
            if missing:
                logger.debug(
                    "%s validation failed - missing or empty headers: %s",
                    self.name,
                    ", ".join(missing),
                )
                return False

        logger.debug("%s detected for path: %s", self.name, path)
        return True
