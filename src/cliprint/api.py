"""JSON API endpoints for client listing and request inspection.

Provides the client registry to UI pickers and reports which client
validators accept an arbitrary inspected request.

All endpoints are mounted under ``/api/`` by the main server module.

Usage:
    The API router is included in the FastAPI app::

        from cliprint.api import api_router
        app.include_router(api_router, prefix="/api")
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Request

from cliprint.clients import get_client, is_valid_client_id, list_clients
from cliprint.models import ClientInfo, DetectionResult, ValidationRequest
from cliprint.validators import detect_clients

api_router = APIRouter()


@api_router.get("/clients", response_model=list[ClientInfo])
async def get_clients() -> list[ClientInfo]:
    """Return every known client, in registry order.

    Returns:
        List of client listing entries (id, name, display name, description, icon).
    """
    return [ClientInfo.from_definition(definition) for definition in list_clients()]


@api_router.get("/clients/{client_id}", response_model=ClientInfo)
async def get_client_info(client_id: str) -> ClientInfo:
    """Return the listing entry for one client.

    Args:
        client_id: Client identifier.

    Returns:
        The client's listing entry.

    Raises:
        HTTPException: 404 if the client is not registered.
    """
    definition = get_client(client_id)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"Client not found: {client_id}")
    return ClientInfo.from_definition(definition)


@api_router.api_route(
    "/detect/{path:path}", methods=["GET", "POST"], response_model=DetectionResult
)
async def detect(
    path: str,
    request: Request,
    client: Annotated[list[str] | None, Query()] = None,
) -> DetectionResult:
    """Report which clients' validators accept this request.

    The inspected request is the live one: its headers, the path after
    ``/api/detect``, and its JSON body (if any).

    Args:
        path: Path of the inspected request, without the leading slash.
        request: FastAPI request.
        client: Optional client IDs to restrict detection to.

    Returns:
        The inspected path and the IDs of all matching clients.

    Raises:
        HTTPException: 404 if a requested client ID is not registered.
    """
    for client_id in client or []:
        if not is_valid_client_id(client_id):
            raise HTTPException(status_code=404, detail=f"Client not found: {client_id}")

    inspected_path = f"/{path}"
    raw_body = await request.body()
    validation_request = ValidationRequest.from_raw(
        dict(request.headers), path=inspected_path, raw_body=raw_body
    )
    matched = detect_clients(validation_request, client_ids=client)
    return DetectionResult(path=inspected_path, matched=matched)
