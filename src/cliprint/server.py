"""FastAPI server exposing the client registry and detection API.

Usage:
    From the CLI (preferred):

    >>> cliprint serve --port 8080

    Programmatic:

    >>> from cliprint.server import start_server
    >>> start_server(host="127.0.0.1", port=8080)
"""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from rich.console import Console

from cliprint import __version__
from cliprint.api import api_router

console = Console()

app = FastAPI(
    title="cliprint",
    description="Identify which CLI client sent an API request",
    version=__version__,
)
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health() -> dict:
    """Return server health status.

    Returns:
        Dictionary with ``{"status": "ok"}``.
    """
    return {"status": "ok"}


def start_server(host: str = "127.0.0.1", port: int = 8080) -> None:
    """Start the API server.

    Launches the uvicorn ASGI server bound to the specified host and
    port. The server runs in the foreground until interrupted with Ctrl+C.

    Args:
        host: Network interface to bind (default ``"127.0.0.1"``).
        port: TCP port to listen on (default ``8080``).
    """
    console.print(f"[bold green]Starting cliprint on {host}:{port}[/bold green]")
    console.print(f"   Clients: [blue]http://localhost:{port}/api/clients[/blue]")
    console.print(f"   Detect:  [blue]http://localhost:{port}/api/detect/<path>[/blue]")
    console.print("   Press [bold]Ctrl+C[/bold] to stop\n")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="warning",
    )
