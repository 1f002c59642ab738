"""cliprint command-line interface.

Commands:
    clients  List known CLI client definitions
    show     Show one client definition in detail
    check    Check which clients a described request matches
    serve    Start the HTTP API server

Usage:
    $ cliprint clients
    $ cliprint check --user-agent "claude-cli/1.0.86 (external, cli)" --path /v1/models
    $ cliprint serve --port 8080

For detailed help on any command:
    $ cliprint <command> --help
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from cliprint.clients import get_client, is_valid_client_id, list_clients
from cliprint.models import ValidationRequest
from cliprint.validators import detect_clients

app = typer.Typer(
    help="Identify which CLI client sent an API request",
    no_args_is_help=True,
)
console = Console()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _error(message: str) -> NoReturn:
    """Print error and exit."""
    console.print(f"[red]X {escape(message)}[/red]")
    raise typer.Exit(1)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _parse_headers(raw_headers: list[str]) -> dict[str, str]:
    """Parse ``Name: value`` strings into a header mapping.

    Raises:
        ValueError: If an entry has no colon or an empty name.
    """
    headers: dict[str, str] = {}
    for raw in raw_headers:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Invalid header (expected 'Name: value'): {raw}")
        headers[name.strip()] = value.strip()
    return headers


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            envvar="CLIPRINT_LOG_LEVEL",
            help="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
        ),
    ] = "WARNING",
) -> None:
    """Identify which CLI client sent an API request."""
    level = log_level.upper()
    if level not in _LOG_LEVELS:
        _error(f"Invalid log level: {log_level}")
    _configure_logging(level)


@app.command()
def clients() -> None:
    """List known CLI client definitions."""
    definitions = list_clients()
    if not definitions:
        console.print("No clients registered.")
        return

    table = Table(title="Known CLI Clients")
    table.add_column("", no_wrap=True)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Display Name")
    table.add_column("Description")

    for definition in definitions:
        table.add_row(
            definition.icon,
            definition.id,
            definition.name,
            definition.display_name,
            definition.description,
        )
    console.print(table)


@app.command()
def show(
    client_id: Annotated[str, typer.Argument(help="Client ID (see 'cliprint clients').")],
) -> None:
    """Show one client definition in detail."""
    definition = get_client(client_id)
    if definition is None:
        _error(f"Unknown client: {client_id}")

    console.print(f"{definition.icon} [bold]{escape(definition.display_name)}[/bold]")
    console.print(f"  ID:               [cyan]{definition.id}[/cyan]")
    console.print(f"  Name:             {escape(definition.name)}")
    console.print(f"  Description:      {escape(definition.description)}")
    console.print(f"  User-Agent:       {escape(definition.user_agent_pattern.pattern)}")
    if definition.required_headers:
        console.print(f"  Required headers: {', '.join(definition.required_headers)}")
    if definition.required_paths:
        console.print(f"  Required paths:   {', '.join(definition.required_paths)}")
    if definition.restricted_paths:
        console.print(f"  Restricted paths: {', '.join(definition.restricted_paths)}")
    if definition.validate_paths:
        console.print(f"  Validated paths:  {', '.join(definition.validate_paths)}")


@app.command()
def check(
    user_agent: Annotated[str, typer.Option("--user-agent", "-A", help="User-Agent header.")],
    path: Annotated[str, typer.Option("--path", "-p", help="Request path.")] = "/",
    header: Annotated[
        list[str] | None,
        typer.Option("--header", "-H", help="Extra header as 'Name: value' (repeatable)."),
    ] = None,
    body: Annotated[
        Path | None,
        typer.Option(
            "--body",
            "-b",
            exists=True,
            dir_okay=False,
            readable=True,
            help="Path to a JSON request body file.",
        ),
    ] = None,
    client: Annotated[
        list[str] | None,
        typer.Option("--client", "-c", help="Only check these client IDs (repeatable)."),
    ] = None,
) -> None:
    """Check which clients a described request matches.

    Exits with status 0 if at least one client matched, 1 otherwise.
    """
    try:
        headers = _parse_headers(header or [])
    except ValueError as e:
        _error(str(e))
    headers["User-Agent"] = user_agent

    for client_id in client or []:
        if not is_valid_client_id(client_id):
            _error(f"Unknown client: {client_id}")

    raw_body = None
    if body is not None:
        raw_body = body.read_bytes()

    request = ValidationRequest.from_raw(headers, path=path, raw_body=raw_body)
    if raw_body and request.body is None:
        console.print(f"[yellow]! Body file is not valid JSON: {escape(str(body))}[/yellow]")

    matched = detect_clients(request, client_ids=client)
    if not matched:
        console.print("[yellow]No client matched.[/yellow]")
        raise typer.Exit(1)

    for client_id in matched:
        definition = get_client(client_id)
        label = f"{definition.icon} {definition.name}" if definition else client_id
        console.print(f"[bold green]OK Matched:[/bold green] {client_id} ({escape(label)})")


@app.command()
def serve(
    host: Annotated[
        str, typer.Option("--host", "-h", envvar="CLIPRINT_HOST", help="Host to bind")
    ] = "127.0.0.1",
    port: Annotated[
        int, typer.Option("--port", "-p", envvar="CLIPRINT_PORT", help="Port to listen on")
    ] = 8080,
) -> None:
    """Start the HTTP API server.

    Serves the client registry at /api/clients and request detection
    at /api/detect/<path>.
    """
    from cliprint.server import start_server

    start_server(host=host, port=port)
