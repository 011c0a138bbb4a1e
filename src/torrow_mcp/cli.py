"""CLI for torrow-mcp (MCP server, archive listing, phrase parsing)."""

import json
from dataclasses import asdict
from enum import Enum

import typer
from loguru import logger

from torrow_mcp.errors import TorrowError
from torrow_mcp.logging_config import configure_logging

app = typer.Typer(help="Torrow archives and notes for MCP clients.")


class Transport(str, Enum):
    stdio = "stdio"
    streamable_http = "streamable-http"
    sse = "sse"


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)
    ctx.obj = {"verbose": verbose}


@app.command()
def serve(
    ctx: typer.Context,
    transport: Transport = typer.Option(
        Transport.stdio, "--transport", "-t", help="MCP transport"
    ),
) -> None:
    """Start the MCP server."""
    from torrow_mcp.mcp.server import run_mcp_server

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    run_mcp_server(transport.value, verbose=verbose)


@app.command()
def archives(
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    token: str | None = typer.Option(
        None, "--token", help="Torrow API token (default: TORROW_TOKEN or a token file)"
    ),
) -> None:
    """List archives under the MCP root context."""
    from torrow_mcp.api import TorrowApi
    from torrow_mcp.core.store.client import TorrowClient
    from torrow_mcp.mcp.server import new_session_state, torrow_list_archives

    try:
        api = TorrowApi(token)
    except TorrowError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    try:
        result = torrow_list_archives(new_session_state(TorrowClient(api)))
    finally:
        api.sess.close()

    if "error" in result:
        typer.echo(result["error"])
        raise typer.Exit(1)

    if output_json:
        typer.echo(json.dumps(result, ensure_ascii=False, indent=2))
        return

    typer.echo(f"{result['count']} archives:\n")
    for archive in result["archives"]:
        tags = " #" + " #".join(archive["tags"]) if archive["tags"] else ""
        typer.echo(f"  {archive['name']}{tags}  [id={archive['id']}]")


@app.command()
def parse(phrase: str = typer.Argument(..., help='Phrase like "Name. Text #tag"')) -> None:
    """Show how a phrase is split into name, text and tags."""
    from torrow_mcp.core.phrase import parse_phrase

    try:
        parsed = parse_phrase(phrase)
    except TorrowError as e:
        typer.echo(str(e))
        raise typer.Exit(1) from e
    data = asdict(parsed)
    data["tags"] = list(parsed.tags)
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))
