"""Meilisearch CLI - document and search commands."""
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from meilipy import MeiliClient, MeiliSearchError, APIConfig, SearchRequest
from meilipy.core.api.config import DEFAULT_HOST

app = typer.Typer(
    name="meili",
    help="Meilisearch document CLI",
    add_completion=False
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    host: str = typer.Option(DEFAULT_HOST, "--host", "-H", envvar="MEILI_HOST", help="Server URL"),
    api_key: Optional[str] = typer.Option(None, "--api-key", "-k", envvar="MEILI_API_KEY", help="API key"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP traffic"),
):
    """Talk to a Meilisearch server."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.obj = APIConfig(host=host, api_key=api_key)


def _client(ctx: typer.Context) -> MeiliClient:
    return MeiliClient(config=ctx.obj)


def _fail(error: MeiliSearchError):
    console.print(f"[red]Error: {error}[/red]")
    raise typer.Exit(1)


def _print_json(data):
    console.print_json(json.dumps(data, ensure_ascii=False))


def _print_update(update):
    console.print(f"[green]Update {update.update_id} enqueued[/green]")


def _read_payload(file: Path) -> str:
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)
    return file.read_text(encoding="utf-8")


@app.command()
def get(
    ctx: typer.Context,
    index: str = typer.Argument(..., help="Index name"),
    identifier: str = typer.Argument(..., help="Document id"),
):
    """Show one document."""
    with _client(ctx) as client:
        try:
            _print_json(client.index(index).get_document(identifier))
        except MeiliSearchError as e:
            _fail(e)


@app.command("list")
def list_documents(
    ctx: typer.Context,
    index: str = typer.Argument(..., help="Index name"),
    limit: int = typer.Option(0, "--limit", "-l", help="Maximum number of documents"),
):
    """List documents of an index."""
    with _client(ctx) as client:
        try:
            _print_json(client.index(index).get_documents(limit))
        except MeiliSearchError as e:
            _fail(e)


@app.command()
def add(
    ctx: typer.Context,
    index: str = typer.Argument(..., help="Index name"),
    file: Path = typer.Argument(..., help="JSON file with a document array"),
    primary_key: Optional[str] = typer.Option(None, "--primary-key", "-p", help="Primary key attribute"),
):
    """Add or replace documents from a JSON file."""
    payload = _read_payload(file)
    with _client(ctx) as client:
        try:
            _print_update(client.index(index).add_documents(payload, primary_key))
        except MeiliSearchError as e:
            _fail(e)


@app.command()
def update(
    ctx: typer.Context,
    index: str = typer.Argument(..., help="Index name"),
    file: Path = typer.Argument(..., help="JSON file with a document array"),
    primary_key: Optional[str] = typer.Option(None, "--primary-key", "-p", help="Primary key attribute"),
):
    """Add or partially update documents from a JSON file."""
    payload = _read_payload(file)
    with _client(ctx) as client:
        try:
            _print_update(client.index(index).update_documents(payload, primary_key))
        except MeiliSearchError as e:
            _fail(e)


@app.command()
def delete(
    ctx: typer.Context,
    index: str = typer.Argument(..., help="Index name"),
    identifier: str = typer.Argument(..., help="Document id"),
):
    """Delete one document."""
    with _client(ctx) as client:
        try:
            _print_update(client.index(index).delete_document(identifier))
        except MeiliSearchError as e:
            _fail(e)


@app.command("delete-all")
def delete_all(
    ctx: typer.Context,
    index: str = typer.Argument(..., help="Index name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete every document of an index."""
    if not yes and not typer.confirm(f"Delete all documents of '{index}'?"):
        raise typer.Abort()
    with _client(ctx) as client:
        try:
            _print_update(client.index(index).delete_documents())
        except MeiliSearchError as e:
            _fail(e)


@app.command()
def search(
    ctx: typer.Context,
    index: str = typer.Argument(..., help="Index name"),
    query: str = typer.Argument(..., help="Query string"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum number of hits"),
):
    """Search an index."""
    with _client(ctx) as client:
        try:
            response = client.index(index).search(SearchRequest(q=query, limit=limit))
        except MeiliSearchError as e:
            _fail(e)
    
    console.print(
        f"{response.nb_hits} hits for '{response.query}' "
        f"[dim]({response.processing_time_ms} ms)[/dim]"
    )
    _print_json(response.hits)


@app.command("update-status")
def update_status(
    ctx: typer.Context,
    index: str = typer.Argument(..., help="Index name"),
    update_id: int = typer.Argument(..., help="Update id"),
):
    """Show the status of one update."""
    with _client(ctx) as client:
        try:
            _print_json(client.index(index).get_update(update_id).to_dict())
        except MeiliSearchError as e:
            _fail(e)


@app.command()
def updates(
    ctx: typer.Context,
    index: str = typer.Argument(..., help="Index name"),
):
    """List the updates of an index."""
    with _client(ctx) as client:
        try:
            items = client.index(index).get_updates()
        except MeiliSearchError as e:
            _fail(e)
    
    table = Table(title=f"Updates of {index}")
    table.add_column("ID", justify="right")
    table.add_column("Status")
    table.add_column("Enqueued")
    table.add_column("Processed")
    table.add_column("Error", style="red")
    
    status_styles = {'processed': 'green', 'failed': 'red', 'enqueued': 'yellow'}
    for item in items:
        style = status_styles.get(item.status, '')
        table.add_row(
            str(item.update_id),
            f"[{style}]{item.status}[/{style}]" if style else str(item.status),
            item.enqueued_at or "",
            item.processed_at or "",
            item.error or ""
        )
    
    console.print(table)


if __name__ == "__main__":
    app()
