"""
CLI Helpers.

Shared console, client construction, error reporting and table output
for the command groups.
"""

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any, Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from tenantcrm.client.crm import CRMClient
from tenantcrm.client.http import ApiError
from tenantcrm.client.storage import StorageError

console = Console()

T = TypeVar("T")


def make_client() -> CRMClient:
    """Client bound to the durable credential store (client.yaml)."""
    return CRMClient()


def run(action: Callable[[CRMClient], Awaitable[T]]) -> T:
    """
    Run an async action with a fresh client.

    API and storage failures print their message and exit with code 1.
    """

    async def _run() -> T:
        async with make_client() as crm:
            return await action(crm)

    try:
        return asyncio.run(_run())
    except ApiError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        if e.code in ("network_error", "timeout"):
            console.print("[dim]Is the server running? Start with: cli.py server start[/dim]")
        raise typer.Exit(1)
    except StorageError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def parse_assignments(pairs: Optional[list[str]]) -> dict[str, Any]:
    """
    Turn `key=value` arguments into a dict. The literal `null` clears a field.

    Raises:
        typer.BadParameter: For an argument without '='
    """
    values: dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected key=value, got {pair!r}")
        values[key.strip()] = None if value == "null" else value
    return values


def print_rows(rows: list[dict[str, Any]], columns: list[str], title: str) -> None:
    """Render rows as a table showing the given columns."""
    table = Table(title=title, show_header=True)
    for column in columns:
        table.add_column(column, style="cyan" if column == "id" else None)
    for row in rows:
        table.add_row(*["" if row.get(column) is None else str(row.get(column)) for column in columns])
    console.print(table)
    console.print(f"[dim]{len(rows)} row(s)[/dim]")


def print_json(data: Any) -> None:
    console.print_json(json.dumps(data, ensure_ascii=False))
