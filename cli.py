#!/usr/bin/env python3
"""
CLI Client.

Command-line client for the CRM API.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                          # Show help

    # Server and database
    python cli.py server start                    # Start FastAPI server
    python cli.py db init                         # Create tables, default tenant, demo admin

    # Session
    python cli.py auth login -e admin@demo.local  # Log in (prompts for password)
    python cli.py auth whoami                     # Current user, tenant and role
    python cli.py auth switch acme                # Switch active workspace
    python cli.py tenants list                    # Workspaces you belong to

    # Records (accounts, contacts, deals, leads, activities, notes)
    python cli.py accounts list
    python cli.py accounts create -s name=Acme
    python cli.py deals update d1 -s stage=propuesta
    python cli.py activities list -f status=open

    # Reminders
    python cli.py reminders sync                  # Schedule reminders for open activities

    # Health and system info
    python cli.py health status
    python cli.py system config tenancy

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
    --help            Show help message
"""

import sys
from pathlib import Path

import typer
from rich.console import Console

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tenantcrm.cli.commands import (  # noqa: E402
    ENTITY_APPS,
    auth_app,
    db_app,
    health_app,
    reminders_app,
    server_app,
    system_app,
    tenants_app,
)

app = typer.Typer(
    name="cli",
    help="TenantCRM CLI - server, database, session, records and reminders.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register command groups
app.add_typer(server_app, name="server")
app.add_typer(db_app, name="db")
app.add_typer(health_app, name="health")
app.add_typer(system_app, name="system")
app.add_typer(auth_app, name="auth")
app.add_typer(tenants_app, name="tenants")
for resource, entity_app in ENTITY_APPS.items():
    app.add_typer(entity_app, name=resource)
app.add_typer(reminders_app, name="reminders")


def _validate_project_root() -> None:
    """Validate that we're running inside the project."""
    from tenantcrm.backend.core.config import find_project_root

    try:
        find_project_root()
    except RuntimeError:
        console.print("[red]Error: .project_root not found. Run from project root.[/red]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    TenantCRM CLI.

    Talks to the CRM API as the logged-in user, inside the active tenant.
    """
    _validate_project_root()

    from tenantcrm.backend.core.logging import setup_logging

    if debug:
        setup_logging(level="DEBUG", format_type="console", enable_file_logging=False)
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console", enable_file_logging=False)
    else:
        setup_logging(level="WARNING", format_type="console", enable_file_logging=False)


if __name__ == "__main__":
    app()
