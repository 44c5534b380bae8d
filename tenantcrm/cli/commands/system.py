"""
System Commands.

Commands for system information and configuration.
"""

from typing import Optional

import typer
from rich.panel import Panel
from rich.tree import Tree

from tenantcrm.cli.common import console

app = typer.Typer(help="System information commands")


@app.command()
def info() -> None:
    """
    Display application information.

    Shows app name, version, API base URL and the active tenant.
    """
    try:
        from tenantcrm.backend.core.config import get_app_config
        from tenantcrm.client.credentials import CredentialStore
        from tenantcrm.client.http import resolve_base_url

        application = get_app_config().application
        credentials = CredentialStore()

        console.print(Panel(
            f"[bold]{application.name}[/bold]\n"
            f"Version: {application.version}\n"
            f"Description: {application.description}\n"
            f"API: {resolve_base_url()}\n"
            f"Active tenant: {credentials.get_active_tenant()}\n"
            f"Logged in: {'yes' if credentials.get_token() else 'no'}",
            title="Application Info",
        ))

    except Exception as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def config(
    section: Optional[str] = typer.Argument(
        None, help="Config section to show (application, database, logging, security, tenancy, client)",
    ),
) -> None:
    """
    Display configuration settings.

    Shows all configuration or a specific section. Secrets are never shown.
    """
    try:
        from tenantcrm.backend.core.config import get_app_config

        app_config = get_app_config()
        sections = {
            "application": app_config.application,
            "database": app_config.database,
            "logging": app_config.logging,
            "security": app_config.security,
            "tenancy": app_config.tenancy,
            "client": app_config.client,
        }
    except Exception as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        raise typer.Exit(1)

    if section:
        if section not in sections:
            console.print(f"[red]Unknown section: {section}[/red]")
            console.print(f"Available sections: {', '.join(sections.keys())}")
            raise typer.Exit(1)
        _display_config_section(section, sections[section].model_dump())
    else:
        for name, data in sections.items():
            _display_config_section(name, data.model_dump())
            console.print()


def _display_config_section(name: str, data: dict) -> None:
    """Display a configuration section as a tree."""
    tree = Tree(f"[bold cyan]{name}[/bold cyan]")

    def add_items(parent: Tree, items: dict) -> None:
        for key, value in items.items():
            if isinstance(value, dict):
                branch = parent.add(f"[cyan]{key}[/cyan]")
                add_items(branch, value)
            else:
                parent.add(f"[cyan]{key}[/cyan]: {value}")

    add_items(tree, data)
    console.print(tree)
