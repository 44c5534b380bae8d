"""
Entity Commands.

One command group per tenant-scoped resource, each with
list / get / create / update / delete. Field values are given as
`key=value` pairs:

    cli.py accounts create -s name=Acme -s website=acme.com
    cli.py deals update d1 -s stage=propuesta
    cli.py activities list -f status=open -f deal_id=d1
"""

from typing import Any, Optional

import typer

from tenantcrm.cli import common
from tenantcrm.client.crm import CRMClient

ENTITY_COLUMNS: dict[str, list[str]] = {
    "accounts": ["id", "name", "website", "phone"],
    "contacts": ["id", "name", "email", "phone", "company", "account_id"],
    "deals": ["id", "title", "stage", "amount", "account_id", "contact_id"],
    "leads": ["id", "name", "email", "company", "status"],
    "activities": ["id", "type", "title", "status", "due_date", "remind_at_ms", "deal_id"],
    "notes": ["id", "body", "deal_id", "contact_id", "account_id", "lead_id"],
}


def build_entity_app(resource: str, columns: list[str]) -> typer.Typer:
    """Build the command group for one resource."""
    app = typer.Typer(help=f"Manage {resource}")

    def client_for(crm: CRMClient):
        return getattr(crm, resource)

    @app.command("list")
    def list_items(
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum rows"),
        filters: Optional[list[str]] = typer.Option(None, "--filter", "-f", help="key=value filter"),
    ) -> None:
        """List records of the active tenant."""
        params = common.parse_assignments(filters)

        async def action(crm: CRMClient) -> list[dict[str, Any]]:
            return await client_for(crm).list(limit=limit, **params)

        common.print_rows(common.run(action), columns, resource.capitalize())

    @app.command()
    def get(id: str = typer.Argument(..., help="Record id")) -> None:
        """Show one record."""

        async def action(crm: CRMClient) -> dict[str, Any]:
            return await client_for(crm).get(id)

        common.print_json(common.run(action))

    @app.command()
    def create(
        fields: Optional[list[str]] = typer.Option(None, "--set", "-s", help="key=value field"),
        id: Optional[str] = typer.Option(None, "--id", help="Record id (generated when omitted)"),
    ) -> None:
        """Create a record."""
        data = common.parse_assignments(fields)
        if id:
            data["id"] = id

        async def action(crm: CRMClient) -> dict[str, Any]:
            return await client_for(crm).create(data)

        created = common.run(action)
        common.console.print(f"[green]Created {created.get('id')}[/green]")

    @app.command()
    def update(
        id: str = typer.Argument(..., help="Record id"),
        fields: Optional[list[str]] = typer.Option(None, "--set", "-s", help="key=value field"),
    ) -> None:
        """Change some fields of a record."""
        patch = common.parse_assignments(fields)
        if not patch:
            raise typer.BadParameter("Nothing to update; pass at least one --set key=value")

        async def action(crm: CRMClient) -> Any:
            return await client_for(crm).update(id, patch)

        common.run(action)
        common.console.print(f"[green]Updated {id}[/green]")

    @app.command()
    def delete(
        id: str = typer.Argument(..., help="Record id"),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    ) -> None:
        """Delete a record."""
        if not yes:
            typer.confirm(f"Delete {id}?", abort=True)

        async def action(crm: CRMClient) -> Any:
            return await client_for(crm).delete(id)

        common.run(action)
        common.console.print(f"[green]Deleted {id}[/green]")

    return app


ENTITY_APPS: dict[str, typer.Typer] = {
    resource: build_entity_app(resource, columns)
    for resource, columns in ENTITY_COLUMNS.items()
}
