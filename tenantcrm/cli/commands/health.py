"""
Health Check Commands.

Commands for checking backend health and status.
"""

from typing import Any

import typer
from rich.panel import Panel
from rich.table import Table

from tenantcrm.cli import common
from tenantcrm.client.crm import CRMClient
from tenantcrm.client.http import ApiError

app = typer.Typer(help="Health check commands")


@app.command()
def status(
    detailed: bool = typer.Option(False, "--detailed", "-d", help="Show detailed status"),
) -> None:
    """
    Check backend health status (requires running server).

    Examples:
        cli.py health status
        cli.py health status -d
    """

    async def action(crm: CRMClient) -> dict[str, Any]:
        path = "/health/detailed" if detailed else "/health/ready"
        try:
            return await crm.api.get(path)
        except ApiError as e:
            if e.status == 503 and isinstance(e.body, dict):
                return e.body
            raise

    data = common.run(action)
    _display_health(data, detailed)
    if data.get("status") != "healthy":
        raise typer.Exit(1)


def _display_health(data: dict, detailed: bool) -> None:
    """Display health check results."""
    status = data.get("status", "unknown")
    status_color = "green" if status == "healthy" else "red" if status == "unhealthy" else "yellow"

    if detailed and "checks" in data:
        table = Table(title="Health Status", show_header=True)
        table.add_column("Component", style="cyan")
        table.add_column("Status")
        table.add_column("Details")

        for component, check_data in data.get("checks", {}).items():
            check_status = check_data.get("status", "unknown")
            color = "green" if check_status == "healthy" else "red"

            details = []
            if "latency_ms" in check_data:
                details.append(f"latency: {check_data['latency_ms']}ms")
            if "error" in check_data:
                details.append(f"error: {check_data['error']}")

            table.add_row(component, f"[{color}]{check_status}[/{color}]", ", ".join(details) or "-")

        common.console.print(table)

        if "application" in data:
            app_info = data["application"]
            common.console.print(
                f"\n[dim]Application: {app_info.get('name', 'N/A')} v{app_info.get('version', 'N/A')}[/dim]"
            )
            common.console.print(f"[dim]Environment: {app_info.get('env', 'N/A')}[/dim]")
    else:
        common.console.print(Panel(f"[{status_color}]{status.upper()}[/{status_color}]", title="Backend Status"))


@app.command()
def ping() -> None:
    """
    Simple ping to check if backend is reachable.

    Examples:
        cli.py health ping
    """

    async def action(crm: CRMClient) -> Any:
        return await crm.api.get("/health")

    common.run(action)
    common.console.print("[green]✓ Backend is reachable[/green]")
