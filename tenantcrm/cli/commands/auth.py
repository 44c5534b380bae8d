"""
Auth Commands.

Log in, register, and switch the active workspace. The token and the
active tenant are stored locally and sent with every later command.
"""

from typing import Any

import typer

from tenantcrm.cli import common
from tenantcrm.client.crm import CRMClient

app = typer.Typer(help="Authentication commands")


@app.command()
def login(
    email: str = typer.Option(..., "--email", "-e", prompt=True, help="Account email"),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True, help="Password"),
) -> None:
    """
    Log in and remember the session.

    Examples:
        cli.py auth login -e admin@demo.local
    """

    async def action(crm: CRMClient) -> dict[str, Any]:
        return await crm.auth.login(email, password)

    result = common.run(action)
    common.console.print(
        f"[green]Logged in as {result['user']['email']}[/green] "
        f"[dim](tenant: {result['active_tenant']})[/dim]"
    )


@app.command()
def register(
    name: str = typer.Option(..., "--name", "-n", prompt=True, help="Display name"),
    email: str = typer.Option(..., "--email", "-e", prompt=True, help="Account email"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, confirmation_prompt=True, help="Password",
    ),
) -> None:
    """Create an account with a personal workspace and log in."""

    async def action(crm: CRMClient) -> dict[str, Any]:
        return await crm.auth.register(name, email, password)

    result = common.run(action)
    common.console.print(
        f"[green]Registered {result['user']['email']}[/green] "
        f"[dim](workspace: {result['active_tenant']})[/dim]"
    )


@app.command()
def logout() -> None:
    """Forget the stored token and active tenant."""

    async def action(crm: CRMClient) -> None:
        crm.auth.logout()

    common.run(action)
    common.console.print("[green]Logged out[/green]")


@app.command()
def whoami() -> None:
    """Show the current user, tenant and role."""

    async def action(crm: CRMClient) -> dict[str, Any]:
        return await crm.auth.me()

    result = common.run(action)
    user = result.get("user", {})
    common.console.print(f"[bold]{user.get('name')}[/bold] <{user.get('email')}>")
    common.console.print(f"Tenant: {result.get('tenant')}  Role: {result.get('role')}")


@app.command()
def switch(tenant_id: str = typer.Argument(..., help="Workspace to make active")) -> None:
    """Make another workspace the active tenant."""

    async def action(crm: CRMClient) -> dict[str, Any]:
        return await crm.auth.switch_tenant(tenant_id)

    result = common.run(action)
    common.console.print(f"[green]Active tenant: {result['active_tenant']}[/green]")
