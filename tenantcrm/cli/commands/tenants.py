"""
Tenant Commands.
"""

from typing import Any, Optional

import typer

from tenantcrm.cli import common
from tenantcrm.client.crm import CRMClient

app = typer.Typer(help="Workspace commands")


@app.command("list")
def list_tenants() -> None:
    """List the workspaces you belong to."""

    async def action(crm: CRMClient) -> dict[str, Any]:
        return await crm.tenants.list()

    result = common.run(action)
    active = result.get("active_tenant")
    rows = [dict(item, active="*" if item.get("id") == active else "") for item in result.get("items", [])]
    common.print_rows(rows, ["active", "id", "name", "role"], "Workspaces")


@app.command()
def members() -> None:
    """List members of the active workspace."""

    async def action(crm: CRMClient) -> dict[str, Any]:
        return await crm.tenants.members()

    result = common.run(action)
    common.print_rows(result.get("items", []), ["user_id", "name", "email", "role"], f"Members of {result.get('tenant')}")


@app.command()
def create(
    name: str = typer.Argument(..., help="Workspace name"),
    id: Optional[str] = typer.Option(None, "--id", help="Workspace id (generated when omitted)"),
) -> None:
    """Create a workspace you own."""

    async def action(crm: CRMClient) -> dict[str, Any]:
        return await crm.tenants.create(name, id=id)

    result = common.run(action)
    common.console.print(f"[green]Created workspace {result['id']}[/green] ({result['name']})")


@app.command()
def invite(
    email: str = typer.Argument(..., help="Email of the person to invite"),
    role: str = typer.Option("member", "--role", help="owner, admin or member"),
) -> None:
    """Invite someone to the active workspace and print the invitation token."""

    async def action(crm: CRMClient) -> dict[str, Any]:
        return await crm.tenants.invite(email, role=role)

    result = common.run(action)
    common.console.print(f"[green]Invited {result['email']}[/green] to {result['tenant']} as {result['role']}")
    common.console.print(result["invite_token"], soft_wrap=True)


@app.command()
def accept(
    token: str = typer.Argument(..., help="Invitation token"),
    name: Optional[str] = typer.Option(None, "--name", help="Your name, for a new account"),
    password: Optional[str] = typer.Option(None, "--password", help="Password, for a new account"),
) -> None:
    """Accept an invitation, creating your account if needed."""

    async def action(crm: CRMClient) -> dict[str, Any]:
        return await crm.tenants.accept_invitation(token, name=name, password=password)

    result = common.run(action)
    common.console.print(
        f"[green]Joined {result['tenant_id']}[/green] as {result['role']} ({result['user']['email']})"
    )


@app.command("set-role")
def set_role(
    user_id: str = typer.Argument(..., help="Member user id"),
    role: str = typer.Argument(..., help="owner, admin or member"),
) -> None:
    """Change a member's role in the active workspace."""

    async def action(crm: CRMClient) -> Any:
        return await crm.tenants.change_role(user_id, role)

    common.run(action)
    common.console.print(f"[green]{user_id} is now {role}[/green]")


@app.command("remove-member")
def remove_member(user_id: str = typer.Argument(..., help="Member user id")) -> None:
    """Remove a member from the active workspace."""

    async def action(crm: CRMClient) -> Any:
        return await crm.tenants.remove_member(user_id)

    common.run(action)
    common.console.print(f"[green]Removed {user_id}[/green]")
