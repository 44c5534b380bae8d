"""
Database Commands.

Tables are created with CREATE TABLE IF NOT EXISTS semantics; there is
no migration history.
"""

import asyncio

import typer
from rich.console import Console

app = typer.Typer(help="Database commands")
console = Console()


async def _init(seed: bool) -> str | None:
    from tenantcrm.backend.core.config import get_settings
    from tenantcrm.backend.core.database import create_tables, dispose_engine, get_session_factory
    from tenantcrm.backend.services.tenant import TenantService

    try:
        await create_tables()
        async with get_session_factory()() as session:
            service = TenantService(session)
            await service.ensure_default_tenant()
            email = None
            if seed:
                user = await service.seed_demo_admin(get_settings().demo_admin_password)
                email = user.email
            await session.commit()
        return email
    finally:
        await dispose_engine()


@app.command()
def init(
    seed: bool = typer.Option(True, "--seed/--no-seed", help="Create the demo admin user"),
) -> None:
    """
    Create missing tables and the default tenant.

    With --seed (the default) the demo admin from tenancy.yaml is created
    as owner of the default tenant; its password is DEMO_ADMIN_PASSWORD.

    Examples:
        cli.py db init
        cli.py db init --no-seed
    """
    try:
        email = asyncio.run(_init(seed))
    except Exception as e:
        console.print(f"[red]Database initialization failed: {e}[/red]")
        raise typer.Exit(1)

    console.print("[green]Database ready[/green]")
    if email:
        console.print(f"[dim]Demo admin: {email}[/dim]")
