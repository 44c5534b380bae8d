"""
Reminder Commands.

Local reminders for open activities. Delivery goes through LogNotifier,
so scheduled reminders show up in the log.
"""

import typer

from tenantcrm.cli import common
from tenantcrm.client.crm import CRMClient
from tenantcrm.client.reminders import LogNotifier, ReminderScheduler

app = typer.Typer(help="Activity reminder commands")


def _scheduler(crm: CRMClient) -> ReminderScheduler:
    from tenantcrm.backend.core.config import get_app_config

    return ReminderScheduler(
        LogNotifier(),
        crm.credentials.store,
        min_lead_ms=get_app_config().client.reminder_min_lead_ms,
    )


@app.command()
def sync() -> None:
    """Schedule reminders for every open activity with a future reminder."""

    async def action(crm: CRMClient) -> int:
        return await _scheduler(crm).sync(crm.activities)

    count = common.run(action)
    common.console.print(f"[green]{count} reminder(s) scheduled[/green]")


@app.command("list")
def list_reminders() -> None:
    """Show which activities have a scheduled reminder."""

    async def action(crm: CRMClient) -> dict[str, str]:
        return _scheduler(crm).mapping()

    mapping = common.run(action)
    rows = [{"activity_id": a, "notification_id": n} for a, n in sorted(mapping.items())]
    common.print_rows(rows, ["activity_id", "notification_id"], "Reminders")


@app.command()
def cancel(
    activity_id: str = typer.Argument(None, help="Activity whose reminder to cancel"),
    all_: bool = typer.Option(False, "--all", help="Cancel every reminder"),
) -> None:
    """Cancel one reminder, or all of them with --all."""
    if not all_ and not activity_id:
        raise typer.BadParameter("Pass an activity id or --all")

    async def action(crm: CRMClient) -> int:
        scheduler = _scheduler(crm)
        if all_:
            return scheduler.cancel_all()
        return 1 if scheduler.cancel(activity_id) else 0

    cancelled = common.run(action)
    common.console.print(f"[green]{cancelled} reminder(s) cancelled[/green]")
