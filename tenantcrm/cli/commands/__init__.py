"""
CLI Commands.

Organized by domain/feature area.
"""

from tenantcrm.cli.commands.auth import app as auth_app
from tenantcrm.cli.commands.db import app as db_app
from tenantcrm.cli.commands.entities import ENTITY_APPS
from tenantcrm.cli.commands.health import app as health_app
from tenantcrm.cli.commands.reminders import app as reminders_app
from tenantcrm.cli.commands.server import app as server_app
from tenantcrm.cli.commands.system import app as system_app
from tenantcrm.cli.commands.tenants import app as tenants_app

__all__ = [
    "ENTITY_APPS",
    "auth_app",
    "db_app",
    "health_app",
    "reminders_app",
    "server_app",
    "system_app",
    "tenants_app",
]
