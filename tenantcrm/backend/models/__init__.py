"""
Database Models.

Importing this package registers every table on `Base.metadata`.
"""

from tenantcrm.backend.models.account import Account
from tenantcrm.backend.models.activity import Activity
from tenantcrm.backend.models.base import Base
from tenantcrm.backend.models.contact import Contact
from tenantcrm.backend.models.deal import Deal
from tenantcrm.backend.models.lead import Lead
from tenantcrm.backend.models.note import Note
from tenantcrm.backend.models.tenant import Membership, Tenant
from tenantcrm.backend.models.user import User

__all__ = [
    "Account",
    "Activity",
    "Base",
    "Contact",
    "Deal",
    "Lead",
    "Membership",
    "Note",
    "Tenant",
    "User",
]
