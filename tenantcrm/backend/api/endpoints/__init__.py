"""
API Router.

Aggregates all endpoint routers.
"""

from fastapi import APIRouter

from tenantcrm.backend.api.endpoints import (
    accounts,
    activities,
    auth,
    contacts,
    deals,
    leads,
    notes,
    tenants,
)

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(tenants.router, prefix="/tenants", tags=["tenants"])
router.include_router(tenants.me_router, prefix="/me", tags=["tenants"])
router.include_router(tenants.invitations_router, prefix="/invitations", tags=["tenants"])

# Tenant-scoped entities
router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
router.include_router(deals.router, prefix="/deals", tags=["deals"])
router.include_router(leads.router, prefix="/leads", tags=["leads"])
router.include_router(activities.router, prefix="/activities", tags=["activities"])
router.include_router(notes.router, prefix="/notes", tags=["notes"])
