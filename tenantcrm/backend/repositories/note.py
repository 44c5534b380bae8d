"""
Note Repository.
"""

from tenantcrm.backend.models.note import Note
from tenantcrm.backend.repositories.base import TenantScopedRepository


class NoteRepository(TenantScopedRepository[Note]):
    model = Note
