"""
FastAPI Dependencies.

Shared dependencies for request handling. Tenant and user resolution
lives in `tenantcrm.backend.core.tenancy`.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tenantcrm.backend.core.database import get_db_session
from tenantcrm.backend.core.pagination import get_list_limit, get_list_offset

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]

ListLimit = Annotated[int, Depends(get_list_limit)]
ListOffset = Annotated[int, Depends(get_list_offset)]
