"""
Auth Service.

Registration, login and token issuance. Every token names the tenant
that was active when it was issued (`active_tenant` claim).
"""

from sqlalchemy.ext.asyncio import AsyncSession

from tenantcrm.backend.core.exceptions import AuthenticationError, ConflictError
from tenantcrm.backend.core.security import create_access_token, hash_password, verify_password
from tenantcrm.backend.core.utils import new_id
from tenantcrm.backend.models.user import User
from tenantcrm.backend.repositories.tenant import MembershipRepository
from tenantcrm.backend.repositories.user import UserRepository
from tenantcrm.backend.schemas.auth import LoginRequest, RegisterRequest
from tenantcrm.backend.services.base import BaseService
from tenantcrm.backend.services.tenant import TenantService


def issue_token(user: User, tenant_id: str) -> str:
    """Create an access token for the user with `tenant_id` as the active tenant."""
    return create_access_token({"sub": user.id, "email": user.email, "active_tenant": tenant_id})


class AuthService(BaseService):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.user_repo = UserRepository(session)
        self.membership_repo = MembershipRepository(session)

    async def register(self, data: RegisterRequest) -> tuple[User, str, str]:
        """
        Create a user together with a personal workspace they own.

        Returns:
            (user, active tenant id, token)

        Raises:
            ConflictError: `email_taken` when the email is registered
        """
        email = data.email.strip().lower()
        if await self.user_repo.exists_by_email(email):
            raise ConflictError("Email already registered", code="email_taken")

        user = await self._execute_db_operation(
            "register user",
            self.user_repo.create(
                id=new_id(),
                name=data.name.strip(),
                email=email,
                password_hash=hash_password(data.password),
            ),
            conflict_code="email_taken",
        )
        workspace = await TenantService(self.session).create_tenant(
            user.id, name=f"{user.name} workspace",
        )
        self._log_operation("User registered", user_id=user.id, tenant_id=workspace.id)
        return user, workspace.id, issue_token(user, workspace.id)

    async def login(self, data: LoginRequest) -> tuple[User, str, str]:
        """
        Verify credentials and issue a token.

        The active tenant is the configured default when the user belongs
        to it, otherwise the first workspace the user is a member of.

        Raises:
            AuthenticationError: `invalid_credentials` on unknown email or bad password
        """
        user = await self.user_repo.get_by_email(data.email)
        if user is None or not user.is_active or not verify_password(data.password, user.password_hash):
            self._logger.warning("Login failed", extra={"email": data.email})
            raise AuthenticationError("Invalid email or password", code="invalid_credentials")

        tenant_id = await TenantService(self.session).default_tenant_for(user.id)
        self._log_operation("User logged in", user_id=user.id, tenant_id=tenant_id)
        return user, tenant_id, issue_token(user, tenant_id)
