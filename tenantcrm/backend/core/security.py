"""
Security Utilities.

Password hashing and JWT access tokens.

Access token claims:
    sub            - User ID
    email          - User email
    active_tenant  - Tenant selected when the token was issued
    exp, type, aud - Expiry, token type ("access"), audience

Invitation token claims:
    tenant, email, role - Where the invitee joins and with which role
    exp, type, aud      - Expiry, token type ("invite"), audience
"""

from datetime import timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from tenantcrm.backend.core.config import get_app_config, get_settings
from tenantcrm.backend.core.exceptions import AuthenticationError, ValidationError
from tenantcrm.backend.core.logging import get_logger
from tenantcrm.backend.core.utils import now_ms, utc_now

logger = get_logger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    password_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )


def create_access_token(data: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Payload data to encode (sub, email, active_tenant)
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token
    """
    settings = get_settings()
    jwt_config = get_app_config().security.jwt
    to_encode = data.copy()

    if expires_delta:
        expire = utc_now() + expires_delta
    else:
        expire = utc_now() + timedelta(minutes=jwt_config.access_token_expire_minutes)

    to_encode.update({"exp": expire, "type": "access", "aud": jwt_config.audience})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=jwt_config.algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT access token.

    Raises:
        AuthenticationError: If token is invalid, expired, or not an access token
    """
    settings = get_settings()
    jwt_config = get_app_config().security.jwt
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[jwt_config.algorithm],
            audience=jwt_config.audience,
        )
    except JWTError as e:
        logger.warning("Token decode failed", extra={"error": str(e)})
        raise AuthenticationError("Invalid or expired token", code="invalid_token")

    if payload.get("type") != "access" or not payload.get("sub"):
        raise AuthenticationError("Invalid or expired token", code="invalid_token")
    return payload


def create_invite_token(tenant_id: str, email: str, role: str) -> tuple[str, int]:
    """
    Create a signed invitation to join a tenant.

    Returns:
        (token, expiry as epoch milliseconds)
    """
    settings = get_settings()
    jwt_config = get_app_config().security.jwt
    expires_at_ms = now_ms() + jwt_config.invite_token_expire_minutes * 60_000
    claims = {
        "tenant": tenant_id,
        "email": email,
        "role": role,
        "type": "invite",
        "aud": jwt_config.audience,
        "exp": expires_at_ms // 1000,
    }
    token = jwt.encode(claims, settings.jwt_secret, algorithm=jwt_config.algorithm)
    return token, expires_at_ms


def decode_invite_token(token: str) -> dict[str, Any]:
    """
    Decode and validate an invitation token.

    Access tokens are rejected even though they share the signing key.

    Raises:
        ValidationError: `invalid_or_expired_invite` for any bad token
    """
    settings = get_settings()
    jwt_config = get_app_config().security.jwt
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[jwt_config.algorithm],
            audience=jwt_config.audience,
        )
    except JWTError as e:
        logger.warning("Invite token decode failed", extra={"error": str(e)})
        raise ValidationError("Invitation is invalid or expired", code="invalid_or_expired_invite")

    if payload.get("type") != "invite" or not payload.get("tenant") or not payload.get("email"):
        raise ValidationError("Invitation is invalid or expired", code="invalid_or_expired_invite")
    return payload
