"""
Auth Schemas.

Request and response bodies for registration, login and the current
session.
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255, examples=["ana@example.com"])
    password: str = Field(..., min_length=4, max_length=128)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    id: str
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    """Returned by login and register. The token carries `active_tenant`."""

    token: str
    active_tenant: str
    user: UserResponse


class MeResponse(BaseModel):
    ok: bool = True
    user: UserResponse
    tenant: str
    role: str
