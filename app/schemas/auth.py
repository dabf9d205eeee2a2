"""Authentication schemas."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Schema for the shared-password login."""

    password: str


class AuthStatus(BaseModel):
    """Whether the current session is logged in."""

    authenticated: bool


class SuccessResponse(BaseModel):
    """Generic acknowledgement."""

    success: bool = True
