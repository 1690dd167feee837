"""Authentication and profile schemas."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, EmailStr, Field

from gift_tracker.models.enums import Theme
from gift_tracker.schemas.base import APIModel


class UserRegister(APIModel):
    """User registration request."""

    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)


class UserLogin(APIModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    # No minimum length: a short wrong password must fail like any other wrong password
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(APIModel):
    """User information response."""

    id: str
    email: str
    name: str
    created_at: datetime
    preferences: dict[str, Any]


class AuthResponse(APIModel):
    """Authentication response with token and user info."""

    token: str
    token_type: str = "bearer"  # noqa: S105
    user: UserResponse


class MessageResponse(APIModel):
    message: str


class ProfileUpdate(APIModel):
    """Update the caller's display name and/or email."""

    name: str | None = Field(None, min_length=2, max_length=255)
    email: EmailStr | None = Field(None, max_length=255)


class PreferencesUpdate(APIModel):
    """Partial update of the preferences bag. Unknown keys are stored as-is."""

    model_config = ConfigDict(extra="allow")

    currency: str | None = Field(None, pattern=r"^[A-Z]{3}$")
    timezone: str | None = Field(None, max_length=64)
    notifications: bool | None = None
    theme: Theme | None = None
