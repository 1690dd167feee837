"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from gift_tracker.api.dependencies import CurrentUser, DbSession, get_authenticator
from gift_tracker.schemas.auth import (
    AuthResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from gift_tracker.services.auth import Authenticator

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: DbSession,
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
):
    """Register a new user and return a token as though they had just logged in."""
    user, token = authenticator.register(db, user_data.name, user_data.email, user_data.password)

    return AuthResponse(
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: DbSession,
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
):
    """Login with email and password."""
    user, token = authenticator.login(db, credentials.email, credentials.password)

    return AuthResponse(
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
def get_me(current_user: CurrentUser):
    """Get current user information."""
    return current_user


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """Logout (client should discard token; tokens are not revocable server-side)."""
    return MessageResponse(message="Logged out successfully")
