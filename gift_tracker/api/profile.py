"""Profile, preferences and session validation endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from gift_tracker.api.dependencies import CurrentUser, get_credential_store
from gift_tracker.errors import DuplicateEmail, EmailTaken
from gift_tracker.schemas.auth import PreferencesUpdate, ProfileUpdate, UserResponse
from gift_tracker.services.credentials import CredentialStore

router = APIRouter(prefix="/api", tags=["profile"])


@router.get("/user/validate", response_model=UserResponse)
def validate_user(current_user: CurrentUser):
    """Validate a stored token and return the fresh profile it belongs to."""
    return current_user


@router.get("/profile", response_model=UserResponse)
def get_profile(current_user: CurrentUser):
    """Get the caller's profile and preferences."""
    return current_user


@router.put("/profile", response_model=UserResponse)
def update_profile(
    profile_data: ProfileUpdate,
    current_user: CurrentUser,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
):
    """Update the caller's name and/or email."""
    try:
        return store.update_profile(current_user, name=profile_data.name, email=profile_data.email)
    except DuplicateEmail:
        raise EmailTaken() from None


@router.put("/profile/preferences", response_model=UserResponse)
def update_preferences(
    preferences: PreferencesUpdate,
    current_user: CurrentUser,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
):
    """Merge the supplied preference keys into the caller's preferences."""
    changes = preferences.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    return store.update_preferences(current_user, changes)
