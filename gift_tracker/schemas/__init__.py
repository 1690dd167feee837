"""Pydantic schemas for API requests and responses."""

from gift_tracker.schemas.auth import (
    AuthResponse,
    MessageResponse,
    PreferencesUpdate,
    ProfileUpdate,
    UserLogin,
    UserRegister,
    UserResponse,
)
from gift_tracker.schemas.budget import BudgetCreate, BudgetResponse, BudgetUpdate
from gift_tracker.schemas.gift import GiftCreate, GiftResponse, GiftUpdate
from gift_tracker.schemas.occasion import OccasionCreate, OccasionResponse, OccasionUpdate
from gift_tracker.schemas.person import PersonCreate, PersonResponse, PersonUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "MessageResponse",
    "ProfileUpdate",
    "PreferencesUpdate",
    "PersonCreate",
    "PersonUpdate",
    "PersonResponse",
    "GiftCreate",
    "GiftUpdate",
    "GiftResponse",
    "OccasionCreate",
    "OccasionUpdate",
    "OccasionResponse",
    "BudgetCreate",
    "BudgetUpdate",
    "BudgetResponse",
]
