"""SQLAlchemy models."""

from gift_tracker.models.budget import Budget
from gift_tracker.models.gift import Gift
from gift_tracker.models.occasion import Occasion
from gift_tracker.models.person import Person
from gift_tracker.models.user import User

__all__ = [
    "User",
    "Person",
    "Gift",
    "Occasion",
    "Budget",
]
