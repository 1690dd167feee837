"""User model."""

from sqlalchemy import JSON, Column, String

from gift_tracker.database import Base
from gift_tracker.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin

DEFAULT_PREFERENCES = {
    "currency": "USD",
    "timezone": "UTC",
    "notifications": True,
    "theme": "light",
}


def default_preferences() -> dict:
    return dict(DEFAULT_PREFERENCES)


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)  # stored lowercased
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    preferences = Column(JSON, nullable=False, default=default_preferences)
