"""Credential store: durable lookup and mutation of user records."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gift_tracker.errors import DuplicateEmail
from gift_tracker.models.user import DEFAULT_PREFERENCES, User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Emails are unique case-insensitively; every path stores and looks up the lowercased form."""
    return email.strip().lower()


class CredentialStore:
    """User records keyed by id and by normalized email."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def find_by_id(self, user_id: str) -> User | None:
        return self.db.get(User, user_id)

    def insert(self, user: User) -> User:
        """Persist a new user. Raises DuplicateEmail if the email is already taken."""
        user.email = normalize_email(user.email)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    def update_profile(self, user: User, name: str | None = None, email: str | None = None) -> User:
        """Change display name and/or email. Raises DuplicateEmail on an email collision."""
        if email is not None:
            email = normalize_email(email)
            if email != user.email:
                existing = self.find_by_email(email)
                if existing is not None and existing.id != user.id:
                    raise DuplicateEmail(email)
                user.email = email
        if name is not None:
            user.name = name

        self._commit()
        self.db.refresh(user)
        return user

    def update_preferences(self, user: User, changes: dict[str, Any]) -> User:
        """Merge changes into the user's preferences bag."""
        # Reassign rather than mutate so the JSON column is flagged dirty
        user.preferences = {**DEFAULT_PREFERENCES, **(user.preferences or {}), **changes}
        self._commit()
        self.db.refresh(user)
        return user

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Email uniqueness constraint rejected write: {e.orig}")
            raise DuplicateEmail() from e
