"""Person model."""

from sqlalchemy import Column, Date, ForeignKey, String, Text, orm

from gift_tracker.database import Base
from gift_tracker.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Person(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A gift recipient owned by a single user."""

    __tablename__ = "people"

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    # Column named like the API field; orm.relationship is used below to avoid the clash
    relationship = Column(String(100), nullable=True)  # "friend", "sister", ...
    birthday = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)
    avatar = Column(String(500), nullable=True)  # URL or emoji
    family_id = Column(String(36), nullable=True)

    # Relationships
    owner = orm.relationship("User", backref="people")
    gifts = orm.relationship("Gift", back_populates="recipient", cascade="all, delete-orphan")
