"""Occasion model."""

from sqlalchemy import Column, Date, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from gift_tracker.database import Base
from gift_tracker.models.enums import OccasionType
from gift_tracker.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Occasion(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A dated event, optionally tied to a person, with an optional budget ceiling."""

    __tablename__ = "occasions"

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    person_id = Column(String(36), ForeignKey("people.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)
    type = Column(String(20), nullable=False, default=OccasionType.OTHER.value)
    description = Column(Text, nullable=True)
    budget = Column(Float, nullable=True)

    # Relationships
    owner = relationship("User", backref="occasions")
    person = relationship("Person")
    gifts = relationship("Gift", back_populates="occasion")
