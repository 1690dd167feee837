"""Gift model."""

from sqlalchemy import Column, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from gift_tracker.database import Base
from gift_tracker.models.enums import GiftStatus
from gift_tracker.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Gift(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A gift planned for (or given to) a person."""

    __tablename__ = "gifts"

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    recipient_id = Column(String(36), ForeignKey("people.id"), nullable=False, index=True)
    occasion_id = Column(String(36), ForeignKey("occasions.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=True)
    currency = Column(String(3), nullable=False, default="USD")
    # Stored as a free string; any status may be set directly
    status = Column(String(20), nullable=False, default=GiftStatus.PLANNED.value)
    notes = Column(Text, nullable=True)

    # Relationships
    owner = relationship("User", backref="gifts")
    recipient = relationship("Person", back_populates="gifts")
    occasion = relationship("Occasion", back_populates="gifts")
