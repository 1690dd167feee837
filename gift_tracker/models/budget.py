"""Budget model."""

from sqlalchemy import Column, Date, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from gift_tracker.database import Base
from gift_tracker.models.enums import BudgetPeriod
from gift_tracker.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Budget(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Spending envelope, optionally scoped to a person or an occasion."""

    __tablename__ = "budgets"

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    person_id = Column(String(36), ForeignKey("people.id"), nullable=True, index=True)
    occasion_id = Column(String(36), ForeignKey("occasions.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    amount = Column(Float, nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    period = Column(String(20), nullable=False, default=BudgetPeriod.MONTHLY.value)
    # Free-form category label, e.g. "holiday" or "birthday"
    type = Column(String(50), nullable=False, default="general")
    description = Column(Text, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    # Relationships
    owner = relationship("User", backref="budgets")
    person = relationship("Person")
    occasion = relationship("Occasion")
