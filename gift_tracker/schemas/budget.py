"""Budget schemas."""

import datetime as dt

from pydantic import Field, field_validator, model_validator

from gift_tracker.models.enums import BudgetPeriod
from gift_tracker.schemas.base import APIModel, reject_null


class BudgetCreate(APIModel):
    """Create a new budget."""

    name: str = Field(..., min_length=1, max_length=255)
    amount: float = Field(..., ge=0)
    currency: str = Field("USD", pattern=r"^[A-Z]{3}$")
    period: BudgetPeriod = BudgetPeriod.MONTHLY
    type: str = Field("general", min_length=1, max_length=50)
    person_id: str | None = Field(None, max_length=36)
    occasion_id: str | None = Field(None, max_length=36)
    description: str | None = Field(None, max_length=5000)
    start_date: dt.date | None = None
    end_date: dt.date | None = None

    @model_validator(mode="after")
    def check_date_range(self) -> "BudgetCreate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class BudgetUpdate(APIModel):
    """Update a budget."""

    name: str | None = Field(None, min_length=1, max_length=255)
    amount: float | None = Field(None, ge=0)
    currency: str | None = Field(None, pattern=r"^[A-Z]{3}$")
    period: BudgetPeriod | None = None
    type: str | None = Field(None, min_length=1, max_length=50)
    person_id: str | None = Field(None, max_length=36)
    occasion_id: str | None = Field(None, max_length=36)
    description: str | None = Field(None, max_length=5000)
    start_date: dt.date | None = None
    end_date: dt.date | None = None

    @field_validator("name", "amount", "currency", "period", "type")
    @classmethod
    def required_columns_not_null(cls, value):
        return reject_null(value)


class BudgetResponse(APIModel):
    """Budget response."""

    id: str
    user_id: str
    person_id: str | None
    occasion_id: str | None
    name: str
    amount: float
    currency: str
    period: str
    type: str
    description: str | None
    start_date: dt.date | None
    end_date: dt.date | None
    created_at: dt.datetime
    updated_at: dt.datetime
