"""Gift schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from gift_tracker.models.enums import GiftStatus
from gift_tracker.schemas.base import APIModel, reject_null


class GiftCreate(APIModel):
    """Create a new gift for one of the caller's people."""

    name: str = Field(..., min_length=1, max_length=255)
    recipient_id: str = Field(..., max_length=36)
    occasion_id: str | None = Field(None, max_length=36)
    description: str | None = Field(None, max_length=5000)
    price: float | None = Field(None, ge=0)
    currency: str = Field("USD", pattern=r"^[A-Z]{3}$")
    status: GiftStatus = GiftStatus.PLANNED
    notes: str | None = Field(None, max_length=5000)


class GiftUpdate(APIModel):
    """Update a gift. Any status value may be set directly."""

    name: str | None = Field(None, min_length=1, max_length=255)
    recipient_id: str | None = Field(None, max_length=36)
    occasion_id: str | None = Field(None, max_length=36)
    description: str | None = Field(None, max_length=5000)
    price: float | None = Field(None, ge=0)
    currency: str | None = Field(None, pattern=r"^[A-Z]{3}$")
    status: GiftStatus | None = None
    notes: str | None = Field(None, max_length=5000)

    @field_validator("name", "recipient_id", "currency", "status")
    @classmethod
    def required_columns_not_null(cls, value):
        return reject_null(value)


class GiftResponse(APIModel):
    """Gift response."""

    id: str
    user_id: str
    recipient_id: str
    occasion_id: str | None
    name: str
    description: str | None
    price: float | None
    currency: str
    status: str
    notes: str | None
    created_at: datetime
    updated_at: datetime
