"""Occasion schemas."""

import datetime as dt

from pydantic import Field, field_validator

from gift_tracker.models.enums import OccasionType
from gift_tracker.schemas.base import APIModel, reject_null


class OccasionCreate(APIModel):
    """Create a new occasion."""

    name: str = Field(..., min_length=1, max_length=255)
    date: dt.date
    type: OccasionType = OccasionType.OTHER
    person_id: str | None = Field(None, max_length=36)
    description: str | None = Field(None, max_length=5000)
    budget: float | None = Field(None, ge=0)


class OccasionUpdate(APIModel):
    """Update an occasion."""

    name: str | None = Field(None, min_length=1, max_length=255)
    date: dt.date | None = None
    type: OccasionType | None = None
    person_id: str | None = Field(None, max_length=36)
    description: str | None = Field(None, max_length=5000)
    budget: float | None = Field(None, ge=0)

    @field_validator("name", "date", "type")
    @classmethod
    def required_columns_not_null(cls, value):
        return reject_null(value)


class OccasionResponse(APIModel):
    """Occasion response."""

    id: str
    user_id: str
    person_id: str | None
    name: str
    date: dt.date
    type: str
    description: str | None
    budget: float | None
    created_at: dt.datetime
    updated_at: dt.datetime
