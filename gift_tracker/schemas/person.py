"""Person schemas."""

import datetime as dt

from pydantic import Field, field_validator

from gift_tracker.schemas.base import APIModel, reject_null


class PersonCreate(APIModel):
    """Create a new person."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str | None = Field(None, max_length=255)
    relationship: str | None = Field(None, max_length=100)
    birthday: dt.date | None = None
    notes: str | None = Field(None, max_length=5000)
    avatar: str | None = Field(None, max_length=500)
    family_id: str | None = Field(None, max_length=36)


class PersonUpdate(APIModel):
    """Update a person. Only supplied fields change."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, max_length=255)
    relationship: str | None = Field(None, max_length=100)
    birthday: dt.date | None = None
    notes: str | None = Field(None, max_length=5000)
    avatar: str | None = Field(None, max_length=500)
    family_id: str | None = Field(None, max_length=36)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        return reject_null(value)


class PersonResponse(APIModel):
    """Person response."""

    id: str
    user_id: str
    name: str
    email: str | None
    relationship: str | None
    birthday: dt.date | None
    notes: str | None
    avatar: str | None
    family_id: str | None
    created_at: dt.datetime
    updated_at: dt.datetime
