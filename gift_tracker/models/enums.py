"""Enums for model fields."""

from enum import Enum


class GiftStatus(str, Enum):
    """Lifecycle of a gift. Transitions between values are not enforced."""

    PLANNED = "planned"
    PURCHASED = "purchased"
    WRAPPED = "wrapped"
    GIVEN = "given"


class OccasionType(str, Enum):
    """Kinds of dated events gifts are planned for."""

    BIRTHDAY = "birthday"
    ANNIVERSARY = "anniversary"
    HOLIDAY = "holiday"
    OTHER = "other"


class BudgetPeriod(str, Enum):
    """Period a budget envelope covers."""

    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"
