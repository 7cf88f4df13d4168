"""Value objects — citee, incident, severity, and citation.

All models are frozen after construction. A :class:`Citation` is only
ever built by a law at the moment it fires, so its severity is never
``Severity.NONE``; the model validator enforces that.
"""

from __future__ import annotations

import datetime
from enum import IntEnum

from pydantic import BaseModel, field_validator


class Severity(IntEnum):
    """Ordinal citation class."""

    NONE = 0
    SMALL = 1
    MEDIUM = 2
    LARGE = 3

    @property
    def label(self) -> str:
        """Display name, e.g. ``"Medium"``."""
        return self.name.capitalize()


class Entity(BaseModel):
    """A named legal person subject to citation.

    A missing, None or blank name fails pydantic validation with
    ``ValidationError``, not :class:`InvalidConfigurationError`: an Entity is
    input data, while that error is kept for wiring laws and issuers.
    """

    model_config = {"frozen": True}

    name: str
    birth_date: datetime.date

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "name must not be empty"
            raise ValueError(msg)
        return v

    def has_birthday_on(self, day: datetime.date) -> bool:
        """Month and day match; the year is ignored."""
        return self.birth_date.month == day.month and self.birth_date.day == day.day


class Incident(BaseModel):
    """Recorded speed at a location with its posted limit.

    Speeds share a unit and are not range-checked: a zero or negative
    ``speed_limit`` is accepted and simply yields a larger diff.
    """

    model_config = {"frozen": True}

    incident_speed: int
    speed_limit: int
    location: str = ""

    @property
    def speed_over_limit(self) -> int:
        """Raw diff before any allowance is applied."""
        return self.incident_speed - self.speed_limit


class Citation(BaseModel):
    """A law's decision to cite an entity."""

    model_config = {"frozen": True}

    date: datetime.date
    issuer_name: str
    citee: Entity
    severity: Severity
    law: str = ""
    location: str = ""

    @field_validator("severity")
    @classmethod
    def _severity_not_none(cls, v: Severity) -> Severity:
        if v is Severity.NONE:
            msg = "a citation cannot carry severity None"
            raise ValueError(msg)
        return v
