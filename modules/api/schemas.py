"""
Hub API Schemas.

Pydantic schemas for decoding hub API responses. Unknown fields sent by the
server are ignored; instances are immutable.
"""

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    """Base for API payloads: frozen, tolerant of extra server fields."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Profile(_ApiModel):
    """The authenticated user, from /profiles/me."""

    id: int = Field(description="Profile identifier")
    name: str = Field(description="Display name")


class VisitPerson(_ApiModel):
    """Person embedded in a hub visit."""

    id: int = Field(description="Person identifier")
    name: str = Field(description="Display name")


class HubVisit(_ApiModel):
    """One person's presence record for one calendar date."""

    date: str = Field(description="Visit date, YYYY-MM-DD", examples=["2024-01-15"])
    notes: str | None = Field(default=None, description="Free-text notes")
    person: VisitPerson

    @property
    def display_notes(self) -> str | None:
        """Notes to show, or None when absent or empty."""
        return self.notes or None
