"""Class schedule model returned by the entry query."""

from pydantic import BaseModel, ConfigDict, NonNegativeInt


class ClassEntry(BaseModel):
    """A scheduled class associated with an entry.

    Field names follow the API payload.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    class_number: NonNegativeInt
    name: str
    placing: NonNegativeInt
    ring: NonNegativeInt
    count: NonNegativeInt  # Number of trips in the class
    scheduled_date: str  # ISO, e.g. "2024-03-15T10:00:00Z"; first 10 chars used
    schedule_starttime: str


class ClassListing(BaseModel):
    """Envelope of the entry query: {"classes": [...]}."""

    model_config = ConfigDict(strict=True, extra="ignore")

    classes: list[ClassEntry]
