"""Trip model returned by the person query."""

from pydantic import BaseModel, ConfigDict, NonNegativeInt


class Trip(BaseModel):
    """One rider's entry in a competition.

    Produced by GET /people/{id}; consumed once by the join step.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    entry_id: NonNegativeInt  # Key for the per-entry class query
    entry_number: NonNegativeInt  # Back number shown in the table
    sponsor: str
    horse: str
    rider_id: NonNegativeInt
    rider_name: str


class TripListing(BaseModel):
    """Envelope of the person query: {"trips": [...]}."""

    model_config = ConfigDict(strict=True, extra="ignore")

    trips: list[Trip]
