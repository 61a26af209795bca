"""Combined trip + class record, the unit of output."""

from pydantic import BaseModel, ConfigDict


class CombinedRecord(BaseModel):
    """Flattened join of one deduplicated trip and one of its classes.

    Field order is the CSV column order.
    """

    model_config = ConfigDict(frozen=True)

    entry_number: int
    horse: str
    rider_name: str
    class_number: int
    class_name: str
    sponsor: str
    trips_count: int
    placing: int
    ring: int
    scheduled_date: str  # YYYY-MM-DD
    scheduled_date_mdy: str  # MM-DD-YYYY
    scheduled_start_time: str

    @classmethod
    def field_names(cls) -> list[str]:
        """Column names in declaration order."""
        return list(cls.model_fields)

    def as_row(self) -> dict[str, str]:
        """Stringify every field, numbers as decimal strings."""
        return {name: str(value) for name, value in self.model_dump().items()}
