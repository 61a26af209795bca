"""Join a rider's trips with their class schedules."""

from collections.abc import Iterable

from showclasses.api.client import ShowClient
from showclasses.api.decoder import decode_classes, decode_trips
from showclasses.errors import DateFormatError
from showclasses.logging import get_logger
from showclasses.models import ClassEntry, CombinedRecord, Trip

logger = get_logger(__name__)

# Widths of the YYYY, MM and DD segments
_DATE_PART_WIDTHS = (4, 2, 2)


def dedupe_by_rider(trips: Iterable[Trip]) -> list[Trip]:
    """Keep the first trip seen for each rider id, in listing order."""
    seen_riders: set[int] = set()
    kept: list[Trip] = []
    for trip in trips:
        if trip.rider_id in seen_riders:
            continue
        seen_riders.add(trip.rider_id)
        kept.append(trip)
    return kept


def format_mdy(scheduled_date: str) -> tuple[str, str]:
    """Split an ISO date into its date part and MM-DD-YYYY form.

    Args:
        scheduled_date: ISO date or timestamp, e.g. "2024-03-15T10:00:00Z"

    Returns:
        Tuple of (first 10 characters, month-day-year string),
        e.g. ("2024-03-15", "03-15-2024")

    Raises:
        DateFormatError: If the first 10 characters are not YYYY-MM-DD
    """
    date_part = scheduled_date[:10]
    parts = date_part.split("-")
    if len(parts) != 3 or any(
        len(part) != width or not (part.isascii() and part.isdigit())
        for part, width in zip(parts, _DATE_PART_WIDTHS)
    ):
        raise DateFormatError(f"Invalid scheduled_date: {scheduled_date!r}")

    year, month, day = parts
    return date_part, f"{month}-{day}-{year}"


def combine(trip: Trip, class_entry: ClassEntry) -> CombinedRecord:
    """Flatten one trip and one of its classes into a CombinedRecord."""
    scheduled_date, scheduled_date_mdy = format_mdy(class_entry.scheduled_date)
    return CombinedRecord(
        entry_number=trip.entry_number,
        horse=trip.horse,
        rider_name=trip.rider_name,
        class_number=class_entry.class_number,
        class_name=class_entry.name,
        sponsor=trip.sponsor,
        trips_count=class_entry.count,
        placing=class_entry.placing,
        ring=class_entry.ring,
        scheduled_date=scheduled_date,
        scheduled_date_mdy=scheduled_date_mdy,
        scheduled_start_time=class_entry.schedule_starttime,
    )


class ScheduleService:
    """Fetch a person's trips and the classes of each distinct rider."""

    def __init__(self, client: ShowClient, customer_id: int):
        self.client = client
        self.customer_id = customer_id

    async def fetch_trips(self, person_id: int) -> list[Trip]:
        """GET /people/{id}?pid={id}&customer_id={cid}."""
        response = await self.client.get(
            f"/people/{person_id}",
            params={"pid": person_id, "customer_id": self.customer_id},
        )
        trips = decode_trips(response)
        logger.info("trips_fetched", person_id=person_id, count=len(trips))
        return trips

    async def fetch_classes(self, entry_id: int) -> list[ClassEntry]:
        """GET /entries/{eid}?eid={eid}&customer_id={cid}."""
        response = await self.client.get(
            f"/entries/{entry_id}",
            params={"eid": entry_id, "customer_id": self.customer_id},
        )
        classes = decode_classes(response)
        logger.info("classes_fetched", entry_id=entry_id, count=len(classes))
        return classes

    async def collect(self, person_id: int) -> list[CombinedRecord]:
        """Build the combined records for a person.

        Entry lookups run one at a time. Output order is trip order, then
        class order within each trip.
        """
        trips = await self.fetch_trips(person_id)
        riders = dedupe_by_rider(trips)
        logger.info("riders_deduplicated", trips=len(trips), riders=len(riders))

        records: list[CombinedRecord] = []
        for trip in riders:
            for class_entry in await self.fetch_classes(trip.entry_id):
                records.append(combine(trip, class_entry))

        return records
