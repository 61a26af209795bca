"""Service layer for showclasses business logic."""

from showclasses.services.schedule import (
    ScheduleService,
    combine,
    dedupe_by_rider,
    format_mdy,
)

__all__ = [
    "ScheduleService",
    "combine",
    "dedupe_by_rider",
    "format_mdy",
]
