"""Domain models for showclasses."""

from showclasses.models.class_entry import ClassEntry, ClassListing
from showclasses.models.record import CombinedRecord
from showclasses.models.trip import Trip, TripListing

__all__ = [
    "Trip",
    "TripListing",
    "ClassEntry",
    "ClassListing",
    "CombinedRecord",
]
