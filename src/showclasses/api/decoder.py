"""Decode show API responses into typed listings."""

import httpx
from pydantic import ValidationError

from showclasses.errors import DecodeError, HttpStatusError
from showclasses.models import ClassEntry, ClassListing, Trip, TripListing


def ensure_success(response: httpx.Response) -> None:
    """Raise HttpStatusError unless the response status is 2xx."""
    if not response.is_success:
        raise HttpStatusError(
            status_code=response.status_code,
            reason=response.reason_phrase,
            url=str(response.request.url),
        )


def decode_trips(response: httpx.Response) -> list[Trip]:
    """Decode a person query body ({"trips": [...]}).

    Raises:
        HttpStatusError: If the status is not 2xx
        DecodeError: If the body is not a valid trip listing
    """
    ensure_success(response)
    try:
        listing = TripListing.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(f"Invalid trip listing: {e}", url=str(response.request.url)) from e
    return listing.trips


def decode_classes(response: httpx.Response) -> list[ClassEntry]:
    """Decode an entry query body ({"classes": [...]}).

    Raises:
        HttpStatusError: If the status is not 2xx
        DecodeError: If the body is not a valid class listing
    """
    ensure_success(response)
    try:
        listing = ClassListing.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(f"Invalid class listing: {e}", url=str(response.request.url)) from e
    return listing.classes
