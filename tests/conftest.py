"""Shared fixtures: sample payloads and a fake show API."""

from collections.abc import Callable

import httpx
import pytest

from showclasses.config import Settings

BASE_URL = "https://api.example.test"


def make_trip(entry_id: int, rider_id: int, **overrides) -> dict:
    """Build a trip payload as the person query returns it."""
    trip = {
        "entry_id": entry_id,
        "entry_number": entry_id % 1000,
        "sponsor": "Stable Co",
        "horse": f"Horse {entry_id}",
        "rider_id": rider_id,
        "rider_name": f"Rider {rider_id}",
    }
    trip.update(overrides)
    return trip


def make_class(class_number: int, **overrides) -> dict:
    """Build a class payload as the entry query returns it."""
    entry = {
        "class_number": class_number,
        "name": f"Class {class_number}",
        "placing": 0,
        "ring": 3,
        "count": 40,
        "scheduled_date": "2024-03-15T10:00:00Z",
        "schedule_starttime": "08:00:00",
    }
    entry.update(overrides)
    return entry


class FakeShowAPI:
    """In-memory show API served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.people: dict[int, dict] = {}
        self.entries: dict[int, dict] = {}
        self.status_overrides: dict[str, int] = {}
        self.requests: list[httpx.Request] = []
        self.fail_with: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with

        path = request.url.path
        if path in self.status_overrides:
            return httpx.Response(self.status_overrides[path])

        kind, _, key = path.strip("/").partition("/")
        if kind == "people" and int(key) in self.people:
            return httpx.Response(200, json=self.people[int(key)])
        if kind == "entries" and int(key) in self.entries:
            return httpx.Response(200, json=self.entries[int(key)])
        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def entry_paths(self) -> list[str]:
        """Paths of all entry queries issued, in order."""
        return [r.url.path for r in self.requests if r.url.path.startswith("/entries/")]


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at the fake API, ignoring any .env file."""
    return Settings(_env_file=None, api_base_url=BASE_URL, person_id=8778, customer_id=15)


@pytest.fixture
def fake_api() -> FakeShowAPI:
    """Provide an empty fake show API."""
    return FakeShowAPI()


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    """Build a response bound to a request, as the client would return it."""

    def _build(payload, status_code: int = 200, path: str = "/people/1") -> httpx.Response:
        request = httpx.Request("GET", f"{BASE_URL}{path}")
        if isinstance(payload, (bytes, str)):
            return httpx.Response(status_code, content=payload, request=request)
        return httpx.Response(status_code, json=payload, request=request)

    return _build
