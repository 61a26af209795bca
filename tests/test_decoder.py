"""Tests for response decoding and the HTTP client wrapper."""

import asyncio

import httpx
import pytest

from showclasses.api import ShowClient, decode_classes, decode_trips, ensure_success
from showclasses.errors import DecodeError, HttpStatusError, NetworkError
from tests.conftest import make_class, make_trip


class TestDecodeTrips:
    """Tests for decoding the person query."""

    def test_decodes_trips_in_order(self, json_response):
        """Trips come back typed and in listing order."""
        response = json_response({"trips": [make_trip(11, 1), make_trip(12, 2)]})

        trips = decode_trips(response)

        assert [t.entry_id for t in trips] == [11, 12]
        assert trips[0].rider_name == "Rider 1"
        assert trips[1].horse == "Horse 12"

    def test_empty_trip_list(self, json_response):
        """An empty listing is valid."""
        assert decode_trips(json_response({"trips": []})) == []

    def test_extra_fields_ignored(self, json_response):
        """Unknown keys in the payload are dropped."""
        trip = make_trip(11, 1, show_name="WEF 10")
        trips = decode_trips(json_response({"trips": [trip]}))
        assert trips[0].entry_id == 11

    def test_missing_field_is_decode_error(self, json_response):
        """A trip without rider_id fails to decode."""
        trip = make_trip(11, 1)
        del trip["rider_id"]

        with pytest.raises(DecodeError, match="Invalid trip listing"):
            decode_trips(json_response({"trips": [trip]}))

    def test_mistyped_field_is_decode_error(self, json_response):
        """A numeric field sent as a string fails to decode."""
        trip = make_trip(11, 1)
        trip["entry_id"] = "11"

        with pytest.raises(DecodeError):
            decode_trips(json_response({"trips": [trip]}))

    def test_wrong_envelope_is_decode_error(self, json_response):
        """A class listing is not a trip listing."""
        with pytest.raises(DecodeError):
            decode_trips(json_response({"classes": []}))

    def test_invalid_json_is_decode_error(self, json_response):
        """A non-JSON body fails to decode."""
        with pytest.raises(DecodeError) as exc_info:
            decode_trips(json_response(b"<html>oops</html>"))
        assert exc_info.value.url.endswith("/people/1")

    def test_non_success_status_not_parsed(self, json_response):
        """A 404 raises HttpStatusError even with a valid-looking body."""
        response = json_response({"trips": []}, status_code=404)

        with pytest.raises(HttpStatusError) as exc_info:
            decode_trips(response)

        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "404 Not Found"


class TestDecodeClasses:
    """Tests for decoding the entry query."""

    def test_decodes_classes(self, json_response):
        """Classes come back typed with wire field names."""
        response = json_response(
            {"classes": [make_class(101, name="1.30m Jumper", count=55)]},
            path="/entries/11",
        )

        classes = decode_classes(response)

        assert len(classes) == 1
        assert classes[0].name == "1.30m Jumper"
        assert classes[0].count == 55

    def test_negative_placing_is_decode_error(self, json_response):
        """Counts and placings are non-negative."""
        response = json_response({"classes": [make_class(101, placing=-1)]})

        with pytest.raises(DecodeError, match="Invalid class listing"):
            decode_classes(response)

    def test_server_error_status(self, json_response):
        """A 500 is reported as a status failure."""
        with pytest.raises(HttpStatusError) as exc_info:
            decode_classes(json_response({}, status_code=500))
        assert exc_info.value.status_code == 500


class TestEnsureSuccess:
    """Tests for the status check."""

    def test_2xx_passes(self, json_response):
        """Any 2xx status is accepted."""
        ensure_success(json_response({}, status_code=204))


class TestShowClient:
    """Tests for the HTTP client wrapper."""

    def test_sends_origin_header_and_query(self, settings):
        """Requests carry the Origin header and go to base_url + path."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"trips": []})

        async def run():
            async with ShowClient(settings, transport=httpx.MockTransport(handler)) as client:
                return await client.get("/people/8778", params={"pid": 8778, "customer_id": 15})

        response = asyncio.run(run())

        assert response.status_code == 200
        request = seen[0]
        assert request.headers["Origin"] == "https://wellingtoninternational.com"
        assert str(request.url) == "https://api.example.test/people/8778?pid=8778&customer_id=15"

    def test_transport_failure_is_network_error(self, settings):
        """Connection errors surface as NetworkError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async def run():
            async with ShowClient(settings, transport=httpx.MockTransport(handler)) as client:
                await client.get("/people/1")

        with pytest.raises(NetworkError, match="connection refused"):
            asyncio.run(run())

    def test_non_success_returned_raw(self, settings):
        """The client does not judge status codes."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        async def run():
            async with ShowClient(settings, transport=httpx.MockTransport(handler)) as client:
                return await client.get("/people/1")

        assert asyncio.run(run()).status_code == 503
