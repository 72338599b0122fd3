"""Shared test fixtures: canned upstream bodies and mock-transport clients."""

import json

import httpx
import pytest

API_KEY = "test-key"
BASE_URL = "https://geocode.maps.co"

LICENCE = "Data © OpenStreetMap contributors, ODbL 1.0. https://osm.org/copyright"

SEARCH_BODY = [
    {
        "place_id": 319634989,
        "licence": LICENCE,
        "osm_type": "node",
        "osm_id": 1000793154,
        "boundingbox": ["40.7557728", "40.7558728", "-73.9788465", "-73.9787465"],
        "lat": "40.7558228",
        "lon": "-73.9787965",
        "display_name": (
            "Barnes & Noble, 555, 5th Avenue, Midtown East, Manhattan, "
            "New York County, New York, 10017, United States"
        ),
        "class": "shop",
        "type": "books",
        "importance": 0.62001,
    },
    {
        "place_id": 319634907,
        "licence": LICENCE,
        "osm_type": "node",
        "osm_id": 2716012085,
        "boundingbox": ["40.7557517", "40.7558517", "-73.9787914", "-73.9786914"],
        "lat": "40.7558017",
        "lon": "-73.9787414",
        "display_name": (
            "555, 5th Avenue, Midtown East, Manhattan, "
            "New York County, New York, 10017, United States"
        ),
        "class": "place",
        "type": "house",
        "importance": 0.62001,
    },
]

REVERSE_BODY = {
    "place_id": 2716012085,
    "licence": LICENCE,
    "osm_type": "node",
    "osm_id": 2716012085,
    "lat": "40.7558017",
    "lon": "-73.9787414",
    "display_name": (
        "555, 5th Avenue, Midtown East, Manhattan, "
        "New York County, New York, 10017, United States"
    ),
    "address": {
        "house_number": "555",
        "road": "5th Avenue",
        "neighbourhood": "Midtown East",
        "suburb": "Manhattan",
        "county": "New York County",
        "city": "New York",
        "state": "New York",
        "ISO3166-2-lvl4": "US-NY",
        "postcode": "10017",
        "country": "United States",
        "country_code": "us",
    },
    "boundingbox": ["40.7557517", "40.7558517", "-73.9787914", "-73.9786914"],
}


class Upstream:
    """
    Fake geocode.maps.co: answers every request with a fixed status and
    body and records what it was asked.
    """

    def __init__(self, status: int = 200, body=None, raw: bytes = None):
        self.status = status
        self.body = body
        self.raw = raw
        self.requests: list = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status, content=self.raw)
        return httpx.Response(self.status, content=json.dumps(self.body).encode())

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_query(self) -> str:
        return self.last.url.query.decode()


@pytest.fixture()
def upstream() -> Upstream:
    return Upstream(body=SEARCH_BODY)


@pytest.fixture()
def http_client(upstream: Upstream):
    c = httpx.Client(transport=httpx.MockTransport(upstream))
    yield c
    c.close()


@pytest.fixture()
def client(http_client: httpx.Client):
    """Create a MapsGeocode client wired to the fake upstream."""
    from mapsgeocode import MapsGeocode

    c = MapsGeocode(API_KEY, base_url=BASE_URL, http_client=http_client)
    yield c
    c.close()
