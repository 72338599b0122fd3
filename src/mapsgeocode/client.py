"""Geocode clients, the main entry point for the library."""

from __future__ import annotations

import os
from typing import Optional, Union

import httpx

from mapsgeocode import _http, query
from mapsgeocode._http import TimeoutTypes
from mapsgeocode.models import GeocodeResult
from mapsgeocode.query import AddressQuery

DEFAULT_BASE_URL = "https://geocode.maps.co"
DEFAULT_TIMEOUT = 10.0

GeocodeQuery = Union[str, AddressQuery]


class _ClientBase:
    """Request building shared by the blocking and async clients."""

    def __init__(self, api_key: str, base_url: str):
        self._api_key = api_key
        self._base_url = base_url

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @classmethod
    def from_env(cls, **kwargs):
        """
        Build a client from ``GEOCODE_APIKEY`` (and ``GEOCODE_BASE_URL``).

        A missing key is not an error here; it surfaces as
        AuthorizationError on first use.
        """
        kwargs.setdefault(
            "base_url", os.environ.get("GEOCODE_BASE_URL", DEFAULT_BASE_URL)
        )
        return cls(os.environ.get("GEOCODE_APIKEY", ""), **kwargs)

    def _url(self, path: str, params: dict[str, str]) -> tuple[str, str]:
        """Return (request URL, same URL with the key redacted)."""
        url = query.build_url(self._base_url, path, params, self._api_key)
        return url, query.redact(url, self._api_key)

    def _search_url(self, text: str) -> tuple[str, str]:
        return self._url(query.SEARCH_PATH, {"q": text})

    def _address_url(self, address: AddressQuery) -> tuple[str, str]:
        return self._url(query.SEARCH_PATH, address.params())

    def _reverse_url(self, lat: float, lon: float) -> tuple[str, str]:
        return self._url(
            query.REVERSE_PATH,
            {
                "lat": query.format_coordinate(lat),
                "lon": query.format_coordinate(lon),
            },
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"


class MapsGeocode(_ClientBase):
    """
    Blocking client for the geocode.maps.co API.

    Construction performs no I/O and no validation: a bad key only
    shows up as AuthorizationError on the first call. Pass
    *http_client* to reuse your own ``httpx.Client``; it will not be
    closed by close(). Every call makes exactly one request and
    accepts a *timeout* overriding the client default.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: TimeoutTypes = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        super().__init__(api_key, base_url)
        self._session = _http._HttpSession(http_client, timeout)

    # ── Public API ────────────────────────────────────────────────

    def geocode(
        self, text: str, *, timeout: TimeoutTypes = None
    ) -> list[GeocodeResult]:
        """
        Forward-geocode a free-text description such as an address or a
        well known place name.

        Returns the matches in upstream order, possibly none.
        """
        return self._fetch_many(*self._search_url(text), timeout)

    def address_geocode(
        self,
        street: str = "",
        city: str = "",
        county: str = "",
        state: str = "",
        country: str = "",
        postalcode: str = "",
        *,
        timeout: TimeoutTypes = None,
    ) -> list[GeocodeResult]:
        """Forward-geocode structured address fields; empty ones are not sent."""
        address = AddressQuery(street, city, county, state, country, postalcode)
        return self._fetch_many(*self._address_url(address), timeout)

    def search(
        self, q: GeocodeQuery, *, timeout: TimeoutTypes = None
    ) -> list[GeocodeResult]:
        """Forward-geocode either free text or an AddressQuery."""
        if isinstance(q, AddressQuery):
            return self._fetch_many(*self._address_url(q), timeout)
        return self.geocode(q, timeout=timeout)

    def reverse(
        self, lat: float, lon: float, *, timeout: TimeoutTypes = None
    ) -> GeocodeResult:
        """
        Return the place nearest to (*lat*, *lon*), with its Address.

        Coordinates are not range checked; the service decides.
        """
        url, log_url = self._reverse_url(lat, lon)
        response = self._session.get(url, log_url, timeout)
        _http.check_status(response)
        return _http.decode_one(response)

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        self._session.close()

    def __enter__(self) -> MapsGeocode:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ── Private helpers ───────────────────────────────────────────

    def _fetch_many(
        self, url: str, log_url: str, timeout: TimeoutTypes
    ) -> list[GeocodeResult]:
        response = self._session.get(url, log_url, timeout)
        _http.check_status(response)
        return _http.decode_many(response)


class AsyncMapsGeocode(_ClientBase):
    """
    Awaitable client with the same operations as MapsGeocode.

    Cancelling the awaiting task cancels the single underlying request.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: TimeoutTypes = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(api_key, base_url)
        self._session = _http._AsyncHttpSession(http_client, timeout)

    async def geocode(
        self, text: str, *, timeout: TimeoutTypes = None
    ) -> list[GeocodeResult]:
        return await self._fetch_many(*self._search_url(text), timeout)

    async def address_geocode(
        self,
        street: str = "",
        city: str = "",
        county: str = "",
        state: str = "",
        country: str = "",
        postalcode: str = "",
        *,
        timeout: TimeoutTypes = None,
    ) -> list[GeocodeResult]:
        address = AddressQuery(street, city, county, state, country, postalcode)
        return await self._fetch_many(*self._address_url(address), timeout)

    async def search(
        self, q: GeocodeQuery, *, timeout: TimeoutTypes = None
    ) -> list[GeocodeResult]:
        if isinstance(q, AddressQuery):
            return await self._fetch_many(*self._address_url(q), timeout)
        return await self.geocode(q, timeout=timeout)

    async def reverse(
        self, lat: float, lon: float, *, timeout: TimeoutTypes = None
    ) -> GeocodeResult:
        url, log_url = self._reverse_url(lat, lon)
        response = await self._session.get(url, log_url, timeout)
        _http.check_status(response)
        return _http.decode_one(response)

    async def aclose(self) -> None:
        await self._session.aclose()

    async def __aenter__(self) -> AsyncMapsGeocode:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    async def _fetch_many(
        self, url: str, log_url: str, timeout: TimeoutTypes
    ) -> list[GeocodeResult]:
        response = await self._session.get(url, log_url, timeout)
        _http.check_status(response)
        return _http.decode_many(response)
