"""Internal HTTP session management, status classification and decoding."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import httpx

from mapsgeocode import __version__
from mapsgeocode.exceptions import (
    STATUS_ERRORS,
    DecodeError,
    TransportError,
    UpstreamError,
)
from mapsgeocode.models import GeocodeResult

logger = logging.getLogger(__name__)

TimeoutTypes = Union[float, httpx.Timeout, None]

_USER_AGENT = f"mapsgeocode/{__version__}"


def check_status(response: httpx.Response) -> None:
    """
    Raise the error mapped to *response*'s status code, if any.

    Only the status code is examined, never the body.
    """
    status = response.status_code
    error_cls = STATUS_ERRORS.get(status)
    if error_cls is None and status >= 400:
        error_cls = UpstreamError
    if error_cls is not None:
        logger.warning("Geocode request failed with HTTP %d", status)
        raise error_cls(status)


def decode_many(response: httpx.Response) -> list[GeocodeResult]:
    """Decode a JSON array body into results, preserving upstream order."""
    data = _load_json(response)
    if not isinstance(data, list):
        raise DecodeError(f"expected a JSON array, got {type(data).__name__}")
    try:
        return [GeocodeResult.from_dict(item) for item in data]
    except TypeError as exc:
        raise DecodeError(str(exc)) from exc


def decode_one(response: httpx.Response) -> GeocodeResult:
    """Decode a JSON object body into a single result."""
    data = _load_json(response)
    try:
        return GeocodeResult.from_dict(data)
    except TypeError as exc:
        raise DecodeError(str(exc)) from exc


def _load_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise DecodeError(str(exc)) from exc


class _HttpSession:
    """
    Holds an ``httpx.Client``, either borrowed from the caller or owned.

    An owned client is created on first use and closed by close();
    a borrowed one is left for the caller to manage.
    """

    def __init__(self, client: Optional[httpx.Client], timeout: TimeoutTypes):
        self._client = client
        self._owned = client is None
        self._timeout = timeout

    def get_client(self) -> httpx.Client:
        """Return the underlying client, creating one if needed."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._timeout,
                headers={"User-Agent": _USER_AGENT},
            )
        return self._client

    def get(self, url: str, log_url: str, timeout: TimeoutTypes) -> httpx.Response:
        """
        Issue one GET, following redirects, and return the fully read
        response.

        Transport failures are re-raised as TransportError and bodies
        httpx cannot decompress as DecodeError; nothing is retried.
        """
        client = self.get_client()
        logger.debug("GET %s", log_url)
        try:
            response = client.get(
                url, timeout=_per_call(timeout), follow_redirects=True
            )
        except httpx.DecodingError as exc:
            logger.debug("GET %s undecodable body: %s", log_url, exc)
            raise DecodeError(str(exc)) from exc
        except httpx.TransportError as exc:
            logger.debug("GET %s failed: %s", log_url, exc)
            raise TransportError(exc) from exc
        logger.debug("GET %s -> %d", log_url, response.status_code)
        return response

    def close(self) -> None:
        """Close the client if we own it."""
        if self._owned and self._client is not None:
            self._client.close()
            self._client = None


class _AsyncHttpSession:
    """Awaitable twin of _HttpSession around an ``httpx.AsyncClient``."""

    def __init__(self, client: Optional[httpx.AsyncClient], timeout: TimeoutTypes):
        self._client = client
        self._owned = client is None
        self._timeout = timeout

    def get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"User-Agent": _USER_AGENT},
            )
        return self._client

    async def get(
        self, url: str, log_url: str, timeout: TimeoutTypes
    ) -> httpx.Response:
        client = self.get_client()
        logger.debug("GET %s", log_url)
        try:
            response = await client.get(
                url, timeout=_per_call(timeout), follow_redirects=True
            )
        except httpx.DecodingError as exc:
            logger.debug("GET %s undecodable body: %s", log_url, exc)
            raise DecodeError(str(exc)) from exc
        except httpx.TransportError as exc:
            logger.debug("GET %s failed: %s", log_url, exc)
            raise TransportError(exc) from exc
        logger.debug("GET %s -> %d", log_url, response.status_code)
        return response

    async def aclose(self) -> None:
        if self._owned and self._client is not None:
            await self._client.aclose()
            self._client = None


def _per_call(timeout: TimeoutTypes) -> Any:
    # None means "whatever the client was configured with"
    return httpx.USE_CLIENT_DEFAULT if timeout is None else timeout
