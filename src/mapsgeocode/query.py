"""Query escaping and URL construction for the geocoding endpoints."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Mapping
from urllib.parse import quote_plus

SEARCH_PATH = "/search"
REVERSE_PATH = "/reverse"


def escape(value: str) -> str:
    """
    Percent-encode *value* for a query string, with spaces as '+'.

    '555 5th Ave' -> '555+5th+Ave', 'Barnes & Noble' -> 'Barnes+%26+Noble'.
    """
    return quote_plus(value)


def format_coordinate(value: float) -> str:
    """Fixed six-decimal text, e.g. 40.7558017 -> '40.755802'."""
    return f"{value:.6f}"


@dataclass(frozen=True)
class AddressQuery:
    """Structured forward-geocoding query. Empty fields are not sent."""

    street: str = ""
    city: str = ""
    county: str = ""
    state: str = ""
    country: str = ""
    postalcode: str = ""

    def params(self) -> dict[str, str]:
        """Return only the non-empty fields, keyed by their upstream names."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}


def build_url(
    base_url: str, path: str, params: Mapping[str, str], api_key: str
) -> str:
    """
    Build the full request URL for *path*.

    *params* are encoded in order, then ``api_key`` is appended last.
    With no params the result is still well formed: ``...?api_key=<key>``.
    """
    pairs = [f"{name}={escape(value)}" for name, value in params.items()]
    pairs.append(f"api_key={escape(api_key)}")
    return f"{base_url.rstrip('/')}{path}?{'&'.join(pairs)}"


def redact(url: str, api_key: str) -> str:
    """Hide the API key before a URL reaches a log line."""
    if not api_key:
        return url
    return url.replace(f"api_key={escape(api_key)}", "api_key=***")
