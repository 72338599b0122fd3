"""Typed result models for mapsgeocode."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any


@dataclass(frozen=True)
class Address:
    """
    Structured address of a reverse lookup.

    Every component is optional upstream; missing ones are "".
    """

    house_number: str = ""
    road: str = ""
    neighbourhood: str = ""
    suburb: str = ""
    county: str = ""
    city: str = ""
    state: str = ""
    iso3166_2_lvl4: str = ""     # region subdivision code, e.g. "US-NY"
    postcode: str = ""
    country: str = ""
    country_code: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Address:
        """Build from an upstream ``address`` object, ignoring unknown keys."""
        values = {}
        for f in fields(cls):
            raw = data.get(_address_key(f.name))
            if raw is None:
                continue
            if not isinstance(raw, str):
                raise TypeError(f"address.{f.name} must be a string")
            values[f.name] = raw
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        """Convert to the upstream key names."""
        return {_address_key(f.name): getattr(self, f.name) for f in fields(self)}

    def __bool__(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))


def _address_key(name: str) -> str:
    if name == "iso3166_2_lvl4":
        return "ISO3166-2-lvl4"
    return name


@dataclass(frozen=True)
class GeocodeResult:
    """One place returned by the geocoding service."""

    place_id: int = 0
    licence: str = ""
    osm_type: str = ""
    osm_id: int = 0
    # [min_lat, max_lat, min_lon, max_lon] exactly as sent upstream
    boundingbox: tuple[str, ...] = ()
    lat: str = ""
    lon: str = ""
    display_name: str = ""
    class_: str = ""
    type: str = ""
    importance: float = 0.0
    # Only populated by reverse lookups
    address: Address = field(default_factory=Address)

    @property
    def latitude(self) -> float:
        return float(self.lat)

    @property
    def longitude(self) -> float:
        return float(self.lon)

    @classmethod
    def from_dict(cls, data: Any) -> GeocodeResult:
        """
        Build from one upstream JSON object.

        Unknown keys are ignored and missing keys keep their zero value.
        Raises TypeError if *data* or one of its known fields has the
        wrong JSON type.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        bbox = data.get("boundingbox")
        if bbox is None:
            bbox = []
        if not isinstance(bbox, list) or not all(isinstance(b, str) for b in bbox):
            raise TypeError("boundingbox must be a list of strings")

        address = data.get("address")
        if address is None:
            address = {}
        if not isinstance(address, dict):
            raise TypeError("address must be a JSON object")

        return cls(
            place_id=_as_int(data, "place_id"),
            licence=_as_str(data, "licence"),
            osm_type=_as_str(data, "osm_type"),
            osm_id=_as_int(data, "osm_id"),
            boundingbox=tuple(bbox),
            lat=_as_str(data, "lat"),
            lon=_as_str(data, "lon"),
            display_name=_as_str(data, "display_name"),
            class_=_as_str(data, "class"),
            type=_as_str(data, "type"),
            importance=_as_float(data, "importance"),
            address=Address.from_dict(address),
        )

    def to_dict(self) -> dict:
        """Convert to a plain dictionary using the upstream key names."""
        return {
            "place_id": self.place_id,
            "licence": self.licence,
            "osm_type": self.osm_type,
            "osm_id": self.osm_id,
            "boundingbox": list(self.boundingbox),
            "lat": self.lat,
            "lon": self.lon,
            "display_name": self.display_name,
            "class": self.class_,
            "type": self.type,
            "importance": self.importance,
            "address": self.address.to_dict(),
        }


_UINT64_MAX = 2**64 - 1


def _as_str(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


def _as_int(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise TypeError(f"{key} must be a non-negative integer")
    if value > _UINT64_MAX:
        raise TypeError(f"{key} does not fit in an unsigned 64-bit integer")
    return value


def _as_float(data: dict, key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} must be a number")
    try:
        return float(value)
    except OverflowError:
        raise TypeError(f"{key} is out of range for a float") from None
