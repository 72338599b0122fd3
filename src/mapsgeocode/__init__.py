"""mapsgeocode: forward and reverse geocoding through geocode.maps.co."""

__version__ = "0.1.0"

from mapsgeocode.client import AsyncMapsGeocode, MapsGeocode  # noqa: E402
from mapsgeocode.exceptions import (  # noqa: E402
    AuthorizationError,
    DecodeError,
    ErrorKind,
    FloodingError,
    GeocodeError,
    ThrottleError,
    TrafficError,
    TransportError,
    UpstreamError,
)
from mapsgeocode.models import Address, GeocodeResult  # noqa: E402
from mapsgeocode.query import AddressQuery  # noqa: E402

__all__ = [
    "MapsGeocode",
    "AsyncMapsGeocode",
    "AddressQuery",
    "GeocodeResult",
    "Address",
    "GeocodeError",
    "ErrorKind",
    "AuthorizationError",
    "FloodingError",
    "ThrottleError",
    "TrafficError",
    "UpstreamError",
    "TransportError",
    "DecodeError",
]
