"""Custom exception hierarchy for mapsgeocode."""

import enum


class ErrorKind(enum.Enum):
    """Every way a geocoding call can fail."""

    AUTHORIZATION = "authorization"
    FLOODING = "flooding"
    THROTTLE = "throttle"
    TRAFFIC = "traffic"
    UNRECOGNIZED = "unrecognized"
    TRANSPORT = "transport"
    DECODE = "decode"


class GeocodeError(Exception):
    """Base exception for all mapsgeocode errors."""

    kind: ErrorKind


class _StatusError(GeocodeError):
    """An error classified from the upstream HTTP status code."""

    message = ""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(self.message.format(status_code=status_code))


class AuthorizationError(_StatusError):
    """HTTP 401: the API key was rejected."""

    kind = ErrorKind.AUTHORIZATION
    message = "Geocode invalid API key"


class FloodingError(_StatusError):
    """HTTP 403: upstream abuse detection flagged the API key."""

    kind = ErrorKind.FLOODING
    message = (
        "Geocode has detected API key abuse, "
        "contact https://maps.co/contact/ to resolve"
    )


class ThrottleError(_StatusError):
    """HTTP 429: the request-rate limit was exceeded."""

    kind = ErrorKind.THROTTLE
    message = "Geocode failed due to exceeding request limit"


class TrafficError(_StatusError):
    """HTTP 503: the upstream is overloaded."""

    kind = ErrorKind.TRAFFIC
    message = "Geocode failed due to high traffic on geocode server"


class UpstreamError(_StatusError):
    """Any other HTTP status >= 400."""

    kind = ErrorKind.UNRECOGNIZED
    message = "Unrecognized upstream error (status code {status_code})"


class TransportError(GeocodeError):
    """
    The request never produced a response (DNS, refused connection,
    timeout). The underlying httpx exception is kept on *original* and
    as ``__cause__``; the message is reused unchanged.
    """

    kind = ErrorKind.TRANSPORT

    def __init__(self, original: Exception):
        self.original = original
        super().__init__(str(original))


class DecodeError(GeocodeError):
    """The response body was not the JSON shape we expected."""

    kind = ErrorKind.DECODE

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Could not decode geocode response: {detail}")


STATUS_ERRORS = {
    401: AuthorizationError,
    403: FloodingError,
    429: ThrottleError,
    503: TrafficError,
}
