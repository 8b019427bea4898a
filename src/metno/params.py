"""Request parameters and cached responses.

Params describes the location to look up and optionally carries the
previous Response for the same location. Response is the immutable unit
of cached state: the freshness deadline, the revalidation token and the
raw body.

Example:
    Threading the previous response back in::

        params = Params(50.0880, 14.4207)
        response = await client.get_with_params(params)

        # Later: returns the same response while it is fresh, otherwise
        # revalidates with If-Modified-Since.
        response = await client.get_with_params(
            params.with_last_response(response)
        )
"""

import math
from dataclasses import dataclass, replace
from datetime import datetime
from datetime import timezone as dt_timezone
from typing import Optional

from .exceptions import MetNoValidationError
from .models import Body, decode_body
from .types import (
    COORDINATE_PRECISION,
    MAX_ALTITUDE,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_ALTITUDE,
)

_SCALE = 10**COORDINATE_PRECISION


def truncate_coordinate(value: float) -> float:
    """Truncate a coordinate to COORDINATE_PRECISION decimal places.

    Truncates toward zero rather than rounding.

    Example:
        >>> truncate_coordinate(14.1234567)
        14.1234
        >>> truncate_coordinate(-0.00005)
        0.0
    """
    return math.trunc(value * _SCALE) / _SCALE


@dataclass(frozen=True)
class Response:
    """A successfully fetched forecast.

    Only the client creates Response objects, after a 200 or 304 answer.
    The body is kept as text and decoded on demand with body().

    Attributes:
        expires_at: Time after which the data must be revalidated. A naive
            value is taken to be UTC.
        last_modified: Value of the Last-Modified header, verbatim.
        raw_body: JSON body of the last 200 answer.
    """

    expires_at: datetime
    last_modified: str
    raw_body: str

    def __post_init__(self) -> None:
        if self.expires_at.utcoffset() is None:
            object.__setattr__(
                self, "expires_at", self.expires_at.replace(tzinfo=dt_timezone.utc)
            )

    def is_fresh(self, now: Optional[datetime] = None) -> bool:
        """Check whether the response can be used without revalidation.

        Args:
            now: Reference time. Defaults to the current UTC time.

        Returns:
            True if expires_at lies after now.
        """
        if now is None:
            now = datetime.now(tz=dt_timezone.utc)
        return self.expires_at > now

    def body(self) -> Body:
        """Decode the raw body.

        The result is not cached; hold on to it if you need it repeatedly.

        Raises:
            MetNoResponseError: If the body does not match the schema.
        """
        return decode_body(self.raw_body)


@dataclass(frozen=True)
class Params:
    """Location for which the forecast should be fetched.

    Values are validated on construction and the coordinates truncated to
    four decimal places, as the API requires.

    Args:
        lat: Latitude in decimal degrees (-90 to 90).
        lon: Longitude in decimal degrees (-180 to 180).
        altitude: Optional altitude in whole meters (-500 to 9000).
        last_response: Previous response for this location, used to skip
            or revalidate the request.

    Raises:
        MetNoValidationError: If any value is out of range or not finite.

    Example:
        >>> params = Params(50.08809, 14.42076, 320)
        >>> params.lat, params.lon
        (50.088, 14.4207)
    """

    lat: float
    lon: float
    altitude: Optional[int] = None
    last_response: Optional[Response] = None

    def __post_init__(self) -> None:
        lat = _validate_coordinate(self.lat, MAX_LATITUDE, "lat")
        lon = _validate_coordinate(self.lon, MAX_LONGITUDE, "lon")
        altitude = _validate_altitude(self.altitude)

        object.__setattr__(self, "lat", truncate_coordinate(lat))
        object.__setattr__(self, "lon", truncate_coordinate(lon))
        object.__setattr__(self, "altitude", altitude)

    def with_last_response(self, response: Optional[Response]) -> "Params":
        """Return a copy of these params carrying the given response."""
        return replace(self, last_response=response)


def _validate_coordinate(value: float, limit: float, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MetNoValidationError(
            f"Invalid {field} value: expected a number, got {value!r}", field
        )
    if not math.isfinite(value) or abs(value) > limit:
        raise MetNoValidationError(
            f"Invalid {field} value: must be a finite number in "
            f"[-{limit}, {limit}], got {value}",
            field,
        )
    return float(value)


def _validate_altitude(value: Optional[float]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MetNoValidationError(
            f"Invalid altitude value: expected whole meters, got {value!r}",
            "altitude",
        )
    if isinstance(value, float) and not value.is_integer():
        raise MetNoValidationError(
            f"Invalid altitude value: expected whole meters, got {value}",
            "altitude",
        )
    if not MIN_ALTITUDE <= value <= MAX_ALTITUDE:
        raise MetNoValidationError(
            f"Invalid altitude value: must be in "
            f"[{MIN_ALTITUDE}, {MAX_ALTITUDE}], got {value}",
            "altitude",
        )
    return int(value)
