"""Async client for the MET Norway Locationforecast API.

This package fetches point forecasts from The Norwegian Meteorological
Institute (the data behind Yr.no) and exposes them as typed, cacheable
results.

Key features:
    - Coordinate validation and truncation to the API's precision
    - Local freshness check: no request before the Expires deadline
    - Conditional revalidation with If-Modified-Since once it has passed
    - Lazy, typed decoding of the response body with pydantic
    - Distinct exceptions for every failure kind
    - Single-request service interface for rate or concurrency limiters
    - Optional per-day summaries and DataFrame conversion

Caching strategy:
    The client keeps no cache of its own. Each Response carries its
    freshness deadline and revalidation token; pass it back in via
    Params.last_response and the client returns it unchanged while fresh,
    or revalidates it once stale.

Terms of service:
    Identify your application in the user agent, stay under 20 requests
    per second and respect the Expires header.
    See https://api.met.no/doc/TermsOfService

Example:
    Fetch a forecast::

        import asyncio
        from metno import MetNoClient

        async def main():
            async with MetNoClient("myapp.example.com support@example.com") as client:
                response = await client.get(50.0880, 14.4207)
                body = response.body()
                for entry in body.properties.timeseries[:5]:
                    details = entry.data.instant.details
                    print(f"{entry.time}: {details.air_temperature}°C")

        asyncio.run(main())

    Reuse the previous response::

        from metno import Params

        params = Params(50.0880, 14.4207, last_response=response)
        response = await client.get_with_params(params)
"""

from .client import MetNoClient
from .exceptions import (
    MetNoAPIError,
    MetNoConnectionError,
    MetNoError,
    MetNoRateLimitError,
    MetNoRequestError,
    MetNoResponseError,
    MetNoValidationError,
)
from .models import (
    Body,
    Coordinates,
    Data,
    Geometry,
    Instant,
    InstantDetails,
    Meta,
    NextHours,
    Properties,
    Summary,
    SummaryDetails,
    TimeSeries,
    Units,
    decode_body,
)
from .params import Params, Response
from .service import ClientService, ForecastService
from .types import COMPLETE_URL

__all__ = [
    "MetNoClient",
    "Params",
    "Response",
    "ForecastService",
    "ClientService",
    "Body",
    "Geometry",
    "Coordinates",
    "Properties",
    "Meta",
    "Units",
    "TimeSeries",
    "Data",
    "Instant",
    "InstantDetails",
    "NextHours",
    "Summary",
    "SummaryDetails",
    "decode_body",
    "MetNoError",
    "MetNoAPIError",
    "MetNoConnectionError",
    "MetNoRateLimitError",
    "MetNoRequestError",
    "MetNoResponseError",
    "MetNoValidationError",
    "COMPLETE_URL",
]
