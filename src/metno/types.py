"""Constants for the MET Norway Locationforecast client.

This module collects the endpoint, header names and parameter bounds used
throughout the client.

Example:
    Pointing the client at a mirror::

        from metno import MetNoClient

        async with MetNoClient(
            "myapp.example.com support@example.com",
            base_url="https://mirror.example.com/locationforecast/2.0/complete",
        ) as client:
            response = await client.get(50.0880, 14.4207)
"""

COMPLETE_URL = "https://api.met.no/weatherapi/locationforecast/2.0/complete"
"""str: URL of the Locationforecast 2.0 "complete" product.

The complete product carries every instantaneous measurement plus the
1, 6 and 12 hour period summaries.
"""

EXPIRES_HEADER = "Expires"
"""str: Response header holding the freshness deadline (RFC 2822 date)."""

LAST_MODIFIED_HEADER = "Last-Modified"
"""str: Response header holding the revalidation token.

The value is kept verbatim and echoed back in ``If-Modified-Since``.
"""

IF_MODIFIED_SINCE_HEADER = "If-Modified-Since"
"""str: Request header used for conditional revalidation."""

COORDINATE_PRECISION = 4
"""int: Number of decimal places kept for latitude and longitude.

Coordinates are truncated (not rounded) to this precision. The API
rejects or redirects requests with more decimals.
"""

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0

MIN_ALTITUDE = -500
"""int: Lowest accepted altitude in meters."""

MAX_ALTITUDE = 9000
"""int: Highest accepted altitude in meters."""
