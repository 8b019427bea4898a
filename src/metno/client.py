"""Async client for the MET Norway Locationforecast API.

This module provides MetNoClient, which fetches forecasts and honors the
API's caching rules in two layers:

1. **Local freshness**: a previous Response whose Expires deadline has not
   passed is returned as-is, without any network I/O.
2. **Conditional revalidation**: once the deadline has passed, the
   request carries If-Modified-Since. A 304 answer refreshes the deadline
   and token but reuses the previous body.

The client keeps no state between calls. Callers own the cache by
passing the last Response back in via Params.

Terms of service:
    Every request must identify the application in the User-Agent header,
    and clients must stay under 20 requests per second. The client does
    not rate limit on its own; wrap it with a limiting decorator (see
    metno.service) if needed. https://api.met.no/doc/TermsOfService

Example:
    Fetch and revalidate::

        import asyncio
        from metno import MetNoClient, Params

        async def main():
            async with MetNoClient("myapp.example.com support@example.com") as client:
                response = await client.get(50.0880, 14.4207)
                body = response.body()
                print(body.properties.timeseries[0].data.instant.details)

                params = Params(50.0880, 14.4207, last_response=response)
                response = await client.get_with_params(params)

        asyncio.run(main())
"""

import logging
from datetime import datetime
from datetime import timezone as dt_timezone
from email.utils import parsedate_to_datetime
from typing import Any, Optional

import httpx

from .exceptions import (
    MetNoAPIError,
    MetNoConnectionError,
    MetNoRateLimitError,
    MetNoRequestError,
    MetNoResponseError,
    MetNoValidationError,
)
from .params import Params, Response
from .types import (
    COMPLETE_URL,
    EXPIRES_HEADER,
    IF_MODIFIED_SINCE_HEADER,
    LAST_MODIFIED_HEADER,
)

logger = logging.getLogger(__name__)


class MetNoClient:
    """Async client for the MET Norway Locationforecast API.

    Args:
        user_agent: Identification sent in the User-Agent header of every
            request, e.g. "myapp.example.com support@example.com".
        base_url: Endpoint to query. Defaults to the "complete" product.
        timeout: HTTP timeout in seconds. Defaults to None (no timeout).
        transport: Optional httpx transport, e.g. httpx.MockTransport in
            tests.

    Raises:
        MetNoValidationError: If user_agent is empty.

    Example:
        Using as async context manager (recommended)::

            async with MetNoClient("myapp support@example.com") as client:
                response = await client.get(50.0880, 14.4207)

        Manual resource management::

            client = MetNoClient("myapp support@example.com")
            try:
                response = await client.get(50.0880, 14.4207)
            finally:
                await client.close()
    """

    def __init__(
        self,
        user_agent: str,
        *,
        base_url: str = COMPLETE_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not user_agent or not user_agent.strip():
            raise MetNoValidationError(
                "A user agent identifying the application is required",
                "user_agent",
            )
        self._user_agent = user_agent
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def user_agent(self) -> str:
        return self._user_agent

    async def __aenter__(self) -> "MetNoClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Lazily create the underlying httpx.AsyncClient."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client. Safe to call multiple times."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, lat: float, lon: float) -> Response:
        """Fetch the forecast for the given coordinates.

        Args:
            lat: Latitude in decimal degrees (-90 to 90).
            lon: Longitude in decimal degrees (-180 to 180).

        Returns:
            The fetched Response.

        Raises:
            MetNoValidationError: If the coordinates are invalid.
            MetNoConnectionError: If the HTTP exchange fails.
            MetNoRateLimitError: If the API answers 429.
            MetNoAPIError: If the API answers with another unexpected status.
            MetNoResponseError: If the response headers are missing or invalid.
        """
        return await self.get_with_params(Params(lat, lon))

    async def get_with_altitude(self, lat: float, lon: float, altitude: int) -> Response:
        """Fetch the forecast for the given coordinates and altitude.

        Same as get(), with the ground altitude in meters (-500 to 9000).

        Example:
            >>> response = await client.get_with_altitude(50.0880, 14.4207, 345)
        """
        return await self.get_with_params(Params(lat, lon, altitude))

    async def get_with_params(self, params: Params) -> Response:
        """Fetch the forecast described by params.

        If params carries a last_response that is still fresh, it is
        returned unchanged and no request is made. Otherwise the API is
        queried, conditionally when a last_response exists.

        Args:
            params: Location and optional previous response.

        Returns:
            A fresh Response. On a 304 answer its raw_body is the previous
            response's body.

        Raises:
            MetNoConnectionError: If the HTTP exchange fails.
            MetNoRateLimitError: If the API answers 429.
            MetNoAPIError: If the API answers with another unexpected status.
            MetNoRequestError: If the previous Last-Modified value is not
                ASCII.
            MetNoResponseError: If the response headers are missing or
                invalid, or a 304 arrives without a previous response.

        Example:
            >>> params = Params(50.0880, 14.4207, last_response=previous)
            >>> response = await client.get_with_params(params)
        """
        last_response = params.last_response
        if last_response is not None and last_response.is_fresh():
            logger.debug(
                f"Using cached forecast for ({params.lat}, {params.lon}) "
                f"until {last_response.expires_at.isoformat()}"
            )
            return last_response

        return await self._fetch(params)

    async def _fetch(self, params: Params) -> Response:
        """Query the API and turn the answer into a Response."""
        client = await self._ensure_client()

        query = self._build_query(params)
        headers = self._build_headers(params)

        logger.debug(
            f"Fetching forecast for ({params.lat}, {params.lon}), "
            f"conditional={IF_MODIFIED_SINCE_HEADER in headers}"
        )

        try:
            response = await client.get(self._base_url, params=query, headers=headers)
        except httpx.RequestError as e:
            raise MetNoConnectionError(f"Request error: {e}") from e

        status = response.status_code
        if status == httpx.codes.OK:
            return self._handle_ok(response)
        if status == httpx.codes.NOT_MODIFIED:
            return self._handle_not_modified(params, response)
        if status == httpx.codes.TOO_MANY_REQUESTS:
            logger.warning("Rate limited by the API (HTTP 429)")
            raise MetNoRateLimitError()

        reason = response.text.strip() or response.reason_phrase
        raise MetNoAPIError(status, reason)

    def _build_query(self, params: Params) -> dict[str, Any]:
        query: dict[str, Any] = {"lat": params.lat, "lon": params.lon}
        if params.altitude is not None:
            query["altitude"] = params.altitude
        return query

    def _build_headers(self, params: Params) -> dict[str, str]:
        headers = {}
        if params.last_response is not None:
            token = params.last_response.last_modified
            try:
                token.encode("ascii")
            except UnicodeEncodeError as e:
                raise MetNoRequestError(
                    "Unable to send a non-ASCII Last-Modified value"
                ) from e
            headers[IF_MODIFIED_SINCE_HEADER] = token
        return headers

    def _handle_ok(self, response: httpx.Response) -> Response:
        expires_at, last_modified = _extract_headers(response)
        logger.debug(f"Received new forecast, expires at {expires_at.isoformat()}")
        return Response(
            expires_at=expires_at,
            last_modified=last_modified,
            raw_body=response.text,
        )

    def _handle_not_modified(self, params: Params, response: httpx.Response) -> Response:
        expires_at, last_modified = _extract_headers(response)

        if params.last_response is None:
            logger.warning("Received 304 Not Modified without a conditional request")
            raise MetNoResponseError(
                "Received 304 Not Modified but no previous response was given"
            )

        logger.debug(f"Forecast not modified, expires at {expires_at.isoformat()}")
        return Response(
            expires_at=expires_at,
            last_modified=last_modified,
            raw_body=params.last_response.raw_body,
        )


def _extract_headers(response: httpx.Response) -> tuple[datetime, str]:
    """Read the freshness deadline and revalidation token from a response.

    Raises:
        MetNoResponseError: If either header is missing or Expires cannot
            be parsed.
    """
    expires = response.headers.get(EXPIRES_HEADER)
    if expires is None:
        logger.warning(f"Response is missing the {EXPIRES_HEADER} header")
        raise MetNoResponseError(f"Missing {EXPIRES_HEADER} header")

    last_modified = response.headers.get(LAST_MODIFIED_HEADER)
    if last_modified is None:
        logger.warning(f"Response is missing the {LAST_MODIFIED_HEADER} header")
        raise MetNoResponseError(f"Missing {LAST_MODIFIED_HEADER} header")

    return parse_http_date(expires), last_modified


def parse_http_date(value: str) -> datetime:
    """Parse an RFC 2822 date into a timezone-aware datetime.

    A "-0000" zone, which RFC 2822 uses for "UTC, origin unknown", is
    returned as UTC.

    Raises:
        MetNoResponseError: If the value is not a valid date.

    Example:
        >>> parse_http_date("Tue, 15 Nov 1994 08:12:31 GMT")
        datetime.datetime(1994, 11, 15, 8, 12, 31, tzinfo=datetime.timezone.utc)
    """
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError) as e:
        raise MetNoResponseError(f"Unable to parse date {value!r}") from e
    if parsed is None:
        raise MetNoResponseError(f"Unable to parse date {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt_timezone.utc)
    return parsed
