"""Exceptions for the MET Norway client.

All exceptions inherit from MetNoError, so a single except clause catches
everything the client raises. Each failure kind has its own class, which
lets callers tell "rate limited, retry later" apart from "network
unreachable".

Example:
    Catching specific errors::

        from metno import (
            MetNoClient,
            MetNoConnectionError,
            MetNoRateLimitError,
        )

        try:
            response = await client.get(50.0880, 14.4207)
        except MetNoRateLimitError:
            print("Rate limited, try again later")
        except MetNoConnectionError as e:
            print(f"Network error: {e}")
"""

from typing import Optional


class MetNoError(Exception):
    """Base exception for all MET Norway client errors.

    Example:
        >>> try:
        ...     await client.get(lat, lon)
        ... except MetNoError as e:
        ...     print(f"Forecast fetch failed: {e}")
    """

    pass


class MetNoValidationError(MetNoError):
    """Exception raised when input validation fails.

    Raised before any network I/O when a coordinate, the altitude or the
    user agent is invalid.

    Args:
        reason: Human-readable description of the problem.
        field: Name of the offending parameter ("lat", "lon",
            "altitude" or "user_agent").

    Attributes:
        reason: Human-readable description of the problem.
        field: Name of the offending parameter.

    Example:
        >>> try:
        ...     Params(91.0, 14.42)
        ... except MetNoValidationError as e:
        ...     print(e.field)
        lat
    """

    def __init__(self, reason: str, field: Optional[str] = None) -> None:
        self.reason = reason
        self.field = field
        super().__init__(reason)


class MetNoConnectionError(MetNoError):
    """Exception raised when the HTTP exchange itself fails.

    Covers DNS failures, TLS and connection errors, and timeouts. Wraps
    the underlying httpx exception.
    """

    pass


class MetNoAPIError(MetNoError):
    """Exception raised when the API answers with an unexpected status.

    Any status other than 200, 304 and 429 ends up here, including
    other 2xx codes such as 203.

    Args:
        status_code: HTTP status code returned by the API.
        reason: Response body or reason phrase.

    Attributes:
        status_code: HTTP status code returned by the API.
        reason: Response body or reason phrase.

    Example:
        >>> raise MetNoAPIError(403, "Forbidden")
        MetNoAPIError: API error (HTTP 403): Forbidden
    """

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API error (HTTP {status_code}): {reason}")


class MetNoRateLimitError(MetNoError):
    """Exception raised when the API answers 429 Too Many Requests.

    The client never retries; backing off is up to the caller.
    """

    def __init__(self) -> None:
        super().__init__("Too many requests (HTTP 429)")


class MetNoResponseError(MetNoError):
    """Exception raised when a response breaks the API contract.

    Missing or unparsable Expires/Last-Modified headers, a 304 without a
    previous response, and bodies that do not match the schema all end up
    here. No Response is ever produced in these cases.

    Args:
        reason: Description of what was wrong with the response.

    Attributes:
        reason: Description of what was wrong with the response.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid or unexpected response: {reason}")


class MetNoRequestError(MetNoError):
    """Exception raised when a request cannot be built.

    Currently this means a previous response whose Last-Modified value
    cannot be sent back as an ASCII If-Modified-Since header.
    """
