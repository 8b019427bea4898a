"""Single-request service interface for composing middleware.

ForecastService is the one-request, one-response abstraction that
generic middleware (concurrency caps, rate limiting, retries) can be
written against. ClientService adapts a MetNoClient to it. A limiting
decorator implements the same protocol and wraps an inner service, so
the client itself never depends on any middleware.

Example:
    Capping concurrency with a decorator::

        import asyncio
        from metno import (
            ClientService,
            ForecastService,
            MetNoClient,
            Params,
            Response,
        )

        class ConcurrencyLimit:
            def __init__(self, inner: ForecastService, limit: int) -> None:
                self._inner = inner
                self._semaphore = asyncio.Semaphore(limit)

            async def ready(self) -> None:
                await self._inner.ready()

            def call(self, params: Params) -> "asyncio.Future[Response]":
                async def run() -> Response:
                    async with self._semaphore:
                        return await self._inner.call(params)
                return asyncio.ensure_future(run())

        async with MetNoClient("myapp support@example.com") as client:
            service = ConcurrencyLimit(ClientService(client), limit=50)
            await service.ready()
            response = await service.call(Params(50.0880, 14.4207))
"""

import asyncio
from typing import Protocol, runtime_checkable

from .client import MetNoClient
from .params import Params, Response


@runtime_checkable
class ForecastService(Protocol):
    """Anything that turns Params into a future Response."""

    async def ready(self) -> None:
        """Wait until the service can accept another call."""
        ...

    def call(self, params: Params) -> "asyncio.Future[Response]":
        """Start a request and return a cancellable future of its result."""
        ...


class ClientService:
    """ForecastService backed by a MetNoClient.

    Holds nothing but a reference to the client. The service is always
    ready; applying backpressure is the job of a wrapping decorator.

    Args:
        client: Client used to perform the requests.
    """

    def __init__(self, client: MetNoClient) -> None:
        self._client = client

    @property
    def client(self) -> MetNoClient:
        return self._client

    async def ready(self) -> None:
        return None

    def call(self, params: Params) -> "asyncio.Future[Response]":
        """Schedule client.get_with_params(params) as a task.

        Must be called with a running event loop. Cancelling the returned
        task cancels the underlying request; no Response is produced.
        """
        return asyncio.ensure_future(self._client.get_with_params(params))
