import asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from metno import (
    ClientService,
    ForecastService,
    MetNoClient,
    MetNoRateLimitError,
    Params,
    Response,
)


def make_response(raw_body: str = "{}") -> Response:
    return Response(
        expires_at=datetime(2030, 1, 1, tzinfo=timezone.utc),
        last_modified="token",
        raw_body=raw_body,
    )


class ConcurrencyLimit:
    """Decorator used to check that services compose."""

    def __init__(self, inner: ForecastService, limit: int) -> None:
        self._inner = inner
        self._semaphore = asyncio.Semaphore(limit)
        self.in_flight = 0
        self.max_in_flight = 0

    async def ready(self) -> None:
        await self._inner.ready()

    def call(self, params: Params) -> "asyncio.Future[Response]":
        async def run() -> Response:
            async with self._semaphore:
                self.in_flight += 1
                self.max_in_flight = max(self.max_in_flight, self.in_flight)
                try:
                    return await self._inner.call(params)
                finally:
                    self.in_flight -= 1

        return asyncio.ensure_future(run())


class TestClientService:
    def test_implements_protocol(self):
        service = ClientService(MetNoClient("test.com support@test.com"))
        assert isinstance(service, ForecastService)

    @pytest.mark.asyncio
    async def test_ready_is_immediate(self):
        service = ClientService(MetNoClient("test.com support@test.com"))
        assert await service.ready() is None

    @pytest.mark.asyncio
    async def test_call_delegates_to_client(self):
        expected = make_response()
        client = MagicMock()
        client.get_with_params = AsyncMock(return_value=expected)
        params = Params(50.0880, 14.4207)

        future = ClientService(client).call(params)

        assert isinstance(future, asyncio.Future)
        assert await future is expected
        client.get_with_params.assert_awaited_once_with(params)

    @pytest.mark.asyncio
    async def test_call_propagates_errors(self):
        client = MagicMock()
        client.get_with_params = AsyncMock(side_effect=MetNoRateLimitError())

        with pytest.raises(MetNoRateLimitError):
            await ClientService(client).call(Params(50.0880, 14.4207))

    @pytest.mark.asyncio
    async def test_call_is_cancellable(self):
        started = asyncio.Event()

        async def never_finishes(params):
            started.set()
            await asyncio.Event().wait()

        client = MagicMock()
        client.get_with_params = never_finishes

        future = ClientService(client).call(Params(50.0880, 14.4207))
        await started.wait()
        future.cancel()

        with pytest.raises(asyncio.CancelledError):
            await future


class TestServiceComposition:
    @pytest.mark.asyncio
    async def test_decorator_wraps_inner_service(self):
        release = asyncio.Event()

        async def slow_fetch(params):
            await release.wait()
            return make_response()

        client = MagicMock()
        client.get_with_params = slow_fetch
        service = ConcurrencyLimit(ClientService(client), limit=2)

        await service.ready()
        futures = [service.call(Params(50.0, 14.0 + i)) for i in range(5)]
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        release.set()
        results = await asyncio.gather(*futures)

        assert len(results) == 5
        assert service.max_in_flight == 2
        assert isinstance(service, ForecastService)
