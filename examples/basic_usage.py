"""Basic usage examples for the MET Norway client."""

import asyncio
import time

from metno import ClientService, ForecastService, MetNoClient, Params, Response
from metno.summary import daily_summaries

USER_AGENT = "metno-examples support@example.com"

PRAGUE = (50.0880, 14.4207)


async def forecast_example() -> None:
    """Print the next hours of the forecast."""
    async with MetNoClient(USER_AGENT) as client:
        response = await client.get(*PRAGUE)
        body = response.body()
        units = body.properties.meta.units

        print("=== Forecast ===")
        print(f"Updated at: {body.properties.meta.updated_at}")
        print(f"Expires at: {response.expires_at}")
        print()

        for entry in body.properties.timeseries[:12]:
            details = entry.data.instant.details
            print(
                f"{entry.time:%a %H:%M}: "
                f"{details.air_temperature} {units.air_temperature or '??'}, "
                f"wind {details.wind_speed} {units.wind_speed or '??'}, "
                f"UV {details.ultraviolet_index_clear_sky}"
            )


async def revalidation_example() -> None:
    """Pass the previous response back in to avoid refetching."""
    async with MetNoClient(USER_AGENT) as client:
        start = time.perf_counter()
        response = await client.get(*PRAGUE)
        print("\n=== Revalidation ===")
        print(f"The first request took: {(time.perf_counter() - start) * 1000:.0f} ms")

        start = time.perf_counter()
        params = Params(*PRAGUE, last_response=response)
        await client.get_with_params(params)
        print(f"The second cached request took: {(time.perf_counter() - start) * 1000:.0f} ms")


class RateLimit:
    """Allow at most `rate` calls per `per` seconds."""

    def __init__(self, inner: ForecastService, rate: int, per: float = 1.0) -> None:
        self._inner = inner
        self._interval = per / rate
        self._next_slot = 0.0
        self._lock = asyncio.Lock()

    async def ready(self) -> None:
        await self._inner.ready()
        async with self._lock:
            now = time.monotonic()
            if self._next_slot > now:
                await asyncio.sleep(self._next_slot - now)
            self._next_slot = max(now, self._next_slot) + self._interval

    def call(self, params: Params) -> "asyncio.Future[Response]":
        return self._inner.call(params)


async def limits_example() -> None:
    """Wrap the client in a rate limiting decorator."""
    async with MetNoClient(USER_AGENT) as client:
        # At most 20 requests per second
        service = RateLimit(ClientService(client), rate=20)

        await service.ready()
        response = await service.call(Params(*PRAGUE))
        body = response.body()

        print("\n=== Rate limited request ===")
        print(body.geometry)


async def summary_example() -> None:
    """Print a week of daily summaries."""
    async with MetNoClient(USER_AGENT) as client:
        response = await client.get(*PRAGUE)

        print("\n=== Week ===")
        for day in daily_summaries(response.body(), tz="Europe/Prague"):
            symbols = ", ".join(s or "-" for s in day.symbols)
            print(
                f"{day.date:%A, %d %B}: {day.max_temperature}° / {day.min_temperature}°, "
                f"{day.precipitation:.1f} mm, wind {day.max_wind_speed} m/s [{symbols}]"
            )


async def main() -> None:
    """Run all examples."""
    await forecast_example()
    await revalidation_example()
    await limits_example()
    await summary_example()


if __name__ == "__main__":
    asyncio.run(main())
