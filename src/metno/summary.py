"""Per-day aggregation of a decoded forecast.

Groups the hourly steps of a Body into local calendar days and reduces
each day to the values a dashboard typically shows: four weather symbols,
the temperature range, total precipitation and the strongest wind.

Example:
    Printing a week::

        from metno.summary import daily_summaries

        body = response.body()
        for day in daily_summaries(body, tz="Europe/Prague"):
            print(
                f"{day.date:%A, %d %B}: {day.max_temperature}° / "
                f"{day.min_temperature}°, {day.precipitation:.1f} mm"
            )
"""

import itertools
from dataclasses import dataclass, field
from datetime import date
from datetime import timezone as dt_timezone
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from .models import Body, TimeSeries

SYMBOL_HOURS = (0, 6, 12, 18)
"""tuple[int, ...]: UTC hours whose 6-hour symbol represents the day.

Further out the API only sends steps at these UTC hours.
"""


@dataclass
class DaySummary:
    """Aggregated forecast for one local day.

    Attributes:
        date: Local calendar date.
        symbols: Symbol codes for the night, morning, afternoon and
            evening periods. Missing periods are None.
        max_temperature: Highest instantaneous air temperature.
        min_temperature: Lowest instantaneous air temperature.
        precipitation: Sum of the 6-hour precipitation amounts.
        max_wind_speed: Highest instantaneous wind speed.
    """

    date: date
    symbols: list[Optional[str]] = field(default_factory=list)
    max_temperature: Optional[float] = None
    min_temperature: Optional[float] = None
    precipitation: float = 0.0
    max_wind_speed: Optional[float] = None


def daily_summaries(body: Body, tz: str = "UTC", days: int = 7) -> list[DaySummary]:
    """Aggregate a forecast into per-day summaries.

    Args:
        body: Decoded forecast.
        tz: IANA timezone name used to split the steps into days.
        days: Maximum number of days to return.

    Returns:
        Chronological list of at most ``days`` summaries.
    """
    zone = ZoneInfo(tz)
    grouped = itertools.groupby(
        body.properties.timeseries,
        key=lambda entry: entry.time.astimezone(zone).date(),
    )

    summaries = []
    for idx, (day, entries) in enumerate(itertools.islice(grouped, days)):
        hours = list(entries)
        summaries.append(
            DaySummary(
                date=day,
                symbols=_pick_symbols(hours, first_day=idx == 0),
                max_temperature=_max(_temperatures(hours)),
                min_temperature=_min(_temperatures(hours)),
                precipitation=_precipitation(hours),
                max_wind_speed=_max(
                    h.data.instant.details.wind_speed for h in hours
                ),
            )
        )
    return summaries


def _six_hour_symbol(entry: TimeSeries) -> Optional[str]:
    next_6_hours = entry.data.next_6_hours
    return next_6_hours.summary.symbol_code if next_6_hours else None


def _pick_symbols(
    hours: Sequence[TimeSeries], first_day: bool
) -> list[Optional[str]]:
    symbols = [
        _six_hour_symbol(h)
        for h in hours
        if h.time.astimezone(dt_timezone.utc).hour in SYMBOL_HOURS
    ]

    # The first day usually starts mid-day
    if first_day and len(symbols) != len(SYMBOL_HOURS):
        symbols.insert(0, _six_hour_symbol(hours[0]))

    symbols = symbols[-len(SYMBOL_HOURS):]
    padding = [None] * (len(SYMBOL_HOURS) - len(symbols))
    return padding + symbols


def _temperatures(hours: Sequence[TimeSeries]) -> list[Optional[float]]:
    return [h.data.instant.details.air_temperature for h in hours]


def _precipitation(hours: Sequence[TimeSeries]) -> float:
    total = 0.0
    for h in hours:
        next_6_hours = h.data.next_6_hours
        if next_6_hours is None or next_6_hours.details is None:
            continue
        if next_6_hours.details.precipitation_amount is not None:
            total += next_6_hours.details.precipitation_amount
    return total


def _max(values) -> Optional[float]:
    present = [v for v in values if v is not None]
    return max(present) if present else None


def _min(values) -> Optional[float]:
    present = [v for v in values if v is not None]
    return min(present) if present else None
