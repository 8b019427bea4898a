"""DataFrame conversion for decoded forecasts.

This module flattens the time series of a Body into a pandas DataFrame
with one row per forecast step.

Requirements:
    pandas >= 2.0 must be installed. Install with:
        pip install pandas
    Or install metno with the dataframe extra:
        pip install metno-locationforecast[dataframe]

Columns:
    - ``time``: step time as a UTC datetime
    - one column per instantaneous measurement (``air_temperature``, ...)
    - ``symbol_code_1h``, ``symbol_code_6h``, ``symbol_code_12h``
    - period measurements prefixed with their period, e.g.
      ``next_1_hours_precipitation_amount``

Example:
    Basic usage::

        from metno import MetNoClient
        from metno.dataframe import to_dataframe

        async with MetNoClient("myapp support@example.com") as client:
            response = await client.get(50.0880, 14.4207)
            df = to_dataframe(response.body())
            print(df[["time", "air_temperature", "symbol_code_1h"]].head())
"""

from typing import Any

from .models import Body, InstantDetails, NextHours, SummaryDetails

PERIODS = {
    "next_1_hours": "1h",
    "next_6_hours": "6h",
    "next_12_hours": "12h",
}


def _check_pandas() -> None:
    """Check if pandas is installed and raise informative error if not."""
    try:
        import pandas  # noqa: F401
    except ImportError as e:
        raise ImportError(
            "pandas is required for DataFrame conversion. "
            "Install it with: pip install pandas"
        ) from e


def _period_columns(key: str, period: Any) -> dict[str, Any]:
    row: dict[str, Any] = {f"symbol_code_{PERIODS[key]}": None}
    for name in SummaryDetails.model_fields:
        row[f"{key}_{name}"] = None

    if isinstance(period, NextHours):
        row[f"symbol_code_{PERIODS[key]}"] = period.summary.symbol_code
        if period.details is not None:
            for name, value in period.details.model_dump().items():
                row[f"{key}_{name}"] = value
    return row


def to_dataframe(body: Body) -> "pd.DataFrame":
    """Convert a decoded forecast to a pandas DataFrame.

    Args:
        body: Decoded forecast, e.g. from Response.body().

    Returns:
        DataFrame with one row per time step. Missing measurements are
        NaN (numeric columns) or None (symbol columns).

    Raises:
        ImportError: If pandas is not installed.

    Example:
        >>> df = to_dataframe(response.body())
        >>> df["air_temperature"].max()
        21.4
    """
    _check_pandas()
    import pandas as pd

    columns = ["time", *InstantDetails.model_fields]
    for key in PERIODS:
        columns.extend(_period_columns(key, None))

    rows = []
    for entry in body.properties.timeseries:
        row: dict[str, Any] = {"time": entry.time}
        row.update(entry.data.instant.details.model_dump())
        for key in PERIODS:
            row.update(_period_columns(key, getattr(entry.data, key)))
        rows.append(row)

    df = pd.DataFrame(rows, columns=columns)
    df["time"] = pd.to_datetime(df["time"], utc=True)

    # Newer pandas infers a string dtype here, which turns None into NaN
    for suffix in PERIODS.values():
        symbols = df[f"symbol_code_{suffix}"].astype(object)
        df[f"symbol_code_{suffix}"] = symbols.where(symbols.notna(), None)
    return df


__all__ = ["to_dataframe"]
