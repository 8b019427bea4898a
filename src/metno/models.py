"""Pydantic models for the Locationforecast "complete" response body.

The models mirror the GeoJSON document returned by the API field for
field. See the API documentation for the meaning of the individual
measurements:
https://api.met.no/weatherapi/locationforecast/2.0/documentation

Key model groups:
    1. **Envelope**: Body, Geometry, Coordinates, Properties, Meta, Units
    2. **Time series**: TimeSeries, Data, Instant, InstantDetails
    3. **Period summaries**: NextHours, Summary, SummaryDetails

Individual measurements are optional. A missing value decodes to None,
which is not the same thing as 0.0.

Example:
    Reading temperatures::

        response = await client.get(50.0880, 14.4207)
        body = response.body()
        unit = body.properties.meta.units.air_temperature
        for entry in body.properties.timeseries:
            temp = entry.data.instant.details.air_temperature
            print(f"{entry.time}: {temp} {unit}")
"""

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ValidationError, model_validator

from .exceptions import MetNoResponseError


class Coordinates(BaseModel):
    """Location of the forecast grid point.

    The API sends a GeoJSON position array ``[lon, lat, alt]``; both the
    array and the named form are accepted.

    Attributes:
        longitude: Longitude in decimal degrees.
        latitude: Latitude in decimal degrees.
        altitude: Altitude in meters.
    """

    longitude: float
    latitude: float
    altitude: float

    @model_validator(mode="before")
    @classmethod
    def _from_position(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise ValueError(
                    f"coordinates must have 3 elements, got {len(data)}"
                )
            longitude, latitude, altitude = data
            return {
                "longitude": longitude,
                "latitude": latitude,
                "altitude": altitude,
            }
        return data


class Geometry(BaseModel):
    """GeoJSON geometry of the forecast point."""

    type: str
    coordinates: Coordinates


class Units(BaseModel):
    """Unit of each measurement, e.g. "celsius" or "m/s"."""

    air_pressure_at_sea_level: Optional[str] = None
    air_temperature: Optional[str] = None
    air_temperature_max: Optional[str] = None
    air_temperature_min: Optional[str] = None
    cloud_area_fraction: Optional[str] = None
    cloud_area_fraction_high: Optional[str] = None
    cloud_area_fraction_low: Optional[str] = None
    cloud_area_fraction_medium: Optional[str] = None
    dew_point_temperature: Optional[str] = None
    fog_area_fraction: Optional[str] = None
    precipitation_amount: Optional[str] = None
    relative_humidity: Optional[str] = None
    ultraviolet_index_clear_sky: Optional[str] = None
    wind_from_direction: Optional[str] = None
    wind_speed: Optional[str] = None


class Meta(BaseModel):
    """Forecast metadata.

    Attributes:
        updated_at: When the forecast model run was last updated.
        units: Unit of each measurement.
    """

    updated_at: datetime
    units: Units


class InstantDetails(BaseModel):
    """Instantaneous measurements at a time step.

    Attributes:
        air_pressure_at_sea_level: Pressure at sea level in hPa.
        air_temperature: Air temperature in °C.
        cloud_area_fraction: Total cloud cover in %.
        cloud_area_fraction_high: High-level cloud cover in %.
        cloud_area_fraction_low: Low-level cloud cover in %.
        cloud_area_fraction_medium: Medium-level cloud cover in %.
        dew_point_temperature: Dew point in °C.
        fog_area_fraction: Fog cover in %.
        relative_humidity: Relative humidity in %.
        ultraviolet_index_clear_sky: UV index under clear sky.
        wind_from_direction: Wind direction in degrees.
        wind_speed: Wind speed in m/s.
    """

    air_pressure_at_sea_level: Optional[float] = None
    air_temperature: Optional[float] = None
    cloud_area_fraction: Optional[float] = None
    cloud_area_fraction_high: Optional[float] = None
    cloud_area_fraction_low: Optional[float] = None
    cloud_area_fraction_medium: Optional[float] = None
    dew_point_temperature: Optional[float] = None
    fog_area_fraction: Optional[float] = None
    relative_humidity: Optional[float] = None
    ultraviolet_index_clear_sky: Optional[float] = None
    wind_from_direction: Optional[float] = None
    wind_speed: Optional[float] = None


class Instant(BaseModel):
    details: InstantDetails


class SummaryDetails(BaseModel):
    """Measurements aggregated over a 1, 6 or 12 hour period."""

    air_temperature_max: Optional[float] = None
    air_temperature_min: Optional[float] = None
    precipitation_amount: Optional[float] = None
    precipitation_amount_max: Optional[float] = None
    precipitation_amount_min: Optional[float] = None
    probability_of_precipitation: Optional[float] = None
    probability_of_thunder: Optional[float] = None
    ultraviolet_index_clear_sky_max: Optional[float] = None


class Summary(BaseModel):
    """Weather symbol for a period, e.g. "clearsky_day"."""

    symbol_code: str


class NextHours(BaseModel):
    """Summary of the period following a time step.

    Attributes:
        summary: Weather symbol for the period.
        details: Aggregated measurements for the period. Documented as
            required but missing from some real responses.
    """

    summary: Summary
    details: Optional[SummaryDetails] = None


class Data(BaseModel):
    """Forecast data for a single time step.

    The period summaries thin out further into the forecast: the last
    steps usually carry only ``next_6_hours`` or nothing at all.
    """

    instant: Instant
    next_1_hours: Optional[NextHours] = None
    next_6_hours: Optional[NextHours] = None
    next_12_hours: Optional[NextHours] = None


class TimeSeries(BaseModel):
    """One forecast step.

    Attributes:
        time: UTC time of the step.
        data: Instantaneous and period data for the step.
    """

    time: datetime
    data: Data


class Properties(BaseModel):
    """Forecast metadata and the chronological list of steps."""

    meta: Meta
    timeseries: list[TimeSeries]


class Body(BaseModel):
    """Decoded response body of the "complete" product.

    Attributes:
        type: GeoJSON type, always "Feature".
        geometry: Location of the forecast point.
        properties: Metadata and time series.

    Example:
        >>> body = response.body()
        >>> body.geometry.coordinates.latitude
        50.088
        >>> body.properties.timeseries[0].data.next_1_hours.summary.symbol_code
        'cloudy'
    """

    type: str
    geometry: Geometry
    properties: Properties


def decode_body(raw: Union[str, bytes]) -> Body:
    """Decode a raw JSON body into a Body.

    Decoding is all-or-nothing: a body missing any required structural
    field is rejected as a whole.

    Args:
        raw: JSON text or bytes as returned by the API.

    Returns:
        The decoded Body.

    Raises:
        MetNoResponseError: If the JSON is malformed or does not match
            the schema.

    Example:
        >>> body = decode_body(response.raw_body)
        >>> len(body.properties.timeseries)
        90
    """
    try:
        return Body.model_validate_json(raw)
    except ValidationError as e:
        raise MetNoResponseError(f"Unable to decode the JSON body: {e}") from e
