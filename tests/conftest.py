import json
from datetime import datetime, timedelta, timezone

import pytest


def _body_data():
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [14.4207, 50.088, 244]},
        "properties": {
            "meta": {
                "updated_at": "2024-06-01T10:12:45Z",
                "units": {
                    "air_temperature": "celsius",
                    "precipitation_amount": "mm",
                    "wind_speed": "m/s",
                },
            },
            "timeseries": [
                {
                    "time": "2024-06-01T12:00:00Z",
                    "data": {
                        "instant": {
                            "details": {
                                "air_temperature": 21.4,
                                "wind_speed": 3.2,
                                "relative_humidity": 48.1,
                            }
                        },
                        "next_1_hours": {
                            "summary": {"symbol_code": "cloudy"},
                            "details": {"precipitation_amount": 0.0},
                        },
                        "next_6_hours": {
                            "summary": {"symbol_code": "cloudy"},
                            "details": {"precipitation_amount": 0.4},
                        },
                        "next_12_hours": {
                            "summary": {"symbol_code": "partlycloudy_day"},
                        },
                    },
                },
                {
                    "time": "2024-06-01T18:00:00Z",
                    "data": {
                        "instant": {
                            "details": {"air_temperature": 17.0, "wind_speed": 5.1}
                        },
                        "next_6_hours": {
                            "summary": {"symbol_code": "rain"},
                            "details": {"precipitation_amount": 1.2},
                        },
                    },
                },
                {
                    "time": "2024-06-02T00:00:00Z",
                    "data": {
                        "instant": {
                            "details": {"air_temperature": 12.5, "wind_speed": 2.0}
                        },
                        "next_6_hours": {
                            "summary": {"symbol_code": "clearsky_night"},
                            "details": {"precipitation_amount": 0.0},
                        },
                    },
                },
                {
                    "time": "2024-06-02T06:00:00Z",
                    "data": {
                        "instant": {"details": {"air_temperature": 14.0}},
                        "next_6_hours": {"summary": {"symbol_code": "fair_day"}},
                    },
                },
                {
                    "time": "2024-06-02T12:00:00Z",
                    "data": {
                        "instant": {
                            "details": {"air_temperature": 23.0, "wind_speed": 6.3}
                        },
                        "next_6_hours": {
                            "summary": {"symbol_code": "partlycloudy_day"},
                            "details": {"precipitation_amount": 2.5},
                        },
                    },
                },
            ],
        },
    }


@pytest.fixture
def body_data():
    return _body_data()


@pytest.fixture
def raw_body():
    return json.dumps(_body_data())


@pytest.fixture
def future_time():
    return datetime.now(tz=timezone.utc).replace(microsecond=0) + timedelta(hours=1)


@pytest.fixture
def past_time():
    return datetime.now(tz=timezone.utc).replace(microsecond=0) - timedelta(hours=1)
