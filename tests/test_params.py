import math
from datetime import datetime, timedelta, timezone

import pytest

from metno import MetNoValidationError, Params, Response
from metno.params import truncate_coordinate


class TestTruncation:
    def test_truncates_to_four_decimals(self):
        assert truncate_coordinate(14.1234567) == 14.1234
        assert truncate_coordinate(12.7654321) == 12.7654

    def test_truncates_instead_of_rounding(self):
        assert truncate_coordinate(14.12349) == 14.1234
        assert truncate_coordinate(-14.12349) == -14.1234
        assert truncate_coordinate(50.08809) == 50.088

    def test_small_negative_becomes_zero(self):
        result = truncate_coordinate(-0.00005)
        assert result == 0.0

    def test_params_store_truncated_values(self):
        params = Params(14.1234567, 12.7654321)
        assert params.lat == 14.1234
        assert params.lon == 12.7654


class TestLatitude:
    def test_valid_latitudes(self):
        for lat in [-90.0, 90.0, 42.0, 0, -90, 90]:
            Params(lat, 100.0)

    def test_invalid_latitudes(self):
        for lat in [-90.0001, 90.0001, -91.0, 91.0, math.inf, -math.inf, math.nan]:
            with pytest.raises(MetNoValidationError) as exc_info:
                Params(lat, 100.0)
            assert exc_info.value.field == "lat"
            assert "Invalid lat value" in str(exc_info.value)

    def test_non_numeric_latitude(self):
        with pytest.raises(MetNoValidationError) as exc_info:
            Params("50.0", 14.0)
        assert exc_info.value.field == "lat"


class TestLongitude:
    def test_valid_longitudes(self):
        for lon in [-180.0, 180.0, 42.0]:
            Params(50.0, lon)

    def test_invalid_longitudes(self):
        for lon in [-180.0001, 180.0001, -181.0, 181.0, math.inf, -math.inf, math.nan]:
            with pytest.raises(MetNoValidationError) as exc_info:
                Params(50.0, lon)
            assert exc_info.value.field == "lon"
            assert "Invalid lon value" in str(exc_info.value)


class TestAltitude:
    def test_valid_altitudes(self):
        for alt in [-500, 9000, 42, 0]:
            assert Params(50.0, 42.0, alt).altitude == alt

    def test_altitude_is_optional(self):
        assert Params(50.0, 42.0).altitude is None

    def test_whole_float_altitude_is_accepted(self):
        params = Params(50.0, 42.0, 320.0)
        assert params.altitude == 320
        assert isinstance(params.altitude, int)

    def test_invalid_altitudes(self):
        for alt in [-501, 9001, 12.5, math.inf, -math.inf, math.nan, True]:
            with pytest.raises(MetNoValidationError) as exc_info:
                Params(50.0, 42.0, alt)
            assert exc_info.value.field == "altitude"
            assert "Invalid altitude value" in str(exc_info.value)


class TestDistinctMessages:
    def test_each_field_has_its_own_message(self):
        messages = set()
        for args in [(91.0, 0.0), (0.0, 181.0), (0.0, 0.0, 9001)]:
            with pytest.raises(MetNoValidationError) as exc_info:
                Params(*args)
            messages.add(exc_info.value.reason)
        assert len(messages) == 3


class TestParamsValue:
    def test_params_are_immutable(self):
        params = Params(50.0, 14.0)
        with pytest.raises(AttributeError):
            params.lat = 10.0

    def test_with_last_response(self, raw_body):
        response = Response(
            expires_at=datetime.now(tz=timezone.utc),
            last_modified="Sat, 01 Jun 2024 10:12:45 GMT",
            raw_body=raw_body,
        )
        params = Params(50.08809, 14.42076, 320)

        updated = params.with_last_response(response)

        assert updated.last_response is response
        assert updated.lat == params.lat
        assert updated.lon == params.lon
        assert updated.altitude == 320
        assert params.last_response is None


class TestResponse:
    def test_is_fresh(self, raw_body):
        now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
        response = Response(
            expires_at=now + timedelta(minutes=5),
            last_modified="Sat, 01 Jun 2024 10:12:45 GMT",
            raw_body=raw_body,
        )
        assert response.is_fresh(now) is True
        assert response.is_fresh(now + timedelta(minutes=5)) is False
        assert response.is_fresh(now + timedelta(minutes=10)) is False

    def test_body_decodes_on_demand(self, raw_body):
        response = Response(
            expires_at=datetime.now(tz=timezone.utc),
            last_modified="Sat, 01 Jun 2024 10:12:45 GMT",
            raw_body=raw_body,
        )
        body = response.body()
        assert body.type == "Feature"
        assert response.body() == body
        assert response.body() is not body

    def test_naive_expires_at_is_utc(self, raw_body):
        response = Response(
            expires_at=datetime(2024, 6, 1, 12, 5),
            last_modified="Sat, 01 Jun 2024 10:12:45 GMT",
            raw_body=raw_body,
        )
        now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

        assert response.expires_at.tzinfo is timezone.utc
        assert response.expires_at == datetime(2024, 6, 1, 12, 5, tzinfo=timezone.utc)
        assert response.is_fresh(now) is True
        assert response.is_fresh() is False
