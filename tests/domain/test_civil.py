"""Tests for civil-time parsing, reference instants, and projection."""

from datetime import UTC, datetime, timedelta

import pytest

from tzchain.domain.civil import parse_civil_time, project, project_with_default, to_instant
from tzchain.domain.errors import MalformedCivilTimeError, MalformedRequestError, UnknownZoneError

TEXT = "2020-12-11 09:20:00"


class TestParseCivilTime:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2020-12-11 09:20:00", datetime(2020, 12, 11, 9, 20)),
            ("2020-12-11T09:20:00", datetime(2020, 12, 11, 9, 20)),
            ("2020-12-11 09:20", datetime(2020, 12, 11, 9, 20)),
            ("2020-12-11", datetime(2020, 12, 11)),
            ("  2020-12-11 09:20:00  ", datetime(2020, 12, 11, 9, 20)),
        ],
    )
    def test_accepted_forms(self, text: str, expected: datetime) -> None:
        assert parse_civil_time(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "yesterday", "2020-13-01 00:00:00", "09:20"])
    def test_unparsable(self, text: str) -> None:
        with pytest.raises(MalformedCivilTimeError):
            parse_civil_time(text)

    @pytest.mark.parametrize("text", ["2020-12-11T09:20:00Z", "2020-12-11 09:20:00+01:00"])
    def test_rejects_offsets(self, text: str) -> None:
        with pytest.raises(MalformedCivilTimeError, match="UTC offset"):
            parse_civil_time(text)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(MalformedCivilTimeError):
            parse_civil_time(20201211)  # type: ignore[arg-type]

    def test_error_carries_text(self) -> None:
        with pytest.raises(MalformedCivilTimeError) as excinfo:
            parse_civil_time("yesterday")
        assert excinfo.value.text == "yesterday"
        assert excinfo.value.code == "MALFORMED_CIVIL_TIME"


class TestToInstant:
    def test_naive_string_is_utc(self) -> None:
        assert to_instant("2020-11-23 00:00:00") == datetime(2020, 11, 23, tzinfo=UTC)

    def test_string_with_offset(self) -> None:
        assert to_instant("2020-11-23T01:00:00+01:00") == datetime(2020, 11, 23, tzinfo=UTC)

    def test_naive_datetime_is_utc(self) -> None:
        assert to_instant(datetime(2020, 11, 23)).tzinfo is UTC

    def test_aware_datetime_converted(self) -> None:
        aware = datetime(2020, 11, 22, 19, tzinfo=UTC) + timedelta(hours=5)
        assert to_instant(aware) == datetime(2020, 11, 23, tzinfo=UTC)

    def test_timestamp(self) -> None:
        assert to_instant(1606089600) == datetime(2020, 11, 23, tzinfo=UTC)

    @pytest.mark.parametrize("value", [None, "now", "NOW"])
    def test_now(self, value: str | None) -> None:
        before = datetime.now(UTC)
        result = to_instant(value)
        assert before <= result <= datetime.now(UTC)

    @pytest.mark.parametrize("value", ["", "tomorrow", True, object()])
    def test_malformed(self, value: object) -> None:
        with pytest.raises(MalformedCivilTimeError):
            to_instant(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "value",
        [
            1e20,
            float("nan"),
            float("inf"),
            "9999-12-31T23:59:59-01:00",
            "9999-12-31 23:59:59",
            "0001-01-01T00:00:00+01:00",
            datetime(9999, 12, 31, 12, tzinfo=UTC),
        ],
    )
    def test_out_of_range(self, value: object) -> None:
        with pytest.raises(MalformedCivilTimeError, match="outside the supported date range"):
            to_instant(value)  # type: ignore[arg-type]

    def test_out_of_range_error_carries_original_text(self) -> None:
        with pytest.raises(MalformedCivilTimeError) as excinfo:
            to_instant("9999-12-31T23:59:59-01:00")
        assert excinfo.value.text == "9999-12-31T23:59:59-01:00"


class TestProject:
    def test_same_instant_across_zones(self) -> None:
        la = project("2020-12-11 09:20:00", "America/Los_Angeles")
        ny = project("2020-12-11 12:20:00", "America/New_York")
        assert la == ny
        assert la.timestamp() == ny.timestamp()

    def test_carries_zone(self) -> None:
        result = project(TEXT, "America/Chicago")
        assert result.tzname() == "CST"
        assert result.utcoffset() == timedelta(hours=-6)
        assert (result.hour, result.minute) == (9, 20)
        assert result.astimezone(UTC) == datetime(2020, 12, 11, 15, 20, tzinfo=UTC)

    def test_chicago_viewed_from_new_york_is_later(self) -> None:
        new_york = project(TEXT, "America/New_York")
        chicago = project(TEXT, "America/Chicago", "America/New_York")
        assert chicago > new_york

    def test_los_angeles_viewed_from_chicago_is_later(self) -> None:
        chicago = project(TEXT, "America/Chicago")
        los_angeles = project(TEXT, "America/Los_Angeles", "America/Chicago")
        assert los_angeles > chicago

    def test_new_york_before_los_angeles(self) -> None:
        assert project(TEXT, "America/New_York") < project(TEXT, "America/Los_Angeles")

    def test_viewing_zone_reexpresses_clock(self) -> None:
        viewed = project(TEXT, "America/Chicago", "America/New_York")
        assert viewed.tzname() == "EST"
        assert (viewed.hour, viewed.minute) == (10, 20)
        assert viewed == project(TEXT, "America/Chicago")

    def test_behind_viewing_zone_is_earlier(self) -> None:
        viewed = project(TEXT, "Asia/Tokyo", "America/New_York")
        assert viewed < project(TEXT, "America/New_York")

    def test_uses_offset_at_that_date(self) -> None:
        summer = project("2021-07-01 12:00:00", "America/New_York")
        winter = project("2021-01-01 12:00:00", "America/New_York")
        assert summer.utcoffset() == timedelta(hours=-4)
        assert winter.utcoffset() == timedelta(hours=-5)

    def test_spring_forward_gap_lands_after_gap(self) -> None:
        result = project("2021-03-14 02:30:00", "America/Chicago")
        assert (result.hour, result.minute) == (3, 30)
        assert result.astimezone(UTC) == datetime(2021, 3, 14, 8, 30, tzinfo=UTC)

    def test_fall_back_ambiguity_takes_earlier_offset(self) -> None:
        result = project("2021-11-07 01:30:00", "America/Chicago")
        assert result.utcoffset() == timedelta(hours=-5)
        assert result.astimezone(UTC) == datetime(2021, 11, 7, 6, 30, tzinfo=UTC)

    def test_unknown_zone(self) -> None:
        with pytest.raises(UnknownZoneError):
            project(TEXT, "America/Chicagoo")

    def test_unknown_viewing_zone(self) -> None:
        with pytest.raises(UnknownZoneError):
            project(TEXT, "America/Chicago", "Pacific/Honalulu")

    def test_malformed_text(self) -> None:
        with pytest.raises(MalformedCivilTimeError):
            project("11/12/2020 9:20am", "America/Chicago")


class TestProjectWithDefault:
    def test_explicit_zone_wins(self) -> None:
        result = project_with_default(TEXT, "America/Chicago", "Europe/Oslo")
        assert result.tzname() == "CST"

    def test_falls_back_to_default(self) -> None:
        result = project_with_default(TEXT, None, "Europe/Oslo")
        assert result == project(TEXT, "Europe/Oslo")

    def test_floating_time_has_no_instant(self) -> None:
        with pytest.raises(MalformedRequestError, match="floating"):
            project_with_default(TEXT, None, None)


class TestFallBackHour:
    """2020-11-01: New York leaves EDT at 06:00Z, Chicago leaves CDT at 07:00Z."""

    def test_distinct_instants_are_not_equal(self) -> None:
        viewed = project("2020-11-01 01:10:00", "America/Chicago", "America/New_York")
        plain = project("2020-11-01 01:10:00", "America/New_York")
        assert viewed.astimezone(UTC) == datetime(2020, 11, 1, 6, 10, tzinfo=UTC)
        assert plain.astimezone(UTC) == datetime(2020, 11, 1, 5, 10, tzinfo=UTC)
        assert viewed != plain
        assert viewed > plain

    def test_later_instant_orders_after_earlier_wall_clock(self) -> None:
        later = project("2020-11-01 01:10:00", "America/Chicago", "America/New_York")
        earlier = project("2020-11-01 01:30:00", "America/New_York")
        assert (later.hour, later.minute) == (1, 10)
        assert later > earlier
        assert earlier < later
        assert sorted([later, earlier]) == [earlier, later]

    def test_same_instant_on_repeated_clock_is_equal(self) -> None:
        viewed = project("2020-11-01 00:10:00", "America/Chicago", "America/New_York")
        plain = project("2020-11-01 01:10:00", "America/New_York")
        assert viewed == plain
        assert viewed.timestamp() == plain.timestamp()

    def test_viewed_reading_carries_post_transition_offset(self) -> None:
        viewed = project("2020-11-01 01:10:00", "America/Chicago", "America/New_York")
        assert viewed.utcoffset() == timedelta(hours=-5)
        assert viewed.tzname() == "EST"


class TestProjectRange:
    def test_before_first_representable_instant(self) -> None:
        with pytest.raises(MalformedCivilTimeError, match="outside the supported date range"):
            project("0001-01-01 00:00:00", "Asia/Tokyo")

    def test_viewing_past_last_representable_instant(self) -> None:
        with pytest.raises(MalformedCivilTimeError, match="outside the supported date range"):
            project("9999-12-31 23:00:00", "UTC", "Asia/Tokyo")
