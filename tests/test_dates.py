from datetime import datetime, timedelta, timezone

from kvextras import dates

# Local wall-clock instant used throughout.
MOMENT = datetime(2021, 11, 23, 15, 30, 0, 23000).astimezone()


def test_parse_millisecond_string():
    parsed = dates.from_iso8601_string("2021-11-23T15:30:00.023-0700")
    expected = datetime(2021, 11, 23, 22, 30, 0, 23000, tzinfo=timezone.utc)
    assert parsed == expected
    assert parsed.tzinfo is not None


def test_parse_second_string():
    parsed = dates.from_iso8601_string("2021-11-23T15:30:00+0000")
    assert parsed == datetime(2021, 11, 23, 15, 30, tzinfo=timezone.utc)


def test_parse_date_only_is_local_midnight():
    parsed = dates.from_iso8601_string("2021-11-23")
    assert parsed == datetime(2021, 11, 23).astimezone()


def test_parse_garbage_returns_none():
    assert dates.from_iso8601_string("23/11/2021") is None
    assert dates.from_iso8601_string("") is None


def test_iso_strings_round_trip_through_parser():
    for text in (
        dates.iso8601_millisecond_string(MOMENT),
        dates.iso8601_date_and_time_string(MOMENT),
    ):
        assert abs(dates.from_iso8601_string(text) - MOMENT) < timedelta(seconds=1)


def test_iso_formatting():
    assert dates.iso8601_date_string(MOMENT) == "2021-11-23"
    assert dates.iso8601_millisecond_string(MOMENT).startswith("2021-11-23T15:30:00.023")
    assert dates.iso8601_date_and_time_string(MOMENT).startswith("2021-11-23T15:30:00")


def test_milliseconds_since_1970():
    epoch = dates.from_milliseconds_since_1970(1500)
    assert epoch == datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)
    assert dates.milliseconds_since_1970(epoch) == 1500.0


def test_display_strings():
    assert dates.time_string(MOMENT) == "3:30 PM"
    assert dates.date_and_time_string(MOMENT) == "Nov 23, 2021, 3:30 PM"
    assert dates.full_date_string(MOMENT) == "Tuesday, November 23, 2021"
    assert (
        dates.full_date_and_time_string(MOMENT)
        == "Tuesday, November 23, 2021 at 3:30 PM"
    )
    assert dates.day_and_month_string(MOMENT) == "Nov 23"


def test_time_string_midnight_and_noon():
    assert dates.time_string(datetime(2021, 1, 1, 0, 5)) == "12:05 AM"
    assert dates.time_string(datetime(2021, 1, 1, 12, 0)) == "12:00 PM"


def test_relative_day_strings():
    now = MOMENT
    assert dates.relative_day_and_month_string(now - dates.days(1), now) == "Yesterday"
    assert dates.relative_day_and_month_string(now, now) == "Today"
    assert dates.relative_day_and_month_string(now + dates.days(1), now) == "Tomorrow"
    assert dates.relative_day_and_month_string(now + dates.weeks(1), now) == "Nov 30"
    assert dates.relative_day_and_time_string(now, now) == "Today, 3:30 PM"


def test_day_boundaries():
    start = dates.start_of_day(MOMENT)
    end = dates.end_of_day(MOMENT)
    assert (start.hour, start.minute, start.second) == (0, 0, 0)
    assert start.date() == MOMENT.date()
    assert end.date() == MOMENT.date() + timedelta(days=1)
    assert (end.hour, end.minute) == (0, 0)


def test_same_day_and_today():
    assert dates.is_same_day(MOMENT, dates.start_of_day(MOMENT))
    assert not dates.is_same_day(MOMENT, dates.end_of_day(MOMENT))
    assert dates.is_today(datetime.now())
    assert not dates.is_today(datetime.now() - dates.days(2))


def test_intervals():
    assert dates.seconds(90).total_seconds() == 90
    assert dates.minutes(2).total_seconds() == 120
    assert dates.hours(1).total_seconds() == 3600
    assert dates.days(1).total_seconds() == 86400
    assert dates.weeks(1).total_seconds() == 604800
