from datetime import date, datetime, timezone

from app.core.time_utils import local_today, month_bounds, monday_of, shift_months, week_bounds


def test_monday_of_and_week_bounds():
    assert monday_of(date(2024, 1, 7)) == date(2024, 1, 1)
    assert week_bounds(date(2024, 1, 3)) == (date(2024, 1, 1), date(2024, 1, 7))


def test_month_bounds_handles_leap_february():
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(date(2023, 12, 31)) == (date(2023, 12, 1), date(2023, 12, 31))


def test_shift_months_clamps_day_and_crosses_years():
    assert shift_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
    assert shift_months(date(2024, 1, 15), -1) == date(2023, 12, 15)
    assert shift_months(date(2023, 11, 30), 3) == date(2024, 2, 29)


def test_local_today_uses_named_timezone():
    instant = datetime(2024, 1, 2, 1, 30, tzinfo=timezone.utc)
    assert local_today("UTC", instant) == date(2024, 1, 2)
    # UTC-3 is still on the previous day
    assert local_today("America/Sao_Paulo", instant) == date(2024, 1, 1)


def test_local_today_treats_naive_as_utc():
    assert local_today("UTC", datetime(2024, 1, 2, 23, 59)) == date(2024, 1, 2)
