import calendar
from datetime import date, datetime, timedelta, timezone


def monday_of(d: date) -> date:
    # Monday = 0, Sunday = 6
    return d - timedelta(days=d.weekday())


def week_bounds(d: date) -> tuple[date, date]:
    """Return (monday, sunday) of the week containing `d`.

    Example: 2024-01-03 (Wed) -> (2024-01-01, 2024-01-07)
    """
    start = monday_of(d)
    return start, start + timedelta(days=6)


def shift_months(d: date, months: int) -> date:
    """Move `d` by a number of calendar months, clamping the day.

    Example: 2024-03-31 shifted by -1 -> 2024-02-29
    """
    month_index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))


def month_bounds(d: date) -> tuple[date, date]:
    """Return (first, last) day of the calendar month containing `d`."""
    last_day = calendar.monthrange(d.year, d.month)[1]
    return d.replace(day=1), d.replace(day=last_day)


def local_today(tz_name: str | None = None, now: datetime | None = None) -> date:
    """Resolve "today" as a calendar date in the configured timezone.

    - If `tz_name` is 'local' or None: use system local timezone.
    - If `tz_name` is an IANA tz name (e.g., 'America/Sao_Paulo'): use that.
    - `now` defaults to the current UTC instant; naive values are taken as UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    if tz_name and tz_name != "local":
        from zoneinfo import ZoneInfo

        return now.astimezone(ZoneInfo(tz_name)).date()
    return now.astimezone().date()
