from __future__ import annotations

"""
Time-span resolution for entry start/end times.

Times are parsed by hand because "24:00" is not a valid clock time for
datetime.time. Both instants are placed on a fixed reference day without DST
or timezone shifts; an end hour of 24 or more carries into midnight of the
next day.
"""

from datetime import datetime, time, timedelta

from travel_expense.config import FULL_DAY_HOURS, REFERENCE_DAY
from travel_expense.errors import MalformedTimeError

_SECONDS_PER_HOUR = 3600


def _parse_part(value: str, part: str) -> int:
    if not part or not (part.isascii() and part.isdigit()):
        raise MalformedTimeError(value, f"{part!r} is not a non-negative integer")
    return int(part)


def parse_clock_time(value: str) -> tuple[int, int]:
    """Split an "HH:MM" string into (hour, minute).

    Only the first ':' separates hour from minute. No range checks happen here;
    "24:00" parses to (24, 0).

    Raises:
        MalformedTimeError: no ':' separator, or a part is not a non-negative integer
    """
    hour, sep, minute = value.partition(":")
    if not sep:
        raise MalformedTimeError(value, "missing ':' separator")
    return _parse_part(value, hour), _parse_part(value, minute)


def _instant_on_reference_day(value: str, hour: int, minute: int) -> datetime:
    try:
        return datetime.combine(REFERENCE_DAY, time(hour, minute))
    except ValueError as e:
        raise MalformedTimeError(value, str(e)) from e


def hours_between(start_time: str, end_time: str) -> int:
    """Whole hours elapsed between two times of day.

    An end hour >= 24 means midnight at the end of the day (its minutes are
    ignored). The result is the absolute difference, truncated: 8h59m is 8.

    Examples:
        hours_between("08:00", "17:00") -> 9
        hours_between("00:00", "24:00") -> 24
        hours_between("09:15", "17:00") -> 7
    """
    start_hour, start_minute = parse_clock_time(start_time)
    end_hour, end_minute = parse_clock_time(end_time)

    start = _instant_on_reference_day(start_time, start_hour, start_minute)
    if end_hour >= FULL_DAY_HOURS:
        end = datetime.combine(REFERENCE_DAY, time(0, 0)) + timedelta(days=1)
    else:
        end = _instant_on_reference_day(end_time, end_hour, end_minute)

    elapsed = abs(end - start)
    return int(elapsed.total_seconds()) // _SECONDS_PER_HOUR


__all__ = ["hours_between", "parse_clock_time"]
