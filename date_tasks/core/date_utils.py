"""
Date Utilities for date_tasks

Five independent, stateless functions over date values: RFC 2822 and
ISO 8601 parsing, leap year checks, time span formatting and the clock
angle problem.

Python 3.9+ compatible.
"""

import math
import logging
from datetime import date, datetime
from typing import Optional

from ..utils.helpers import milliseconds, to_utc
from ..utils.time_parser import DateParser


logger = logging.getLogger(__name__)


def parse_data_from_rfc2822(value: str) -> Optional[datetime]:
    """
    Parse an RFC 2822 date string into an aware datetime.

    Examples:
        'Tue, 26 Jan 2016 13:48:02 GMT'
        'Sun, 17 May 1998 03:00:00 GMT+01'
        'December 17, 1995 03:24:00'

    Returns None when the string cannot be parsed.
    """
    return DateParser().parse_rfc2822(value)


def parse_data_from_iso8601(value: str) -> Optional[datetime]:
    """
    Parse an ISO 8601 date string into an aware datetime.

    Examples:
        '2016-01-19T16:07:37+00:00'
        '2016-01-19T08:07:37Z'

    Returns None when the string cannot be parsed.
    """
    return DateParser().parse_iso8601(value)


def is_leap_year(value: date) -> bool:
    """
    Check whether the year of a date is a leap year.

    Args:
        value: date or datetime

    Returns:
        True for leap years (1900 -> False, 2000 -> True, 2012 -> True)
    """
    if not isinstance(value, date):
        raise TypeError(f"Expected date or datetime, got {type(value)}")

    year = value.year
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _pad(value: int, width: int) -> str:
    # One "0" per power of ten (below 10 ** width) that value falls under
    return "0" * sum(value < 10 ** k for k in range(1, width)) + str(value)


def time_span_to_string(start_date: datetime, end_date: datetime) -> str:
    """
    Format the span between two datetimes as "HH:mm:ss.sss".

    Each field is the plain difference of the end and start wall-clock
    fields. Nothing is carried between units, so a field of end_date that
    is smaller than the same field of start_date comes out negative. Zeros
    are prefixed whenever a value is below 10 (or 100 for milliseconds),
    negatives included: -5 seconds renders as "0-5".

    Args:
        start_date: Start datetime
        end_date: End datetime

    Returns:
        Span string, e.g. "05:20:10.453"
    """
    for name, value in (("start_date", start_date), ("end_date", end_date)):
        if not isinstance(value, datetime):
            raise TypeError(f"{name} must be a datetime, got {type(value)}")

    if start_date.tzinfo is not None and end_date.tzinfo is not None:
        end_date = end_date.astimezone(start_date.tzinfo)

    hours = end_date.hour - start_date.hour
    minutes = end_date.minute - start_date.minute
    seconds = end_date.second - start_date.second
    millis = milliseconds(end_date) - milliseconds(start_date)

    if min(hours, minutes, seconds, millis) < 0:
        logger.debug(f"Field underflow in time span {start_date} -> {end_date}")

    return f"{_pad(hours, 2)}:{_pad(minutes, 2)}:{_pad(seconds, 2)}.{_pad(millis, 3)}"


def clock_angle_degrees(hour: int, minute: int) -> float:
    """
    Angle in degrees between the hands of a 12-hour analog clock.

    Args:
        hour: Hour of day (0-23)
        minute: Minute (0-59)

    Returns:
        Angle in [0, 180]
    """
    hour %= 12
    angle = abs((60 * hour + minute) / 2 - 6 * minute)
    if angle > 180:
        angle = 360 - angle
    return angle


def angle_between_clock_hands(value: datetime) -> float:
    """
    Angle in radians between the clock hands at the UTC time of a datetime.

    Naive datetimes are read as UTC.

    Examples:
        00:00 UTC -> 0
        03:00 UTC -> pi/2
        18:00 UTC -> pi
        21:00 UTC -> pi/2
    """
    if not isinstance(value, datetime):
        raise TypeError(f"Expected datetime, got {type(value)}")

    utc = to_utc(value)
    return math.radians(clock_angle_degrees(utc.hour, utc.minute))
