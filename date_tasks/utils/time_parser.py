"""
Date Parser for date_tasks

Parses RFC 2822 and ISO 8601 date strings into timezone-aware datetimes.
Supports forms like "Tue, 26 Jan 2016 13:48:02 GMT",
"Sun, 17 May 1998 03:00:00 GMT+01" and "2016-01-19T16:07:37+00:00".

Python 3.9+ compatible.
"""

import re
import logging
import warnings
from datetime import datetime, tzinfo
from typing import Dict, Optional, Union

from dateutil import tz
from dateutil.parser import parse as dateutil_parse, isoparse, isoparser, UnknownTimezoneWarning

from ..core.config_manager import ConfigManager


# Zone names allowed by RFC 2822 section 4.3 (obsolete zones included)
RFC2822_ZONES: Dict[str, Union[int, tzinfo]] = {
    "UT": tz.UTC,
    "UTC": tz.UTC,
    "GMT": tz.UTC,
    "Z": tz.UTC,
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}

# "GMT+01" style suffixes; dateutil would read these with the POSIX sign
_GMT_OFFSET_RE = re.compile(r'\b(?:GMT|UTC|UT)\s*([+-])(\d{1,2})(?::?(\d{2}))?\b', re.IGNORECASE)

# Plain four-digit year at the start of an ISO 8601 string
_ISO_YEAR_RE = re.compile(r'\d{4}')

# Two defaults that differ in every date field
_PROBE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def resolve_timezone(name: str) -> tzinfo:
    """
    Resolve a configured timezone name.

    Args:
        name: "UTC", "local", or any name known to dateutil.tz.gettz

    Returns:
        tzinfo object

    Raises:
        ValueError: If the name cannot be resolved
    """
    if name.upper() == "UTC":
        return tz.UTC
    if name.lower() == "local":
        return tz.tzlocal()

    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown timezone '{name}'")
    return zone


class DateParser:
    """
    RFC 2822 / ISO 8601 date parsing for date_tasks.

    Every parse method returns a timezone-aware datetime, or None when the
    input cannot be parsed.
    """

    def __init__(self, config: Optional[ConfigManager] = None, naive_timezone: Optional[str] = None):
        self.logger = logging.getLogger(__name__)
        self.config = config or ConfigManager()

        if naive_timezone is None:
            naive_timezone = self.config.get("parsing", "naive_timezone", "UTC")
        self.naive_timezone = resolve_timezone(str(naive_timezone))

        self._zones: Dict[str, Union[int, tzinfo]] = dict(RFC2822_ZONES)
        extra_zones = self.config.get("parsing", "rfc2822_zones") or {}
        if not isinstance(extra_zones, dict):
            self.logger.warning(f"Ignoring rfc2822_zones setting, expected a mapping: {extra_zones!r}")
            extra_zones = {}
        for name, offset in extra_zones.items():
            try:
                self._zones[str(name).upper()] = int(offset)
            except (TypeError, ValueError):
                self.logger.warning(f"Ignoring zone '{name}' with invalid offset {offset!r}")

        # Zone names are case-insensitive; dateutil only matches upper-case tokens
        self._zone_name_re = re.compile(
            r'\b(' + '|'.join(re.escape(name) for name in sorted(self._zones, key=len, reverse=True) if name) + r')\b',
            re.IGNORECASE
        )

    def parse(self, value: Union[str, datetime]) -> Optional[datetime]:
        """
        Parse a date in either supported format.

        ISO 8601 is tried first, then RFC 2822.

        Args:
            value: Date string or datetime object

        Returns:
            Aware datetime, or None if neither format applies
        """
        if isinstance(value, datetime):
            return self._localize(value)

        result = self.parse_iso8601(value)
        if result is None:
            result = self.parse_rfc2822(value)
        return result

    def parse_rfc2822(self, value: Union[str, datetime]) -> Optional[datetime]:
        """
        Parse an RFC 2822 date string.

        Args:
            value: Date string or datetime object

        Returns:
            Aware datetime, or None if the string cannot be parsed

        Raises:
            ValueError: If value is neither a string nor a datetime
        """
        if isinstance(value, datetime):
            return self._localize(value)

        date_str = self._check_input(value)
        if not date_str:
            return None

        date_str = _GMT_OFFSET_RE.sub(self._gmt_offset_to_numeric, date_str)
        date_str = self._zone_name_re.sub(lambda m: m.group(0).upper(), date_str)

        try:
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always", UnknownTimezoneWarning)
                first = dateutil_parse(date_str, default=_PROBE_DEFAULTS[0], tzinfos=self._zones)
                second = dateutil_parse(date_str, default=_PROBE_DEFAULTS[1], tzinfos=self._zones)
        except (ValueError, OverflowError) as e:
            self.logger.debug(f"RFC 2822 parsing failed for '{value}': {e}")
            return None

        if any(issubclass(w.category, UnknownTimezoneWarning) for w in caught):
            self.logger.debug(f"Unknown timezone in '{value}'")
            return None

        # Defaults leaked into the result, so the string is missing date fields
        if (first.year, first.month, first.day) != (second.year, second.month, second.day):
            self.logger.debug(f"Incomplete date in '{value}'")
            return None

        return self._localize(first)

    def parse_iso8601(self, value: Union[str, datetime]) -> Optional[datetime]:
        """
        Parse an ISO 8601 date string.

        Date-only strings are UTC midnight; date-time strings without an
        offset use the configured naive timezone.

        Args:
            value: Date string or datetime object

        Returns:
            Aware datetime, or None if the string cannot be parsed

        Raises:
            ValueError: If value is neither a string nor a datetime
        """
        if isinstance(value, datetime):
            return self._localize(value)

        date_str = self._check_input(value)
        if not date_str:
            return None

        # Signed expanded years ("+002016-01-19") are not supported by isoparse
        if not _ISO_YEAR_RE.match(date_str):
            self.logger.debug(f"ISO 8601 string does not start with a four-digit year: '{value}'")
            return None

        try:
            day = isoparser().parse_isodate(date_str)
        except ValueError:
            pass
        else:
            return datetime(day.year, day.month, day.day, tzinfo=tz.UTC)

        try:
            parsed = isoparse(date_str)
        except (ValueError, OverflowError) as e:
            self.logger.debug(f"ISO 8601 parsing failed for '{value}': {e}")
            return None

        return self._localize(parsed)

    def _check_input(self, value: object) -> str:
        if not isinstance(value, str):
            raise ValueError(f"Date input must be string or datetime, got {type(value)}")
        return value.strip()

    def _localize(self, value: datetime) -> datetime:
        """Attach the naive timezone to datetimes that carry none."""
        if value.tzinfo is None:
            return value.replace(tzinfo=self.naive_timezone)
        return value

    @staticmethod
    def _gmt_offset_to_numeric(match: "re.Match[str]") -> str:
        sign, hours, minutes = match.groups()
        return f"{sign}{int(hours):02d}{minutes or '00'}"


# Convenience function for common use cases
def parse_date(value: Union[str, datetime]) -> Optional[datetime]:
    """
    Convenience function to parse an RFC 2822 or ISO 8601 date.

    Args:
        value: Date string or datetime object

    Returns:
        Aware datetime, or None if the string cannot be parsed
    """
    parser = DateParser()
    return parser.parse(value)
