"""
Utility Functions and Helpers

This package contains date parsing, timestamp helpers and logging setup.
"""

from .time_parser import DateParser, parse_date, resolve_timezone
from .helpers import setup_logging, to_utc

__all__ = [
    "DateParser",
    "parse_date",
    "resolve_timezone",
    "setup_logging",
    "to_utc"
]
