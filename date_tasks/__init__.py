"""
date_tasks - Date and Time Utility Functions

Parsing of RFC 2822 and ISO 8601 date strings, leap year checks,
time span formatting and the clock angle problem.

Version: 1.0.0
Python: 3.9+ compatibility
"""

__version__ = "1.0.0"
__python_requires__ = ">=3.9"

# Core imports for package users
from .core.config_manager import ConfigManager
from .core.date_utils import (
    parse_data_from_rfc2822,
    parse_data_from_iso8601,
    is_leap_year,
    time_span_to_string,
    angle_between_clock_hands,
    clock_angle_degrees,
)
from .utils.time_parser import DateParser, parse_date

__all__ = [
    "ConfigManager",
    "DateParser",
    "parse_date",
    "parse_data_from_rfc2822",
    "parse_data_from_iso8601",
    "is_leap_year",
    "time_span_to_string",
    "angle_between_clock_hands",
    "clock_angle_degrees",
]
