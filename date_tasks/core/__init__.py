"""
Core date_tasks components.

This package contains configuration management and the date utility
functions themselves.
"""

from .config_manager import ConfigManager
from .date_utils import (
    parse_data_from_rfc2822,
    parse_data_from_iso8601,
    is_leap_year,
    time_span_to_string,
    angle_between_clock_hands,
    clock_angle_degrees,
)

__all__ = [
    "ConfigManager",
    "parse_data_from_rfc2822",
    "parse_data_from_iso8601",
    "is_leap_year",
    "time_span_to_string",
    "angle_between_clock_hands",
    "clock_angle_degrees",
]
