#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Optional, Any, List
from datetime import date


def safe_str(value: Optional[Any], default: str = "") -> str:
    """
    Safely convert value to string.

    Args:
        value: Value to convert.
        default: Default value if value is None.

    Returns:
        String value.
    """
    if value is None:
        return default
    return str(value)


def safe_list(value: Optional[Any]) -> List[str]:
    """
    Return the string items of a JSON list column, or an empty list.
    """
    if not isinstance(value, (list, tuple, set)):
        return []
    return [item for item in value if isinstance(item, str)]


def safe_datetime_iso(dt: Optional[date]) -> Optional[str]:
    """
    Safely convert a date or datetime to ISO format string.

    Args:
        dt: Date or datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()
