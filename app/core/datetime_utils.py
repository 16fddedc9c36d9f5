"""
Date utilities for trip records
"""

from datetime import date, datetime, timedelta
from typing import Dict, Any, Optional

def convert_timezone_aware_datetimes(data: Dict[str, Any], datetime_fields: list = None) -> Dict[str, Any]:
    """
    Convert timezone-aware datetimes to naive UTC for PostgreSQL compatibility

    Args:
        data: Dictionary containing data with potential datetime fields
        datetime_fields: List of field names that contain datetimes. If None, checks trip date fields.

    Returns:
        Dictionary with converted datetime fields
    """
    if datetime_fields is None:
        datetime_fields = ['start_date', 'end_date', 'created_at', 'updated_at']

    for field in datetime_fields:
        value = data.get(field)
        if isinstance(value, datetime):
            if value.tzinfo:
                value = value.replace(tzinfo=None)
            # Trip dates are stored as plain dates
            if field in ('start_date', 'end_date'):
                value = value.date()
            data[field] = value

    return data

def days_since(start: date, today: Optional[date] = None) -> int:
    """Whole days elapsed from start to today (negative for future dates)"""
    if today is None:
        today = date.today()
    if isinstance(start, datetime):
        start = start.date()
    return (today - start).days

def derive_end_date(start: Optional[date], days: Optional[int]) -> Optional[date]:
    """End date of a trip that starts on start and lasts days"""
    if not start or not days:
        return None
    return start + timedelta(days=days)
