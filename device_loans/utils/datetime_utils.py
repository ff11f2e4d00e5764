"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
Naive datetimes are interpreted in the timezone configured in
device_loans.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- ensure_aware(): Attach the application timezone to naive datetimes
- parse_iso(): Safely parse ISO 8601 string to datetime
- to_iso(): Convert datetime object to the stored ISO 8601 form
- truncate_to_millis(): Drop sub-millisecond precision, matching what is stored

Stored timestamps are always UTC with millisecond precision and a "Z"
suffix (e.g. "2025-12-24T10:30:00.000Z"). Fixed-width UTC strings sort
lexicographically in chronological order, which the overdue query
relies on.
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional

from device_loans.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def ensure_aware(dt: datetime) -> datetime:
    """Return dt unchanged if aware, otherwise tagged with the app timezone."""
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=_get_app_timezone())
    return dt


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    Handles both timezone-aware and naive strings.
    If string is naive, assumes application timezone.

    Args:
        dt_str: ISO 8601 string (e.g., "2025-12-24T10:30:00.000Z" or "2025-12-24T10:30:00+05:30")

    Returns:
        timezone-aware datetime object, or None if the value is empty, not a string or malformed
    """
    if not dt_str or not isinstance(dt_str, str):
        return None

    try:
        parsed = datetime.fromisoformat(dt_str.replace("Z", "+00:00"))
    except ValueError:
        return None
    return ensure_aware(parsed)


def to_iso(dt: datetime) -> str:
    """
    Convert datetime object to the stored ISO 8601 form.
    If datetime is naive, assumes application timezone.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        UTC string with millisecond precision, e.g. "2025-12-24T05:00:00.000Z"
    """
    utc = ensure_aware(dt).astimezone(dt_timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def truncate_to_millis(dt: datetime) -> datetime:
    """Drop microseconds below one millisecond so dt equals its stored form."""
    return dt.replace(microsecond=dt.microsecond - dt.microsecond % 1000)
