"""
DateTime Utilities
==================

All timestamps written by the service are UTC.

Functions:
- now(): Returns timezone-aware UTC datetime object
- now_iso(): Returns ISO 8601 string with a trailing 'Z'
"""
from datetime import datetime, timezone


def now() -> datetime:
    """
    Get current datetime in UTC.
    
    Returns:
        timezone-aware datetime object
    """
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """
    Get current UTC datetime as an ISO 8601 string, second precision.
    
    Returns:
        ISO 8601 formatted string (e.g., "2025-12-24T10:30:00Z")
    """
    return now().replace(microsecond=0).isoformat().replace("+00:00", "Z")
