"""Utility helper functions for registry hosts."""

import getpass
from datetime import datetime, timezone


def get_current_timestamp() -> int:
    """
    Get current UTC time in milliseconds since the epoch.

    Returns:
        Timestamp used to stamp new records
    """
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def format_timestamp(timestamp_ms: int) -> str:
    """
    Render a millisecond timestamp as an ISO 8601 UTC string.
    """
    try:
        return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).isoformat()
    except (OverflowError, OSError, ValueError):
        return str(timestamp_ms)


def default_identity() -> str:
    """
    Get the OS login name, used as the caller identity when none is configured.
    """
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "anonymous"
