"""RFC 3339 rendering of (seconds, nanos) timestamps"""
from datetime import datetime, timezone

from .errors import InvalidTimestamp
from .models import Timestamp

MAX_NANOS = 999_999_999


def to_iso_string(timestamp: Timestamp) -> str:
    """Format a timestamp as UTC with a trimmed nanosecond fraction.

    ``Timestamp(0, 500000000)`` becomes ``1970-01-01T00:00:00.5Z``; zero nanos
    produce no fractional part at all.
    """
    seconds, nanos = timestamp.seconds, timestamp.nanos
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise InvalidTimestamp(seconds, nanos, "seconds must be an integer")
    if isinstance(nanos, bool) or not isinstance(nanos, int):
        raise InvalidTimestamp(seconds, nanos, "nanos must be an integer")
    if seconds < 0:
        raise InvalidTimestamp(seconds, nanos, "seconds must not be negative")
    if not 0 <= nanos <= MAX_NANOS:
        raise InvalidTimestamp(seconds, nanos, f"nanos must be within [0, {MAX_NANOS}]")

    try:
        instant = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidTimestamp(seconds, nanos, str(e)) from e

    fraction = f"{nanos:09d}".rstrip("0")
    suffix = f".{fraction}Z" if fraction else "Z"
    return instant.strftime("%Y-%m-%dT%H:%M:%S") + suffix
