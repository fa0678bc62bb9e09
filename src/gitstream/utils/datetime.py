"""Centralized datetime handling for git timestamps.

git's ``%ai`` placeholder renders author dates as ``2024-01-01 10:00:00 +0000``.
Records carry the date as an ISO 8601 string, keeping the author's original
UTC offset rather than normalizing to UTC.

Design decisions:
- The original offset is preserved end to end
- ISO 8601 input (``%aI``) is accepted as well as the ``%ai`` form
- Naive datetimes are assumed to be UTC (not local time)
"""

from datetime import datetime, timezone

__all__ = ["parse_git_timestamp", "serialize_datetime"]

GIT_ISO_LIKE_FORMAT = "%Y-%m-%d %H:%M:%S %z"


def parse_git_timestamp(value: str) -> datetime:
    """Parse a git author/committer date.

    Args:
        value: Date in git's ``%ai`` form or strict ISO 8601 (``%aI``)

    Returns:
        Timezone-aware datetime carrying the source offset.

    Raises:
        ValueError: If value is not a recognizable date.

    Examples:
        >>> parse_git_timestamp("2019-08-08 18:03:38 -0400").isoformat()
        '2019-08-08T18:03:38-04:00'
        >>> parse_git_timestamp("2024-01-01T10:00:00+00:00").isoformat()
        '2024-01-01T10:00:00+00:00'
    """
    text = value.strip()
    try:
        dt = datetime.strptime(text, GIT_ISO_LIKE_FORMAT)
    except ValueError:
        try:
            dt = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"Cannot parse git timestamp: {value!r}") from e

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def serialize_datetime(dt: datetime) -> str:
    """Serialize datetime to an ISO 8601 string.

    Args:
        dt: Datetime to serialize. If naive (no timezone), assumes UTC.

    Returns:
        ISO 8601 formatted string (e.g., "2024-12-14T10:30:00+00:00")
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()
