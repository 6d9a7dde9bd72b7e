"""Publication dates derived from a document's position in the tree."""

from datetime import UTC, date, datetime, time
from email.utils import format_datetime
from pathlib import PurePath


def _parse_segment(segment: str, max_digits: int) -> int | None:
    if not segment.isascii() or not segment.isdigit() or len(segment) > max_digits:
        return None
    return int(segment)


def _date_from_segments(year: str, month: str, day: str) -> date | None:
    if len(year) != 4:
        return None
    parts = (
        _parse_segment(year, 4),
        _parse_segment(month, 2),
        _parse_segment(day, 2),
    )
    if None in parts:
        return None
    try:
        return date(*parts)
    except ValueError:
        return None


def resolve_date(path: str | PurePath) -> date | None:
    """Resolve the first <year>/<month>/<day> run of segments in a path.

    The date segments must be followed by at least one more segment (the
    document itself). Returns None when no valid date is found.
    """
    segments = PurePath(path).parts
    for i in range(len(segments) - 3):
        resolved = _date_from_segments(*segments[i : i + 3])
        if resolved is not None:
            return resolved
    return None


def format_rfc822_datetime(value: datetime) -> str:
    """Format an aware datetime as an RFC 822 GMT timestamp."""
    return format_datetime(value.astimezone(UTC), usegmt=True)


def format_rfc822(value: date) -> str:
    """Format a calendar date as midnight UTC, e.g. 'Thu, 07 Mar 2024 00:00:00 GMT'."""
    return format_rfc822_datetime(datetime.combine(value, time(0, 0), tzinfo=UTC))
