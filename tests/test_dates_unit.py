"""Unit tests for path-based date resolution."""

from datetime import UTC, date, datetime
from pathlib import Path

from feed_builder.dates import format_rfc822, format_rfc822_datetime, resolve_date


class TestResolveDateUnit:
    """Unit tests for resolve_date."""

    def test_resolves_year_month_day(self):
        assert resolve_date("2024/3/7/post.ext") == date(2024, 3, 7)

    def test_zero_padded_segments(self):
        assert resolve_date("2024/03/07/post.md") == date(2024, 3, 7)

    def test_date_inside_longer_path(self):
        assert resolve_date("/srv/blog/2023/12/25/post.md") == date(2023, 12, 25)

    def test_accepts_path_objects(self):
        assert resolve_date(Path("2021") / "6" / "15" / "post.md") == date(2021, 6, 15)

    def test_first_valid_window_wins(self):
        """An invalid leading window is skipped, not fatal."""
        assert resolve_date("2024/13/2020/1/2/post.md") == date(2020, 1, 2)

    def test_unknown_when_no_date(self):
        assert resolve_date("drafts/post.md") is None
        assert resolve_date("post.md") is None
        assert resolve_date("") is None

    def test_unknown_for_invalid_calendar_dates(self):
        assert resolve_date("2024/13/1/post.md") is None
        assert resolve_date("2023/2/29/post.md") is None
        assert resolve_date("2024/0/10/post.md") is None
        assert resolve_date("2024/1/32/post.md") is None

    def test_leap_day(self):
        assert resolve_date("2024/2/29/post.md") == date(2024, 2, 29)

    def test_unknown_for_malformed_segments(self):
        assert resolve_date("24/3/7/post.md") is None
        assert resolve_date("20245/3/7/post.md") is None
        assert resolve_date("2024/march/7/post.md") is None
        assert resolve_date("2024/3/007/post.md") is None
        assert resolve_date("2024/+3/7/post.md") is None

    def test_requires_document_after_date(self):
        """A bare date directory is not a document."""
        assert resolve_date("2024/3/7") is None


class TestFormatRfc822Unit:
    """Unit tests for RSS timestamp formatting."""

    def test_date_is_midnight_gmt(self):
        assert format_rfc822(date(2024, 3, 7)) == "Thu, 07 Mar 2024 00:00:00 GMT"

    def test_datetime_is_converted_to_gmt(self):
        value = datetime(2024, 1, 1, 12, 30, tzinfo=UTC)
        assert format_rfc822_datetime(value) == "Mon, 01 Jan 2024 12:30:00 GMT"
