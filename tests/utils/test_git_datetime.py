"""Tests for git timestamp parsing and serialization."""

from datetime import datetime, timedelta, timezone

import pytest

from gitstream.utils.datetime import parse_git_timestamp, serialize_datetime


class TestParseGitTimestamp:
    """Tests for parse_git_timestamp function."""

    def test_parse_git_iso_like_format(self) -> None:
        """Parse git's %ai output."""
        result = parse_git_timestamp("2024-01-01 10:00:00 +0000")
        assert result == datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)

    def test_negative_offset_is_preserved(self) -> None:
        """The author's offset is kept, not normalized to UTC."""
        result = parse_git_timestamp("2019-08-08 18:03:38 -0400")
        assert result.utcoffset() == timedelta(hours=-4)
        assert result.hour == 18

    def test_half_hour_offset(self) -> None:
        """Non-whole-hour offsets survive."""
        result = parse_git_timestamp("2024-03-01 09:15:00 +0530")
        assert result.utcoffset() == timedelta(hours=5, minutes=30)

    def test_parse_strict_iso(self) -> None:
        """git's %aI output is accepted too."""
        result = parse_git_timestamp("2024-01-01T10:00:00+02:00")
        assert result.utcoffset() == timedelta(hours=2)

    def test_surrounding_whitespace_ignored(self) -> None:
        """Stray whitespace does not break parsing."""
        result = parse_git_timestamp("  2024-01-01 10:00:00 +0000 ")
        assert result.year == 2024

    def test_naive_iso_assumes_utc(self) -> None:
        """Naive ISO input is taken as UTC."""
        result = parse_git_timestamp("2024-01-01T10:00:00")
        assert result.tzinfo == timezone.utc

    @pytest.mark.parametrize("value", ["", "yesterday", "2024-13-01 10:00:00 +0000"])
    def test_invalid_raises(self, value: str) -> None:
        """Unrecognizable dates raise ValueError."""
        with pytest.raises(ValueError, match="Cannot parse git timestamp"):
            parse_git_timestamp(value)


class TestSerializeDatetime:
    """Tests for serialize_datetime function."""

    def test_serialize_keeps_offset(self) -> None:
        """Offsets appear in the ISO string."""
        tz = timezone(timedelta(hours=-4))
        dt = datetime(2019, 8, 8, 18, 3, 38, tzinfo=tz)
        assert serialize_datetime(dt) == "2019-08-08T18:03:38-04:00"

    def test_serialize_naive_datetime_assumes_utc(self) -> None:
        """Naive datetime is assumed to be UTC."""
        dt = datetime(2024, 12, 14, 10, 30, 0)
        assert serialize_datetime(dt) == "2024-12-14T10:30:00+00:00"

    def test_round_trip_from_git(self) -> None:
        """git input serializes to the matching ISO form."""
        dt = parse_git_timestamp("2024-01-01 10:00:00 +0000")
        assert serialize_datetime(dt) == "2024-01-01T10:00:00+00:00"
