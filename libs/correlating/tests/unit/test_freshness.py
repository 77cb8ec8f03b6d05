"""Freshness check unit tests"""

from datetime import datetime, timedelta, timezone

import pytest

from libs.correlating.src.domain.services.freshness import is_fresh, parse_timestamp

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)


class TestIsFresh:
    """Test is_fresh"""

    def test_younger_than_max_age(self) -> None:
        calculated_at = (NOW - timedelta(hours=23)).isoformat()
        assert is_fresh(calculated_at, timedelta(hours=24), now=NOW)

    def test_older_than_max_age(self) -> None:
        calculated_at = (NOW - timedelta(hours=25)).isoformat()
        assert not is_fresh(calculated_at, timedelta(hours=24), now=NOW)

    def test_exactly_max_age_is_stale(self) -> None:
        """Boundary uses strict less-than"""
        calculated_at = (NOW - timedelta(hours=24)).isoformat()
        assert not is_fresh(calculated_at, timedelta(hours=24), now=NOW)


class TestParseTimestamp:
    """Test parse_timestamp"""

    def test_accepts_trailing_z(self) -> None:
        parsed = parse_timestamp("2025-01-17T10:00:00.000Z")
        assert parsed == datetime(2025, 1, 17, 10, 0, tzinfo=timezone.utc)

    def test_naive_is_utc(self) -> None:
        assert parse_timestamp("2025-01-17T10:00:00").tzinfo == timezone.utc

    def test_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_timestamp("yesterday")
