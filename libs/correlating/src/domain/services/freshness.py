"""Cache freshness check"""

from datetime import datetime, timedelta, timezone


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC

    Raises:
        ValueError: not an ISO-8601 string
    """
    # Accept a trailing "Z" as written by JavaScript toISOString()
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_fresh(
    calculated_at: str,
    max_age: timedelta,
    now: datetime | None = None,
) -> bool:
    """now - calculated_at < max_age"""
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    return current - parse_timestamp(calculated_at) < max_age
