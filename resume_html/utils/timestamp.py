"""Timestamp formatting utilities."""

from datetime import date, datetime, timezone


def now() -> str:
    """Current local time as a compact string for directory names (20251114_123456)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def parse_partial_date(value: str) -> date:
    """
    Parse an ISO 8601 date that may omit the month or day.

    JSON Resume dates are written as "YYYY", "YYYY-MM" or "YYYY-MM-DD". Missing
    components default to 1. A trailing time part is ignored.

    Args:
        value: Date string

    Returns:
        date instance

    Raises:
        ValueError: If the value is not a (partial) ISO 8601 date

    Examples:
        parse_partial_date("2020")        # date(2020, 1, 1)
        parse_partial_date("2020-03")     # date(2020, 3, 1)
        parse_partial_date("2020-03-15")  # date(2020, 3, 15)
    """
    text = value.strip().split("T")[0]
    parts = text.split("-")
    if not 1 <= len(parts) <= 3 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Invalid date: {value!r}")

    numbers = [int(part) for part in parts] + [1] * (3 - len(parts))
    return date(numbers[0], numbers[1], numbers[2])


def to_iso_utc(value: date) -> str:
    """
    Format a date as an ISO 8601 UTC timestamp with millisecond precision.

    Examples:
        to_iso_utc(date(2020, 1, 1))  # "2020-01-01T00:00:00.000Z"
    """
    moment = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
