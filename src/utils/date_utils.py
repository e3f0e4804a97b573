"""
Date utility functions for Claimkit.

This module provides date coercion and the fixed-pattern formatting used
by the claim and transcript views.
"""

from datetime import date, datetime
from typing import Optional, TypedDict, Union
from src.core.logging import get_logger

logger = get_logger(__name__)

DateLike = Union[datetime, date, str]


class DateParts(TypedDict):
    """Day, month and year components of a formatted date."""

    day: str
    month: str
    year: str


def to_datetime(value: DateLike) -> datetime:
    """
    Coerce a date-like value into a datetime in local time.

    Naive datetimes are taken as local time. Aware datetimes are converted
    to the local timezone. Plain dates become local midnight. Strings are
    parsed as ISO-8601 (a trailing 'Z' is accepted).

    Args:
        value: datetime, date or ISO-8601 string

    Returns:
        Datetime object

    Raises:
        ValueError: If a string cannot be parsed
        TypeError: If the value is not date-like

    Example:
        >>> to_datetime("2024-03-05").day
        5
    """
    if isinstance(value, datetime):
        return value.astimezone() if value.tzinfo is not None else value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Could not parse date: {value}")
            raise ValueError(f"Invalid date string: {value!r}")
        return to_datetime(parsed)

    raise TypeError(f"Expected datetime, date or str, got {type(value).__name__}")


def format_date(dt: DateLike) -> str:
    """
    Format a date as yyyy/MM/dd using its local calendar fields.

    Example:
        >>> format_date(datetime(2024, 3, 5, 23, 59))
        '2024/03/05'
    """
    d = to_datetime(dt)
    return f"{d.year:04d}/{d.month:02d}/{d.day:02d}"


def format_date_general(
    dt: Optional[DateLike],
    as_string: bool
) -> Union[str, DateParts, None]:
    """
    Split a date into day/month/year strings.

    The components are taken from the format_date() output rather than from
    the calendar fields, so they carry the same zero padding.

    Args:
        dt: Date to split, or None
        as_string: Return a yyyy-MM-dd string instead of the parts

    Returns:
        yyyy-MM-dd string, DateParts dict, or None when dt is None

    Example:
        >>> format_date_general(datetime(2024, 3, 5), as_string=True)
        '2024-03-05'
        >>> format_date_general(datetime(2024, 3, 5), as_string=False)
        {'day': '05', 'month': '03', 'year': '2024'}
        >>> format_date_general(None, as_string=True) is None
        True
    """
    if not dt:
        return None

    year, month, day = format_date(dt).split("/")

    if as_string:
        return f"{year}-{month}-{day}"
    return DateParts(day=day, month=month, year=year)
