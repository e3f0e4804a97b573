"""
Compact number formatting for Claimkit.

Renders counts the way en-US compact short notation does:
1234 -> "1.2K", 15300 -> "15K", 999999 -> "1M".
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

# (threshold, suffix), smallest first
COMPACT_UNITS = [
    (Decimal(1), ""),
    (Decimal(10) ** 3, "K"),
    (Decimal(10) ** 6, "M"),
    (Decimal(10) ** 9, "B"),
    (Decimal(10) ** 12, "T"),
]


def _round_compact(value: Decimal) -> Decimal:
    """Keep 2 significant digits below 10, whole numbers from 10 up."""
    if value < 10:
        if value == 0:
            return value
        exponent = value.adjusted() - 1
        return value.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)
    return value.quantize(Decimal(1), rounding=ROUND_HALF_UP)


def _render(value: Decimal) -> str:
    if value == value.to_integral_value():
        whole = int(value)
        # grouping separators only from five integer digits
        return f"{whole:,}" if whole >= 10000 else str(whole)
    return format(value.normalize(), "f")


def format_compact(value: Union[int, float]) -> str:
    """
    Format a number in compact short notation.

    Args:
        value: Number to format

    Returns:
        Compact string such as "1.2K", "15K", "3.4M" or "999"

    Example:
        >>> format_compact(1234)
        '1.2K'
        >>> format_compact(-1500000)
        '-1.5M'
        >>> format_compact(42)
        '42'
    """
    number = Decimal(str(value))
    magnitude = abs(number)

    index = 0
    for i, (threshold, _) in enumerate(COMPACT_UNITS):
        if magnitude >= threshold:
            index = i

    threshold, suffix = COMPACT_UNITS[index]
    scaled = _round_compact(magnitude / threshold)

    # 999999 rounds to 1000K, which is shown as 1M
    if scaled >= 1000 and index < len(COMPACT_UNITS) - 1:
        threshold, suffix = COMPACT_UNITS[index + 1]
        scaled = _round_compact(magnitude / threshold)

    sign = "-" if number < 0 and scaled != 0 else ""
    return f"{sign}{_render(scaled)}{suffix}"


def get_count(item: Union[int, float, str]) -> str:
    """
    Format a count, using the length of a string item.

    Example:
        >>> get_count("hello")
        '5'
        >>> get_count(1234)
        '1.2K'
    """
    value = len(item) if isinstance(item, str) else item
    return format_compact(value)
