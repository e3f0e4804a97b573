"""
Claim expiry helpers for Claimkit.

A claim is valid for a configured number of hours after its start
timestamp. This module reports whether a claim has expired and a
human-readable "hours left" label.

Note: the hours value is computed from (start - now), not from
(start + duration - now). Callers rendering it see zero or a negative
number for a live claim. This matches the behaviour downstream views were
built against and is kept as-is until they are updated.
"""

from datetime import datetime
from typing import Callable, Optional
from src.core.logging import get_logger
from src.utils.date_utils import DateLike, to_datetime

logger = get_logger(__name__)

MS_PER_HOUR = 3_600_000

NO_TIMESTAMP_TEXT = "no timestamp found"
EXPIRED_TEXT = "expired"


def _epoch_ms(dt: datetime) -> int:
    return int(round(dt.timestamp() * 1000))


class ClaimExpiryCalculator:
    """
    Computes remaining claim time from a fixed claim duration.

    Args:
        claim_duration_in_hours: Hours a claim stays valid
        clock: Zero-argument callable returning "now" (default: datetime.now)

    Example:
        >>> calc = ClaimExpiryCalculator(claim_duration_in_hours=24)
        >>> calc.get_time_left_text(None)
        'no timestamp found'
    """

    def __init__(
        self,
        claim_duration_in_hours: float,
        clock: Optional[Callable[[], datetime]] = None
    ):
        if claim_duration_in_hours < 0:
            raise ValueError(
                f"claim_duration_in_hours must be non-negative, got {claim_duration_in_hours}"
            )
        self.claim_duration_in_hours = claim_duration_in_hours
        self.claim_duration_in_ms = int(claim_duration_in_hours * MS_PER_HOUR)
        self._clock = clock or datetime.now

    def get_time_left(self, start: Optional[DateLike]) -> Optional[int]:
        """
        Get whole hours between the claim start and now.

        Returns None when there is no start timestamp or when
        start + duration is strictly before now. The hour count is
        truncated toward zero.
        """
        if not start:
            return None

        now = _epoch_ms(to_datetime(self._clock()))
        given = _epoch_ms(to_datetime(start))
        expiry = given + self.claim_duration_in_ms

        if expiry < now:
            logger.debug(f"Claim started at {start} expired {(now - expiry) / MS_PER_HOUR:.1f}h ago")
            return None

        return int((given - now) / MS_PER_HOUR)

    def get_time_left_text(self, start: Optional[DateLike]) -> str:
        """
        Describe the remaining claim time.

        Returns "no timestamp found", "expired", or "<hours> hours left".
        """
        if not start:
            return NO_TIMESTAMP_TEXT

        hours = self.get_time_left(start)
        if not hours:
            return EXPIRED_TEXT

        return f"{hours} hours left"


def _calculator(config=None) -> ClaimExpiryCalculator:
    if config is None:
        from src.core.config import get_config
        config = get_config()
    return ClaimExpiryCalculator(config.claim_duration_in_hours)


def get_time_left(start: Optional[DateLike], config=None) -> Optional[int]:
    """Shortcut for ClaimExpiryCalculator.get_time_left using a Config (default: global)."""
    return _calculator(config).get_time_left(start)


def get_time_left_text(start: Optional[DateLike], config=None) -> str:
    """Shortcut for ClaimExpiryCalculator.get_time_left_text using a Config (default: global)."""
    return _calculator(config).get_time_left_text(start)
