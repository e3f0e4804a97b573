"""
Shared utility functions for Claimkit.

This module contains the presentation and convenience helpers used by the
transcript and claim views:
- Date formatting
- Claim expiry ("hours left") labels
- Compact count formatting
- Transcript frontmatter
- Retry logic with a fixed delay
"""

from src.utils.date_utils import (
    format_date,
    format_date_general,
    to_datetime,
    DateParts,
)
from src.utils.claim_utils import ClaimExpiryCalculator, get_time_left, get_time_left_text
from src.utils.number_utils import format_compact, get_count
from src.utils.metadata import Metadata
from src.utils.retry import retry_api_call, retry_call, RetryConfig, RetryExhaustedError

__all__ = [
    # Date utilities
    "format_date",
    "format_date_general",
    "to_datetime",
    "DateParts",
    # Claim utilities
    "ClaimExpiryCalculator",
    "get_time_left",
    "get_time_left_text",
    # Number utilities
    "format_compact",
    "get_count",
    # Metadata
    "Metadata",
    # Retry utilities
    "retry_api_call",
    "retry_call",
    "RetryConfig",
    "RetryExhaustedError",
]
