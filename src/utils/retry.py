"""
Retry utility with a fixed delay for Claimkit.

This module retries API calls that fail transiently. Attempts are strictly
sequential and the delay between them is constant.
"""

import asyncio
import time
from typing import Awaitable, Callable, TypeVar, Optional
from dataclasses import dataclass
from src.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


class RetryExhaustedError(RuntimeError):
    """Raised when no attempt is allowed to run (attempt count <= 0)."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"API call failed after {attempts} attempts")


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    retries: int = 3
    delay: float = 1000  # milliseconds

    def __post_init__(self):
        """Validate configuration."""
        if self.delay < 0:
            raise ValueError("delay must be non-negative")

    @classmethod
    def from_config(cls, config=None) -> "RetryConfig":
        """
        Build a RetryConfig from RETRY_ATTEMPTS / RETRY_DELAY_MS.

        Args:
            config: Config to read (default: the global one)
        """
        if config is None:
            from src.core.config import get_config
            config = get_config()
        return cls(retries=config.retry_attempts, delay=config.retry_delay_ms)


def _resolve(
    retries: Optional[int],
    delay: Optional[float],
    config: Optional[RetryConfig]
) -> RetryConfig:
    if config is not None:
        return config
    if retries is None or delay is None:
        defaults = RetryConfig.from_config()
        retries = defaults.retries if retries is None else retries
        delay = defaults.delay if delay is None else delay
    return RetryConfig(retries=retries, delay=delay)


async def retry_api_call(
    func: Callable[[], Awaitable[T]],
    retries: Optional[int] = None,
    delay: Optional[float] = None,
    config: Optional[RetryConfig] = None
) -> T:
    """
    Await func() up to `retries` times with a fixed delay between attempts.

    Args:
        func: Zero-argument coroutine function to call
        retries: Maximum number of attempts (default: RETRY_ATTEMPTS, 3)
        delay: Milliseconds to wait after a failed, non-final attempt
            (default: RETRY_DELAY_MS, 1000)
        config: Optional RetryConfig overriding retries and delay

    Returns:
        Result from the first successful attempt

    Raises:
        The exception of the final attempt if every attempt fails
        RetryExhaustedError: If retries <= 0 (func is never called)

    Example:
        >>> async def fetch():
        ...     return "Success"
        >>> # asyncio.run(retry_api_call(fetch)) == "Success"
    """
    config = _resolve(retries, delay, config)

    for attempt in range(config.retries):
        try:
            return await func()
        except Exception as e:
            if attempt == config.retries - 1:
                logger.error(f"All {config.retries} attempts failed: {e}")
                raise

            logger.debug(
                f"Attempt {attempt + 1}/{config.retries} failed, "
                f"retrying in {config.delay:.0f}ms: {e}"
            )
            await asyncio.sleep(config.delay / 1000)

    raise RetryExhaustedError(config.retries)


def retry_call(
    func: Callable[[], T],
    retries: Optional[int] = None,
    delay: Optional[float] = None,
    config: Optional[RetryConfig] = None
) -> T:
    """
    Blocking version of retry_api_call.

    Same contract: sequential attempts, fixed delay, last failure re-raised,
    RetryExhaustedError when retries <= 0.

    Example:
        >>> retry_call(lambda: "Success", retries=2, delay=0)
        'Success'
    """
    config = _resolve(retries, delay, config)

    for attempt in range(config.retries):
        try:
            return func()
        except Exception as e:
            if attempt == config.retries - 1:
                logger.error(f"All {config.retries} attempts failed: {e}")
                raise

            logger.debug(
                f"Attempt {attempt + 1}/{config.retries} failed, "
                f"retrying in {config.delay:.0f}ms: {e}"
            )
            time.sleep(config.delay / 1000)

    raise RetryExhaustedError(config.retries)
