"""
Core utilities for Claimkit.

This module contains shared infrastructure used across all components:
- Configuration management
- Logging
"""

from src.core.logging import get_logger, setup_logging, init_logging_from_config
from src.core.config import get_config, validate_config, reset_config, Config

__all__ = [
    "get_logger",
    "setup_logging",
    "init_logging_from_config",
    "get_config",
    "validate_config",
    "reset_config",
    "Config",
]
