"""
Configuration Management for Claimkit

This module provides centralized configuration management with:
- Environment variable loading
- Claim duration read from the shared JSON config file
- Type validation
- Sensible defaults
"""

import json
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv


DEFAULT_CLAIM_DURATION_IN_HOURS = 24.0


def _load_claim_duration(config_file: Path) -> Optional[float]:
    """
    Read claim_duration_in_hours from a JSON config file.

    Returns None if the file does not exist or has no such key.

    Raises:
        ValueError: If the file is not valid JSON
    """
    if not config_file.exists():
        return None

    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {config_file}: {e}") from e

    value = data.get("claim_duration_in_hours") if isinstance(data, dict) else None
    return float(value) if value is not None else None


class Config:
    """
    Application configuration loaded from environment variables.

    Values are read from configs/.env or the process environment. The claim
    duration falls back to the JSON file named by CLAIM_CONFIG_FILE, then to
    DEFAULT_CLAIM_DURATION_IN_HOURS.
    """

    def __init__(self, env_path: Optional[Path] = None):
        """
        Initialize configuration from environment.

        Args:
            env_path: Path to .env file (default: configs/.env)
        """
        if env_path is None:
            env_path = Path("configs/.env")

        load_dotenv(dotenv_path=env_path, override=True)

        # === Claim Configuration ===
        self.claim_config_file: Path = Path(os.getenv("CLAIM_CONFIG_FILE", "config/config.json"))
        env_duration = os.getenv("CLAIM_DURATION_IN_HOURS")
        if env_duration:
            self.claim_duration_in_hours: float = float(env_duration)
        else:
            file_duration = _load_claim_duration(self.claim_config_file)
            self.claim_duration_in_hours = (
                file_duration if file_duration is not None else DEFAULT_CLAIM_DURATION_IN_HOURS
            )

        # === Retry Configuration ===
        self.retry_attempts: int = int(os.getenv("RETRY_ATTEMPTS", "3"))
        self.retry_delay_ms: int = int(os.getenv("RETRY_DELAY_MS", "1000"))

        # === Logging Configuration ===
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_dir: Path = Path(os.getenv("LOG_DIR", "logs"))

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: If any value is out of range
        """
        errors = []

        if self.claim_duration_in_hours <= 0:
            errors.append(
                f"CLAIM_DURATION_IN_HOURS must be positive, got {self.claim_duration_in_hours}"
            )

        if self.retry_attempts <= 0:
            errors.append(f"RETRY_ATTEMPTS must be positive, got {self.retry_attempts}")

        if self.retry_delay_ms < 0:
            errors.append(f"RETRY_DELAY_MS must be non-negative, got {self.retry_delay_ms}")

        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            errors.append(f"LOG_LEVEL is not a valid level: {self.log_level}")

        if errors:
            raise ValueError("Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors))

    def __repr__(self) -> str:
        return (
            f"Config(\n"
            f"  claim_duration_in_hours={self.claim_duration_in_hours},\n"
            f"  retry_attempts={self.retry_attempts},\n"
            f"  retry_delay_ms={self.retry_delay_ms},\n"
            f"  log_level={self.log_level}\n"
            f")"
        )


# Global configuration instance (lazy-loaded)
_config: Optional[Config] = None


def get_config(env_path: Optional[Path] = None) -> Config:
    """
    Get the global configuration instance.

    Args:
        env_path: Optional path to .env file (only used on first call)

    Returns:
        Global Config instance

    Example:
        >>> config = get_config()
        >>> config.claim_duration_in_hours > 0
        True
    """
    global _config
    if _config is None:
        _config = Config(env_path=env_path)
    return _config


def reset_config() -> None:
    """Drop the global configuration so the next get_config() reloads it."""
    global _config
    _config = None


def validate_config(env_path: Optional[Path] = None) -> None:
    """
    Validate configuration and raise error if invalid.

    This should be called at application startup to fail fast
    if configuration is incorrect.

    Raises:
        ValueError: If configuration is invalid
    """
    config = get_config(env_path=env_path)
    config.validate()
