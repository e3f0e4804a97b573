"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all tests in the test suite.
"""

import pytest
from datetime import datetime
from pathlib import Path
from typing import Callable, List


# ============================================================================
# Paths and Directories
# ============================================================================

@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Time Fixtures
# ============================================================================

@pytest.fixture
def fixed_now() -> datetime:
    """Return a fixed 'now' used by clock-injected calculators."""
    return datetime(2024, 3, 5, 12, 0, 0)


@pytest.fixture
def fixed_clock(fixed_now) -> Callable[[], datetime]:
    """Return a clock callable that always reports fixed_now."""
    return lambda: fixed_now


# ============================================================================
# Config Fixtures
# ============================================================================

@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear config-related environment variables and point .env at tmp_path."""
    for name in (
        "CLAIM_DURATION_IN_HOURS",
        "CLAIM_CONFIG_FILE",
        "RETRY_ATTEMPTS",
        "RETRY_DELAY_MS",
        "LOG_LEVEL",
        "LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CLAIM_CONFIG_FILE", str(tmp_path / "missing.json"))
    return tmp_path / ".env"


@pytest.fixture
def reset_global_config():
    """Drop the global Config before and after the test."""
    from src.core.config import reset_config
    reset_config()
    yield
    reset_config()


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture
def recorded_sleeps(monkeypatch, clean_env, reset_global_config) -> List[float]:
    """Replace time.sleep and asyncio.sleep in the retry module and record delays.

    Also clears retry settings from the environment so defaults are 3 and 1000ms.
    """
    import src.utils.retry as retry_module

    sleeps: List[float] = []

    async def fake_async_sleep(seconds):
        sleeps.append(seconds)

    def fake_sleep(seconds):
        sleeps.append(seconds)

    monkeypatch.setattr(retry_module.asyncio, "sleep", fake_async_sleep)
    monkeypatch.setattr(retry_module.time, "sleep", fake_sleep)
    return sleeps


# ============================================================================
# Test Markers
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
