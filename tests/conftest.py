"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

import pytest

# Add project root to path so `src` imports resolve
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# Environment Variable Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Clear PATTERNS_ environment variables."""
    for key in (
        "PATTERNS_LOG_LEVEL",
        "PATTERNS_MIN_NAME_LENGTH",
        "PATTERNS_COUNTER_START",
        "PATTERNS_ECHO_OUTPUT",
    ):
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# Singleton Reset
# =============================================================================

@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the counter handle and config cache before and after each test."""
    from src.config import reset_config
    from src.core.patterns import reset_instance

    reset_instance()
    reset_config()

    yield

    reset_instance()
    reset_config()


# =============================================================================
# Domain Fixtures
# =============================================================================

@pytest.fixture
def person():
    """Fresh person record used by the proxy tests."""
    return {"name": "John Doe", "age": 42, "nationality": "American"}


@pytest.fixture
def registry():
    """Empty species registry."""
    from src.prototype import BehaviorRegistry
    return BehaviorRegistry()


@pytest.fixture
def dog(registry):
    """Dog species with a single bark method."""
    return registry.create_species("Dog", {"bark": lambda self: "Woof!"})
