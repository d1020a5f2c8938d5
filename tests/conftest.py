"""
Pytest configuration and fixtures for Pizzeria tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pizzeria.core.catalog import BEIJING_CATALOG, LONDON_CATALOG
from pizzeria.core.strategy import (
    BeijingKitchen,
    DirectStrategy,
    FamilyStrategy,
    LondonKitchen,
    RegionalStrategy,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment overrides out of the tests."""
    monkeypatch.delenv("PIZZERIA_REGION", raising=False)
    monkeypatch.delenv("PIZZERIA_STRATEGY", raising=False)


@pytest.fixture
def beijing_strategies():
    """All three strategies bound to Beijing."""
    return [
        DirectStrategy(BEIJING_CATALOG),
        RegionalStrategy(BeijingKitchen()),
        FamilyStrategy(BEIJING_CATALOG),
    ]


@pytest.fixture
def london_strategies():
    """All three strategies bound to London."""
    return [
        DirectStrategy(LONDON_CATALOG),
        RegionalStrategy(LondonKitchen()),
        FamilyStrategy(LONDON_CATALOG),
    ]
