"""Pytest fixtures for charge-rate engine tests."""

from __future__ import annotations

import pytest

from charge_rate_engine.calculators.types import BillableOptions, CostConfig, WorkConfig
from charge_rate_engine.config import get_settings
from charge_rate_engine.profiles import ApprenticeProfile

# Pay rate used by the reference scenario
SCENARIO_PAY_RATE = 29.50


@pytest.fixture
def cost_config() -> CostConfig:
    """Production default cost configuration."""
    return CostConfig()


@pytest.fixture
def work_config() -> WorkConfig:
    """Production default work pattern (7.6h x 5d x 52w)."""
    return WorkConfig()


@pytest.fixture
def billable_options() -> BillableOptions:
    """Every category unbilled."""
    return BillableOptions()


@pytest.fixture
def profile() -> ApprenticeProfile:
    """A third-year apprentice on default configuration."""
    return ApprenticeProfile(
        id="apprentice-1",
        name="Sam Taylor",
        year=3,
        base_pay_rate=SCENARIO_PAY_RATE,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
