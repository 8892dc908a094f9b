"""Pytest configuration and fixtures."""

import pytest
from structlog.testing import capture_logs

from amm_pricing.config import PricingConfig
from amm_pricing.pools.types import PoolSnapshot
from amm_pricing.positions.accountant import PositionAccountant
from amm_pricing.pricing.engine import PoolPricingEngine
from tests.helpers import make_pool, make_stable_pool


@pytest.fixture
def engine() -> PoolPricingEngine:
    """Pricing engine with the default configuration."""
    return PoolPricingEngine()


@pytest.fixture
def strict_engine() -> PoolPricingEngine:
    """Pricing engine that raises when a stable solver does not converge."""
    return PoolPricingEngine(PricingConfig(strict_convergence=True))


@pytest.fixture
def accountant() -> PositionAccountant:
    return PositionAccountant()


@pytest.fixture
def balanced_pool() -> PoolSnapshot:
    """Fee-free constant-product pool with 1000/1000 reserves."""
    return make_pool(x=1000, y=1000)


@pytest.fixture
def stable_pool() -> PoolSnapshot:
    """Balanced stable pool, A=100."""
    return make_stable_pool()


@pytest.fixture
def captured_logs():
    """Capture structlog events emitted during a test."""
    with capture_logs() as logs:
        yield logs
