"""Tests for PricingConfig."""

import pytest

from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig


class TestPricingConfig:
    """Tests for config defaults and validation."""

    def test_defaults(self):
        assert DEFAULT_PRICING_CONFIG.max_iterations == 256
        assert DEFAULT_PRICING_CONFIG.strict_convergence is False
        assert DEFAULT_PRICING_CONFIG.slippage_scale == 10**9

    @pytest.mark.parametrize("kwargs", [{"max_iterations": 0}, {"slippage_scale": -1}])
    def test_rejects_non_positive(self, kwargs):
        with pytest.raises(ValueError):
            PricingConfig(**kwargs)


class TestFromEnv:
    """Tests for environment loading."""

    def test_defaults_without_env(self, monkeypatch):
        monkeypatch.delenv("AMM_PRICING_MAX_ITERATIONS", raising=False)
        monkeypatch.delenv("AMM_PRICING_STRICT_CONVERGENCE", raising=False)
        assert PricingConfig.from_env() == PricingConfig()

    def test_reads_env(self, monkeypatch):
        monkeypatch.setenv("AMM_PRICING_MAX_ITERATIONS", "64")
        monkeypatch.setenv("AMM_PRICING_STRICT_CONVERGENCE", "Yes")
        config = PricingConfig.from_env()
        assert config.max_iterations == 64
        assert config.strict_convergence is True

    def test_strict_false_values(self, monkeypatch):
        monkeypatch.setenv("AMM_PRICING_STRICT_CONVERGENCE", "off")
        assert PricingConfig.from_env().strict_convergence is False
