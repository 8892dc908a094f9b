"""Tests for TokenInfo metadata."""

import pytest
from pydantic import ValidationError

from amm_pricing.pools.tokens import StableCoinKind, TokenInfo
from tests.helpers import USDC


class TestTokenInfoParsing:
    """Tests for pydantic validation of token metadata."""

    def test_from_camel_case(self):
        info = TokenInfo.model_validate(
            {"coinType": USDC, "symbol": "USDC", "decimals": 6, "stableCoin": "usdc"}
        )
        assert info.coin_type == USDC
        assert info.stable_coin == StableCoinKind.USDC
        assert info.is_stable_coin

    def test_from_field_names(self):
        info = TokenInfo(coin_type=USDC, symbol="USDC", decimals=6)
        assert not info.is_stable_coin

    def test_decimals_bounds(self):
        with pytest.raises(ValidationError):
            TokenInfo(coin_type=USDC, symbol="X", decimals=78)
        with pytest.raises(ValidationError):
            TokenInfo(coin_type=USDC, symbol="X", decimals=-1)

    def test_unknown_stable_kind_rejected(self):
        with pytest.raises(ValidationError):
            TokenInfo.model_validate({"coinType": USDC, "symbol": "X", "stableCoin": "euro"})

    def test_frozen(self):
        info = TokenInfo(coin_type=USDC, symbol="USDC", decimals=6)
        with pytest.raises(ValidationError):
            info.decimals = 9  # type: ignore[misc]


class TestDecimals:
    """Tests for decimal helpers."""

    def test_display_decimals_unknown_is_zero(self):
        assert TokenInfo(coin_type=USDC, symbol="X").display_decimals == 0

    def test_decimal_step(self):
        assert TokenInfo(coin_type=USDC, symbol="X", decimals=6).decimal_step() == "0.000001"
        assert TokenInfo(coin_type=USDC, symbol="X", decimals=1).decimal_step() == "0.1"

    def test_decimal_step_zero(self):
        assert TokenInfo(coin_type=USDC, symbol="X", decimals=0).decimal_step() == "1"

    def test_decimal_step_unknown(self):
        assert TokenInfo(coin_type=USDC, symbol="X").decimal_step() is None
