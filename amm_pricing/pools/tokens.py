"""Token display metadata supplied by the data layer."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from amm_pricing.constants import MAX_TOKEN_DECIMALS


class StableCoinKind(str, Enum):
    """Stable coins recognized as a $1 price anchor."""

    USDC = "usdc"
    USDT = "usdt"
    DAI = "dai"
    BUSD = "busd"
    OTHER = "other"


class TokenInfo(BaseModel):
    """Decimal precision and price-anchor metadata for one token."""

    coin_type: str = Field(alias="coinType")
    symbol: str
    name: str | None = None
    # Unknown decimals are treated as 0 when normalizing volumes
    decimals: int | None = Field(default=None, ge=0, le=MAX_TOKEN_DECIMALS)
    stable_coin: StableCoinKind | None = Field(default=None, alias="stableCoin")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_stable_coin(self) -> bool:
        return self.stable_coin is not None

    @property
    def display_decimals(self) -> int:
        return self.decimals or 0

    def decimal_step(self) -> str | None:
        """Smallest representable increment as a string ("0.000001" for 6).

        Returns None when decimals are unknown.
        """
        if self.decimals is None:
            return None
        if self.decimals <= 0:
            return "1"
        return "0." + "0" * (self.decimals - 1) + "1"
