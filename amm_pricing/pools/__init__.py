"""Pool snapshot package.

Provides the immutable PoolSnapshot and its curve variants, plus token
metadata used for display-level valuation.
"""

from .tokens import StableCoinKind, TokenInfo
from .types import (
    BoostMultiplier,
    ConstantProductCurve,
    Curve,
    FeeDirection,
    FeeSchedule,
    MiningState,
    PoolSnapshot,
    StableCurve,
    TokenHolderReward,
    TokenHolderRewardType,
    TradeVolume,
)

__all__ = [
    "PoolSnapshot",
    "Curve",
    "ConstantProductCurve",
    "StableCurve",
    "FeeDirection",
    "FeeSchedule",
    "TradeVolume",
    "MiningState",
    "BoostMultiplier",
    "TokenHolderReward",
    "TokenHolderRewardType",
    "TokenInfo",
    "StableCoinKind",
]
