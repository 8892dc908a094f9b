"""Curve math and fee stages."""

from amm_pricing.amm.constant_product import get_amount_out, proportional_amount
from amm_pricing.amm.fees import (
    FeeCut,
    ProtocolFeeCut,
    apply_bps_fee,
    apply_protocol_fees,
    bps_fee,
)
from amm_pricing.amm.stable_math import (
    compute_d,
    compute_d_decimal,
    compute_y,
    compute_y_decimal,
    compute_y_scaled,
    price_rational,
)

__all__ = [
    # Constant product
    "get_amount_out",
    "proportional_amount",
    # Stable swap
    "compute_d",
    "compute_y",
    "compute_y_scaled",
    "compute_d_decimal",
    "compute_y_decimal",
    "price_rational",
    # Fees
    "bps_fee",
    "apply_bps_fee",
    "apply_protocol_fees",
    "FeeCut",
    "ProtocolFeeCut",
]
