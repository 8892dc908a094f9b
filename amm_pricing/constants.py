"""Protocol constants for the AMM pricing core.

Centralizes the fixed-point scales and numeric bounds shared by the
settlement contract and every client-side preview.
"""

# Fee rates are stored on-chain in basis points (1 bps = 1/10000)
BPS_SCALING = 10_000

# Largest amount the settlement contract accepts (Move u64)
U64_MAX = 2**64 - 1

# Slippage tolerance is applied as a 9-decimal fixed-point multiplier
SLIPPAGE_SCALE = 10**9

# Newton-Raphson iteration budget for the stable-swap solvers
STABLE_MAX_ITERATIONS = 256

# Fractional digits used when deriving a vesting ratio from epochs
VESTING_RATIO_SCALE = 9

# Largest decimals value a token can declare
MAX_TOKEN_DECIMALS = 77
