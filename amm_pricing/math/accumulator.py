"""Cumulative reward-per-unit accounting.

An AccumulatorRatio is a running ``sum / amount`` pair kept as two integers
(e.g. mining reward per staked LP unit). Two snapshots of the same
accumulator are compared with ``diff`` to obtain the reward accrued between
them, using only integer cross-multiplication.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AccumulatorRatio:
    """A rate accumulator stored as an exact fraction.

    The zero state (``sum == 0 and amount == 0``) is a sentinel for "never
    accrued" and behaves as the ratio 0/1 in ``diff``.

    Attributes:
        sum: Running numerator
        amount: Running denominator (never negative)
    """

    sum: int
    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"Accumulator amount cannot be negative: {self.amount}")
        if self.amount == 0 and self.sum != 0:
            raise ValueError(f"Accumulator with sum {self.sum} has zero amount")

    def is_zero_state(self) -> bool:
        """True if this is the never-accrued sentinel."""
        return self.sum == 0 and self.amount == 0

    @classmethod
    def zero(cls) -> AccumulatorRatio:
        return cls(0, 0)

    def _as_fraction(self) -> tuple[int, int]:
        if self.is_zero_state():
            return 0, 1
        return self.sum, self.amount

    @staticmethod
    def diff(a: AccumulatorRatio, b: AccumulatorRatio, multiplier: int) -> int:
        """Compute ``(a.sum/a.amount - b.sum/b.amount) * multiplier``.

        The subtraction is carried out on cross-multiplied numerators and
        divided once at the end, so no fractional part is lost before the
        multiplier is applied. A negative difference clamps to zero.

        Args:
            a: Current accumulator snapshot
            b: Earlier (baseline) snapshot
            multiplier: Units the rate applies to (e.g. a position balance)

        Returns:
            Accrued amount, floored, never negative
        """
        s1, a1 = a._as_fraction()
        s2, a2 = b._as_fraction()

        n1 = s1 * a2
        n2 = s2 * a1
        if n1 < n2:
            return 0
        return (n1 - n2) * multiplier // (a1 * a2)
