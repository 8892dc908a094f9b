"""Tests for SafeInt checked arithmetic wrapper."""

import pytest

from amm_pricing.safe_int import (
    U64_MAX,
    DivisionByZero,
    S,
    SafeInt,
    SafeIntError,
    U64Overflow,
    Underflow,
)


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        assert SafeInt(SafeInt(42)).value == 42

    def test_from_invalid_type_raises(self):
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore

    def test_bool_rejected(self):
        """Booleans are ints in Python but never token amounts."""
        with pytest.raises(TypeError):
            SafeInt(True)  # type: ignore

    def test_alias_s(self):
        assert S is SafeInt

    def test_zero_constructor(self):
        assert SafeInt.zero().value == 0


class TestSafeIntArithmetic:
    """Tests for SafeInt arithmetic operations."""

    def test_add(self):
        assert (S(10) + S(5)).value == 15
        assert (S(10) + 5).value == 15
        assert (5 + S(10)).value == 15

    def test_sub(self):
        assert (S(10) - S(3)).value == 7
        assert (S(10) - 10).value == 0

    def test_sub_underflow_raises(self):
        with pytest.raises(Underflow):
            S(3) - S(10)

    def test_mul(self):
        assert (S(6) * S(7)).value == 42
        assert (6 * S(7)).value == 42

    def test_floordiv_truncates(self):
        assert (S(10) // S(3)).value == 3

    def test_floordiv_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            S(10) // S(0)

    def test_errors_are_arithmetic_errors(self):
        assert issubclass(SafeIntError, ArithmeticError)
        assert issubclass(Underflow, SafeIntError)


class TestSafeIntComparison:
    """Tests for comparisons with SafeInt and int."""

    def test_equality(self):
        assert S(5) == S(5)
        assert S(5) == 5
        assert S(5) != 6

    def test_ordering(self):
        assert S(1) < S(2)
        assert S(2) <= 2
        assert S(3) > 2
        assert S(3) >= S(3)

    def test_bool(self):
        assert not S(0)
        assert S(1)


class TestSafeIntNamedOperations:
    """Tests for min, clamp and u64 conversion."""

    def test_min(self):
        assert S(5).min(3).value == 3
        assert S(5).min(S(9)).value == 5

    def test_clamp(self):
        assert S(15).clamp(0, 10).value == 10
        assert S(-5).clamp(0, 10).value == 0

    def test_to_u64(self):
        assert S(U64_MAX).to_u64() == U64_MAX

    def test_to_u64_overflow(self):
        with pytest.raises(U64Overflow):
            S(U64_MAX + 1).to_u64()

    def test_to_u64_negative(self):
        with pytest.raises(U64Overflow):
            S(-1).to_u64()

    def test_is_u64(self):
        assert S(0).is_u64()
        assert not S(U64_MAX + 1).is_u64()
