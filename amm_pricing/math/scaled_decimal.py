"""Exact decimal values backed by an integer and a decimal scale.

A ScaledDecimal ``(value, scale)`` denotes ``value / 10**scale``. It is used
for user-entered amounts and ratios that must never pass through a binary
float before reaching integer math. Parsing is strict and canonical:
``"1.50"`` becomes ``(15, 1)`` and ``"1.000"`` becomes ``(1, 0)``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from amm_pricing.errors import InvalidDecimalError, ScaleAlignmentError

__all__ = [
    "ScaledDecimal",
    "format_numeric",
]

_DECIMAL_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?")


def format_numeric(s: str, width: int | None = None) -> str:
    """Canonicalize a numeric string.

    Strips leading zeros, strips trailing fractional zeros, restores a single
    ``0`` before a bare decimal point and drops a dangling ``.``.

    Args:
        s: Digits with an optional decimal point
        width: If given, truncate the result to this many characters

    Returns:
        Canonical representation ("007.50" -> "7.5", ".5" -> "0.5", "" -> "0")
    """
    s = s.lstrip("0")
    if "." in s:
        s = s.rstrip("0")
    if s.startswith("."):
        s = "0" + s
    if s == "":
        s = "0"
    if width is not None and len(s) > width:
        s = s[:width]
    if s.endswith("."):
        s = s[:-1]
    return s


@dataclass(frozen=True)
class ScaledDecimal:
    """Immutable fixed-point decimal.

    Attributes:
        value: Unscaled integer magnitude
        scale: Number of fractional digits (clamped to >= 0)
    """

    value: int
    scale: int

    def __post_init__(self) -> None:
        if self.scale < 0:
            object.__setattr__(self, "scale", 0)

    # --- Construction ---

    @classmethod
    def parse(cls, s: str) -> ScaledDecimal | None:
        """Parse a decimal string, returning None when it is invalid.

        Accepts ``digits`` or ``digits.digits*``. A leading ``00`` is rejected
        ("00.5"), a single leading zero is allowed ("0.5", "07.1").
        Anything that is not a str of exactly that shape yields None.
        """
        if not isinstance(s, str) or _DECIMAL_PATTERN.fullmatch(s) is None:
            return None
        if len(s) >= 2 and s[0] == "0" and s[1] == "0":
            return None

        canonical = format_numeric(s)
        point = canonical.find(".")
        scale = len(canonical) - 1 - point if point >= 0 else 0

        try:
            value = int(canonical.replace(".", ""))
        except ValueError:
            # Exceeds the interpreter's integer string conversion limit
            return None
        return cls(value, scale)

    @classmethod
    def from_str(cls, s: str) -> ScaledDecimal:
        """Parse a decimal string.

        Raises:
            InvalidDecimalError: If the string is not a valid decimal
        """
        parsed = cls.parse(s)
        if parsed is None:
            raise InvalidDecimalError(f"Invalid decimal string: {s!r}")
        return parsed

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int, scale: int) -> ScaledDecimal:
        """Floor of ``numerator / denominator`` at ``scale`` fractional digits.

        Raises:
            ZeroDivisionError: If denominator is zero
        """
        scale = max(scale, 0)
        return cls((numerator * 10**scale) // denominator, scale)

    @classmethod
    def zero(cls) -> ScaledDecimal:
        return cls(0, 0)

    @classmethod
    def one(cls) -> ScaledDecimal:
        return cls(1, 0)

    # --- Formatting ---

    def to_string(self, pad_to_scale: bool = False) -> str:
        """Render as a decimal string.

        Args:
            pad_to_scale: Pad trailing zeros so the fraction has exactly
                ``scale`` digits ("1.5" at scale 3 -> "1.500")
        """
        if self.value < 0:
            return "-" + ScaledDecimal(-self.value, self.scale).to_string(pad_to_scale)

        if self.scale <= 0:
            return format_numeric(str(self.value))

        digits = "0" * self.scale + str(self.value)
        rendered = format_numeric(digits[: -self.scale] + "." + digits[-self.scale :])

        if pad_to_scale:
            if "." not in rendered:
                rendered += "."
            current = len(rendered) - 1 - rendered.index(".")
            rendered += "0" * max(self.scale - current, 0)

        return rendered

    def __str__(self) -> str:
        return self.to_string()

    def to_float(self) -> float:
        """Approximate float value for display. Never feed back into amounts."""
        return self.value / 10**self.scale

    # --- Alignment ---

    def can_align_to(self, target: ScaledDecimal | int) -> bool:
        """True if this value can be expressed at ``target`` scale losslessly."""
        return self.scale <= _target_scale(target)

    def align_to(self, target: ScaledDecimal | int) -> ScaledDecimal:
        """Rescale to ``target`` scale (only upward).

        Raises:
            ScaleAlignmentError: If target scale is lower than the current one
        """
        target_scale = _target_scale(target)
        if not self.can_align_to(target_scale):
            raise ScaleAlignmentError(
                f"Cannot align scale {self.scale} down to {target_scale}"
            )
        return ScaledDecimal(self.value * 10 ** (target_scale - self.scale), target_scale)

    # --- Arithmetic ---

    def mul_int(self, amount: int) -> int:
        """``amount * self`` floored to an integer."""
        return amount * self.value // 10**self.scale

    def is_unit_interval(self) -> bool:
        """True if 0 <= self <= 1."""
        return 0 <= self.value <= 10**self.scale


def _target_scale(target: ScaledDecimal | int) -> int:
    if isinstance(target, ScaledDecimal):
        return target.scale
    return target
