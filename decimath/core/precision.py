"""Precision requests: significant-digit count plus rounding rule.

A PrecisionSpec is supplied with every call and never mutates shared state.
Arithmetic at a given precision runs inside ``localcontext(spec.context())``;
the context carries the widest exponent range the platform allows and traps
InvalidOperation/DivisionByZero/Overflow, so a silent NaN or Infinity can
never leak into a result.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from enum import Enum
from typing import final

from decimath.core.errors import InvalidPrecisionError
from decimath.core.result import Err, Ok


class RoundingRule(Enum):
    """Rounding rule applied to the final digit. Values are decimal's mode names."""

    HALF_UP = ROUND_HALF_UP
    HALF_EVEN = ROUND_HALF_EVEN
    HALF_DOWN = ROUND_HALF_DOWN
    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR
    ZERO_FIVE_UP = ROUND_05UP


@final
@dataclass(frozen=True, slots=True)
class PrecisionSpec:
    """Number of significant digits and the rounding rule for a result."""

    digits: int
    rounding: RoundingRule = RoundingRule.HALF_EVEN

    def __post_init__(self) -> None:
        if isinstance(self.digits, bool) or not isinstance(self.digits, int) or self.digits < 1:
            raise InvalidPrecisionError(
                f"PrecisionSpec requires int digits >= 1, got {self.digits!r}",
                source="decimath.core.precision.PrecisionSpec",
                digits=self.digits,
            )
        if not isinstance(self.rounding, RoundingRule):
            raise TypeError(
                f"PrecisionSpec.rounding must be RoundingRule, "
                f"got {type(self.rounding).__name__}"
            )

    @staticmethod
    def parse(
        digits: object, rounding: RoundingRule | str = RoundingRule.HALF_EVEN,
    ) -> Ok[PrecisionSpec] | Err[str]:
        """Validate raw input; accepts a RoundingRule or its member name."""
        if isinstance(digits, bool) or not isinstance(digits, int):
            return Err(f"PrecisionSpec: digits must be int, got {type(digits).__name__}")
        if digits < 1:
            return Err(f"PrecisionSpec: digits must be >= 1, got {digits}")
        if isinstance(rounding, str):
            try:
                rounding = RoundingRule[rounding.upper()]
            except KeyError:
                return Err(f"PrecisionSpec: unknown rounding rule '{rounding}'")
        return Ok(PrecisionSpec(digits=digits, rounding=rounding))

    def with_guard(self, guard: int) -> PrecisionSpec:
        """Same rounding, ``guard`` more digits (never below one digit)."""
        return PrecisionSpec(digits=max(1, self.digits + guard), rounding=self.rounding)

    def with_digits(self, digits: int) -> PrecisionSpec:
        return PrecisionSpec(digits=digits, rounding=self.rounding)

    def context(self) -> Context:
        """A fresh decimal Context for arithmetic at this precision."""
        return Context(
            prec=self.digits,
            rounding=self.rounding.value,
            Emin=MIN_EMIN,
            Emax=MAX_EMAX,
            capitals=1,
            clamp=0,
            flags=[],
            traps=[InvalidOperation, DivisionByZero, Overflow],
        )

    def round(self, value: Decimal) -> Decimal:
        """Round ``value`` to this precision and rounding rule."""
        with localcontext(self.context()):
            return +value

    @property
    def acceptable_error(self) -> Decimal:
        """10^-(digits+1): convergence threshold for series and iterations."""
        return Decimal((0, (1,), -(self.digits + 1)))


DECIMAL32 = PrecisionSpec(digits=7)
DECIMAL64 = PrecisionSpec(digits=16)
DECIMAL128 = PrecisionSpec(digits=34)
