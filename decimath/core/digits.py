"""Exact digit-level helpers for Decimal values.

None of these round: they rebuild the Decimal from its (sign, digits,
exponent) tuple instead of going through a context, so results are exact
whatever the ambient precision.

Functions
---------
exponent            : Decimal -> int      (power of ten of the leading digit)
mantissa            : Decimal -> Decimal  (value scaled into [1, 10))
shift               : Decimal x int -> Decimal  (exact multiply by 10^places)
integral_part       : Decimal -> Decimal  (truncated toward zero)
fractional_part     : Decimal -> Decimal
is_integer          : Decimal -> bool
significant_digits  : Decimal -> int
round_with_trailing_zeroes : Decimal x PrecisionSpec -> Decimal
"""

from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, localcontext

from decimath.core.precision import PrecisionSpec


def exponent(value: Decimal) -> int:
    """Exponent of the most significant digit: 123.4 -> 2, 0.0012 -> -3."""
    return value.adjusted()


def shift(value: Decimal, places: int) -> Decimal:
    """value * 10^places, exact."""
    sign, digits, exp = value.as_tuple()
    if not isinstance(exp, int):
        raise TypeError(f"shift requires a finite Decimal, got {value}")
    return Decimal((sign, digits, exp + places))


def mantissa(value: Decimal) -> Decimal:
    """value / 10^exponent(value): 123.4 -> 1.234."""
    e = exponent(value)
    if e == 0:
        return value
    return shift(value, -e)


def integral_part(value: Decimal) -> Decimal:
    """Integer part, truncated toward zero: -3.7 -> -3."""
    return value.to_integral_value(rounding=ROUND_DOWN)


def fractional_part(value: Decimal) -> Decimal:
    """value - integral_part(value): -3.7 -> -0.7."""
    with localcontext() as ctx:
        ctx.prec = len(value.as_tuple().digits) + 1
        return value - integral_part(value)


def is_integer(value: Decimal) -> bool:
    return value.is_finite() and value == value.to_integral_value()


def significant_digits(value: Decimal) -> int:
    """Digits without trailing fractional zeros; integer zeros count.

    1.2300 -> 3, 0.0012 -> 2, 1200 -> 4.
    """
    _, digits, exp = value.as_tuple()
    if not isinstance(exp, int):
        raise TypeError(f"significant_digits requires a finite Decimal, got {value}")
    stripped = list(digits)
    while len(stripped) > 1 and stripped[-1] == 0 and exp < 0:
        stripped.pop()
        exp += 1
    if exp <= 0:
        return len(stripped)
    return len(stripped) + exp


def round_with_trailing_zeroes(value: Decimal, spec: PrecisionSpec) -> Decimal:
    """Round to spec and pad with zeros so exactly spec.digits digits show.

    With 5 digits: 1.23 -> 1.2300, 0.00123 -> 0.0012300, 0 -> 0.0000.
    """
    rounded = spec.round(value)
    leading = 0 if rounded.is_zero() else rounded.adjusted()
    quantum = Decimal((0, (1,), leading - spec.digits + 1))
    with localcontext(spec.context()):
        return rounded.quantize(quantum)
