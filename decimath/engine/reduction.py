"""Argument range reduction.

The series in decimath.engine.calculators converge quickly only for small
arguments. Each helper here maps an arbitrary argument into that range and
reports the correction the caller must apply afterwards:

    log   x = m * 2^a * 3^b * 10^e     ln x = ln m + a ln2 + b ln3 + e ln10
    exp   x = n + f                     e^x = exp((1 + f/n) / 256)^(256 n)
    sin   x = r (mod 2 pi), |r| <= pi/2 after the supplement identity

The reductions are exact or performed at the caller's working context; no
constant is computed here (pi and the logarithms come from the constant
cache, passed in by the caller).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal, localcontext
from typing import final

from decimath.core.digits import exponent, fractional_part, integral_part, shift

_ONE = Decimal(1)
_TWO = Decimal(2)

# Halving the exp argument eight times before the series: x / 256.
EXP_SCALE = 256

# Above this |x| asin switches to pi/2 - asin(sqrt(1 - x^2)).
ASIN_COMPLEMENT_THRESHOLD = Decimal("0.707107")

# Strictly below pi/2: smaller |x| need no angle reduction at all.
_HALF_PI_LOWER_BOUND = Decimal("1.5707963")

# (upper bound, factors of two, factors of three) for log arguments in
# [0.1, 10); dividing by 2^a 3^b brings each band into about [0.7, 1.4].
_LOG_BANDS: tuple[tuple[Decimal, int, int], ...] = (
    (Decimal("0.115"), 0, -2),   # (0.1 - 0.11111 - 0.115) -> (0.9 - 1.0 - 1.035)
    (Decimal("0.14"), -3, 0),    # (0.115 - 0.125 - 0.14) -> (0.92 - 1.0 - 1.12)
    (Decimal("0.2"), -1, -1),    # (0.14 - 0.16667 - 0.2) -> (0.84 - 1.0 - 1.2)
    (Decimal("0.3"), -2, 0),     # (0.2 - 0.25 - 0.3) -> (0.8 - 1.0 - 1.2)
    (Decimal("0.42"), 0, -1),    # (0.3 - 0.33333 - 0.42) -> (0.9 - 1.0 - 1.26)
    (Decimal("0.7"), -1, 0),     # (0.42 - 0.5 - 0.7) -> (0.84 - 1.0 - 1.4)
    (Decimal("1.4"), 0, 0),      # (0.7 - 1.0 - 1.4)
    (Decimal("2.5"), 1, 0),      # (1.4 - 2.0 - 2.5) -> (0.7 - 1.0 - 1.25)
    (Decimal("3.5"), 0, 1),      # (2.5 - 3.0 - 3.5) -> (0.83 - 1.0 - 1.17)
    (Decimal("5.0"), 2, 0),      # (3.5 - 4.0 - 5.0) -> (0.875 - 1.0 - 1.25)
    (Decimal("7.0"), 1, 1),      # (5.0 - 6.0 - 7.0) -> (0.83 - 1.0 - 1.17)
    (Decimal("8.5"), 3, 0),      # (7.0 - 8.0 - 8.5) -> (0.875 - 1.0 - 1.0625)
    (Decimal("10"), 0, 2),       # (8.5 - 9.0 - 10.0) -> (0.94 - 1.0 - 1.11)
)


# ---------------------------------------------------------------------------
# Integer powers
# ---------------------------------------------------------------------------


def power_by_squaring(x: Decimal, n: int, context: Context) -> Decimal:
    """x^n for n >= 0 by repeated squaring, every product rounded to context."""
    if n < 0:
        raise ValueError(f"power_by_squaring requires n >= 0, got {n}")
    result = _ONE
    base = x
    while n > 0:
        if n & 1:
            result = context.multiply(result, base)
        n >>= 1
        if n > 0:
            base = context.multiply(base, base)
    return context.plus(result)


# ---------------------------------------------------------------------------
# log
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class LogReduction:
    """x = mantissa * 2^twos * 3^threes * 10^tens, mantissa in about [0.7, 1.4]."""

    mantissa: Decimal
    twos: int
    threes: int
    tens: int

    @property
    def is_identity(self) -> bool:
        return self.twos == 0 and self.threes == 0 and self.tens == 0


def reduce_log(x: Decimal, context: Context) -> LogReduction:
    """Decompose x > 0; the mantissa is rounded to context."""
    tens = 0
    value = x
    if value < Decimal("0.1") or value >= Decimal("10"):
        tens = exponent(value)
        value = shift(value, -tens)

    twos = threes = 0
    for upper, band_twos, band_threes in _LOG_BANDS:
        if value < upper:
            twos, threes = band_twos, band_threes
            break

    multiplier = 2 ** max(0, -twos) * 3 ** max(0, -threes)
    divisor = 2 ** max(0, twos) * 3 ** max(0, threes)
    if multiplier != 1 or divisor != 1:
        with localcontext(context):
            value = value * multiplier / divisor
    return LogReduction(mantissa=value, twos=twos, threes=threes, tens=tens)


def atanh_argument(mantissa: Decimal, context: Context) -> Decimal:
    """u = (m - 1) / (m + 1), so that ln m = 2 atanh(u)."""
    with localcontext(context):
        return (mantissa - _ONE) / (mantissa + _ONE)


# ---------------------------------------------------------------------------
# exp
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class ExpReduction:
    """e^x = exp(argument)^power with |argument| < 2/256."""

    argument: Decimal
    power: int


def reduce_exp(x: Decimal, context: Context) -> ExpReduction:
    """Split x into integral n and fractional f, then scale down by 256."""
    n = int(integral_part(x))
    with localcontext(context):
        if n == 0:
            return ExpReduction(argument=x / EXP_SCALE, power=EXP_SCALE)
        z = _ONE + fractional_part(x) / n
        return ExpReduction(argument=z / EXP_SCALE, power=EXP_SCALE * n)


# ---------------------------------------------------------------------------
# sin / cos
# ---------------------------------------------------------------------------


def needs_angle_reduction(x: Decimal) -> bool:
    return x.copy_abs() > _HALF_PI_LOWER_BOUND


def angle_guard_digits(x: Decimal) -> int:
    """Extra digits of pi needed to reduce x: one per integer digit of x."""
    return max(0, x.adjusted() + 1)


def _reduce_to_pi(x: Decimal, pi: Decimal, context: Context) -> Decimal:
    """IEEE remainder of x by 2 pi: a value in [-pi, pi]."""
    with localcontext(context):
        return x.remainder_near(_TWO * pi)


def reduce_sin(x: Decimal, pi: Decimal, context: Context) -> Decimal:
    """sin x = sin r with |r| <= pi/2, using sin(pi - r) = sin r."""
    r = _reduce_to_pi(x, pi, context)
    with localcontext(context):
        half_pi = pi / _TWO
        if r > half_pi:
            r = pi - r
        elif r < -half_pi:
            r = -pi - r
    return r

