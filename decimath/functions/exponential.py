"""exp, log, pow and the constants pi and e.

Every function validates its argument, reduces it (decimath.engine.reduction),
evaluates a series at working precision and rounds once at the end.
Results whose exponent does not fit the decimal context (e.g. exp(10^50))
raise ``decimal.Overflow``.
"""

from __future__ import annotations

from decimal import Decimal, Inexact, localcontext

from decimath.core.digits import fractional_part, integral_part, is_integer
from decimath.core.errors import domain_error
from decimath.core.precision import PrecisionSpec
from decimath.engine.calculators import SeriesFamily
from decimath.engine.context import EngineContext, resolve
from decimath.engine.newton import sqrt_newton
from decimath.engine.reduction import atanh_argument, power_by_squaring, reduce_exp, reduce_log
from decimath.functions._validation import Number, as_decimal, check_spec

_ZERO = Decimal(0)
_ONE = Decimal(1)
_TWO = Decimal(2)
_TEN = Decimal(10)
_HALF = Decimal("0.5")

_GUARD_DIGITS = 6
_INTEGER_POWER_GUARD_DIGITS = 10


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------


def pi(spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """pi rounded to spec, from the engine's constant cache."""
    return resolve(context).constants.pi(check_spec("pi", spec))


def e(spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Euler's number rounded to spec, from the engine's constant cache."""
    return resolve(context).constants.e(check_spec("e", spec))


# ---------------------------------------------------------------------------
# exp
# ---------------------------------------------------------------------------


def exp(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """e^x rounded to spec.

    x = n + f is evaluated as exp((1 + f/n) / 256)^(256 n); the guard digits
    grow with the number of integer digits of x because raising to the
    256 n-th power multiplies the relative error by that much.
    """
    value = as_decimal("exp", x)
    spec = check_spec("exp", spec)
    engine = resolve(context)
    if value.is_zero():
        return spec.round(_ONE)

    integer_digits = max(0, value.adjusted() + 1)
    working = spec.with_guard(_GUARD_DIGITS + integer_digits + 3)
    working_context = working.context()
    reduction = reduce_exp(value, working_context)
    base = engine.calculator(SeriesFamily.EXP).calculate(reduction.argument, working)
    result = power_by_squaring(base, abs(reduction.power), working_context)
    if reduction.power < 0:
        with localcontext(working_context):
            result = _ONE / result
    return spec.round(result)


# ---------------------------------------------------------------------------
# log
# ---------------------------------------------------------------------------


def log(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Natural logarithm rounded to spec.

    x = m * 2^a * 3^b * 10^e with m close to 1, so that
    ln x = 2 atanh((m - 1)/(m + 1)) + a ln2 + b ln3 + e ln10.

    Raises
    ------
    DomainError
        x <= 0.
    """
    value = as_decimal("log", x)
    spec = check_spec("log", spec)
    if value <= 0:
        raise domain_error("log", value, f"x <= 0: x = {value}")
    engine = resolve(context)
    if value == _ONE:
        return spec.round(_ZERO)
    if value == _TEN:
        return engine.constants.log_ten(spec)

    working = spec.with_guard(_GUARD_DIGITS)
    working_context = working.context()
    reduction = reduce_log(value, working_context)
    u = atanh_argument(reduction.mantissa, working_context)
    log_mantissa = engine.calculator(SeriesFamily.ATANH).calculate(u, working)

    constants = engine.constants
    with localcontext(working_context):
        result = _TWO * log_mantissa
        if reduction.twos:
            result += reduction.twos * constants.log_two(working)
        if reduction.threes:
            result += reduction.threes * constants.log_three(working)
        if reduction.tens:
            result += reduction.tens * constants.log_ten(working)
    return spec.round(result)


def log2(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Logarithm to base 2: ln x / ln 2."""
    value = as_decimal("log2", x)
    spec = check_spec("log2", spec)
    if value <= 0:
        raise domain_error("log2", value, f"x <= 0: x = {value}")
    engine = resolve(context)
    working = spec.with_guard(_GUARD_DIGITS)
    with localcontext(working.context()):
        result = log(value, working, context=engine) / engine.constants.log_two(working)
    return spec.round(result)


def log10(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Logarithm to base 10: ln x / ln 10."""
    value = as_decimal("log10", x)
    spec = check_spec("log10", spec)
    if value <= 0:
        raise domain_error("log10", value, f"x <= 0: x = {value}")
    engine = resolve(context)
    working = spec.with_guard(_GUARD_DIGITS)
    with localcontext(working.context()):
        result = log(value, working, context=engine) / engine.constants.log_ten(working)
    return spec.round(result)


# ---------------------------------------------------------------------------
# pow
# ---------------------------------------------------------------------------


def _half_integer_power(
    base: Decimal, twice: int, spec: PrecisionSpec, engine: EngineContext,
) -> Decimal:
    """x^(n/2) for odd n as sqrt(x^|n|), inverted for n < 0.

    x^|n| is formed with twice the working digits. When that square is exact
    and the nearest spec.digits root squares back to it, the root is exact
    and is returned (or inverted) with a single rounding, so directed
    rounding rules see the exact value: pow(4, 0.5) is 2 under FLOOR.
    """
    n = abs(twice)
    working = spec.with_guard(_INTEGER_POWER_GUARD_DIGITS + len(str(n)))
    square_context = working.with_digits(2 * working.digits).context()
    square = power_by_squaring(base, n, square_context)
    root = sqrt_newton(square, working, engine.config)

    if not square_context.flags[Inexact]:
        candidate = PrecisionSpec(digits=spec.digits).round(root)
        with localcontext(square_context):
            exact = candidate * candidate == square
        if exact:
            if twice < 0:
                return spec.context().divide(_ONE, candidate)
            return spec.round(candidate)

    if twice < 0:
        with localcontext(working.context()):
            root = _ONE / root
    return spec.round(root)


def pow(  # noqa: A001
    x: Number, y: Number, spec: PrecisionSpec, *, context: EngineContext | None = None,
) -> Decimal:
    """x^y rounded to spec.

    Whole y uses exponentiation by squaring (exact for pow(2, 10)); y with
    fractional part 1/2 is sqrt(x^(2y)), exact for perfect squares; otherwise
    x^y = exp(y ln x). Non-integral y needs x > 0.

    Raises
    ------
    DomainError
        0^y for y < 0, or x < 0 with a non-integral y.
    """
    base = as_decimal("pow", x)
    exponent = as_decimal("pow", y)
    spec = check_spec("pow", spec)
    engine = resolve(context)

    if base.is_zero():
        if exponent.is_zero():
            return spec.round(_ONE)
        if exponent > 0:
            return spec.round(_ZERO)
        raise domain_error("pow(x, y)", exponent, f"x = 0 with y < 0: y = {exponent}")

    if is_integer(exponent):
        n = int(exponent)
        working = spec.with_guard(_INTEGER_POWER_GUARD_DIGITS + len(str(abs(n))))
        working_context = working.context()
        result = power_by_squaring(base, abs(n), working_context)
        if n < 0:
            with localcontext(working_context):
                result = _ONE / result
        return spec.round(result)

    if base < 0:
        raise domain_error(
            "pow(x, y)", base, f"x < 0 with non-integral y: x = {base}, y = {exponent}",
        )

    if fractional_part(exponent).copy_abs() == _HALF:
        twice = 2 * int(integral_part(exponent)) + (1 if exponent > 0 else -1)
        return _half_integer_power(base, twice, spec, engine)

    # |y ln x| decides how many digits of ln x survive in exp(y ln x).
    working = spec.with_guard(_GUARD_DIGITS)
    with localcontext(working.context()):
        product = exponent * log(base, working, context=engine)
    extra = max(0, product.adjusted() + 1)
    if extra:
        working = spec.with_guard(_GUARD_DIGITS + extra)
        with localcontext(working.context()):
            product = exponent * log(base, working, context=engine)
    return exp(product, spec, context=engine)
