"""Circular functions and their inverses.

sin reduces x modulo 2 pi and folds into [-pi/2, pi/2]; cos is evaluated
as sin(x + pi/2) once |x| leaves the band where its own series is accurate.
When the reduced argument comes out much smaller than x (x close to a
multiple of pi), pi is fetched again with as many extra digits as the
cancellation lost, so small results keep their relative precision.
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from decimath.core.errors import domain_error
from decimath.core.precision import PrecisionSpec
from decimath.engine.calculators import SeriesFamily
from decimath.engine.context import EngineContext, resolve
from decimath.engine.reduction import (
    ASIN_COMPLEMENT_THRESHOLD,
    angle_guard_digits,
    needs_angle_reduction,
    reduce_sin,
)
from decimath.functions._validation import Number, as_decimal, check_spec
from decimath.functions.roots import sqrt

_ZERO = Decimal(0)
_ONE = Decimal(1)
_TWO = Decimal(2)

_GUARD_DIGITS = 6

# Below pi/4: cos series used directly.
_COS_SERIES_BOUND = Decimal("0.785")


# ---------------------------------------------------------------------------
# Internals at working precision
# ---------------------------------------------------------------------------


def _sin(x: Decimal, working: PrecisionSpec, engine: EngineContext, *, quarter: bool) -> Decimal:
    """sin(x), or sin(x + pi/2) = cos(x) when ``quarter``."""
    if not quarter and not needs_angle_reduction(x):
        return engine.calculator(SeriesFamily.SIN).calculate(x, working)

    guard = angle_guard_digits(x) + 1
    lost = 0
    while True:
        pi_spec = working.with_guard(guard + lost)
        pi_value = engine.constants.pi(pi_spec)
        pi_context = pi_spec.context()
        shifted = pi_context.add(x, pi_context.divide(pi_value, _TWO)) if quarter else x
        argument = reduce_sin(shifted, pi_value, pi_context)
        # A zero remainder only means pi was too short to tell x from a multiple.
        measured = lost + pi_spec.digits if argument.is_zero() else -argument.adjusted()
        if measured <= lost:
            break
        lost = measured
    return engine.calculator(SeriesFamily.SIN).calculate(argument, working)


def _cos(x: Decimal, working: PrecisionSpec, engine: EngineContext) -> Decimal:
    if x.copy_abs() < _COS_SERIES_BOUND:
        return engine.calculator(SeriesFamily.COS).calculate(x, working)
    return _sin(x, working, engine, quarter=True)


def _asin(x: Decimal, working: PrecisionSpec, engine: EngineContext) -> Decimal:
    """asin for |x| <= 1."""
    if x < 0:
        return _asin(x.copy_negate(), working, engine).copy_negate()
    if x == _ONE:
        with localcontext(working.context()):
            return engine.constants.pi(working) / _TWO
    if x >= ASIN_COMPLEMENT_THRESHOLD:
        # asin(x) = pi/2 - asin(sqrt(1 - x^2)); (1 - x)(1 + x) avoids cancelling.
        with localcontext(working.context()):
            complement = sqrt((_ONE - x) * (_ONE + x), working, context=engine)
            return engine.constants.pi(working) / _TWO - _asin_series(complement, working, engine)
    return _asin_series(x, working, engine)


def _asin_series(x: Decimal, working: PrecisionSpec, engine: EngineContext) -> Decimal:
    return engine.calculator(SeriesFamily.ASIN).calculate(x, working)


def _acos(x: Decimal, working: PrecisionSpec, engine: EngineContext) -> Decimal:
    """acos for |x| <= 1, without cancelling near x = 1."""
    with localcontext(working.context()):
        pi_value = engine.constants.pi(working)
        if x.copy_abs() < ASIN_COMPLEMENT_THRESHOLD:
            return pi_value / _TWO - _asin(x, working, engine)
        complement = _asin_series(
            sqrt((_ONE - x) * (_ONE + x), working, context=engine), working, engine,
        )
        return complement if x > 0 else pi_value - complement


def _atan(x: Decimal, working: PrecisionSpec, engine: EngineContext) -> Decimal:
    if x.is_zero():
        return _ZERO
    with localcontext(working.context()):
        if x.copy_abs() > _ONE:
            # atan(x) = +-pi/2 - atan(1/x)
            half_pi = engine.constants.pi(working) / _TWO
            inner = _atan(_ONE / x, working, engine)
            return (half_pi if x > 0 else -half_pi) - inner
        argument = x / sqrt(_ONE + x * x, working, context=engine)
    return _asin(argument, working, engine)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def sin(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Sine of x (radians) rounded to spec."""
    value = as_decimal("sin", x)
    spec = check_spec("sin", spec)
    return spec.round(_sin(value, spec.with_guard(_GUARD_DIGITS), resolve(context), quarter=False))


def cos(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Cosine of x (radians) rounded to spec."""
    value = as_decimal("cos", x)
    spec = check_spec("cos", spec)
    return spec.round(_cos(value, spec.with_guard(_GUARD_DIGITS), resolve(context)))


def tan(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """sin(x) / cos(x)."""
    value = as_decimal("tan", x)
    spec = check_spec("tan", spec)
    if value.is_zero():
        return spec.round(_ZERO)
    engine = resolve(context)
    working = spec.with_guard(_GUARD_DIGITS)
    numerator = _sin(value, working, engine, quarter=False)
    denominator = _cos(value, working, engine)
    with localcontext(working.context()):
        result = numerator / denominator
    return spec.round(result)


def cot(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """cos(x) / sin(x).

    Raises
    ------
    DomainError
        x == 0.
    """
    value = as_decimal("cot", x)
    spec = check_spec("cot", spec)
    if value.is_zero():
        raise domain_error("cot", value, "x = 0")
    engine = resolve(context)
    working = spec.with_guard(_GUARD_DIGITS)
    numerator = _cos(value, working, engine)
    denominator = _sin(value, working, engine, quarter=False)
    with localcontext(working.context()):
        result = numerator / denominator
    return spec.round(result)


def asin(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Arc sine, result in [-pi/2, pi/2].

    Raises
    ------
    DomainError
        |x| > 1.
    """
    value = as_decimal("asin", x)
    spec = check_spec("asin", spec)
    if value.copy_abs() > _ONE:
        raise domain_error("asin", value, f"|x| > 1: x = {value}")
    return spec.round(_asin(value, spec.with_guard(_GUARD_DIGITS), resolve(context)))


def acos(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Arc cosine, result in [0, pi].

    Raises
    ------
    DomainError
        |x| > 1.
    """
    value = as_decimal("acos", x)
    spec = check_spec("acos", spec)
    if value.copy_abs() > _ONE:
        raise domain_error("acos", value, f"|x| > 1: x = {value}")
    if value == _ONE:
        return spec.round(_ZERO)
    return spec.round(_acos(value, spec.with_guard(_GUARD_DIGITS), resolve(context)))


def atan(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Arc tangent, result in (-pi/2, pi/2)."""
    value = as_decimal("atan", x)
    spec = check_spec("atan", spec)
    return spec.round(_atan(value, spec.with_guard(_GUARD_DIGITS), resolve(context)))


def atan2(
    y: Number, x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None,
) -> Decimal:
    """Angle of the point (x, y), result in (-pi, pi].

    Raises
    ------
    DomainError
        x == 0 and y == 0.
    """
    ordinate = as_decimal("atan2", y)
    abscissa = as_decimal("atan2", x)
    spec = check_spec("atan2", spec)
    engine = resolve(context)
    working = spec.with_guard(_GUARD_DIGITS)

    if abscissa > 0:
        with localcontext(working.context()):
            ratio = ordinate / abscissa
        return spec.round(_atan(ratio, working, engine))

    pi_value = engine.constants.pi(working)
    if abscissa < 0:
        if ordinate.is_zero():
            return spec.round(pi_value)
        with localcontext(working.context()):
            angle = _atan(ordinate / abscissa, working, engine)
            result = angle + pi_value if ordinate > 0 else angle - pi_value
        return spec.round(result)

    if ordinate.is_zero():
        raise domain_error("atan2(y, x)", abscissa, "x = 0 and y = 0")
    with localcontext(working.context()):
        result = pi_value / _TWO if ordinate > 0 else -pi_value / _TWO
    return spec.round(result)


def acot(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Arc cotangent, result in (0, pi)."""
    value = as_decimal("acot", x)
    spec = check_spec("acot", spec)
    engine = resolve(context)
    working = spec.with_guard(_GUARD_DIGITS)
    with localcontext(working.context()):
        if value > 0:
            result = _atan(_ONE / value, working, engine)
        else:
            result = engine.constants.pi(working) / _TWO - _atan(value, working, engine)
    return spec.round(result)
