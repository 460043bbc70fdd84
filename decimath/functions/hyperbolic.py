"""Hyperbolic functions and their inverses."""

from __future__ import annotations

from decimal import Decimal, localcontext

from decimath.core.errors import domain_error
from decimath.core.precision import PrecisionSpec
from decimath.engine.calculators import SeriesFamily
from decimath.engine.context import EngineContext, resolve
from decimath.functions._validation import Number, as_decimal, check_spec
from decimath.functions.exponential import exp, log
from decimath.functions.roots import sqrt

_ZERO = Decimal(0)
_ONE = Decimal(1)
_TWO = Decimal(2)
_HALF = Decimal("0.5")

_GUARD_DIGITS = 6

# Below this |x| sinh and cosh use their series, above it exp.
_SERIES_BOUND = Decimal(2)


def _sinh(x: Decimal, working: PrecisionSpec, engine: EngineContext) -> Decimal:
    if x.copy_abs() < _SERIES_BOUND:
        return engine.calculator(SeriesFamily.SINH).calculate(x, working)
    with localcontext(working.context()):
        e_x = exp(x, working, context=engine)
        e_minus_x = exp(x.copy_negate(), working, context=engine)
        return (e_x - e_minus_x) / _TWO


def _cosh(x: Decimal, working: PrecisionSpec, engine: EngineContext) -> Decimal:
    if x.copy_abs() < _SERIES_BOUND:
        return engine.calculator(SeriesFamily.COSH).calculate(x, working)
    with localcontext(working.context()):
        e_x = exp(x, working, context=engine)
        e_minus_x = exp(x.copy_negate(), working, context=engine)
        return (e_x + e_minus_x) / _TWO


def _atanh(x: Decimal, working: PrecisionSpec, engine: EngineContext) -> Decimal:
    """atanh for |x| < 1: series up to 1/2, 1/2 ln((1 + x)/(1 - x)) beyond."""
    if x.copy_abs() <= _HALF:
        return engine.calculator(SeriesFamily.ATANH).calculate(x, working)
    with localcontext(working.context()):
        return _HALF * log((_ONE + x) / (_ONE - x), working, context=engine)


def sinh(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Hyperbolic sine."""
    value = as_decimal("sinh", x)
    spec = check_spec("sinh", spec)
    return spec.round(_sinh(value, spec.with_guard(_GUARD_DIGITS), resolve(context)))


def cosh(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Hyperbolic cosine."""
    value = as_decimal("cosh", x)
    spec = check_spec("cosh", spec)
    return spec.round(_cosh(value, spec.with_guard(_GUARD_DIGITS), resolve(context)))


def tanh(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """sinh(x) / cosh(x)."""
    value = as_decimal("tanh", x)
    spec = check_spec("tanh", spec)
    engine = resolve(context)
    working = spec.with_guard(_GUARD_DIGITS)
    numerator = _sinh(value, working, engine)
    denominator = _cosh(value, working, engine)
    with localcontext(working.context()):
        result = numerator / denominator
    return spec.round(result)


def coth(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """cosh(x) / sinh(x); x == 0 is a DomainError."""
    value = as_decimal("coth", x)
    spec = check_spec("coth", spec)
    if value.is_zero():
        raise domain_error("coth", value, "x = 0")
    engine = resolve(context)
    working = spec.with_guard(_GUARD_DIGITS)
    numerator = _cosh(value, working, engine)
    denominator = _sinh(value, working, engine)
    with localcontext(working.context()):
        result = numerator / denominator
    return spec.round(result)


def asinh(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Inverse hyperbolic sine: ln(x + sqrt(x^2 + 1)), odd in x."""
    value = as_decimal("asinh", x)
    spec = check_spec("asinh", spec)
    if value.is_zero():
        return spec.round(_ZERO)
    engine = resolve(context)
    working = spec.with_guard(_GUARD_DIGITS)
    magnitude = value.copy_abs()
    with localcontext(working.context()):
        root = sqrt(magnitude * magnitude + _ONE, working, context=engine)
        if magnitude < _HALF:
            # asinh(x) = atanh(x / sqrt(1 + x^2)), argument below 1/2
            result = _atanh(magnitude / root, working, engine)
        else:
            result = log(magnitude + root, working, context=engine)
    return spec.round(result if value > 0 else result.copy_negate())


def acosh(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Inverse hyperbolic cosine: ln(x + sqrt(x^2 - 1)).

    Raises
    ------
    DomainError
        x < 1.
    """
    value = as_decimal("acosh", x)
    spec = check_spec("acosh", spec)
    if value < _ONE:
        raise domain_error("acosh", value, f"x < 1: x = {value}")
    if value == _ONE:
        return spec.round(_ZERO)
    engine = resolve(context)
    # acosh(1 + d) ~ sqrt(2 d): half the leading zeros of d are lost in the log.
    with localcontext(spec.with_guard(_GUARD_DIGITS).context()):
        leading_zeros = max(0, -(value - _ONE).adjusted())
    working = spec.with_guard(_GUARD_DIGITS + leading_zeros // 2 + 1)
    with localcontext(working.context()):
        root = sqrt((value - _ONE) * (value + _ONE), working, context=engine)
        result = log(value + root, working, context=engine)
    return spec.round(result)


def atanh(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Inverse hyperbolic tangent.

    Raises
    ------
    DomainError
        |x| >= 1.
    """
    value = as_decimal("atanh", x)
    spec = check_spec("atanh", spec)
    if value.copy_abs() >= _ONE:
        raise domain_error("atanh", value, f"|x| >= 1: x = {value}")
    return spec.round(_atanh(value, spec.with_guard(_GUARD_DIGITS), resolve(context)))


def acoth(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Inverse hyperbolic cotangent: atanh(1/x), or 1/2 ln((x + 1)/(x - 1)) below |x| = 2.

    Raises
    ------
    DomainError
        |x| <= 1.
    """
    value = as_decimal("acoth", x)
    spec = check_spec("acoth", spec)
    if value.copy_abs() <= _ONE:
        raise domain_error("acoth", value, f"|x| <= 1: x = {value}")
    engine = resolve(context)
    working = spec.with_guard(_GUARD_DIGITS)
    with localcontext(working.context()):
        if value.copy_abs() < _TWO:
            # 1 - 1/x cancels near |x| = 1; x - 1 does not.
            result = _HALF * log((value + _ONE) / (value - _ONE), working, context=engine)
        else:
            result = _atanh(_ONE / value, working, engine)
    return spec.round(result)
