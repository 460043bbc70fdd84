"""sqrt, root and reciprocal."""

from __future__ import annotations

from decimal import Decimal, localcontext

from decimath.core.digits import is_integer
from decimath.core.errors import DivisionByZeroError, domain_error
from decimath.core.precision import PrecisionSpec
from decimath.engine.context import EngineContext, resolve
from decimath.engine.newton import root_newton, sqrt_newton
from decimath.functions._validation import Number, as_decimal, check_spec
from decimath.functions.exponential import exp, log, pow

_ZERO = Decimal(0)
_ONE = Decimal(1)

_GUARD_DIGITS = 6


def sqrt(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Square root by Newton iteration with doubling precision.

    Raises
    ------
    DomainError
        x < 0.
    """
    value = as_decimal("sqrt", x)
    spec = check_spec("sqrt", spec)
    if value < 0:
        raise domain_error("sqrt", value, f"x < 0: x = {value}")
    if value.is_zero():
        return spec.round(_ZERO)
    return sqrt_newton(value, spec, resolve(context).config)


def root(
    x: Number, n: Number, spec: PrecisionSpec, *, context: EngineContext | None = None,
) -> Decimal:
    """n-th root of x.

    Whole n >= 2 iterates Newton from an exp(ln(x)/n) seed; any other
    positive n is x^(1/n). Negative x is accepted for odd whole n only.

    Raises
    ------
    DomainError
        n <= 0, or x < 0 with n not an odd integer.
    """
    value = as_decimal("root", x)
    index = as_decimal("root", n)
    spec = check_spec("root", spec)
    if index <= 0:
        raise domain_error("root(x, n)", index, f"n <= 0: n = {index}")
    engine = resolve(context)

    if value < 0:
        if not (is_integer(index) and int(index) % 2 == 1):
            raise domain_error(
                "root(x, n)", value, f"x < 0 requires an odd integer n: x = {value}, n = {index}",
            )
        working = spec.with_guard(_GUARD_DIGITS)
        magnitude = root(value.copy_negate(), index, working, context=engine)
        return spec.round(magnitude.copy_negate())
    if value.is_zero():
        return spec.round(_ZERO)
    if index == 1:
        return spec.round(value)
    if index == 2:
        return sqrt_newton(value, spec, engine.config)

    if is_integer(index):
        k = int(index)
        seed_spec = PrecisionSpec(digits=engine.config.newton_seed_digits)
        with localcontext(seed_spec.context()):
            seed = exp(log(value, seed_spec, context=engine) / k, seed_spec, context=engine)
        return root_newton(value, k, seed, spec, engine.config)

    working = spec.with_guard(_GUARD_DIGITS)
    with localcontext(working.context()):
        inverse = _ONE / index
    return pow(value, inverse, spec, context=engine)


def reciprocal(x: Number, spec: PrecisionSpec) -> Decimal:
    """1/x rounded to spec.

    Raises
    ------
    DivisionByZeroError
        x == 0.
    """
    value = as_decimal("reciprocal", x)
    spec = check_spec("reciprocal", spec)
    if value.is_zero():
        raise DivisionByZeroError(
            "Illegal reciprocal: x = 0", source="decimath.functions.roots.reciprocal",
        )
    with localcontext(spec.context()):
        return _ONE / value
