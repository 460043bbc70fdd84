"""factorial, gamma and Bernoulli numbers.

Non-integral factorials use Spouge's approximation

    x! ~ (x + a)^(x + 1/2) e^-(x + a) (c0 + sum_{k=1}^{a-1} c_k / (x + k))

    c0  = sqrt(2 pi)
    c_k = (-1)^(k-1) (a - k)^(k - 1/2) e^(a - k) / (k - 1)!

with a = 1.3 * digits. The c_k depend only on a; they are computed once at
1.5 * a digits and kept in the engine's constant cache.
"""

from __future__ import annotations

import math
from decimal import Decimal, localcontext

from decimath.core.digits import is_integer
from decimath.core.errors import domain_error
from decimath.core.precision import PrecisionSpec
from decimath.core.rational import ExactRational
from decimath.engine.context import EngineContext, resolve
from decimath.functions._validation import Number, as_decimal, check_spec
from decimath.functions.exponential import exp, pow
from decimath.functions.roots import sqrt

_ONE = Decimal(1)
_TWO = Decimal(2)
_HALF = Decimal("0.5")

_GUARD_DIGITS = 6

# Whole arguments up to this size are computed exactly with math.factorial.
_EXACT_FACTORIAL_LIMIT = 1000


def _spouge_coefficients(a: int, spec: PrecisionSpec, engine: EngineContext) -> tuple[Decimal, ...]:
    with localcontext(spec.context()):
        coefficients = [sqrt(_TWO * engine.constants.pi(spec), spec, context=engine)]
        for k in range(1, a):
            delta = Decimal(a - k)
            term = pow(delta, Decimal(k) - _HALF, spec, context=engine)
            term = term * exp(delta, spec, context=engine) / math.factorial(k - 1)
            coefficients.append(term if k % 2 == 1 else -term)
    return tuple(coefficients)


def _spouge(x: Decimal, spec: PrecisionSpec, engine: EngineContext) -> Decimal:
    """x! for non-integral x > -1."""
    a = max(2, spec.digits * 13 // 10)
    table_spec = PrecisionSpec(digits=max(spec.digits, a * 15 // 10))
    coefficients = engine.constants.table(
        "spouge", a, table_spec, lambda s: _spouge_coefficients(a, s, engine),
    )
    working = spec.with_digits(spec.digits * 2)
    with localcontext(working.context()):
        factor = coefficients[0]
        for k in range(1, a):
            factor += coefficients[k] / (x + k)
        result = pow(x + a, x + _HALF, working, context=engine)
        result *= exp(-x - a, working, context=engine)
        result *= factor
    return result


def _factorial(x: Decimal, spec: PrecisionSpec, engine: EngineContext) -> Decimal:
    if is_integer(x):
        n = int(x)
        if n < 0:
            raise domain_error("factorial", x, f"x is a negative integer: x = {x}")
        if n <= _EXACT_FACTORIAL_LIMIT:
            return Decimal(math.factorial(n))

    if x >= -1:
        return _spouge(x, spec, engine)

    # x! = (x + m)! / ((x + 1)(x + 2)...(x + m)) with x + m in (-1, 0)
    steps = int(x.copy_negate())
    working = spec.with_guard(_GUARD_DIGITS + len(str(steps)))
    with localcontext(working.context()):
        shifted = x
        divisor = _ONE
        for _ in range(steps):
            shifted += 1
            divisor *= shifted
        return _spouge(shifted, working, engine) / divisor


def factorial(
    x: Number, spec: PrecisionSpec | None = None, *, context: EngineContext | None = None,
) -> Decimal:
    """x! for int or Decimal x.

    An int argument returns the exact factorial (rounded only if ``spec`` is
    given). A Decimal argument needs ``spec``; non-integral values use
    Spouge's approximation, extended below -1 by x! = (x + 1)! / (x + 1).

    Raises
    ------
    DomainError
        x is a negative integer.
    """
    if isinstance(x, int) and not isinstance(x, bool):
        if x < 0:
            raise domain_error("factorial(n)", x, f"n < 0: n = {x}")
        exact = Decimal(math.factorial(x))
        return exact if spec is None else check_spec("factorial", spec).round(exact)

    value = as_decimal("factorial", x)
    if spec is None:
        raise TypeError("factorial of a Decimal requires a PrecisionSpec")
    spec = check_spec("factorial", spec)
    return spec.round(_factorial(value, spec, resolve(context)))


def gamma(x: Number, spec: PrecisionSpec, *, context: EngineContext | None = None) -> Decimal:
    """Gamma function: gamma(x) = (x - 1)!.

    Raises
    ------
    DomainError
        x is zero or a negative integer.
    """
    value = as_decimal("gamma", x)
    spec = check_spec("gamma", spec)
    if is_integer(value) and value <= 0:
        raise domain_error("gamma", value, f"x is zero or a negative integer: x = {value}")
    working = spec.with_guard(_GUARD_DIGITS)
    with localcontext(working.context()):
        shifted = value - _ONE
    return spec.round(_factorial(shifted, spec, resolve(context)))


def bernoulli(n: int, spec: PrecisionSpec) -> Decimal:
    """Bernoulli number B(n) as a Decimal; B(1) = -0.5, odd n > 1 give 0.

    Raises
    ------
    DomainError
        n < 0.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"bernoulli expects int, got {type(n).__name__}")
    spec = check_spec("bernoulli", spec)
    return ExactRational.bernoulli(n).to_decimal(spec)
