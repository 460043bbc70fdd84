"""Newton-Raphson iteration for square and integer roots.

Both iterations start from a short seed and grow the working precision each
step (doubling for sqrt, tripling for the n-th root) until the target plus
guard digits is reached; they then iterate at full precision until two
successive values differ by less than the acceptable error scaled to the
magnitude of the result. The seed only saves iterations; the termination
test is what guarantees the digits.

No domain checks here: x must be > 0 and n >= 2.
"""

from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from decimath.core.precision import PrecisionSpec
from decimath.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from decimath.engine.reduction import power_by_squaring

logger = logging.getLogger(__name__)

_GUARD_DIGITS = 6
_TWO = Decimal(2)


def _tolerance(spec: PrecisionSpec, result: Decimal) -> Decimal:
    """Acceptable error relative to the leading digit of result."""
    return Decimal((0, (1,), result.adjusted() - (spec.digits + 1)))


def sqrt_newton(
    x: Decimal, spec: PrecisionSpec, config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> Decimal:
    """Square root of x > 0, rounded to spec."""
    max_digits = spec.digits + _GUARD_DIGITS
    adaptive = config.newton_seed_digits
    seed = x.sqrt(spec.with_digits(adaptive).context())
    if adaptive >= max_digits:
        return spec.round(seed)

    with localcontext(spec.with_digits(2 * adaptive + 2).context()):
        if seed * seed == x:
            return spec.round(seed)

    result = seed
    iterations = 0
    while True:
        last = result
        adaptive = min(adaptive * 2, max_digits)
        with localcontext(spec.with_digits(adaptive).context()):
            result = (x / last + last) / _TWO
            converged = abs(result - last) <= _tolerance(spec, result)
        iterations += 1
        if adaptive >= max_digits and converged:
            break
    logger.debug("sqrt converged in %d iterations at %d digits", iterations, max_digits)
    return spec.round(result)


def root_newton(
    x: Decimal,
    n: int,
    seed: Decimal,
    spec: PrecisionSpec,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> Decimal:
    """n-th root of x > 0 starting from ``seed``, rounded to spec."""
    max_digits = spec.digits + _GUARD_DIGITS
    adaptive = config.newton_seed_digits
    result = seed
    iterations = 0
    while True:
        adaptive = min(adaptive * 3, max_digits)
        context = spec.with_digits(adaptive).context()
        with localcontext(context):
            step = (x / power_by_squaring(result, n - 1, context) - result) / n
            result = result + step
            converged = abs(step) <= _tolerance(spec, result)
        iterations += 1
        if adaptive >= max_digits and converged:
            break
    logger.debug("root(%d) converged in %d iterations at %d digits", n, iterations, max_digits)
    return spec.round(result)
