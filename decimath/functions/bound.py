"""DecimalMath: every function bound to one PrecisionSpec and EngineContext.

Callers that compute many values at the same precision (or that need a few
guard digits on top of it, like a complex-number layer) hold one of these
instead of threading ``spec`` and ``context`` through every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import final

from decimath.core.precision import PrecisionSpec
from decimath.engine.context import EngineContext
from decimath.functions import exponential, hyperbolic, roots, special, trigonometric
from decimath.functions._validation import Number


@final
@dataclass(frozen=True, slots=True)
class DecimalMath:
    """Function surface at a fixed precision."""

    spec: PrecisionSpec
    engine: EngineContext = field(default_factory=EngineContext.shared)

    def __post_init__(self) -> None:
        if not isinstance(self.spec, PrecisionSpec):
            raise TypeError(
                f"DecimalMath.spec must be PrecisionSpec, got {type(self.spec).__name__}"
            )
        if not isinstance(self.engine, EngineContext):
            raise TypeError(
                f"DecimalMath.engine must be EngineContext, got {type(self.engine).__name__}"
            )

    def with_guard(self, guard: int) -> DecimalMath:
        """Same engine, ``guard`` more digits."""
        return DecimalMath(spec=self.spec.with_guard(guard), engine=self.engine)

    def round(self, value: Decimal) -> Decimal:
        return self.spec.round(value)

    # --- constants ---

    def pi(self) -> Decimal:
        return exponential.pi(self.spec, context=self.engine)

    def e(self) -> Decimal:
        return exponential.e(self.spec, context=self.engine)

    # --- exponential ---

    def exp(self, x: Number) -> Decimal:
        return exponential.exp(x, self.spec, context=self.engine)

    def log(self, x: Number) -> Decimal:
        return exponential.log(x, self.spec, context=self.engine)

    def log2(self, x: Number) -> Decimal:
        return exponential.log2(x, self.spec, context=self.engine)

    def log10(self, x: Number) -> Decimal:
        return exponential.log10(x, self.spec, context=self.engine)

    def pow(self, x: Number, y: Number) -> Decimal:
        return exponential.pow(x, y, self.spec, context=self.engine)

    # --- roots ---

    def sqrt(self, x: Number) -> Decimal:
        return roots.sqrt(x, self.spec, context=self.engine)

    def root(self, x: Number, n: Number) -> Decimal:
        return roots.root(x, n, self.spec, context=self.engine)

    def reciprocal(self, x: Number) -> Decimal:
        return roots.reciprocal(x, self.spec)

    # --- trigonometric ---

    def sin(self, x: Number) -> Decimal:
        return trigonometric.sin(x, self.spec, context=self.engine)

    def cos(self, x: Number) -> Decimal:
        return trigonometric.cos(x, self.spec, context=self.engine)

    def tan(self, x: Number) -> Decimal:
        return trigonometric.tan(x, self.spec, context=self.engine)

    def cot(self, x: Number) -> Decimal:
        return trigonometric.cot(x, self.spec, context=self.engine)

    def asin(self, x: Number) -> Decimal:
        return trigonometric.asin(x, self.spec, context=self.engine)

    def acos(self, x: Number) -> Decimal:
        return trigonometric.acos(x, self.spec, context=self.engine)

    def atan(self, x: Number) -> Decimal:
        return trigonometric.atan(x, self.spec, context=self.engine)

    def atan2(self, y: Number, x: Number) -> Decimal:
        return trigonometric.atan2(y, x, self.spec, context=self.engine)

    def acot(self, x: Number) -> Decimal:
        return trigonometric.acot(x, self.spec, context=self.engine)

    # --- hyperbolic ---

    def sinh(self, x: Number) -> Decimal:
        return hyperbolic.sinh(x, self.spec, context=self.engine)

    def cosh(self, x: Number) -> Decimal:
        return hyperbolic.cosh(x, self.spec, context=self.engine)

    def tanh(self, x: Number) -> Decimal:
        return hyperbolic.tanh(x, self.spec, context=self.engine)

    def coth(self, x: Number) -> Decimal:
        return hyperbolic.coth(x, self.spec, context=self.engine)

    def asinh(self, x: Number) -> Decimal:
        return hyperbolic.asinh(x, self.spec, context=self.engine)

    def acosh(self, x: Number) -> Decimal:
        return hyperbolic.acosh(x, self.spec, context=self.engine)

    def atanh(self, x: Number) -> Decimal:
        return hyperbolic.atanh(x, self.spec, context=self.engine)

    def acoth(self, x: Number) -> Decimal:
        return hyperbolic.acoth(x, self.spec, context=self.engine)

    # --- special ---

    def factorial(self, x: Number) -> Decimal:
        return special.factorial(x, self.spec, context=self.engine)

    def gamma(self, x: Number) -> Decimal:
        return special.gamma(x, self.spec, context=self.engine)

    def bernoulli(self, n: int) -> Decimal:
        return special.bernoulli(n, self.spec)
