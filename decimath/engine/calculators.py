"""Series calculators, one per function family.

The coefficient recurrences are plain generators of exact rationals; the
SeriesSpec constants pair each with its power sequence and pairwise flag.
A SeriesCalculator owns the coefficient cache for one family. It performs
no argument checking or range reduction: callers must pass x inside the
fast-convergence range (see decimath.engine.reduction).

    EXP    sum x^n / n!
    SIN    sum (-1)^n x^(2n+1) / (2n+1)!
    COS    sum (-1)^n x^(2n) / (2n)!
    SINH   sum x^(2n+1) / (2n+1)!
    COSH   sum x^(2n) / (2n)!
    ASIN   sum (2n)! / (4^n (n!)^2 (2n+1)) x^(2n+1)
    ATANH  sum x^(2n+1) / (2n+1)
"""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal
from enum import Enum
from typing import final

from decimath.core.precision import PrecisionSpec
from decimath.core.rational import ExactRational
from decimath.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from decimath.engine.power import PowerKind
from decimath.engine.series import CoefficientCache, SeriesSpec, evaluate

# ---------------------------------------------------------------------------
# Coefficient recurrences
# ---------------------------------------------------------------------------


def exp_coefficients() -> Iterator[ExactRational]:
    """1/n!, each from the previous one divided by n."""
    factor = ExactRational.ONE
    n = 0
    while True:
        yield factor
        n += 1
        factor = factor.divide(n)


def sin_coefficients() -> Iterator[ExactRational]:
    """(-1)^n / (2n+1)!"""
    factorial = ExactRational.ONE
    negative = False
    n = 0
    while True:
        factor = factorial.reciprocal()
        yield factor.negate() if negative else factor
        n += 1
        factorial = factorial.multiply(2 * n).multiply(2 * n + 1)
        negative = not negative


def cos_coefficients() -> Iterator[ExactRational]:
    """(-1)^n / (2n)!"""
    factorial = ExactRational.ONE
    negative = False
    n = 0
    while True:
        factor = factorial.reciprocal()
        yield factor.negate() if negative else factor
        n += 1
        factorial = factorial.multiply(2 * n - 1).multiply(2 * n)
        negative = not negative


def sinh_coefficients() -> Iterator[ExactRational]:
    """1 / (2n+1)!"""
    factorial = ExactRational.ONE
    n = 0
    while True:
        yield factorial.reciprocal()
        n += 1
        factorial = factorial.multiply(2 * n).multiply(2 * n + 1)


def cosh_coefficients() -> Iterator[ExactRational]:
    """1 / (2n)!"""
    factorial = ExactRational.ONE
    n = 0
    while True:
        yield factorial.reciprocal()
        n += 1
        factorial = factorial.multiply(2 * n - 1).multiply(2 * n)


def asin_coefficients() -> Iterator[ExactRational]:
    """(2n)! / (4^n (n!)^2 (2n+1))"""
    factorial_2n = ExactRational.ONE
    factorial_n = ExactRational.ONE
    four_power_n = ExactRational.ONE
    n = 0
    while True:
        yield factorial_2n.divide(
            four_power_n.multiply(factorial_n).multiply(factorial_n).multiply(2 * n + 1)
        )
        n += 1
        factorial_2n = factorial_2n.multiply(2 * n - 1).multiply(2 * n)
        factorial_n = factorial_n.multiply(n)
        four_power_n = four_power_n.multiply(4)


def atanh_coefficients() -> Iterator[ExactRational]:
    """1 / (2n+1)"""
    n = 0
    while True:
        yield ExactRational(1, 2 * n + 1)
        n += 1


# ---------------------------------------------------------------------------
# Series specifications
# ---------------------------------------------------------------------------

EXP = SeriesSpec(name="exp", coefficients=exp_coefficients, power=PowerKind.N, pairwise=False)
SIN = SeriesSpec(
    name="sin", coefficients=sin_coefficients, power=PowerKind.TWO_N_PLUS_ONE, pairwise=True,
)
COS = SeriesSpec(name="cos", coefficients=cos_coefficients, power=PowerKind.TWO_N, pairwise=True)
SINH = SeriesSpec(
    name="sinh", coefficients=sinh_coefficients, power=PowerKind.TWO_N_PLUS_ONE, pairwise=True,
)
COSH = SeriesSpec(
    name="cosh", coefficients=cosh_coefficients, power=PowerKind.TWO_N, pairwise=True,
)
ASIN = SeriesSpec(
    name="asin", coefficients=asin_coefficients, power=PowerKind.TWO_N_PLUS_ONE, pairwise=False,
)
ATANH = SeriesSpec(
    name="atanh", coefficients=atanh_coefficients, power=PowerKind.TWO_N_PLUS_ONE, pairwise=True,
)


class SeriesFamily(Enum):
    """Function families with a series calculator."""

    EXP = EXP
    SIN = SIN
    COS = COS
    SINH = SINH
    COSH = COSH
    ASIN = ASIN
    ATANH = ATANH

    @property
    def series(self) -> SeriesSpec:
        return self.value


# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------


@final
class SeriesCalculator:
    """Evaluates one SeriesSpec, reusing its coefficient cache across calls."""

    __slots__ = ("_cache", "config", "series")

    def __init__(self, series: SeriesSpec, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> None:
        self.series = series
        self.config = config
        self._cache = CoefficientCache(series.name, series.coefficients)

    @property
    def cache(self) -> CoefficientCache:
        return self._cache

    def calculate(self, x: Decimal, spec: PrecisionSpec) -> Decimal:
        """Sum the series at x. No domain checks, no range reduction."""
        cache = self._cache
        if not self.config.reuse_coefficients:
            cache = CoefficientCache(self.series.name, self.series.coefficients)
        return evaluate(x, spec, self.series, cache, config=self.config)
