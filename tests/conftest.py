"""Hypothesis strategies and pytest fixtures for decimath.

Results are compared in units of the last requested digit against the
high-precision literals in tests.reference or against the same function
evaluated with more guard digits.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from decimath.core.precision import PrecisionSpec
from decimath.engine.context import EngineContext

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=25,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# FIXTURES
# ===================================================================


@pytest.fixture
def engine() -> EngineContext:
    """Fresh, isolated engine: empty coefficient caches and constants."""
    return EngineContext()


@pytest.fixture
def p30() -> PrecisionSpec:
    return PrecisionSpec(digits=30)


# ===================================================================
# HELPERS
# ===================================================================


def ulp(value: Decimal, spec: PrecisionSpec) -> Decimal:
    """One unit in the last requested digit of ``value``."""
    leading = 0 if value.is_zero() else value.adjusted()
    return Decimal((0, (1,), leading - spec.digits + 1))


def assert_close(actual: Decimal, expected: Decimal, spec: PrecisionSpec, ulps: int = 1) -> None:
    """|actual - expected| within ``ulps`` units of the last requested digit."""
    diff = abs(actual - expected)
    bound = ulps * ulp(expected, spec)
    assert diff <= bound, f"{actual} != {expected} (diff {diff}, bound {bound})"


# ===================================================================
# STRATEGIES
# ===================================================================


def finite_decimals(
    min_value: str = "-1000",
    max_value: str = "1000",
    places: int = 6,
) -> SearchStrategy[Decimal]:
    """Finite Decimal values, no NaN, no Infinity."""
    return st.decimals(
        min_value=Decimal(min_value),
        max_value=Decimal(max_value),
        places=places,
        allow_nan=False,
        allow_infinity=False,
    )


def positive_decimals(
    min_value: str = "0.000001",
    max_value: str = "1000000",
    places: int = 6,
) -> SearchStrategy[Decimal]:
    """Strictly positive Decimal values."""
    return finite_decimals(min_value, max_value, places).filter(lambda d: d > 0)


def unit_interval(places: int = 6) -> SearchStrategy[Decimal]:
    """Values in [-1, 1] (asin / acos domain)."""
    return finite_decimals("-1", "1", places)


def precisions(min_digits: int = 5, max_digits: int = 60) -> SearchStrategy[PrecisionSpec]:
    """PrecisionSpec with HALF_EVEN rounding."""
    return st.integers(min_value=min_digits, max_value=max_digits).map(
        lambda d: PrecisionSpec(digits=d)
    )
