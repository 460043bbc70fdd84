"""Tests for decimath.functions.special — factorial, gamma, Bernoulli numbers."""

from __future__ import annotations

import math
from decimal import Decimal, localcontext

import pytest

from decimath.core.errors import DomainError
from decimath.core.precision import PrecisionSpec
from decimath.engine.context import EngineContext
from decimath.functions.special import bernoulli, factorial, gamma
from tests.conftest import assert_close
from tests.reference import (
    FACTORIAL_0_5,
    FACTORIAL_1_5,
    FACTORIAL_NEG_1_5,
    GAMMA_NEG_1_5,
    SQRT_PI,
)

_P30 = PrecisionSpec(digits=30)


class TestFactorial:
    def test_int_is_exact(self) -> None:
        assert factorial(0) == 1
        assert factorial(5) == 120
        assert factorial(50) == Decimal(math.factorial(50))

    def test_int_rounded_with_spec(self) -> None:
        assert factorial(30, PrecisionSpec(digits=5)) == Decimal("2.6525E+32")

    def test_whole_decimal(self, engine: EngineContext) -> None:
        assert factorial(Decimal(10), _P30, context=engine) == 3628800

    def test_decimal_requires_spec(self) -> None:
        with pytest.raises(TypeError):
            factorial(Decimal("1.5"))

    @pytest.mark.parametrize(
        ("x", "expected"),
        [
            ("0.5", FACTORIAL_0_5),
            ("1.5", FACTORIAL_1_5),
            ("-1.5", FACTORIAL_NEG_1_5),
            ("-0.5", SQRT_PI),
        ],
    )
    def test_reference(self, engine: EngineContext, x: str, expected: Decimal) -> None:
        assert_close(factorial(Decimal(x), _P30, context=engine), expected, _P30)

    def test_recurrence(self, engine: EngineContext) -> None:
        # 2.5! = 2.5 * 1.5!
        expected = PrecisionSpec(digits=60).context().multiply(Decimal("2.5"), FACTORIAL_1_5)
        assert_close(factorial(Decimal("2.5"), _P30, context=engine), expected, _P30)

    def test_far_below_minus_one(self, engine: EngineContext) -> None:
        # (-3.5)! = (-1.5)! / ((-2.5)(-1.5)); divides down by the recurrence
        context = PrecisionSpec(digits=60).context()
        expected = context.divide(FACTORIAL_NEG_1_5, Decimal("3.75"))
        assert_close(factorial(Decimal("-3.5"), _P30, context=engine), expected, _P30)

    def test_far_below_minus_one_under_low_precision(self, engine: EngineContext) -> None:
        # 13.5 rounds to 14 at two digits; the recurrence needs 13 steps
        x = Decimal("-13.5")
        expected = factorial(x, _P30, context=engine)
        with localcontext() as ctx:
            ctx.prec = 2
            result = factorial(x, _P30, context=engine)
        assert result == expected

    def test_large_whole_decimal(self, engine: EngineContext) -> None:
        spec = PrecisionSpec(digits=20)
        result = factorial(Decimal(1001), spec, context=engine)
        assert_close(result, spec.round(Decimal(math.factorial(1001))), spec, ulps=2)

    @pytest.mark.parametrize("x", [-1, -7])
    def test_negative_int(self, x: int) -> None:
        with pytest.raises(DomainError):
            factorial(x)

    def test_negative_whole_decimal(self, engine: EngineContext) -> None:
        with pytest.raises(DomainError):
            factorial(Decimal(-2), _P30, context=engine)

    def test_table_cached_per_precision(self, engine: EngineContext) -> None:
        factorial(Decimal("0.5"), _P30, context=engine)
        # a = 39 for 30 digits; a shorter request must not recompute
        def fail(spec: PrecisionSpec) -> tuple[Decimal, ...]:
            raise AssertionError(f"recomputed at {spec.digits} digits")

        engine.constants.table("spouge", 39, PrecisionSpec(digits=10), fail)


class TestGamma:
    def test_half(self, engine: EngineContext) -> None:
        assert_close(gamma(Decimal("0.5"), _P30, context=engine), SQRT_PI, _P30)

    def test_negative_reference(self, engine: EngineContext) -> None:
        assert_close(gamma(Decimal("-1.5"), _P30, context=engine), GAMMA_NEG_1_5, _P30)

    def test_whole(self, engine: EngineContext) -> None:
        assert gamma(5, _P30, context=engine) == 24
        assert gamma(1, _P30, context=engine) == 1

    @pytest.mark.parametrize("x", [0, -1, Decimal("-3")])
    def test_poles(self, engine: EngineContext, x: Decimal | int) -> None:
        with pytest.raises(DomainError):
            gamma(x, _P30, context=engine)


class TestBernoulli:
    @pytest.mark.parametrize(
        ("n", "expected"),
        [(0, "1"), (1, "-0.5"), (3, "0"), (4, "-0.03333333333")],
    )
    def test_values(self, n: int, expected: str) -> None:
        assert bernoulli(n, PrecisionSpec(digits=10)) == Decimal(expected)

    def test_twelve(self) -> None:
        spec = PrecisionSpec(digits=30)
        expected = PrecisionSpec(digits=30).context().divide(-691, 2730)
        assert bernoulli(12, spec) == expected

    def test_negative(self) -> None:
        with pytest.raises(DomainError):
            bernoulli(-2, _P30)

    def test_rejects_decimal(self) -> None:
        with pytest.raises(TypeError):
            bernoulli(Decimal(4), _P30)  # type: ignore[arg-type]
