"""Tests for decimath.functions.hyperbolic."""

from __future__ import annotations

from decimal import Decimal, localcontext

import pytest
from hypothesis import assume, given

from decimath.core.errors import DomainError
from decimath.core.precision import PrecisionSpec
from decimath.engine.context import EngineContext
from decimath.functions.hyperbolic import (
    acosh,
    acoth,
    asinh,
    atanh,
    cosh,
    coth,
    sinh,
    tanh,
)
from tests.conftest import assert_close, finite_decimals
from tests.reference import COTH_1_234, E, PI

_P50 = PrecisionSpec(digits=50)
_WIDE = PrecisionSpec(digits=120).context()
_INVERSE_E = _WIDE.divide(1, E)


class TestForward:
    def test_sinh_one(self, engine: EngineContext) -> None:
        expected = _WIDE.divide(_WIDE.subtract(E, _INVERSE_E), 2)
        assert_close(sinh(1, _P50, context=engine), expected, _P50)

    def test_cosh_one(self, engine: EngineContext) -> None:
        expected = _WIDE.divide(_WIDE.add(E, _INVERSE_E), 2)
        assert_close(cosh(1, _P50, context=engine), expected, _P50)

    def test_tanh_one(self, engine: EngineContext) -> None:
        expected = _WIDE.divide(_WIDE.subtract(E, _INVERSE_E), _WIDE.add(E, _INVERSE_E))
        assert_close(tanh(1, _P50, context=engine), expected, _P50)

    def test_coth_reference(self, engine: EngineContext) -> None:
        assert_close(coth(Decimal("1.234"), _P50, context=engine), COTH_1_234, _P50)

    def test_zero(self, engine: EngineContext) -> None:
        assert sinh(0, _P50, context=engine) == 0
        assert cosh(0, _P50, context=engine) == 1
        assert tanh(0, _P50, context=engine) == 0

    def test_coth_zero(self, engine: EngineContext) -> None:
        with pytest.raises(DomainError):
            coth(0, _P50, context=engine)

    def test_symmetry(self, engine: EngineContext) -> None:
        x = Decimal("3.75")
        assert sinh(-x, _P50, context=engine) == sinh(x, _P50, context=engine).copy_negate()
        assert cosh(-x, _P50, context=engine) == cosh(x, _P50, context=engine)

    def test_large_argument_uses_exp(self, engine: EngineContext) -> None:
        spec = PrecisionSpec(digits=30)
        assert tanh(100, spec, context=engine) == 1
        assert_close(
            cosh(100, spec, context=engine), sinh(100, spec, context=engine), spec,
        )

    @given(finite_decimals("-20", "20"))
    def test_cosh_squared_minus_sinh_squared(self, x: Decimal) -> None:
        spec = PrecisionSpec(digits=20)
        # cancellation grows with e^2|x|; carry those digits as guard
        working = spec.with_guard(20)
        context = working.context()
        s, c = sinh(x, working), cosh(x, working)
        difference = context.subtract(context.multiply(c, c), context.multiply(s, s))
        assert_close(spec.round(difference), Decimal(1), spec, ulps=2)


class TestInverse:
    @given(finite_decimals("-10", "10"))
    def test_asinh_inverts_sinh(self, x: Decimal) -> None:
        assume(x != 0)
        spec = PrecisionSpec(digits=30)
        working = spec.with_guard(8)
        assert_close(spec.round(asinh(sinh(x, working), working)), x, spec, ulps=2)

    @given(finite_decimals("0.1", "10"))
    def test_acosh_inverts_cosh(self, x: Decimal) -> None:
        spec = PrecisionSpec(digits=30)
        working = spec.with_guard(8)
        assert_close(spec.round(acosh(cosh(x, working), working)), x, spec, ulps=2)

    @given(finite_decimals("-5", "5"))
    def test_atanh_inverts_tanh(self, x: Decimal) -> None:
        assume(x != 0)
        spec = PrecisionSpec(digits=30)
        working = spec.with_guard(12)
        assert_close(spec.round(atanh(tanh(x, working), working)), x, spec, ulps=2)

    def test_asinh_odd(self, engine: EngineContext) -> None:
        x = Decimal("0.3")
        assert asinh(-x, _P50, context=engine) == asinh(x, _P50, context=engine).copy_negate()
        assert asinh(0, _P50, context=engine) == 0

    def test_acosh_one(self, engine: EngineContext) -> None:
        assert acosh(1, _P50, context=engine) == 0

    def test_acosh_near_one(self, engine: EngineContext) -> None:
        spec = PrecisionSpec(digits=20)
        # acosh(1 + d) ~ sqrt(2 d) for tiny d
        result = acosh(Decimal("1.00000000000000000000000000000001"), spec, context=engine)
        assert Decimal("1.41421E-16") < result < Decimal("1.41422E-16")

    def test_atanh_half_is_half_log_three(self, engine: EngineContext) -> None:
        expected = _WIDE.divide(engine.constants.log_three(PrecisionSpec(digits=70)), 2)
        assert_close(atanh(Decimal("0.5"), _P50, context=engine), expected, _P50)

    def test_acoth_is_atanh_of_reciprocal(self, engine: EngineContext) -> None:
        assert_close(
            acoth(2, _P50, context=engine),
            atanh(Decimal("0.5"), _P50.with_guard(5), context=engine),
            _P50,
        )
        assert acoth(-2, _P50, context=engine) == acoth(2, _P50, context=engine).copy_negate()

    @pytest.mark.parametrize(
        ("function", "x"),
        [
            (acosh, Decimal("0.999")),
            (acosh, -1),
            (atanh, 1),
            (atanh, Decimal("-1.5")),
            (acoth, 1),
            (acoth, Decimal("0.5")),
            (acoth, 0),
        ],
    )
    def test_domain(self, engine: EngineContext, function: object, x: Decimal | int) -> None:
        with pytest.raises(DomainError):
            function(x, _P50, context=engine)  # type: ignore[operator]


# ---------------------------------------------------------------------------
# Long and negative arguments, the caller's decimal context
# ---------------------------------------------------------------------------

_PI_40 = PrecisionSpec(digits=40).round(PI)


def _wide_asinh(x: Decimal) -> Decimal:
    root = _WIDE.sqrt(_WIDE.add(_WIDE.multiply(x, x), 1))
    return _WIDE.ln(_WIDE.add(x, root))


def _wide_half_log_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """1/2 ln(numerator / denominator) at 120 digits."""
    return _WIDE.multiply(Decimal("0.5"), _WIDE.ln(_WIDE.divide(numerator, denominator)))


class TestLongArguments:
    def test_asinh_of_forty_digit_argument(self, engine: EngineContext) -> None:
        expected = _wide_asinh(_PI_40)
        result = asinh(_PI_40, _P50, context=engine)
        assert len(result.as_tuple().digits) == 50
        assert_close(result, expected, _P50)

    def test_asinh_of_negative_forty_digit_argument(self, engine: EngineContext) -> None:
        result = asinh(_PI_40.copy_negate(), _P50, context=engine)
        assert result == asinh(_PI_40, _P50, context=engine).copy_negate()
        assert_close(result, _wide_asinh(_PI_40).copy_negate(), _P50)

    def test_asinh_of_small_negative(self, engine: EngineContext) -> None:
        x = Decimal("-0.3")
        assert_close(asinh(x, _P50, context=engine), _wide_asinh(x), _P50)

    def test_atanh_just_below_one(self, engine: EngineContext) -> None:
        spec = PrecisionSpec(digits=40)
        x = Decimal("0." + "9" * 32)
        expected = _wide_half_log_ratio(_WIDE.add(1, x), _WIDE.subtract(1, x))
        assert_close(atanh(x, spec, context=engine), expected, spec)
        assert_close(atanh(x.copy_negate(), spec, context=engine), expected.copy_negate(), spec)

    def test_acoth_just_above_one(self, engine: EngineContext) -> None:
        spec = PrecisionSpec(digits=40)
        x = Decimal("1." + "0" * 31 + "1")
        expected = _wide_half_log_ratio(_WIDE.add(x, 1), _WIDE.subtract(x, 1))
        assert_close(acoth(x, spec, context=engine), expected, spec)
        assert_close(acoth(x.copy_negate(), spec, context=engine), expected.copy_negate(), spec)

    @pytest.mark.parametrize(
        ("function", "x"),
        [
            (atanh, Decimal("1." + "0" * 31 + "1")),
            (atanh, Decimal("-1." + "0" * 31 + "1")),
            (acoth, Decimal("0." + "9" * 32)),
            (acoth, Decimal("-0." + "9" * 32)),
        ],
    )
    def test_domain_boundary(self, engine: EngineContext, function: object, x: Decimal) -> None:
        with pytest.raises(DomainError):
            function(x, _P50, context=engine)  # type: ignore[operator]

    def test_results_ignore_ambient_precision(self, engine: EngineContext) -> None:
        spec = PrecisionSpec(digits=40)
        near_one = Decimal("0." + "9" * 32)
        expected = [
            asinh(_PI_40.copy_negate(), spec, context=engine),
            atanh(near_one, spec, context=engine),
            sinh(Decimal("-3.75"), spec, context=engine),
        ]
        with localcontext() as ctx:
            ctx.prec = 6
            result = [
                asinh(_PI_40.copy_negate(), spec, context=engine),
                atanh(near_one, spec, context=engine),
                sinh(Decimal("-3.75"), spec, context=engine),
            ]
        assert result == expected
