"""Tests for decimath.functions.bound — DecimalMath."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

import decimath.functions as dm
from decimath.core.precision import PrecisionSpec
from decimath.engine.context import EngineContext
from decimath.functions.bound import DecimalMath

_SPEC = PrecisionSpec(digits=25)

_UNARY = [
    "exp", "log", "log2", "log10", "sqrt",
    "sin", "cos", "tan", "cot", "asin", "acos", "atan", "acot",
    "sinh", "cosh", "tanh", "coth", "asinh", "acosh", "atanh",
    "factorial", "gamma",
]


class TestConstruction:
    def test_defaults_to_shared_engine(self) -> None:
        assert DecimalMath(_SPEC).engine is EngineContext.shared()

    def test_rejects_bad_spec(self) -> None:
        with pytest.raises(TypeError):
            DecimalMath(25)  # type: ignore[arg-type]

    def test_rejects_bad_engine(self) -> None:
        with pytest.raises(TypeError):
            DecimalMath(_SPEC, engine=None)  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DecimalMath(_SPEC).spec = PrecisionSpec(digits=5)  # type: ignore[misc]

    def test_with_guard_keeps_engine(self, engine: EngineContext) -> None:
        bound = DecimalMath(_SPEC, engine).with_guard(5)
        assert bound.spec.digits == 30
        assert bound.engine is engine

    def test_round(self) -> None:
        assert DecimalMath(PrecisionSpec(digits=3)).round(Decimal("3.14159")) == Decimal("3.14")


class TestDelegation:
    @pytest.mark.parametrize("name", _UNARY)
    def test_unary_matches_free_function(self, engine: EngineContext, name: str) -> None:
        x = Decimal("0.75") if name not in {"acosh", "coth"} else Decimal("1.75")
        bound = getattr(DecimalMath(_SPEC, engine), name)(x)
        free = getattr(dm, name)(x, _SPEC, context=engine)
        assert bound == free

    def test_acoth(self, engine: EngineContext) -> None:
        math = DecimalMath(_SPEC, engine)
        assert math.acoth(3) == dm.acoth(3, _SPEC, context=engine)

    def test_binary(self, engine: EngineContext) -> None:
        math = DecimalMath(_SPEC, engine)
        assert math.pow(2, Decimal("0.5")) == dm.pow(2, Decimal("0.5"), _SPEC, context=engine)
        assert math.root(10, 3) == dm.root(10, 3, _SPEC, context=engine)
        assert math.atan2(1, 2) == dm.atan2(1, 2, _SPEC, context=engine)

    def test_constants(self, engine: EngineContext) -> None:
        math = DecimalMath(_SPEC, engine)
        assert math.pi() == dm.pi(_SPEC, context=engine)
        assert math.e() == dm.e(_SPEC, context=engine)

    def test_reciprocal_and_bernoulli(self) -> None:
        math = DecimalMath(PrecisionSpec(digits=5))
        assert math.reciprocal(3) == Decimal("0.33333")
        assert math.bernoulli(2) == Decimal("0.16667")

    def test_factorial_of_int_rounded(self) -> None:
        math = DecimalMath(PrecisionSpec(digits=5))
        assert math.factorial(30) == Decimal("2.6525E+32")
