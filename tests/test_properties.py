"""Property tests across the function surface.

Precision scaling: a result at p digits must agree with the same function at
p + 20 digits rounded back to p, up to one unit in the last place.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import TypeAlias

import pytest
from hypothesis import given
from hypothesis import strategies as st

import decimath.functions as dm
from decimath.core.precision import PrecisionSpec, RoundingRule
from tests.conftest import assert_close, finite_decimals, positive_decimals, precisions

Unary: TypeAlias = Callable[..., Decimal]

_DOMAINS: list[tuple[str, st.SearchStrategy[Decimal]]] = [
    ("exp", finite_decimals("-100", "100")),
    ("log", positive_decimals()),
    ("sqrt", positive_decimals()),
    ("sin", finite_decimals()),
    ("cos", finite_decimals()),
    ("atan", finite_decimals()),
    ("asin", finite_decimals("-1", "1")),
    ("acos", finite_decimals("-1", "1")),
    ("sinh", finite_decimals("-50", "50")),
    ("cosh", finite_decimals("-50", "50")),
    ("tanh", finite_decimals("-50", "50")),
    ("asinh", finite_decimals()),
]


@pytest.mark.parametrize(("name", "domain"), _DOMAINS)
@given(data=st.data())
def test_precision_scaling(
    name: str, domain: st.SearchStrategy[Decimal], data: st.DataObject,
) -> None:
    function: Unary = getattr(dm, name)
    x = data.draw(domain)
    spec = data.draw(precisions(5, 40))
    low = function(x, spec)
    high = function(x, spec.with_guard(20))
    assert_close(low, spec.round(high), spec)


@given(finite_decimals("-10", "10"), precisions(5, 40))
def test_deterministic(x: Decimal, spec: PrecisionSpec) -> None:
    assert dm.exp(x, spec) == dm.exp(x, spec)
    assert dm.sin(x, spec) == dm.sin(x, spec)


@given(finite_decimals("-10", "10"), st.sampled_from(list(RoundingRule)))
def test_directed_rounding_brackets(x: Decimal, rounding: RoundingRule) -> None:
    spec = PrecisionSpec(digits=15, rounding=rounding)
    value = dm.exp(x, spec)
    reference = dm.exp(x, PrecisionSpec(digits=40))
    assert_close(value, reference, PrecisionSpec(digits=15))
    if rounding is RoundingRule.FLOOR:
        assert value <= reference
    elif rounding is RoundingRule.CEILING:
        assert value >= reference


@given(positive_decimals(), positive_decimals())
def test_log_of_product(a: Decimal, b: Decimal) -> None:
    spec = PrecisionSpec(digits=30)
    working = spec.with_guard(6)
    context = working.context()
    left = dm.log(context.multiply(a, b), working)
    right = context.add(dm.log(a, working), dm.log(b, working))
    # absolute comparison: ln(ab) can be near zero while ln a, ln b are not
    assert abs(left - right) <= Decimal("1E-30")


@given(finite_decimals("-20", "20"), finite_decimals("-20", "20"))
def test_exp_of_sum(a: Decimal, b: Decimal) -> None:
    spec = PrecisionSpec(digits=30)
    working = spec.with_guard(6)
    context = working.context()
    left = dm.exp(context.add(a, b), working)
    right = context.multiply(dm.exp(a, working), dm.exp(b, working))
    assert_close(spec.round(left), spec.round(right), spec, ulps=2)
