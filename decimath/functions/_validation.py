"""Argument checks shared by the public functions."""

from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

from decimath.core.errors import domain_error
from decimath.core.precision import PrecisionSpec

Number: TypeAlias = Decimal | int


def as_decimal(function: str, value: object) -> Decimal:
    """Accept Decimal or int; NaN and Infinity are outside every domain."""
    if isinstance(value, bool) or not isinstance(value, Decimal | int):
        raise TypeError(f"{function} expects Decimal or int, got {type(value).__name__}")
    if isinstance(value, int):
        return Decimal(value)
    if not value.is_finite():
        raise domain_error(function, value, "argument must be finite")
    return value


def check_spec(function: str, spec: object) -> PrecisionSpec:
    if not isinstance(spec, PrecisionSpec):
        raise TypeError(f"{function} expects PrecisionSpec, got {type(spec).__name__}")
    return spec
