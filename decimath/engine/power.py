"""Power sequences feeding the series engine.

Each sequence yields the successive powers of x one series term needs,
with one multiplication per step at the working context. There is no
convergence logic here. A sequence belongs to exactly one evaluation.

    PowerKind.N                 1, x, x^2, x^3, ...
    PowerKind.TWO_N             1, x^2, x^4, ...
    PowerKind.TWO_N_PLUS_ONE    x, x^3, x^5, ...
"""

from __future__ import annotations

from decimal import Context, Decimal
from enum import Enum
from typing import Protocol, final

_ONE = Decimal(1)


class PowerSequence(Protocol):
    """Generator of successive powers of x."""

    def current(self) -> Decimal: ...

    def advance(self) -> None: ...


class _StepPowers:
    """Current power times a fixed multiplier per step."""

    __slots__ = ("_context", "_multiplier", "_power")

    def __init__(self, first: Decimal, multiplier: Decimal, context: Context) -> None:
        self._context = context
        self._multiplier = multiplier
        self._power = first

    def current(self) -> Decimal:
        return self._power

    def advance(self) -> None:
        self._power = self._context.multiply(self._power, self._multiplier)


@final
class PowerN(_StepPowers):
    """1, x, x^2, ... (exp)."""

    __slots__ = ()

    def __init__(self, x: Decimal, context: Context) -> None:
        super().__init__(_ONE, context.plus(x), context)


@final
class PowerTwoN(_StepPowers):
    """1, x^2, x^4, ... (cos, cosh)."""

    __slots__ = ()

    def __init__(self, x: Decimal, context: Context) -> None:
        super().__init__(_ONE, context.multiply(x, x), context)


@final
class PowerTwoNPlusOne(_StepPowers):
    """x, x^3, x^5, ... (sin, sinh, asin, atanh)."""

    __slots__ = ()

    def __init__(self, x: Decimal, context: Context) -> None:
        super().__init__(context.plus(x), context.multiply(x, x), context)


class PowerKind(Enum):
    """Which powers of x a series consumes."""

    N = "n"
    TWO_N = "2n"
    TWO_N_PLUS_ONE = "2n+1"

    def start(self, x: Decimal, context: Context) -> PowerSequence:
        """A fresh sequence positioned at its first power."""
        match self:
            case PowerKind.N:
                return PowerN(x, context)
            case PowerKind.TWO_N:
                return PowerTwoN(x, context)
            case PowerKind.TWO_N_PLUS_ONE:
                return PowerTwoNPlusOne(x, context)
