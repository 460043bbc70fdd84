"""ExactRational — exact p/q arithmetic for series coefficients.

Coefficients such as 1/(2n+1)! are kept as exact rationals so that rounding
happens only once per term, when the coefficient meets the power of x at
working precision. Values are NOT reduced on every operation (the gcd of
large factorials is costly and buys nothing inside a series); call
``reduce()`` for display or comparison of the raw fields.

Invariants:
  - denominator > 0 (the sign lives in the numerator)
  - instances are immutable; every operation returns a new instance
  - equality and hashing compare values, so 1/2 == 2/4
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from fractions import Fraction
from math import comb, gcd
from typing import ClassVar, TypeAlias, final

from decimath.core.errors import DivisionByZeroError, domain_error
from decimath.core.precision import PrecisionSpec
from decimath.core.result import Err, Ok

Operand: TypeAlias = "ExactRational | int"


def _division_by_zero(operation: str) -> DivisionByZeroError:
    return DivisionByZeroError(
        f"ExactRational.{operation}: division by zero",
        source=f"decimath.core.rational.ExactRational.{operation}",
    )


@final
@dataclass(frozen=True, slots=True, eq=False)
class ExactRational:
    """Exact rational number numerator/denominator."""

    numerator: int
    denominator: int

    ZERO: ClassVar[ExactRational]  # Assigned after class definition
    ONE: ClassVar[ExactRational]
    TWO: ClassVar[ExactRational]
    TEN: ClassVar[ExactRational]

    def __post_init__(self) -> None:
        for name, field in (("numerator", self.numerator), ("denominator", self.denominator)):
            if isinstance(field, bool) or not isinstance(field, int):
                raise TypeError(
                    f"ExactRational.{name} must be int, got {type(field).__name__}"
                )
        if self.denominator == 0:
            raise _division_by_zero("__init__")
        if self.denominator < 0:
            raise TypeError(
                f"ExactRational.denominator must be > 0, got {self.denominator} "
                f"(use ExactRational.of to normalize the sign)"
            )

    # --- construction ---

    @staticmethod
    def of(numerator: int, denominator: int = 1) -> ExactRational:
        """Create numerator/denominator, moving a negative sign to the numerator."""
        if denominator == 0:
            raise _division_by_zero("of")
        if denominator < 0:
            return ExactRational(-numerator, -denominator)
        return ExactRational(numerator, denominator)

    @staticmethod
    def from_decimal(value: Decimal) -> ExactRational:
        """Exact conversion: Decimal('1.25') -> 125/100."""
        sign, digits, exp = value.as_tuple()
        if not isinstance(exp, int):
            raise TypeError(f"ExactRational.from_decimal requires finite Decimal, got {value}")
        coefficient = int("".join(map(str, digits))) if digits else 0
        if sign:
            coefficient = -coefficient
        if exp >= 0:
            return ExactRational(coefficient * 10**exp, 1)
        return ExactRational(coefficient, 10**-exp)

    @staticmethod
    def parse(raw: str) -> Ok[ExactRational] | Err[str]:
        """Parse 'p/q', an integer or a decimal literal."""
        text = raw.strip()
        if "/" in text:
            left, _, right = text.partition("/")
            try:
                numerator, denominator = int(left), int(right)
            except ValueError:
                return Err(f"ExactRational: invalid fraction '{raw}'")
            if denominator == 0:
                return Err(f"ExactRational: zero denominator in '{raw}'")
            return Ok(ExactRational.of(numerator, denominator))
        try:
            value = Decimal(text)
        except InvalidOperation:
            return Err(f"ExactRational: invalid number '{raw}'")
        if not value.is_finite():
            return Err(f"ExactRational: must be finite, got '{raw}'")
        return Ok(ExactRational.from_decimal(value))

    # --- arithmetic ---

    def add(self, other: Operand) -> ExactRational:
        o = _coerce(other)
        if self.denominator == o.denominator:
            return ExactRational(self.numerator + o.numerator, self.denominator)
        return ExactRational(
            self.numerator * o.denominator + o.numerator * self.denominator,
            self.denominator * o.denominator,
        )

    def subtract(self, other: Operand) -> ExactRational:
        return self.add(_coerce(other).negate())

    def multiply(self, other: Operand) -> ExactRational:
        o = _coerce(other)
        return ExactRational(self.numerator * o.numerator, self.denominator * o.denominator)

    def divide(self, other: Operand) -> ExactRational:
        o = _coerce(other)
        if o.numerator == 0:
            raise _division_by_zero("divide")
        return ExactRational.of(self.numerator * o.denominator, self.denominator * o.numerator)

    def reciprocal(self) -> ExactRational:
        if self.numerator == 0:
            raise _division_by_zero("reciprocal")
        return ExactRational.of(self.denominator, self.numerator)

    def negate(self) -> ExactRational:
        return ExactRational(-self.numerator, self.denominator)

    def abs(self) -> ExactRational:
        return self if self.numerator >= 0 else self.negate()

    def pow(self, exponent: int) -> ExactRational:
        """Integer power; negative exponents go through the reciprocal."""
        if exponent == 0:
            return ExactRational.ONE
        if exponent < 0:
            return self.reciprocal().pow(-exponent)
        return ExactRational(self.numerator**exponent, self.denominator**exponent)

    # --- inspection ---

    def signum(self) -> int:
        return (self.numerator > 0) - (self.numerator < 0)

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_integer(self) -> bool:
        return self.numerator % self.denominator == 0

    def integer_part(self) -> ExactRational:
        """Truncated toward zero: 7/2 -> 3, -7/2 -> -3 (denominator kept)."""
        return self.subtract(self.fraction_part())

    def fraction_part(self) -> ExactRational:
        """self - integer_part(): 7/2 -> 1/2, -7/2 -> -1/2."""
        remainder = abs(self.numerator) % self.denominator
        return ExactRational(remainder if self.numerator >= 0 else -remainder, self.denominator)

    def reduce(self) -> ExactRational:
        """Lowest terms. Idempotent: a reduced value is returned unchanged."""
        divisor = gcd(self.numerator, self.denominator)
        if divisor == 1:
            return self
        return ExactRational(self.numerator // divisor, self.denominator // divisor)

    def compare_to(self, other: Operand) -> int:
        o = _coerce(other)
        diff = self.numerator * o.denominator - o.numerator * self.denominator
        return (diff > 0) - (diff < 0)

    # --- conversion ---

    def to_decimal(self, spec: PrecisionSpec) -> Decimal:
        """numerator / denominator rounded to spec (one correctly-rounded division)."""
        with localcontext(spec.context()):
            return Decimal(self.numerator) / Decimal(self.denominator)

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    # --- Bernoulli numbers ---

    @staticmethod
    def bernoulli(n: int) -> ExactRational:
        """Exact Bernoulli number B(n), with B(1) = -1/2."""
        if n < 0:
            raise domain_error("bernoulli(n)", n, f"n < 0: n = {n}")
        if n == 1:
            return ExactRational(-1, 2)
        if n % 2 == 1:
            return ExactRational.ZERO
        index = n // 2
        with _BERNOULLI_LOCK:
            for i in range(len(_BERNOULLI_CACHE), index + 1):
                _BERNOULLI_CACHE.append(_calculate_bernoulli(2 * i))
            return _BERNOULLI_CACHE[index]

    # --- dunder protocol ---

    def __add__(self, other: object) -> ExactRational:
        if not isinstance(other, ExactRational | int):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> ExactRational:
        if not isinstance(other, ExactRational | int):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> ExactRational:
        if not isinstance(other, int):
            return NotImplemented
        return _coerce(other).subtract(self)

    def __mul__(self, other: object) -> ExactRational:
        if not isinstance(other, ExactRational | int):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> ExactRational:
        if not isinstance(other, ExactRational | int):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> ExactRational:
        if not isinstance(other, int):
            return NotImplemented
        return _coerce(other).divide(self)

    def __neg__(self) -> ExactRational:
        return self.negate()

    def __abs__(self) -> ExactRational:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExactRational | int) or isinstance(other, bool):
            return NotImplemented
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        return hash(self.to_fraction())

    def __lt__(self, other: Operand) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Operand) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Operand) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Operand) -> bool:
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


ExactRational.ZERO = ExactRational(0, 1)
ExactRational.ONE = ExactRational(1, 1)
ExactRational.TWO = ExactRational(2, 1)
ExactRational.TEN = ExactRational(10, 1)


def _coerce(value: Operand) -> ExactRational:
    if isinstance(value, ExactRational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return ExactRational(value, 1)
    raise TypeError(
        f"ExactRational operand must be ExactRational or int, got {type(value).__name__}"
    )


# Even-index Bernoulli numbers B(0), B(2), B(4), ... in lowest terms.
_BERNOULLI_CACHE: list[ExactRational] = []
_BERNOULLI_LOCK = threading.Lock()


def _calculate_bernoulli(n: int) -> ExactRational:
    """B(n) = sum_k 1/(k+1) * sum_j (-1)^j * C(k, j) * j^n."""
    total = ExactRational.ZERO
    for k in range(n + 1):
        inner = sum((-1) ** j * comb(k, j) * j**n for j in range(k + 1))
        total = total.add(ExactRational(inner, k + 1))
    return total.reduce()
