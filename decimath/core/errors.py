"""Error hierarchy for decimath.

Arithmetic failures are raised, as the standard ``decimal`` module does.
Base class DecimathError, four @final subclasses. Each error carries a
stable ``code`` and the ``source`` ("module.function") that raised it.
"""

from __future__ import annotations

from typing import ClassVar, final


class DecimathError(ArithmeticError):
    """Base error. NOT @final — has subclasses."""

    code: ClassVar[str] = "DECIMATH_ERROR"

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def to_dict(self) -> dict[str, object]:
        """Serialize to dict with stable keys."""
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
class DomainError(DecimathError, ValueError):
    """Argument lies outside the domain of the function."""

    code: ClassVar[str] = "DOMAIN"

    def __init__(self, message: str, *, source: str, argument: str) -> None:
        super().__init__(message, source=source)
        self.argument = argument

    def to_dict(self) -> dict[str, object]:
        return {**DecimathError.to_dict(self), "argument": self.argument}


@final
class InvalidPrecisionError(DecimathError, ValueError):
    """Requested digit count is not a positive int."""

    code: ClassVar[str] = "INVALID_PRECISION"

    def __init__(self, message: str, *, source: str, digits: object) -> None:
        super().__init__(message, source=source)
        self.digits = digits

    def to_dict(self) -> dict[str, object]:
        return {**DecimathError.to_dict(self), "digits": repr(self.digits)}


@final
class DivisionByZeroError(DecimathError, ZeroDivisionError):
    """Exact division by zero."""

    code: ClassVar[str] = "DIVISION_BY_ZERO"


@final
class NonConvergenceError(DecimathError):
    """A series exceeded the configured term cap without converging."""

    code: ClassVar[str] = "NON_CONVERGENCE"

    def __init__(self, message: str, *, source: str, series: str, terms: int) -> None:
        super().__init__(message, source=source)
        self.series = series
        self.terms = terms

    def to_dict(self) -> dict[str, object]:
        return {**DecimathError.to_dict(self), "series": self.series, "terms": self.terms}


def domain_error(function: str, argument: object, reason: str) -> DomainError:
    """Build the DomainError for ``function`` rejecting ``argument``."""
    return DomainError(
        f"Illegal {function}: {reason}",
        source=f"decimath.functions.{function.split('(')[0]}",
        argument=str(argument),
    )
