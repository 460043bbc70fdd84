"""Generic Taylor/Maclaurin series evaluation.

A series is described by data, not by a subclass: a SeriesSpec names the
coefficient recurrence (a generator of exact rationals), the power sequence
it multiplies with, and whether terms are checked in pairs. One function,
``evaluate``, sums any of them.

Algorithm
---------
1. Working precision = requested digits + guard digits (EngineConfig).
2. Acceptable error = 10^-(digits+1).
3. term_i = coefficient_i.numerator * power_i / coefficient_i.denominator,
   the only roundings being this term and the running sum.
4. Pairwise series add two terms before checking termination, so an
   alternating series cannot stop on an accidentally tiny single term.
5. Stop when |step| <= acceptable error, round the sum to the request.

Termination is guaranteed by the reduced argument ranges the callers feed in;
there is no iteration cap unless EngineConfig.max_series_terms is set.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import TypeAlias, final

from decimath.core.errors import NonConvergenceError
from decimath.core.precision import PrecisionSpec
from decimath.core.rational import ExactRational
from decimath.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from decimath.engine.power import PowerKind, PowerSequence

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)

CoefficientRecurrence: TypeAlias = Callable[[], Iterator[ExactRational]]


@final
@dataclass(frozen=True, slots=True)
class SeriesSpec:
    """What to sum: coefficients c_i, powers p_i, and the pairwise flag."""

    name: str
    coefficients: CoefficientRecurrence
    power: PowerKind
    pairwise: bool


@final
class CoefficientCache:
    """Append-only, thread-safe list of series coefficients.

    Entries are never modified once appended, so a reader asking for an
    index below the current length reads without the lock. Extension runs
    the recurrence under the lock: no coefficient is computed twice and no
    reader sees a partial append.
    """

    __slots__ = ("_coefficients", "_lock", "_recurrence", "name")

    def __init__(self, name: str, recurrence: CoefficientRecurrence) -> None:
        self.name = name
        self._coefficients: list[ExactRational] = []
        self._lock = threading.Lock()
        self._recurrence: Iterator[ExactRational] = recurrence()

    def __len__(self) -> int:
        return len(self._coefficients)

    def get(self, index: int) -> ExactRational:
        """Coefficient of term ``index``, extending the cache if needed."""
        coefficients = self._coefficients
        if index < len(coefficients):
            return coefficients[index]
        with self._lock:
            before = len(self._coefficients)
            while len(self._coefficients) <= index:
                self._coefficients.append(next(self._recurrence))
            if len(self._coefficients) > before:
                logger.debug(
                    "%s coefficient cache grew %d -> %d",
                    self.name, before, len(self._coefficients),
                )
            return self._coefficients[index]

    def snapshot(self) -> tuple[ExactRational, ...]:
        """Immutable copy of the coefficients computed so far."""
        return tuple(self._coefficients)


def _term(coefficient: ExactRational, powers: PowerSequence) -> Decimal:
    # Caller holds the working localcontext.
    term = powers.current() * coefficient.numerator / coefficient.denominator
    powers.advance()
    return term


def evaluate(
    x: Decimal,
    spec: PrecisionSpec,
    series: SeriesSpec,
    cache: CoefficientCache,
    *,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> Decimal:
    """Sum ``series`` at x to ``spec``.

    Raises
    ------
    NonConvergenceError
        Only when config.max_series_terms is set and is exceeded.
    """
    working = spec.with_guard(config.series_guard_digits)
    acceptable_error = spec.acceptable_error
    context = working.context()
    powers = series.power.start(x, context)
    cap = config.max_series_terms

    total = _ZERO
    index = 0
    with localcontext(context):
        while True:
            step = _term(cache.get(index), powers)
            index += 1
            if series.pairwise:
                step = step + _term(cache.get(index), powers)
                index += 1
            total = total + step
            if abs(step) <= acceptable_error:
                break
            if cap is not None and index >= cap:
                raise NonConvergenceError(
                    f"{series.name} series did not converge within {cap} terms "
                    f"(x={x}, digits={spec.digits}, last step={step})",
                    source="decimath.engine.series.evaluate",
                    series=series.name,
                    terms=index,
                )
    return spec.round(total)
