"""Cached mathematical constants: pi, e, ln 2, ln 3, ln 10.

Each constant has one entry holding ``(digits, value)``. A request at or
below the cached precision rounds the stored value; a longer request
recomputes at the new precision plus EngineConfig.constant_guard_digits and
replaces the entry wholesale, under that entry's lock. Readers never see a
half-written entry: the tuple is swapped in a single assignment.

Besides the named constants there is a keyed table store for coefficient
sets that depend on a parameter (Spouge's approximation in
decimath.functions.special).

    pi      Chudnovsky: 426880 sqrt(10005) / sum_k M_k (13591409 + 545140134 k) / (-640320^3)^k
    e       EXP series at 1
    ln 2    2 atanh(1/3)
    ln 3    ln 2 + 2 atanh(1/5)
    ln 10   3 ln 2 + 2 atanh(1/9)

The logarithms use the literals in decimath.engine._literals while the
request is shorter than the literal.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable
from decimal import Decimal, localcontext
from typing import TypeAlias, final

from decimath.core.precision import PrecisionSpec
from decimath.engine._literals import LOG_TEN, LOG_THREE, LOG_TWO
from decimath.engine.calculators import SeriesCalculator, SeriesFamily
from decimath.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from decimath.engine.newton import sqrt_newton

logger = logging.getLogger(__name__)

CalculatorLookup: TypeAlias = Callable[[SeriesFamily], SeriesCalculator]
Compute: TypeAlias = Callable[[PrecisionSpec], Decimal]
TableCompute: TypeAlias = Callable[[PrecisionSpec], tuple[Decimal, ...]]

_ONE = Decimal(1)
_TWO = Decimal(2)

# Chudnovsky: each term adds about 14.18 digits.
_CHUDNOVSKY_A = 13591409
_CHUDNOVSKY_B = 545140134
_CHUDNOVSKY_C3_OVER_24 = 640320**3 // 24
_CHUDNOVSKY_FACTOR = 426880
_DIGITS_PER_TERM = 14

# Digits kept back from the end of a truncated literal.
_LITERAL_MARGIN = 5


def _literal_digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


@final
class _Entry:
    """One cached constant: ``cached`` is (digits, value) or None."""

    __slots__ = ("cached", "lock")

    def __init__(self) -> None:
        self.cached: tuple[int, Decimal] | None = None
        self.lock = threading.Lock()


@final
class ConstantCache:
    """Per-engine cache of constants, each entry under its own lock."""

    __slots__ = ("_calculator", "_config", "_entries", "_tables", "_tables_lock")

    def __init__(
        self, calculator: CalculatorLookup, config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    ) -> None:
        self._calculator = calculator
        self._config = config
        self._entries = {
            name: _Entry() for name in ("pi", "e", "log_two", "log_three", "log_ten")
        }
        self._tables: dict[tuple[str, Hashable], tuple[int, tuple[Decimal, ...]]] = {}
        self._tables_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public constants
    # ------------------------------------------------------------------

    def pi(self, spec: PrecisionSpec) -> Decimal:
        return self._get("pi", spec, self._compute_pi)

    def e(self, spec: PrecisionSpec) -> Decimal:
        return self._get("e", spec, self._compute_e)

    def log_two(self, spec: PrecisionSpec) -> Decimal:
        return self._get("log_two", spec, self._compute_log_two)

    def log_three(self, spec: PrecisionSpec) -> Decimal:
        return self._get("log_three", spec, self._compute_log_three)

    def log_ten(self, spec: PrecisionSpec) -> Decimal:
        return self._get("log_ten", spec, self._compute_log_ten)

    def cached_digits(self, name: str) -> int:
        """Precision currently stored for ``name``; 0 if never computed."""
        cached = self._entries[name].cached
        return 0 if cached is None else cached[0]

    def table(
        self, name: str, key: Hashable, spec: PrecisionSpec, compute: TableCompute,
    ) -> tuple[Decimal, ...]:
        """Coefficient table ``(name, key)`` computed at least at spec.digits.

        Tables are returned as stored, not rounded: consumers use them as
        working values at their own precision.
        """
        slot = (name, key)
        stored = self._tables.get(slot)
        if stored is not None and stored[0] >= spec.digits:
            return stored[1]
        with self._tables_lock:
            stored = self._tables.get(slot)
            if stored is not None and stored[0] >= spec.digits:
                return stored[1]
            values = compute(spec)
            self._tables[slot] = (spec.digits, values)
            logger.debug("table %s[%r] computed at %d digits", name, key, spec.digits)
            return values

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _get(self, name: str, spec: PrecisionSpec, compute: Compute) -> Decimal:
        entry = self._entries[name]
        cached = entry.cached
        if cached is None or cached[0] < spec.digits:
            with entry.lock:
                cached = entry.cached
                if cached is None or cached[0] < spec.digits:
                    digits = spec.digits + self._config.constant_guard_digits
                    value = compute(PrecisionSpec(digits=digits))
                    cached = (digits, value)
                    entry.cached = cached
                    logger.debug("constant %s computed at %d digits", name, digits)
        return spec.round(cached[1])

    def _atanh(self, x: Decimal, spec: PrecisionSpec) -> Decimal:
        return self._calculator(SeriesFamily.ATANH).calculate(x, spec)

    def _compute_pi(self, spec: PrecisionSpec) -> Decimal:
        working = spec.with_guard(10)
        terms = working.digits // _DIGITS_PER_TERM + 2
        root = sqrt_newton(Decimal(10005), working, self._config)
        with localcontext(working.context()):
            term = _ONE
            sum_a = _ONE
            sum_b = Decimal(0)
            for k in range(1, terms):
                term = term * -((6 * k - 5) * (2 * k - 1) * (6 * k - 1))
                term = term / (k * k * k * _CHUDNOVSKY_C3_OVER_24)
                sum_a += term
                sum_b += k * term
            total = _CHUDNOVSKY_A * sum_a + _CHUDNOVSKY_B * sum_b
            result = _CHUDNOVSKY_FACTOR * root / total
        return spec.round(result)

    def _compute_e(self, spec: PrecisionSpec) -> Decimal:
        return self._calculator(SeriesFamily.EXP).calculate(_ONE, spec)

    def _compute_log_two(self, spec: PrecisionSpec) -> Decimal:
        if spec.digits + _LITERAL_MARGIN < _literal_digits(LOG_TWO):
            return spec.round(LOG_TWO)
        working = spec.with_guard(2)
        with localcontext(working.context()):
            result = _TWO * self._atanh(_ONE / 3, working)
        return spec.round(result)

    def _compute_log_three(self, spec: PrecisionSpec) -> Decimal:
        if spec.digits + _LITERAL_MARGIN < _literal_digits(LOG_THREE):
            return spec.round(LOG_THREE)
        working = spec.with_guard(2)
        with localcontext(working.context()):
            result = self.log_two(working) + _TWO * self._atanh(_ONE / 5, working)
        return spec.round(result)

    def _compute_log_ten(self, spec: PrecisionSpec) -> Decimal:
        if spec.digits + _LITERAL_MARGIN < _literal_digits(LOG_TEN):
            return spec.round(LOG_TEN)
        working = spec.with_guard(2)
        with localcontext(working.context()):
            result = 3 * self.log_two(working) + _TWO * self._atanh(_ONE / 9, working)
        return spec.round(result)
