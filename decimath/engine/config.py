"""Engine configuration.

Pure configuration data: one frozen dataclass, passed explicitly to an
EngineContext. There is no global mutable switch; choosing between shared
and isolated coefficient caches is a constructor argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final


@final
@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Tuning knobs for series evaluation, Newton iteration and constants."""

    # Digits carried beyond the request inside every series evaluation.
    series_guard_digits: int = 4
    # False: every calculation builds a private coefficient cache.
    reuse_coefficients: bool = True
    # None: no cap, series run until convergence.
    max_series_terms: int | None = None
    # Precision of the starting value for sqrt/root Newton iteration.
    newton_seed_digits: int = 17
    # Extra digits stored with cached constants (pi, e, ln2, ...).
    constant_guard_digits: int = 10

    def __post_init__(self) -> None:
        if self.series_guard_digits < 0:
            raise TypeError(
                f"EngineConfig.series_guard_digits must be >= 0, got {self.series_guard_digits}"
            )
        if self.max_series_terms is not None and self.max_series_terms < 2:
            raise TypeError(
                f"EngineConfig.max_series_terms must be >= 2 or None, got {self.max_series_terms}"
            )
        if self.newton_seed_digits < 1:
            raise TypeError(
                f"EngineConfig.newton_seed_digits must be >= 1, got {self.newton_seed_digits}"
            )
        if self.constant_guard_digits < 0:
            raise TypeError(
                f"EngineConfig.constant_guard_digits must be >= 0, "
                f"got {self.constant_guard_digits}"
            )


DEFAULT_ENGINE_CONFIG = EngineConfig()
