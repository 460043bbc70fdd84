"""Engine context: the calculators and constants one computation uses.

An EngineContext owns one SeriesCalculator per SeriesFamily (and with it the
coefficient caches) plus a ConstantCache. ``EngineContext.shared()`` is the
process-wide instance the public functions fall back to; constructing
``EngineContext(config)`` gives a fully isolated one, e.g. for tests or for
a different EngineConfig.
"""

from __future__ import annotations

import logging
import threading
from typing import final

from decimath.engine.calculators import SeriesCalculator, SeriesFamily
from decimath.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from decimath.engine.constants import ConstantCache

logger = logging.getLogger(__name__)

_shared: EngineContext | None = None
_shared_lock = threading.Lock()


@final
class EngineContext:
    """Calculators, coefficient caches and constants bound to one EngineConfig."""

    __slots__ = ("_calculators", "config", "constants")

    def __init__(self, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> None:
        if not isinstance(config, EngineConfig):
            raise TypeError(
                f"EngineContext.config must be EngineConfig, got {type(config).__name__}"
            )
        self.config = config
        self._calculators = {
            family: SeriesCalculator(family.series, config) for family in SeriesFamily
        }
        self.constants = ConstantCache(self.calculator, config)
        logger.debug("engine context created with %r", config)

    def calculator(self, family: SeriesFamily) -> SeriesCalculator:
        return self._calculators[family]

    @classmethod
    def shared(cls) -> EngineContext:
        """The lazily created process-wide context."""
        global _shared
        context = _shared
        if context is None:
            with _shared_lock:
                context = _shared
                if context is None:
                    context = _shared = cls()
        return context


def resolve(context: EngineContext | None) -> EngineContext:
    """``context`` itself, or the shared context when None."""
    if context is None:
        return EngineContext.shared()
    if not isinstance(context, EngineContext):
        raise TypeError(f"context must be EngineContext or None, got {type(context).__name__}")
    return context
