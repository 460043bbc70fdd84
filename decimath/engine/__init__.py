"""decimath.engine — series evaluation, range reduction and constant caching."""

from decimath.engine.calculators import (
    SeriesCalculator as SeriesCalculator,
)
from decimath.engine.calculators import (
    SeriesFamily as SeriesFamily,
)
from decimath.engine.config import (
    DEFAULT_ENGINE_CONFIG as DEFAULT_ENGINE_CONFIG,
)
from decimath.engine.config import (
    EngineConfig as EngineConfig,
)
from decimath.engine.constants import (
    ConstantCache as ConstantCache,
)
from decimath.engine.context import (
    EngineContext as EngineContext,
)
from decimath.engine.power import (
    PowerKind as PowerKind,
)
from decimath.engine.power import (
    PowerSequence as PowerSequence,
)
from decimath.engine.series import (
    CoefficientCache as CoefficientCache,
)
from decimath.engine.series import (
    SeriesSpec as SeriesSpec,
)
from decimath.engine.series import (
    evaluate as evaluate,
)
