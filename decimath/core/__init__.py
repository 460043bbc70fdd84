"""decimath.core — precision, errors, results, exact rationals and digit helpers."""

from decimath.core.digits import (
    exponent as exponent,
)
from decimath.core.digits import (
    fractional_part as fractional_part,
)
from decimath.core.digits import (
    integral_part as integral_part,
)
from decimath.core.digits import (
    is_integer as is_integer,
)
from decimath.core.digits import (
    mantissa as mantissa,
)
from decimath.core.digits import (
    round_with_trailing_zeroes as round_with_trailing_zeroes,
)
from decimath.core.digits import (
    shift as shift,
)
from decimath.core.digits import (
    significant_digits as significant_digits,
)
from decimath.core.errors import (
    DecimathError as DecimathError,
)
from decimath.core.errors import (
    DivisionByZeroError as DivisionByZeroError,
)
from decimath.core.errors import (
    DomainError as DomainError,
)
from decimath.core.errors import (
    InvalidPrecisionError as InvalidPrecisionError,
)
from decimath.core.errors import (
    NonConvergenceError as NonConvergenceError,
)
from decimath.core.precision import (
    DECIMAL32 as DECIMAL32,
)
from decimath.core.precision import (
    DECIMAL64 as DECIMAL64,
)
from decimath.core.precision import (
    DECIMAL128 as DECIMAL128,
)
from decimath.core.precision import (
    PrecisionSpec as PrecisionSpec,
)
from decimath.core.precision import (
    RoundingRule as RoundingRule,
)
from decimath.core.rational import (
    ExactRational as ExactRational,
)
from decimath.core.result import (
    Err as Err,
)
from decimath.core.result import (
    Ok as Ok,
)
from decimath.core.result import (
    unwrap as unwrap,
)
