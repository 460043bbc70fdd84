"""decimath.functions — the public function surface."""

from decimath.functions.bound import (
    DecimalMath as DecimalMath,
)
from decimath.functions.exponential import (
    e as e,
)
from decimath.functions.exponential import (
    exp as exp,
)
from decimath.functions.exponential import (
    log as log,
)
from decimath.functions.exponential import (
    log2 as log2,
)
from decimath.functions.exponential import (
    log10 as log10,
)
from decimath.functions.exponential import (
    pi as pi,
)
from decimath.functions.exponential import (
    pow as pow,
)
from decimath.functions.hyperbolic import (
    acosh as acosh,
)
from decimath.functions.hyperbolic import (
    acoth as acoth,
)
from decimath.functions.hyperbolic import (
    asinh as asinh,
)
from decimath.functions.hyperbolic import (
    atanh as atanh,
)
from decimath.functions.hyperbolic import (
    cosh as cosh,
)
from decimath.functions.hyperbolic import (
    coth as coth,
)
from decimath.functions.hyperbolic import (
    sinh as sinh,
)
from decimath.functions.hyperbolic import (
    tanh as tanh,
)
from decimath.functions.roots import (
    reciprocal as reciprocal,
)
from decimath.functions.roots import (
    root as root,
)
from decimath.functions.roots import (
    sqrt as sqrt,
)
from decimath.functions.special import (
    bernoulli as bernoulli,
)
from decimath.functions.special import (
    factorial as factorial,
)
from decimath.functions.special import (
    gamma as gamma,
)
from decimath.functions.trigonometric import (
    acos as acos,
)
from decimath.functions.trigonometric import (
    acot as acot,
)
from decimath.functions.trigonometric import (
    asin as asin,
)
from decimath.functions.trigonometric import (
    atan as atan,
)
from decimath.functions.trigonometric import (
    atan2 as atan2,
)
from decimath.functions.trigonometric import (
    cos as cos,
)
from decimath.functions.trigonometric import (
    cot as cot,
)
from decimath.functions.trigonometric import (
    sin as sin,
)
from decimath.functions.trigonometric import (
    tan as tan,
)
