from .numeric_config import NumericInterpolatorConfig as NumericInterpolatorConfig
from .numeric_factories import (
    NullInterpolatorFactory as NullInterpolatorFactory,
    NaNInterpolatorFactory as NaNInterpolatorFactory,
    ZeroInterpolatorFactory as ZeroInterpolatorFactory,
    ScalarInterpolatorFactory as ScalarInterpolatorFactory,
)
