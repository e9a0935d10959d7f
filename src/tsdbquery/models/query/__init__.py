from .errors import InvalidConfigurationError as InvalidConfigurationError
from .fill_policy import NumericFillPolicy as NumericFillPolicy
from .metric import Metric as Metric
from .group_by import GroupByConfig as GroupByConfig
from .protocols import (
    QueryIteratorInterpolatorFactory as QueryIteratorInterpolatorFactory,
    QueryIteratorInterpolatorConfig as QueryIteratorInterpolatorConfig,
)
