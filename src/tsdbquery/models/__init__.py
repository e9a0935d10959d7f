from .query import (
    InvalidConfigurationError as InvalidConfigurationError,
    NumericFillPolicy as NumericFillPolicy,
    Metric as Metric,
    GroupByConfig as GroupByConfig,
)
