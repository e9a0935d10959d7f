"""
tsdbquery - query specification model for a time-series query engine.

This package provides the immutable, validated objects that describe a query
before it is planned and executed:

- **Metric**: A single metric selection (filter, aggregator, time offset, fill policy).
- **GroupByConfig**: A grouping directive reducing series by tag keys.
- **NumericFillPolicy / FillPolicy**: How missing points are synthesized.
- **Interpolation**: Reference interpolator factories and their configuration.

Example:
    >>> from tsdbquery import Metric
    >>> metric = Metric.new_builder().set_metric("sys.cpu.user").set_id("m1").build()
    >>> metric.validate()
"""

# --- Enums ---
from .enum import (
    FillPolicy as FillPolicy,
    FillWithRealPolicy as FillWithRealPolicy,
)

# --- Query Models ---
from .models.query import (
    InvalidConfigurationError as InvalidConfigurationError,
    NumericFillPolicy as NumericFillPolicy,
    Metric as Metric,
    GroupByConfig as GroupByConfig,
    QueryIteratorInterpolatorFactory as QueryIteratorInterpolatorFactory,
    QueryIteratorInterpolatorConfig as QueryIteratorInterpolatorConfig,
)

# --- Configuration ---
from .config import (
    QueryDefaults as QueryDefaults,
    DEFAULT_QUERY_DEFAULTS as DEFAULT_QUERY_DEFAULTS,
)

# --- Interpolation ---
from .interpolation import (
    NumericInterpolatorConfig as NumericInterpolatorConfig,
    NullInterpolatorFactory as NullInterpolatorFactory,
    NaNInterpolatorFactory as NaNInterpolatorFactory,
    ZeroInterpolatorFactory as ZeroInterpolatorFactory,
    ScalarInterpolatorFactory as ScalarInterpolatorFactory,
)

# --- Helpers ---
from .helpers import (
    parse_duration as parse_duration,
    parse_relative_time as parse_relative_time,
    is_relative_time as is_relative_time,
    resolve_relative_time as resolve_relative_time,
)

from .logging_config import (
    get_logger as get_logger,
    setup_sdk_logging as setup_sdk_logging,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_sdk_logging",
    # Enums
    "FillPolicy",
    "FillWithRealPolicy",
    # Query Models
    "InvalidConfigurationError",
    "NumericFillPolicy",
    "Metric",
    "GroupByConfig",
    "QueryIteratorInterpolatorFactory",
    "QueryIteratorInterpolatorConfig",
    # Configuration
    "QueryDefaults",
    "DEFAULT_QUERY_DEFAULTS",
    # Interpolation
    "NumericInterpolatorConfig",
    "NullInterpolatorFactory",
    "NaNInterpolatorFactory",
    "ZeroInterpolatorFactory",
    "ScalarInterpolatorFactory",
    # Helpers
    "parse_duration",
    "parse_relative_time",
    "is_relative_time",
    "resolve_relative_time",
]


# --- Set up the top-level logger for the package ---

from logging import NullHandler

_sdk_logger = get_logger()
_sdk_logger.addHandler(NullHandler())
