"""
Configuration Module.

Defines the fallback values applied when a query component leaves an
optional field unset.
"""

from dataclasses import dataclass, field

from .enum import FillPolicy
from .models.query.fill_policy import NumericFillPolicy


@dataclass(frozen=True)
class QueryDefaults:
    """
    Fallbacks used to resolve the optional fields of a
    [`Metric`][tsdbquery.models.query.Metric].

    The defaults are never written into the metric itself: equality, hashing
    and ordering always see the fields exactly as they were set. They are only
    consulted through
    [`Metric.effective_aggregator()`][tsdbquery.models.query.Metric.effective_aggregator]
    and [`Metric.effective_fill_policy()`][tsdbquery.models.query.Metric.effective_fill_policy].
    """

    default_aggregator: str = "sum"
    """Reduction function used when a metric names none."""

    default_fill_policy: NumericFillPolicy = field(
        default_factory=lambda: NumericFillPolicy(policy=FillPolicy.NONE)
    )
    """Fill policy used when a metric names none."""


DEFAULT_QUERY_DEFAULTS = QueryDefaults()
