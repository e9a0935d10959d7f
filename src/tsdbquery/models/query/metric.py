"""
Metric Module.

Defines [`Metric`][tsdbquery.models.query.Metric], the leaf of a time-series
query: which metric to read, which filter to apply, how to reduce it, how far
to shift it in time and how to fill the gaps.

Metrics are built in two steps. The builder (or the JSON parser) only copies
fields, so partially specified metrics can be round-tripped freely. The owning
query then calls [`validate()`][tsdbquery.models.query.Metric.validate] before
planning.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ...config import DEFAULT_QUERY_DEFAULTS, QueryDefaults
from ...helpers.relative_time import parse_relative_time
from ...logging_config import get_logger
from .errors import InvalidConfigurationError
from .fill_policy import NumericFillPolicy, _compare_optional

# Set the hierarchical logger
logger = get_logger(__name__)


def _compare_fill_policies(
    left: Optional[NumericFillPolicy], right: Optional[NumericFillPolicy]
) -> int:
    if left is None or right is None:
        return _compare_optional(left, right)
    return left.compare_to(right)


class Metric(BaseModel):
    """
    A single metric selection inside a query.

    Instances are immutable and therefore safe to share between threads once
    built. Equality, hashing and ordering cover all six fields, which makes
    metrics usable as cache keys and sortable for plan comparisons.

    Example:
        ```python
        from tsdbquery import FillPolicy, Metric, NumericFillPolicy

        metric = (
            Metric.new_builder()
            .set_metric("sys.cpu.user")
            .set_id("m1")
            .set_filter("f1")
            .set_time_offset("1h-ago")
            .set_aggregator("sum")
            .set_fill_policy(NumericFillPolicy(policy=FillPolicy.NOT_A_NUMBER))
            .build()
        )
        metric.validate()

        # Round trip through the wire format
        assert Metric.parse_json(metric.to_json()) == metric
        ```

    Attributes:
        metric: The time-series metric name.
        id: Handle used to reference this metric inside the query. Must differ from `metric`.
        filter: Reference to a filter defined elsewhere in the query.
        aggregator: Name of the reduction function.
        time_offset: Relative time shift such as `"1h-ago"` (wire key `timeOffset`).
        fill_policy: How missing points are filled (wire key `fillPolicy`).
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    metric: Optional[str] = None
    id: Optional[str] = None
    filter: Optional[str] = None
    aggregator: Optional[str] = None
    time_offset: Optional[str] = Field(default=None, alias="timeOffset")
    fill_policy: Optional[NumericFillPolicy] = Field(default=None, alias="fillPolicy")

    class Builder:
        """
        Mutable accumulator for a [`Metric`][tsdbquery.models.query.Metric].

        Setters never validate. A builder may be reused: every call to
        `build()` snapshots the current values into a new `Metric`.
        """

        def __init__(self):
            self._metric: Optional[str] = None
            self._id: Optional[str] = None
            self._filter: Optional[str] = None
            self._aggregator: Optional[str] = None
            self._time_offset: Optional[str] = None
            self._fill_policy: Optional[NumericFillPolicy] = None

        def set_metric(self, metric: str) -> "Metric.Builder":
            self._metric = metric
            return self

        def set_id(self, id: str) -> "Metric.Builder":
            self._id = id
            return self

        def set_filter(self, filter: str) -> "Metric.Builder":
            self._filter = filter
            return self

        def set_aggregator(self, aggregator: str) -> "Metric.Builder":
            self._aggregator = aggregator
            return self

        def set_time_offset(self, time_offset: str) -> "Metric.Builder":
            self._time_offset = time_offset
            return self

        def set_fill_policy(
            self, fill_policy: NumericFillPolicy
        ) -> "Metric.Builder":
            self._fill_policy = fill_policy
            return self

        def build(self) -> "Metric":
            """Returns an immutable snapshot of the builder. Performs no validation."""
            return Metric(
                metric=self._metric,
                id=self._id,
                filter=self._filter,
                aggregator=self._aggregator,
                time_offset=self._time_offset,
                fill_policy=self._fill_policy,
            )

    @classmethod
    def new_builder(cls) -> "Metric.Builder":
        """Returns a fresh builder with no fields set."""
        return cls.Builder()

    # --- Structural (de)serialization ---

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Metric":
        """
        Populates a metric from its wire dictionary.

        Unknown keys are ignored and absent keys leave the field unset. No
        semantic validation is performed.
        """
        return cls.model_validate(data)

    @classmethod
    def parse_json(cls, json_str: Union[str, bytes]) -> "Metric":
        """Same as [`from_dict()`][tsdbquery.models.query.Metric.from_dict], from a JSON document."""
        return cls.model_validate_json(json_str)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the metric into its wire dictionary.

        Only the fields that are set are emitted, under their wire keys.

        Example Output:
            `{"metric": "sys.cpu.user", "id": "m1", "timeOffset": "1h-ago", "fillPolicy": {"policy": "nan"}}`
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    # --- Validation ---

    def validate(self) -> None:
        """
        Checks the cross-field rules that must hold before the metric drives execution.

        The check is pure: calling it any number of times has no side effect
        other than raising.

        Raises:
            InvalidConfigurationError: If `metric` is missing or empty, if `id` is
                missing, empty or equal to `metric`, if `time_offset` is not a
                relative time expression, or if `fill_policy` is inconsistent.
        """
        if not self.metric:
            raise self._invalid("Missing or empty metric")
        if not self.id:
            raise self._invalid("Missing or empty id")
        if self.id == self.metric:
            raise self._invalid(
                f"The id '{self.id}' cannot be the same as the metric name"
            )
        if self.time_offset is not None:
            try:
                parse_relative_time(self.time_offset)
            except InvalidConfigurationError as e:
                raise self._invalid(f"Invalid timeOffset: {e}") from e
        if self.fill_policy is not None:
            try:
                self.fill_policy.validate()
            except InvalidConfigurationError as e:
                raise self._invalid(f"Invalid fillPolicy: {e}") from e

    def _invalid(self, reason: str) -> InvalidConfigurationError:
        logger.debug(f"Metric '{self.id}' failed validation: {reason}")
        return InvalidConfigurationError(reason)

    # --- Defaults resolution ---

    def effective_aggregator(self, defaults: Optional[QueryDefaults] = None) -> str:
        """Returns `aggregator`, or the configured default when unset."""
        if self.aggregator is not None:
            return self.aggregator
        return (defaults or DEFAULT_QUERY_DEFAULTS).default_aggregator

    def effective_fill_policy(
        self, defaults: Optional[QueryDefaults] = None
    ) -> NumericFillPolicy:
        """Returns `fill_policy`, or the configured default when unset."""
        if self.fill_policy is not None:
            return self.fill_policy
        return (defaults or DEFAULT_QUERY_DEFAULTS).default_fill_policy

    # --- Identity and ordering ---

    def _key(self):
        return (
            self.id,
            self.filter,
            self.metric,
            self.time_offset,
            self.aggregator,
            self.fill_policy,
        )

    def compare_to(self, other: "Metric") -> int:
        """
        Three-way comparison returning -1, 0 or 1.

        Fields are compared in the order `id`, `filter`, `metric`,
        `time_offset`, `aggregator`, `fill_policy`, stopping at the first
        difference. An unset field sorts before a set one.
        """
        for mine, theirs in zip(self._key()[:-1], other._key()[:-1]):
            result = _compare_optional(mine, theirs)
            if result != 0:
                return result
        return _compare_fill_policies(self.fill_policy, other.fill_policy)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Metric):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "Metric") -> bool:
        if not isinstance(other, Metric):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Metric") -> bool:
        if not isinstance(other, Metric):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Metric") -> bool:
        if not isinstance(other, Metric):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Metric") -> bool:
        if not isinstance(other, Metric):
            return NotImplemented
        return self.compare_to(other) >= 0
