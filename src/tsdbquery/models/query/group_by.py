"""
Group-By Configuration Module.

Defines [`GroupByConfig`][tsdbquery.models.query.GroupByConfig], the directive
that reduces several series into one per distinct combination of tag values.

Unlike [`Metric`][tsdbquery.models.query.Metric], which defers validation to an
explicit `validate()` call, a `GroupByConfig` is validated eagerly by its
builder: an invalid instance can never exist.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Optional, Set

from ...logging_config import get_logger
from .errors import InvalidConfigurationError
from .protocols import QueryIteratorInterpolatorConfig, QueryIteratorInterpolatorFactory

# Set the hierarchical logger
logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class GroupByConfig:
    """
    Immutable grouping directive.

    The interpolator factory and its configuration are held by reference and
    never copied. Equality uses identity for the factory and structural
    comparison for every other field.

    Example:
        ```python
        from tsdbquery import GroupByConfig, NumericInterpolatorConfig, ScalarInterpolatorFactory

        factory = ScalarInterpolatorFactory()
        config = (
            GroupByConfig.new_builder()
            .set_aggregator("sum")
            .set_id("GBy")
            .set_tag_keys({"host"})
            .add_tag_key("dc")
            .set_query_iterator_interpolator_factory(factory)
            .set_query_iterator_interpolator_config(factory.default_config(scalar=42))
            .build()
        )
        assert config.get_tag_keys() == {"host", "dc"}
        ```

    Attributes:
        aggregator: Name of the reduction function applied within each group.
        id: Identifier of the directive inside the query.
        tag_keys: The tag keys whose values define the groups.
        interpolator_factory: Capability producing the interpolators used while grouping.
        interpolator_config: Configuration paired with `interpolator_factory`.
    """

    aggregator: str
    id: str
    tag_keys: FrozenSet[str]
    interpolator_factory: QueryIteratorInterpolatorFactory
    interpolator_config: QueryIteratorInterpolatorConfig

    class Builder:
        """
        Mutable accumulator for a [`GroupByConfig`][tsdbquery.models.query.GroupByConfig].

        A builder may be reused: every successful `build()` snapshots the
        current values into a new `GroupByConfig`.
        """

        def __init__(self):
            self._aggregator: Optional[str] = None
            self._id: Optional[str] = None
            self._tag_keys: Optional[Set[str]] = None
            self._interpolator_factory: Optional[QueryIteratorInterpolatorFactory] = None
            self._interpolator_config: Optional[QueryIteratorInterpolatorConfig] = None

        @classmethod
        def from_dict(cls, data: Dict[str, Any]) -> "GroupByConfig.Builder":
            """
            Creates a builder populated from the wire keys `aggregator`, `id` and `tagKeys`.

            Unknown keys are ignored. The interpolator factory and configuration
            are not part of the wire format and must be set programmatically
            before calling `build()`.
            """
            builder = cls()
            if data.get("aggregator") is not None:
                builder.set_aggregator(data["aggregator"])
            if data.get("id") is not None:
                builder.set_id(data["id"])
            if data.get("tagKeys") is not None:
                builder.set_tag_keys(data["tagKeys"])
            return builder

        def set_aggregator(self, aggregator: str) -> "GroupByConfig.Builder":
            self._aggregator = aggregator
            return self

        def set_id(self, id: str) -> "GroupByConfig.Builder":
            self._id = id
            return self

        def set_tag_keys(self, tag_keys: Iterable[str]) -> "GroupByConfig.Builder":
            """Replaces the tag keys. Duplicates collapse and a bare string is a single key."""
            if isinstance(tag_keys, str):
                tag_keys = [tag_keys]
            self._tag_keys = set(tag_keys) if tag_keys is not None else None
            return self

        def add_tag_key(self, tag_key: str) -> "GroupByConfig.Builder":
            """Adds one tag key, creating the set if none was set yet."""
            if self._tag_keys is None:
                self._tag_keys = set()
            self._tag_keys.add(tag_key)
            return self

        def set_query_iterator_interpolator_factory(
            self, factory: QueryIteratorInterpolatorFactory
        ) -> "GroupByConfig.Builder":
            self._interpolator_factory = factory
            return self

        def set_query_iterator_interpolator_config(
            self, config: QueryIteratorInterpolatorConfig
        ) -> "GroupByConfig.Builder":
            self._interpolator_config = config
            return self

        def build(self) -> "GroupByConfig":
            """
            Validates the accumulated fields and returns an immutable `GroupByConfig`.

            Raises:
                InvalidConfigurationError: If `aggregator` or `id` is missing or
                    empty, if no tag key is set, or if the interpolator factory
                    or configuration is missing.
            """
            if not self._aggregator:
                raise self._invalid("Missing or empty aggregator")
            if not self._id:
                raise self._invalid("Missing or empty id")
            if not self._tag_keys:
                raise self._invalid("Missing or empty tag keys")
            if self._interpolator_factory is None:
                raise self._invalid("Missing interpolator factory")
            if self._interpolator_config is None:
                raise self._invalid("Missing interpolator config")

            return GroupByConfig(
                aggregator=self._aggregator,
                id=self._id,
                tag_keys=frozenset(self._tag_keys),
                interpolator_factory=self._interpolator_factory,
                interpolator_config=self._interpolator_config,
            )

        def _invalid(self, reason: str) -> InvalidConfigurationError:
            logger.debug(f"GroupByConfig '{self._id}' rejected: {reason}")
            return InvalidConfigurationError(reason)

    @classmethod
    def new_builder(cls) -> "GroupByConfig.Builder":
        """Returns a fresh builder with no fields set."""
        return cls.Builder()

    # --- Accessors ---

    def get_aggregator(self) -> str:
        return self.aggregator

    def get_id(self) -> str:
        return self.id

    def get_tag_keys(self) -> FrozenSet[str]:
        return self.tag_keys

    def get_interpolator(self) -> QueryIteratorInterpolatorFactory:
        return self.interpolator_factory

    def get_interpolator_config(self) -> QueryIteratorInterpolatorConfig:
        return self.interpolator_config

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the wire-visible part of the directive.

        Example Output:
            `{"aggregator": "sum", "id": "GBy", "tagKeys": ["dc", "host"]}`
        """
        return {
            "aggregator": self.aggregator,
            "id": self.id,
            "tagKeys": sorted(self.tag_keys),
        }

    # --- Identity ---

    def __eq__(self, other) -> bool:
        if not isinstance(other, GroupByConfig):
            return NotImplemented
        return (
            self.aggregator == other.aggregator
            and self.id == other.id
            and self.tag_keys == other.tag_keys
            and self.interpolator_factory is other.interpolator_factory
            and self.interpolator_config == other.interpolator_config
        )

    def __hash__(self) -> int:
        # The config may be unhashable; it only takes part in equality
        return hash(
            (self.aggregator, self.id, self.tag_keys, id(self.interpolator_factory))
        )
