import typing


@typing.runtime_checkable
class QueryIteratorInterpolatorFactory(typing.Protocol):
    """
    Capability that produces the interpolators used while iterating grouped series.

    A [`GroupByConfig`][tsdbquery.models.query.GroupByConfig] stores the factory
    by reference and compares it by identity. Nothing else about it is
    inspected by the query model.

    Reference implementations live in
    [`tsdbquery.interpolation`][tsdbquery.interpolation].
    """

    def name(self) -> str:
        """Short identifier of the interpolation family (e.g. `"scalar"`)."""
        ...


@typing.runtime_checkable
class QueryIteratorInterpolatorConfig(typing.Protocol):
    """
    Configuration object paired 1:1 with a
    [`QueryIteratorInterpolatorFactory`][tsdbquery.models.query.QueryIteratorInterpolatorFactory].

    Opaque to the query model: it is held by reference and only checked for presence.
    """

    ...
