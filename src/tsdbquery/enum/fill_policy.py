from enum import Enum


class FillPolicy(Enum):
    """
    Strategy used to synthesize a value at a timestamp where a time series has
    no recorded data point.

    The declaration order is meaningful: it is the order in which
    [`NumericFillPolicy`][tsdbquery.models.query.NumericFillPolicy] instances,
    and therefore [`Metric`][tsdbquery.models.query.Metric] instances, are sorted.
    """

    NONE = "none"  # Emit nothing for the missing timestamp.
    NULL = "null"  # Emit an explicit null.
    NOT_A_NUMBER = "nan"  # Emit a NaN.
    ZERO = "zero"  # Emit 0.
    SCALAR = "scalar"  # Emit a caller supplied constant.

    @classmethod
    def _missing_(cls, value):
        # Wire tags are matched case-insensitively ("NaN", "Zero", ...)
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @property
    def is_parameterized(self) -> bool:
        """`True` when the policy needs a companion value (only `SCALAR`)."""
        return self is FillPolicy.SCALAR

    @property
    def ordinal(self) -> int:
        """Position of the member in the declaration order."""
        return list(FillPolicy).index(self)
