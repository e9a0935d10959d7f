import math
from dataclasses import dataclass
from typing import Optional

from ..enum import FillPolicy, FillWithRealPolicy
from ..models.query.fill_policy import NumericFillPolicy


@dataclass
class NumericInterpolatorConfig:
    """
    Configuration for the numeric interpolators.

    Pairs with one of the factories in
    [`tsdbquery.interpolation`][tsdbquery.interpolation] when handed to a
    [`GroupByConfig`][tsdbquery.models.query.GroupByConfig].
    """

    fill_policy: FillPolicy = FillPolicy.NONE
    """Strategy applied when no usable real value exists."""

    real_fill_policy: FillWithRealPolicy = FillWithRealPolicy.NONE
    """Whether a neighbouring real value may be used first."""

    scalar: Optional[float] = None
    """The constant emitted under `FillPolicy.SCALAR`."""

    @property
    def fill_value(self) -> Optional[float]:
        """The synthesized value for a missing point, `None` for no value."""
        if self.fill_policy is FillPolicy.NOT_A_NUMBER:
            return math.nan
        if self.fill_policy is FillPolicy.ZERO:
            return 0.0
        if self.fill_policy is FillPolicy.SCALAR:
            return self.scalar
        return None

    def to_fill_policy(self) -> NumericFillPolicy:
        """Returns the equivalent `NumericFillPolicy`, e.g. to attach to a `Metric`."""
        return NumericFillPolicy(
            policy=self.fill_policy,
            value=self.scalar if self.fill_policy.is_parameterized else None,
        )
