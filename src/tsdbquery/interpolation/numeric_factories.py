from typing import Optional

from ..enum import FillPolicy, FillWithRealPolicy
from .numeric_config import NumericInterpolatorConfig


class _NumericInterpolatorFactory:
    """Shared behaviour of the numeric interpolator factories."""

    fill_policy: FillPolicy = FillPolicy.NONE

    def name(self) -> str:
        return self.fill_policy.value

    def default_config(
        self, real_fill_policy: FillWithRealPolicy = FillWithRealPolicy.NONE
    ) -> NumericInterpolatorConfig:
        """Returns a configuration using this factory's fill policy."""
        return NumericInterpolatorConfig(
            fill_policy=self.fill_policy, real_fill_policy=real_fill_policy
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NullInterpolatorFactory(_NumericInterpolatorFactory):
    """Fills missing points with an explicit null."""

    fill_policy = FillPolicy.NULL


class NaNInterpolatorFactory(_NumericInterpolatorFactory):
    """Fills missing points with NaN."""

    fill_policy = FillPolicy.NOT_A_NUMBER


class ZeroInterpolatorFactory(_NumericInterpolatorFactory):
    """Fills missing points with 0."""

    fill_policy = FillPolicy.ZERO


class ScalarInterpolatorFactory(_NumericInterpolatorFactory):
    """
    Fills missing points with a caller supplied constant.

    The constant travels in the paired
    [`NumericInterpolatorConfig.scalar`][tsdbquery.interpolation.NumericInterpolatorConfig].
    """

    fill_policy = FillPolicy.SCALAR

    def default_config(
        self,
        real_fill_policy: FillWithRealPolicy = FillWithRealPolicy.NONE,
        scalar: Optional[float] = 0.0,
    ) -> NumericInterpolatorConfig:
        return NumericInterpolatorConfig(
            fill_policy=self.fill_policy,
            real_fill_policy=real_fill_policy,
            scalar=scalar,
        )
