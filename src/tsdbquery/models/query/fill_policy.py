"""
Numeric Fill Policy Module.

Defines [`NumericFillPolicy`][tsdbquery.models.query.NumericFillPolicy], the
value object pairing a [`FillPolicy`][tsdbquery.enum.FillPolicy] with the
optional constant it needs. It is the `fillPolicy` member of a
[`Metric`][tsdbquery.models.query.Metric].
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ...enum import FillPolicy
from .errors import InvalidConfigurationError


def _compare_optional(left, right) -> int:
    """Three-way comparison where `None` ranks below any present value."""
    if left is None and right is None:
        return 0
    if left is None:
        return -1
    if right is None:
        return 1
    if left == right:
        return 0
    return -1 if left < right else 1


class NumericFillPolicy(BaseModel):
    """
    Immutable `(policy, value)` pair describing how missing numeric points are filled.

    `value` is only meaningful for parameterized policies (i.e. `SCALAR`).
    Construction never validates: consistency is checked by
    [`validate()`][tsdbquery.models.query.NumericFillPolicy.validate], which the
    owning `Metric` calls from its own validation.

    Example:
        ```python
        from tsdbquery import FillPolicy, NumericFillPolicy

        nan_fill = NumericFillPolicy(policy=FillPolicy.NOT_A_NUMBER)
        scalar_fill = (
            NumericFillPolicy.new_builder()
            .set_policy(FillPolicy.SCALAR)
            .set_value(42)
            .build()
        )
        ```
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    policy: Optional[FillPolicy] = None
    """The fill strategy."""

    value: Optional[float] = None
    """The constant used by parameterized policies."""

    class Builder:
        """Mutable accumulator for a [`NumericFillPolicy`][tsdbquery.models.query.NumericFillPolicy]."""

        def __init__(self):
            self._policy: Optional[FillPolicy] = None
            self._value: Optional[float] = None

        def set_policy(self, policy: FillPolicy) -> "NumericFillPolicy.Builder":
            self._policy = policy
            return self

        def set_value(self, value: Optional[float]) -> "NumericFillPolicy.Builder":
            self._value = value
            return self

        def build(self) -> "NumericFillPolicy":
            return NumericFillPolicy(policy=self._policy, value=self._value)

    @classmethod
    def new_builder(cls) -> "NumericFillPolicy.Builder":
        """Returns a fresh builder with no fields set."""
        return cls.Builder()

    def validate(self) -> None:
        """
        Checks the consistency between `policy` and `value`.

        Raises:
            InvalidConfigurationError: If the policy is missing, if a value is set
                for a policy that takes none, or if `SCALAR` has no value
                or a NaN or infinite one.
        """
        if self.policy is None:
            raise InvalidConfigurationError("Missing fill policy")
        if self.policy.is_parameterized:
            if self.value is None:
                raise InvalidConfigurationError(
                    f"Fill policy '{self.policy.value}' requires a value"
                )
            if not math.isfinite(self.value):
                raise InvalidConfigurationError(
                    f"Fill policy '{self.policy.value}' requires a finite value, got {self.value}"
                )
        elif self.value is not None:
            raise InvalidConfigurationError(
                f"Fill policy '{self.policy.value}' does not accept a value, got {self.value}"
            )

    @property
    def fill_value(self) -> Optional[float]:
        """
        The number an interpolator emits for a missing point under this policy.

        `None` means no value (for `NONE` and `NULL`).
        """
        if self.policy is FillPolicy.NOT_A_NUMBER:
            return math.nan
        if self.policy is FillPolicy.ZERO:
            return 0.0
        if self.policy is FillPolicy.SCALAR:
            return self.value
        return None

    def compare_to(self, other: "NumericFillPolicy") -> int:
        """Orders by policy declaration order, then by value (absent first)."""
        result = _compare_optional(
            self.policy.ordinal if self.policy is not None else None,
            other.policy.ordinal if other.policy is not None else None,
        )
        if result != 0:
            return result
        return _compare_optional(self.value, other.value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NumericFillPolicy):
            return NotImplemented
        return self.policy == other.policy and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.policy, self.value))
