import math

import pytest

from tsdbquery import (
    FillPolicy,
    FillWithRealPolicy,
    NaNInterpolatorFactory,
    NullInterpolatorFactory,
    NumericFillPolicy,
    NumericInterpolatorConfig,
    QueryIteratorInterpolatorConfig,
    QueryIteratorInterpolatorFactory,
    ScalarInterpolatorFactory,
    ZeroInterpolatorFactory,
)


@pytest.mark.parametrize(
    "factory, policy",
    [
        (NullInterpolatorFactory(), FillPolicy.NULL),
        (NaNInterpolatorFactory(), FillPolicy.NOT_A_NUMBER),
        (ZeroInterpolatorFactory(), FillPolicy.ZERO),
        (ScalarInterpolatorFactory(), FillPolicy.SCALAR),
    ],
)
def test_factories(factory, policy):
    assert isinstance(factory, QueryIteratorInterpolatorFactory)
    assert factory.fill_policy is policy
    assert factory.name() == policy.value

    config = factory.default_config(real_fill_policy=FillWithRealPolicy.PREFER_NEXT)
    assert isinstance(config, QueryIteratorInterpolatorConfig)
    assert config.fill_policy is policy
    assert config.real_fill_policy is FillWithRealPolicy.PREFER_NEXT


def test_scalar_default_config():
    config = ScalarInterpolatorFactory().default_config(scalar=42)
    assert config.scalar == 42
    assert config.fill_value == 42


def test_config_defaults():
    config = NumericInterpolatorConfig()
    assert config.fill_policy is FillPolicy.NONE
    assert config.real_fill_policy is FillWithRealPolicy.NONE
    assert config.fill_value is None


def test_config_fill_value():
    assert math.isnan(NumericInterpolatorConfig(fill_policy=FillPolicy.NOT_A_NUMBER).fill_value)
    assert NumericInterpolatorConfig(fill_policy=FillPolicy.ZERO).fill_value == 0.0


def test_config_to_fill_policy():
    scalar = NumericInterpolatorConfig(fill_policy=FillPolicy.SCALAR, scalar=42)
    assert scalar.to_fill_policy() == NumericFillPolicy(policy=FillPolicy.SCALAR, value=42)
    scalar.to_fill_policy().validate()

    # The scalar is dropped for policies that take no value
    zero = NumericInterpolatorConfig(fill_policy=FillPolicy.ZERO, scalar=42)
    assert zero.to_fill_policy() == NumericFillPolicy(policy=FillPolicy.ZERO)
    zero.to_fill_policy().validate()
