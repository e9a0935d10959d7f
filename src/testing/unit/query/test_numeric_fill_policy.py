import math

import pytest

from tsdbquery import FillPolicy, InvalidConfigurationError, NumericFillPolicy


def test_builder():
    policy = (
        NumericFillPolicy.new_builder()
        .set_policy(FillPolicy.SCALAR)
        .set_value(42)
        .build()
    )
    assert policy.policy is FillPolicy.SCALAR
    assert policy.value == 42
    assert policy == NumericFillPolicy(policy=FillPolicy.SCALAR, value=42.0)
    assert hash(policy) == hash(NumericFillPolicy(policy=FillPolicy.SCALAR, value=42.0))


@pytest.mark.parametrize(
    "policy",
    [FillPolicy.NONE, FillPolicy.NULL, FillPolicy.NOT_A_NUMBER, FillPolicy.ZERO],
)
def test_value_rejected_for_non_parameterized(policy):
    NumericFillPolicy(policy=policy).validate()
    with pytest.raises(InvalidConfigurationError, match="does not accept a value"):
        NumericFillPolicy(policy=policy, value=42).validate()


def test_missing_policy_rejected():
    with pytest.raises(InvalidConfigurationError, match="Missing fill policy"):
        NumericFillPolicy().validate()


def test_scalar_requires_value():
    NumericFillPolicy(policy=FillPolicy.SCALAR, value=0).validate()
    with pytest.raises(InvalidConfigurationError, match="requires a value"):
        NumericFillPolicy(policy=FillPolicy.SCALAR).validate()


def test_fill_value():
    assert math.isnan(NumericFillPolicy(policy=FillPolicy.NOT_A_NUMBER).fill_value)
    assert NumericFillPolicy(policy=FillPolicy.ZERO).fill_value == 0.0
    assert NumericFillPolicy(policy=FillPolicy.SCALAR, value=3.5).fill_value == 3.5
    assert NumericFillPolicy(policy=FillPolicy.NULL).fill_value is None
    assert NumericFillPolicy(policy=FillPolicy.NONE).fill_value is None


def test_compare_to():
    nan = NumericFillPolicy(policy=FillPolicy.NOT_A_NUMBER)
    zero = NumericFillPolicy(policy=FillPolicy.ZERO)
    assert nan.compare_to(zero) == -1
    assert zero.compare_to(nan) == 1
    assert nan.compare_to(NumericFillPolicy(policy=FillPolicy.NOT_A_NUMBER)) == 0

    low = NumericFillPolicy(policy=FillPolicy.SCALAR, value=1)
    high = NumericFillPolicy(policy=FillPolicy.SCALAR, value=2)
    unset = NumericFillPolicy(policy=FillPolicy.SCALAR)
    assert low.compare_to(high) == -1
    assert unset.compare_to(low) == -1


def test_parse_from_dict():
    policy = NumericFillPolicy.model_validate({"policy": "scalar", "value": 7, "x": 1})
    assert policy == NumericFillPolicy(policy=FillPolicy.SCALAR, value=7)

    with pytest.raises(ValueError):
        NumericFillPolicy.model_validate({"policy": "bogus"})


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_scalar_rejects_non_finite_value(value):
    policy = NumericFillPolicy(policy=FillPolicy.SCALAR, value=value)
    with pytest.raises(InvalidConfigurationError, match="finite value"):
        policy.validate()
