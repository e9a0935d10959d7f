import pytest

from tsdbquery import (
    InvalidConfigurationError,
    is_relative_time,
    parse_duration,
    parse_relative_time,
    resolve_relative_time,
)


@pytest.mark.parametrize(
    "duration, expected_ms",
    [
        ("250ms", 250),
        ("30s", 30_000),
        ("15m", 900_000),
        ("1h", 3_600_000),
        ("2d", 172_800_000),
        ("1w", 604_800_000),
        ("1n", 2_592_000_000),
        ("1y", 31_536_000_000),
        ("1H", 3_600_000),
    ],
)
def test_parse_duration(duration, expected_ms):
    assert parse_duration(duration) == expected_ms


@pytest.mark.parametrize("duration", ["", "   ", "h", "1", "1x", "-1h", "1.5h", "0h"])
def test_parse_duration_invalid(duration):
    with pytest.raises(InvalidConfigurationError):
        parse_duration(duration)


def test_parse_relative_time():
    assert parse_relative_time("1h-ago") == 3_600_000
    assert parse_relative_time(" 2D-AGO ") == 172_800_000


@pytest.mark.parametrize("expression", ["what?", "1h", "-ago", "1h-ago-ago", ""])
def test_parse_relative_time_invalid(expression):
    with pytest.raises(InvalidConfigurationError):
        parse_relative_time(expression)
    assert not is_relative_time(expression)


def test_parse_relative_time_none():
    with pytest.raises(InvalidConfigurationError, match="null"):
        parse_relative_time(None)


def test_resolve_relative_time():
    now_ms = 1_700_000_000_000
    assert resolve_relative_time("1h-ago", now_ms) == now_ms - 3_600_000
    assert is_relative_time("1h-ago")
