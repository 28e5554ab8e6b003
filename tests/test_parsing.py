import pytest

from philosophers.parsing import (
    ArgumentError,
    Settings,
    atoi,
    parse_arguments,
    validate,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t-17abc", -17),
        ("+5", 5),
        ("abc", 0),
        ("", 0),
        ("007", 7),
        ("-", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_stops_at_second_sign():
    assert atoi("+-3") == 0


def test_validate_returns_arguments():
    assert validate(["5", "800", "200", "200"]) == ("5", "800", "200", "200")


@pytest.mark.parametrize("bad", ["", "-5", "+5", "12a", " 3", "1.5", "2147483648", "99999999999"])
def test_validate_rejects(bad):
    with pytest.raises(ArgumentError):
        validate(["5", bad, "200", "200"])


def test_validate_accepts_int_max():
    assert validate(["2147483647"]) == ("2147483647",)


def test_parse_four_arguments():
    settings = parse_arguments(["5", "800", "200", "100"])
    assert settings == Settings(5, 800, 200, 100, None)
    assert settings.unlimited_meals


def test_parse_with_meal_limit():
    settings = parse_arguments(["4", "410", "200", "200", "7"])
    assert settings.max_meals == 7
    assert not settings.unlimited_meals


def test_zero_meal_limit_means_unlimited():
    assert parse_arguments(["4", "410", "200", "200", "0"]).max_meals is None


def test_parse_int_max_value():
    assert parse_arguments(["1", "2147483647", "1", "1"]).time_to_die == 2147483647


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "3", "1"],
    ],
)
def test_parse_wrong_count(args):
    with pytest.raises(ArgumentError):
        parse_arguments(args)


def test_parse_rejects_non_numeric():
    with pytest.raises(ArgumentError, match="Error"):
        parse_arguments(["5", "eight", "200", "200"])


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["-1", "800", "200", "200"])