"""Tests for input validators."""

import math

import pytest

from sizing.validators import (
    is_percentage,
    is_positive_number,
    is_valid_number,
    parse_max_positions,
    to_number,
    validate_inputs,
)


class TestIsValidNumber:

    @pytest.mark.parametrize("value", [0, 1, -3.5, 1e-12, "42", " 7.25 ", "-0.5"])
    def test_accepts_finite_numbers(self, value):
        assert is_valid_number(value)

    @pytest.mark.parametrize(
        "value",
        [None, "", "   ", "abc", "12abc", math.nan, math.inf, -math.inf, "inf", "nan", True, [1], {}],
    )
    def test_rejects_everything_else(self, value):
        assert not is_valid_number(value)

    def test_to_number_parses_strings(self):
        assert to_number("100.5") == 100.5
        assert to_number("x") is None


class TestIsPositiveNumber:

    def test_positive(self):
        assert is_positive_number(0.01)
        assert is_positive_number("3")

    def test_zero_and_negative(self):
        assert not is_positive_number(0)
        assert not is_positive_number(-1)
        assert not is_positive_number(None)


class TestIsPercentage:

    def test_bounds_inclusive(self):
        assert is_percentage(0)
        assert is_percentage(100)
        assert is_percentage(55.5)

    def test_out_of_range(self):
        assert not is_percentage(100.0001)
        assert not is_percentage(-0.0001)
        assert not is_percentage("")


class TestValidateInputs:

    def test_all_valid(self):
        assert validate_inputs({"a": 1, "b": "2.5", "c": -4})

    def test_one_invalid(self):
        assert not validate_inputs({"a": 1, "b": None})

    def test_sign_not_checked(self):
        assert validate_inputs({"entry": -10, "stop": 0})

    def test_empty_mapping(self):
        assert validate_inputs({})


class TestParseMaxPositions:

    def test_positive_integer(self):
        assert parse_max_positions(5) == 5
        assert parse_max_positions("3") == 3

    def test_fraction_truncates(self):
        assert parse_max_positions(2.9) == 2

    @pytest.mark.parametrize("value", [None, "", 0, 0.5, -2, "abc"])
    def test_not_applicable(self, value):
        assert parse_max_positions(value) is None
