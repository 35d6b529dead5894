# tests/unit/core/test_wage.py
# Unit tests for hourly wage parsing, lenient loading & start gating

import math

import pytest

from shiftclock.core.exceptions import InvalidWageError, ValidationError
from shiftclock.core.wage import can_start_with, load_wage, parse_wage


# * Test strict parsing of user input
class TestParseWage:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("20", 20.0),
            ("  18.50 ", 18.5),
            ("0", 0.0),
            ("-0.05", -0.05),
            (25, 25.0),
            (12.75, 12.75),
            ("1e2", 100.0),
        ],
    )
    # * Test accepted values
    def test_valid(self, raw, expected):
        assert parse_wage(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "   ", "abc", "12abc", "-0.1", "-5", "nan", "inf", "-inf", None, True, [20]],
    )
    # * Test rejected values carry the offending input
    def test_invalid(self, raw):
        with pytest.raises(InvalidWageError) as exc:
            parse_wage(raw)

        assert str(exc.value) == "Please enter a valid hourly wage."
        assert exc.value.value is raw

    # * Test InvalidWageError is a validation error
    def test_error_hierarchy(self):
        with pytest.raises(ValidationError):
            parse_wage("nope")


# * Test lenient loading of persisted values
class TestLoadWage:

    # * Test absent value loads as zero
    def test_absent(self):
        assert load_wage(None) == 0.0

    # * Test stored decimal strings load as floats
    def test_stored(self):
        assert load_wage("22.5") == 22.5

    @pytest.mark.parametrize("raw", ["", "garbage", "nan", "inf"])
    # * Test unusable stored values load as zero
    def test_unusable(self, raw):
        value = load_wage(raw)

        assert value == 0.0
        assert math.isfinite(value)


# * Test only strictly positive wages allow starting a shift
@pytest.mark.parametrize(
    "wage, allowed",
    [(20.0, True), (0.01, True), (0.0, False), (-0.05, False)],
)
def test_can_start_with(wage, allowed):
    assert can_start_with(wage) is allowed
