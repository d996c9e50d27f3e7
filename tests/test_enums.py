"""
Unit tests for earning_templates.domain.enums.

Tests cover:
  • PayCycle membership and exact-name parsing
  • CalculationMethod values
  • OverrideMode setting resolution
"""

import pytest

from earning_templates.domain.enums import CalculationMethod, OverrideMode, PayCycle
from earning_templates.domain.errors import EarningTemplateError, InvalidArgument


EXPECTED_PAY_CYCLES = [
    "One", "OneTwo", "OneThree", "OneFour", "OneFive",
    "OneTwoThree", "OneTwoFour", "OneTwoFive",
    "OneTwoThreeFour", "OneTwoThreeFive", "OneTwoThreeFourFive",
    "Two", "TwoThree", "TwoFour", "TwoFive",
    "TwoThreeFour", "TwoThreeFive", "TwoThreeFourFive",
    "Three", "ThreeFour", "ThreeFive", "ThreeFourFive",
    "Four", "FourFive",
    "Five",
]


class TestPayCycle:
    def test_closed_set_of_symbolic_names(self):
        assert [c.value for c in PayCycle] == EXPECTED_PAY_CYCLES

    def test_no_duplicate_values(self):
        assert len(set(c.value for c in PayCycle)) == len(EXPECTED_PAY_CYCLES)

    @pytest.mark.parametrize("name", ["One", "Two", "OneTwoThreeFourFive", "FourFive"])
    def test_parse_exact_name(self, name):
        assert PayCycle.parse(name).value == name

    def test_parse_returns_member(self):
        assert PayCycle.parse("Two") is PayCycle.TWO

    @pytest.mark.parametrize("text", ["NotARealCycle", "two", "ONE", " Two", "Two ", "", "OneSix"])
    def test_parse_rejects_anything_else(self, text):
        with pytest.raises(InvalidArgument) as exc_info:
            PayCycle.parse(text)
        assert exc_info.value.field == "payCycle"
        assert exc_info.value.value == text

    def test_parse_error_is_a_value_error_and_domain_error(self):
        with pytest.raises(ValueError):
            PayCycle.parse("Six")
        with pytest.raises(EarningTemplateError):
            PayCycle.parse("Six")

    def test_member_compares_equal_to_its_name(self):
        assert PayCycle.ONE_TWO == "OneTwo"


class TestCalculationMethod:
    def test_values(self):
        assert [m.value for m in CalculationMethod] == ["FlatAmount", "UnitXRate"]


class TestOverrideMode:
    @pytest.mark.parametrize("raw,expected", [
        ("replace", OverrideMode.REPLACE),
        ("merge", OverrideMode.MERGE),
        (" MERGE ", OverrideMode.MERGE),
        ("Replace", OverrideMode.REPLACE),
    ])
    def test_from_setting(self, raw, expected):
        assert OverrideMode.from_setting(raw) is expected

    def test_from_setting_unknown(self):
        with pytest.raises(ValueError, match="Unknown override mode"):
            OverrideMode.from_setting("patch")
