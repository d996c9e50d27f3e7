"""
Unit tests for earning_templates.templates — template capability + Regular.

Tests cover:
  • create() with no override -> template defaults
  • full override replaces identity fields, never the behaviour flags
  • replace vs merge policy for partial overrides
  • immutability of the produced records
  • a new variant plugs in without touching existing code
"""

from __future__ import annotations

import dataclasses

import pytest

from earning_templates.domain.enums import CalculationMethod, OverrideMode, PayCycle
from earning_templates.domain.models import AddableThing, Earning, EarningDefault
from earning_templates.domain.overrides import parse_earning_default
from earning_templates.templates.base import Template
from earning_templates.templates.earnings import EarningTemplate, RegularEarningTemplate


REGULAR_DEFAULTS = Earning(
    code="Regular",
    description="Regular earnings",
    pay_cycle=PayCycle.ONE_TWO_THREE_FOUR_FIVE,
    calculation_method=CalculationMethod.FLAT_AMOUNT,
    include_in_401k=True,
    include_in_productive_hours=True,
    include_in_overtime=True,
)


class _SickEarningTemplate(EarningTemplate):
    code = "Sick"
    description = "Sick pay"
    pay_cycle = PayCycle.ONE_THREE
    calculation_method = CalculationMethod.UNIT_X_RATE
    include_in_401k = False
    include_in_productive_hours = False
    include_in_overtime = False


class TestRegularTemplate:
    def test_fixed_attributes(self, regular):
        assert regular.code == "Regular"
        assert regular.description == "Regular earnings"
        assert regular.pay_cycle is PayCycle.ONE_TWO_THREE_FOUR_FIVE
        assert regular.calculation_method is CalculationMethod.FLAT_AMOUNT
        assert regular.include_in_401k is True
        assert regular.include_in_productive_hours is True
        assert regular.include_in_overtime is True

    def test_is_a_template(self, regular):
        assert isinstance(regular, Template)

    def test_create_without_override(self, regular):
        assert regular.create(None) == REGULAR_DEFAULTS

    def test_create_default_argument(self, regular):
        assert regular.create() == REGULAR_DEFAULTS

    def test_create_returns_addable_thing(self, regular):
        assert isinstance(regular.create(), AddableThing)

    def test_full_override(self, regular):
        earning = regular.create(EarningDefault("Custom", "Custom earnings", PayCycle.TWO))
        assert earning.code == "Custom"
        assert earning.description == "Custom earnings"
        assert earning.pay_cycle is PayCycle.TWO
        assert earning.calculation_method is CalculationMethod.FLAT_AMOUNT
        assert earning.include_in_401k is True
        assert earning.include_in_productive_hours is True
        assert earning.include_in_overtime is True

    def test_all_blank_parsed_override_matches_no_override(self, regular):
        assert regular.create(parse_earning_default("", " ", None)) == regular.create(None)

    def test_each_call_builds_a_new_record(self, regular):
        assert regular.create() is not regular.create()


class TestOverrideModes:
    def test_replace_is_verbatim_for_partial_override(self, regular):
        # code only: description is blanked, not taken from the template
        earning = regular.create(EarningDefault("Custom", "", PayCycle.THREE))
        assert earning.code == "Custom"
        assert earning.description == ""
        assert earning.pay_cycle is PayCycle.THREE

    def test_replace_is_the_default_mode(self, regular):
        partial = EarningDefault("", "", PayCycle.FIVE)
        assert regular.create(partial) == regular.create(partial, mode=OverrideMode.REPLACE)

    def test_merge_falls_back_for_blank_fields(self, regular):
        earning = regular.create(EarningDefault("Custom", "  ", PayCycle.THREE), mode=OverrideMode.MERGE)
        assert earning.code == "Custom"
        assert earning.description == "Regular earnings"
        assert earning.pay_cycle is PayCycle.THREE

    def test_merge_keeps_supplied_fields(self, regular):
        earning = regular.create(
            EarningDefault("Custom", "Custom earnings", PayCycle.TWO), mode=OverrideMode.MERGE,
        )
        assert (earning.code, earning.description) == ("Custom", "Custom earnings")

    def test_merge_never_touches_flags(self, regular):
        earning = regular.create(EarningDefault("", "", PayCycle.ONE), mode=OverrideMode.MERGE)
        assert earning.calculation_method is CalculationMethod.FLAT_AMOUNT
        assert earning.include_in_overtime is True


class TestImmutability:
    def test_earning_is_frozen(self, regular):
        earning = regular.create()
        with pytest.raises(dataclasses.FrozenInstanceError):
            earning.code = "Changed"

    def test_override_is_frozen(self):
        default = EarningDefault("Custom", "Custom earnings", PayCycle.TWO)
        with pytest.raises(dataclasses.FrozenInstanceError):
            default.pay_cycle = PayCycle.ONE

    def test_override_pay_cycle_defaults_to_every_period(self):
        assert EarningDefault("C", "D").pay_cycle is PayCycle.ONE_TWO_THREE_FOUR_FIVE


class TestEarningSerialization:
    def test_to_dict_uses_symbolic_names(self):
        assert REGULAR_DEFAULTS.to_dict() == {
            "code": "Regular",
            "description": "Regular earnings",
            "pay_cycle": "OneTwoThreeFourFive",
            "calculation_method": "FlatAmount",
            "include_in_401k": True,
            "include_in_productive_hours": True,
            "include_in_overtime": True,
        }

    def test_from_default(self):
        earning = Earning.from_default(
            EarningDefault("X", "Y", PayCycle.FOUR),
            calculation_method=CalculationMethod.UNIT_X_RATE,
            include_in_401k=False,
            include_in_productive_hours=True,
            include_in_overtime=False,
        )
        assert earning == Earning("X", "Y", PayCycle.FOUR, CalculationMethod.UNIT_X_RATE, False, True, False)


class TestNewVariant:
    def test_variant_uses_its_own_flags(self):
        sick = _SickEarningTemplate()
        earning = sick.create(EarningDefault("SickX", "Sick override", PayCycle.TWO))
        assert earning.calculation_method is CalculationMethod.UNIT_X_RATE
        assert earning.include_in_401k is False
        assert earning.code == "SickX"

    def test_variant_defaults(self):
        earning = _SickEarningTemplate().create()
        assert (earning.code, earning.pay_cycle) == ("Sick", PayCycle.ONE_THREE)

    def test_earning_template_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError, match="EarningTemplate is not a concrete template"):
            EarningTemplate()

    def test_variant_missing_a_flag_is_rejected(self):
        class _HalfDone(EarningTemplate):
            code = "HalfDone"
            description = "Half done"
            pay_cycle = PayCycle.ONE
            calculation_method = CalculationMethod.FLAT_AMOUNT

        with pytest.raises(TypeError) as exc_info:
            _HalfDone()
        message = str(exc_info.value)
        assert "include_in_401k" in message
        assert "include_in_overtime" in message
        assert "code" not in message.split("missing", 1)[1]

    def test_template_base_is_abstract(self):
        with pytest.raises(TypeError):
            Template()

    def test_repr(self):
        assert repr(RegularEarningTemplate()) == "<RegularEarningTemplate code='Regular'>"
