"""
earning_templates.domain.models — Canonical immutable records.

Two families:

* ``AddableThing`` — things a template can create (``Earning``).
* ``StubCodeDefault`` — caller overrides for a thing's identity fields
  (``EarningDefault``).

Import pattern::

    from earning_templates.domain.models import Earning, EarningDefault
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict

from earning_templates.domain.enums import CalculationMethod, PayCycle


# ---------------------------------------------------------------------------
# Creatable things
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AddableThing:
    """Root of everything a template can create."""


@dataclass(frozen=True)
class Earning(AddableThing):
    """One payroll earning configuration, as stamped out by a template."""
    code:        str
    description: str
    pay_cycle:   PayCycle

    calculation_method:          CalculationMethod
    include_in_401k:             bool
    include_in_productive_hours: bool
    include_in_overtime:         bool

    @classmethod
    def from_default(
        cls,
        default: "EarningDefault",
        calculation_method: CalculationMethod,
        include_in_401k: bool,
        include_in_productive_hours: bool,
        include_in_overtime: bool,
    ) -> "Earning":
        """Identity fields from ``default``, behaviour flags from the caller."""
        return cls(
            code=default.code,
            description=default.description,
            pay_cycle=default.pay_cycle,
            calculation_method=calculation_method,
            include_in_401k=include_in_401k,
            include_in_productive_hours=include_in_productive_hours,
            include_in_overtime=include_in_overtime,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to plain dict for JSON responses / logging."""
        d = dataclasses.asdict(self)
        d["pay_cycle"] = self.pay_cycle.value
        d["calculation_method"] = self.calculation_method.value
        return d


# ---------------------------------------------------------------------------
# Caller overrides
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StubCodeDefault:
    """Replacement identity fields for a creatable thing."""
    code:        str
    description: str
    pay_cycle:   PayCycle = PayCycle.ONE_TWO_THREE_FOUR_FIVE


@dataclass(frozen=True)
class EarningDefault(StubCodeDefault):
    """Override accepted by earning templates."""
