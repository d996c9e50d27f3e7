"""
Earning templates.

``EarningTemplate`` fixes the template family to (Earning, EarningDefault)
and carries the behaviour flags every earning inherits from its template.
Concrete variants only declare class attributes; add a new one by
subclassing and listing it in ``EARNING_TEMPLATE_TYPES``.
"""

from __future__ import annotations

from typing import Optional, Tuple, Type

from earning_templates.core.constants import REGULAR_CODE
from earning_templates.domain.enums import CalculationMethod, OverrideMode, PayCycle
from earning_templates.domain.models import Earning, EarningDefault
from earning_templates.templates.base import Template


class EarningTemplate(Template[Earning, EarningDefault]):
    """Base for earning variants; only subclasses that set every attribute can be instantiated."""
    required_attributes = Template.required_attributes + (
        "calculation_method",
        "include_in_401k",
        "include_in_productive_hours",
        "include_in_overtime",
    )

    calculation_method: CalculationMethod
    include_in_401k: bool
    include_in_productive_hours: bool
    include_in_overtime: bool

    def create(
        self,
        default: Optional[EarningDefault] = None,
        mode: OverrideMode = OverrideMode.REPLACE,
    ) -> Earning:
        if default is None:
            return Earning(
                code=self.code,
                description=self.description,
                pay_cycle=self.pay_cycle,
                calculation_method=self.calculation_method,
                include_in_401k=self.include_in_401k,
                include_in_productive_hours=self.include_in_productive_hours,
                include_in_overtime=self.include_in_overtime,
            )
        return Earning.from_default(
            self.resolve_identity(default, mode),
            calculation_method=self.calculation_method,
            include_in_401k=self.include_in_401k,
            include_in_productive_hours=self.include_in_productive_hours,
            include_in_overtime=self.include_in_overtime,
        )


class RegularEarningTemplate(EarningTemplate):
    """Regular earnings: flat amount, counted toward 401k, productive hours and overtime."""
    code = REGULAR_CODE
    description = "Regular earnings"
    pay_cycle = PayCycle.ONE_TWO_THREE_FOUR_FIVE

    calculation_method = CalculationMethod.FLAT_AMOUNT
    include_in_401k = True
    include_in_productive_hours = True
    include_in_overtime = True


# Every variant the default registry is built from.
EARNING_TEMPLATE_TYPES: Tuple[Type[EarningTemplate], ...] = (
    RegularEarningTemplate,
)
