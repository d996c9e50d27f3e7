"""
Override parsing — raw optional strings to an ``EarningDefault`` or nothing.

Rules:
  • all of code / description / payCycle blank or absent → ``None``
  • otherwise code and description are kept verbatim (absent → "")
  • payCycle must be a PayCycle symbolic name, exact match
  • a blank payCycle next to a non-blank code or description is rejected
"""

from __future__ import annotations

from typing import Optional

from earning_templates.domain.enums import PayCycle
from earning_templates.domain.errors import InvalidArgument
from earning_templates.domain.models import EarningDefault


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_earning_default(
    code: Optional[str] = None,
    description: Optional[str] = None,
    pay_cycle: Optional[str] = None,
) -> Optional[EarningDefault]:
    """Build the override for an earning template, or ``None`` for no override.

    Raises
    ------
    InvalidArgument
        If ``pay_cycle`` is not a PayCycle name, or is blank while
        ``code`` / ``description`` carry a value.
    """
    if is_blank(code) and is_blank(description) and is_blank(pay_cycle):
        return None

    if is_blank(pay_cycle):
        raise InvalidArgument(
            "payCycle is required when code or description is supplied",
            field="payCycle",
            value=pay_cycle,
        )

    return EarningDefault(
        code=code if code is not None else "",
        description=description if description is not None else "",
        pay_cycle=PayCycle.parse(pay_cycle),
    )
