"""
Template capability.

A template is a fixed, named policy that stamps out a domain record,
optionally overridden by caller-supplied identity fields.  It is generic over
the record it produces (an ``AddableThing``) and the override it accepts (a
``StubCodeDefault``); each concrete template family fixes both.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import Generic, Optional, Tuple, TypeVar

from earning_templates.domain.enums import OverrideMode, PayCycle
from earning_templates.domain.models import AddableThing, StubCodeDefault

T = TypeVar("T", bound=AddableThing)
D = TypeVar("D", bound=StubCodeDefault)


class Template(ABC, Generic[T, D]):
    """
    Base class for all templates.

    Subclasses set ``code``, ``description`` and ``pay_cycle`` as class
    attributes.  Instances are stateless and shared through the registry,
    never created per request.
    """

    code: str
    description: str
    pay_cycle: PayCycle

    # Class attributes a concrete template must define
    required_attributes: Tuple[str, ...] = ("code", "description", "pay_cycle")

    def __init__(self) -> None:
        missing = [name for name in self.required_attributes if not hasattr(self, name)]
        if missing:
            raise TypeError(
                f"{type(self).__name__} is not a concrete template; missing {', '.join(missing)}"
            )

    @abstractmethod
    def create(self, default: Optional[D] = None, mode: OverrideMode = OverrideMode.REPLACE) -> T:
        """Produce a fully populated record.

        ``default is None`` uses the template's own identity fields.
        Otherwise ``mode`` decides how the override's identity fields apply.
        Behaviour flags always come from the template.
        """

    def resolve_identity(self, default: D, mode: OverrideMode) -> D:
        """Apply the override policy to ``default``'s identity fields."""
        if mode == OverrideMode.REPLACE:
            return default
        return dataclasses.replace(
            default,
            code=default.code if default.code.strip() else self.code,
            description=default.description if default.description.strip() else self.description,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} code={self.code!r}>"
