"""
Template registry.

Resolves a caller-supplied code to a template instance.  Built once from an
explicit list of templates and read-only afterwards, so it can be shared by
concurrent requests without locking.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional

from earning_templates.domain.errors import TemplateNotFound
from earning_templates.templates.base import Template
from earning_templates.templates.earnings import EARNING_TEMPLATE_TYPES

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """
    Read-only mapping of template code -> template instance.

    Lookups are exact, case-sensitive string matches.  The registry owns the
    instances; callers get the same reference on every lookup.
    """

    def __init__(self, templates: Iterable[Template]):
        mapping = {}
        for template in templates:
            if template.code in mapping:
                raise ValueError(f"Duplicate template code '{template.code}'")
            mapping[template.code] = template
        self._templates: Mapping[str, Template] = MappingProxyType(mapping)

    def lookup(self, code: str) -> Optional[Template]:
        """Return the template registered under ``code``, or ``None``."""
        return self._templates.get(code)

    def get(self, code: str) -> Template:
        """Like :meth:`lookup` but raises ``TemplateNotFound`` on a miss."""
        template = self.lookup(code)
        if template is None:
            raise TemplateNotFound(code)
        return template

    def codes(self) -> List[str]:
        return sorted(self._templates)

    def __contains__(self, code: object) -> bool:
        return code in self._templates

    def __iter__(self) -> Iterator[Template]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"<TemplateRegistry codes={self.codes()!r}>"


def build_earning_registry() -> TemplateRegistry:
    """Build the registry of every built-in earning template."""
    registry = TemplateRegistry(template_type() for template_type in EARNING_TEMPLATE_TYPES)
    logger.debug("Earning template registry built: %s", registry.codes())
    return registry
