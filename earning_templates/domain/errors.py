"""
Typed exceptions for the earning template domain.

Every error carries a machine-readable ``code`` so the API layer can map it
to a response without parsing messages::

    EarningTemplateError (EARNING_TEMPLATE_ERROR)
     +-- TemplateNotFound (TEMPLATE_NOT_FOUND)
     +-- InvalidArgument  (INVALID_ARGUMENT)

All of them are caller-input problems and surface as HTTP 400.
"""

from __future__ import annotations

from typing import Optional


class EarningTemplateError(Exception):
    """Base exception for all earning template errors."""

    code: str = "EARNING_TEMPLATE_ERROR"


class TemplateNotFound(EarningTemplateError):
    """No template is registered under the given code."""

    code: str = "TEMPLATE_NOT_FOUND"

    def __init__(self, template_code: str):
        self.template_code = template_code
        super().__init__(f"No earning template registered for code '{template_code}'")


class InvalidArgument(EarningTemplateError, ValueError):
    """A caller-supplied value is malformed or ambiguous."""

    code: str = "INVALID_ARGUMENT"

    def __init__(self, message: str, field: Optional[str] = None, value: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(message)
