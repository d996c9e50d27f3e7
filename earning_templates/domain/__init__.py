"""
earning_templates.domain — Canonical records, enumerations and errors.

This package defines the source-of-truth types shared across every layer
of the service. Nothing in here should import from other earning_templates
sub-packages (only stdlib).
"""
