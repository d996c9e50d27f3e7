"""
earning_templates.templates — Template capability, variants and registry.

Import surface::

    from earning_templates.templates.registry import build_earning_registry
    from earning_templates.templates.earnings import RegularEarningTemplate
"""
