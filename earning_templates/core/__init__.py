"""
earning_templates.core — Process-wide plumbing (logging, constants).
"""
