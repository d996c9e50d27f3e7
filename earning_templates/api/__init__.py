"""
earning_templates.api — FastAPI request boundary (schemas + routers).
"""
