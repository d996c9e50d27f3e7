"""
Earning Templates — create payroll earning records from named templates.

Run the API with::

    uvicorn earning_templates.app:app --reload --port 8001
"""

__version__ = "1.0.0"
