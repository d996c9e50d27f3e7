"""
Earning Templates — system-wide constants.

Template codes and route paths live here so the registry, the API layer and
the tests agree on the exact strings.
"""

# ---------------------------------------------------------------------------
# Template codes (exact, case-sensitive registry keys)
# ---------------------------------------------------------------------------

REGULAR_CODE: str = "Regular"

# ---------------------------------------------------------------------------
# HTTP surface
# ---------------------------------------------------------------------------

EARNING_TEMPLATE_PREFIX: str = "/EarningTemplate"
TEMPLATE_CODE_PARAM: str = "templateCode"
REQUEST_ID_HEADER: str = "X-Request-ID"

# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

# Rolling window for the errors_last_hour counter
ERROR_WINDOW_SECONDS: float = 3600.0
