"""
Centralized configuration for the Earning Templates service.
All settings come from environment variables for 12-factor deployment.
"""

import os

from earning_templates import __version__


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.environ.get(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> list:
    raw = os.environ.get(name, default)
    return [s.strip() for s in raw.split(",") if s.strip()]


APP_VERSION = __version__

# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8001"))

# ---------------------------------------------------------------------------
# Template behaviour
# ---------------------------------------------------------------------------
# How caller-supplied overrides are applied to a template's identity fields:
#   replace — override code/description/payCycle are used verbatim
#   merge   — blank override code/description fall back to the template's
OVERRIDE_MODE = os.environ.get("OVERRIDE_MODE", "replace").strip().lower()

# ---------------------------------------------------------------------------
# Error responses
# ---------------------------------------------------------------------------
# When on, 500 responses carry the formatted traceback. Keep off in production.
EXPOSE_TRACEBACKS = _env_bool("EXPOSE_TRACEBACKS", False)

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
CORS_ORIGINS = _env_list("CORS_ORIGINS", "*")
