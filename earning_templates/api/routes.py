"""
Earning Templates — router registration.

Import and call ``register_routes(app)`` once in ``earning_templates.app``.

  POST /EarningTemplate?templateCode=<code>  — create an earning from a template
  GET  /health                               — health check
"""

from __future__ import annotations

import logging
import time
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request, Response

from earning_templates import config
from earning_templates.api.schemas import (
    EarningDefaultRequest,
    EarningResponse,
    ErrorResponse,
    HealthResponse,
)
from earning_templates.core.constants import EARNING_TEMPLATE_PREFIX, TEMPLATE_CODE_PARAM
from earning_templates.domain.enums import OverrideMode
from earning_templates.metrics import metrics_snapshot, record_earning_created
from earning_templates.templates.registry import TemplateRegistry

logger = logging.getLogger(__name__)

# Module-level start time for uptime reporting
_START_TIME: float = time.time()


# ---------------------------------------------------------------------------
# Dependencies — both are fixed on app.state by create_app()
# ---------------------------------------------------------------------------

def get_template_registry(request: Request) -> TemplateRegistry:
    return request.app.state.template_registry


def get_override_mode(request: Request) -> OverrideMode:
    return request.app.state.override_mode


# ---------------------------------------------------------------------------
# Earning templates
# ---------------------------------------------------------------------------

earning_router = APIRouter(prefix=EARNING_TEMPLATE_PREFIX, tags=["earning-templates"])


def _location_for(template_code: str) -> str:
    return f"{EARNING_TEMPLATE_PREFIX}?{urlencode({TEMPLATE_CODE_PARAM: template_code})}"


@earning_router.post(
    "",
    status_code=201,
    response_model=EarningResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Create an earning from a named template",
)
async def add_earning_by_template(
    request: Request,
    response: Response,
    template_code: str = Query(..., alias=TEMPLATE_CODE_PARAM),
    body: Optional[EarningDefaultRequest] = Body(None),
    registry: TemplateRegistry = Depends(get_template_registry),
    mode: OverrideMode = Depends(get_override_mode),
):
    request.state.template_code = template_code
    template = registry.get(template_code)

    earning_default = body.to_domain() if body is not None else None
    earning = template.create(earning_default, mode=mode)

    record_earning_created(template.code)
    logger.info(
        "Earning created from template %s (override=%s, mode=%s): code=%s pay_cycle=%s",
        template.code, earning_default is not None, mode.value,
        earning.code, earning.pay_cycle.value,
    )

    response.headers["Location"] = _location_for(template.code)
    return EarningResponse.from_domain(earning)


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

system_router = APIRouter(tags=["system"])


@system_router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check(
    registry: TemplateRegistry = Depends(get_template_registry),
    mode: OverrideMode = Depends(get_override_mode),
):
    snap = metrics_snapshot()
    return HealthResponse(
        status="ok" if len(registry) else "degraded",
        version=config.APP_VERSION,
        templates=len(registry),
        override_mode=mode.value,
        uptime_seconds=round(time.time() - _START_TIME, 1),
        earnings_created=snap["earnings_created"],
        earnings_by_template=snap["earnings_by_template"],
        client_errors=snap["client_errors"],
        errors_last_hour=snap["errors_last_hour"],
    )


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def register_routes(app: FastAPI) -> None:
    """Mount all routers onto ``app``.

    Call this once from ``earning_templates.app`` after creating the FastAPI instance.
    """
    app.include_router(earning_router)
    app.include_router(system_router)

    logger.debug("Routes registered: %d total", len(app.routes))
