"""
Earning Templates - FastAPI Application
Main entry point for the HTTP service.

Run with:
    uvicorn earning_templates.app:app --reload --host 0.0.0.0 --port 8001
"""

import json
import logging
import time
import traceback
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from earning_templates import config
from earning_templates.api.routes import register_routes
from earning_templates.core.constants import REQUEST_ID_HEADER
from earning_templates.core.logging import configure_logging
from earning_templates.domain.enums import OverrideMode
from earning_templates.domain.errors import EarningTemplateError
from earning_templates.metrics import record_client_error, record_error
from earning_templates.templates.registry import TemplateRegistry, build_earning_registry

configure_logging()
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan (startup / shutdown)
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Runs once on startup, yields for the lifetime of the app."""
    registry: TemplateRegistry = app.state.template_registry
    logger.info(
        "Earning template registry ready: %d template(s) %s, override_mode=%s",
        len(registry), registry.codes(), app.state.override_mode.value,
    )
    yield  # Application is running


# ---------------------------------------------------------------------------
# Request logging -- one structured line per request
# ---------------------------------------------------------------------------

async def request_logging_middleware(request: Request, call_next):
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.request_id = request_id
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        record_error()
        raise

    if response.status_code >= 500:
        record_error()
    response.headers[REQUEST_ID_HEADER] = request_id

    payload = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "status": response.status_code,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "template_code": getattr(request.state, "template_code", None),
    }
    logger.info("request_log %s", json.dumps(payload, sort_keys=True))
    return response


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

async def earning_template_error_handler(request: Request, exc: EarningTemplateError):
    """Caller-input problems (unknown template, bad override) -> 400."""
    record_client_error()
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "type": type(exc).__name__, "code": exc.code},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Missing templateCode or a malformed body -> 400 rather than 422."""
    record_client_error()
    logger.warning("Invalid request on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors()), "type": "RequestValidationError"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Surface unhandled errors as structured JSON."""
    tb = traceback.format_exc()
    logger.error(
        "Unhandled exception on %s %s: %s\n%s",
        request.method, request.url.path, exc, tb,
    )
    content = {
        "detail": str(exc),
        "type": type(exc).__name__,
        "path": request.url.path,
    }
    if config.EXPOSE_TRACEBACKS:
        content["traceback"] = tb
    return JSONResponse(status_code=500, content=content)


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------

def create_app(
    registry: Optional[TemplateRegistry] = None,
    override_mode: Optional[OverrideMode] = None,
) -> FastAPI:
    """Build the application around an explicit template registry.

    The registry and override mode are fixed on ``app.state`` before the app
    is returned, so every request sees a fully populated registry.
    """
    app = FastAPI(
        title="Earning Templates",
        version=config.APP_VERSION,
        description="Create payroll earnings from named templates",
        lifespan=lifespan,
    )
    app.state.template_registry = registry if registry is not None else build_earning_registry()
    app.state.override_mode = (
        override_mode if override_mode is not None
        else OverrideMode.from_setting(config.OVERRIDE_MODE)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", REQUEST_ID_HEADER],
    )
    app.middleware("http")(request_logging_middleware)

    app.add_exception_handler(EarningTemplateError, earning_template_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    register_routes(app)
    return app


app = create_app()


# ---------------------------------------------------------------------------
# Development entry-point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "earning_templates.app:app",
        host=config.HOST,
        port=config.PORT,
        reload=True,
    )
