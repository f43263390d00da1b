# backend/app/main.py

import logging
import os
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.gzip import GZipMiddleware

from . import models  # noqa: F401  register tables on Base.metadata
from .api import api_quote
from .core.config import settings
from .core.observability import setup_logging, setup_tracer
from .database import Base, engine
from .service_types.validation import QuoteValidationError
from .utils import request_field_errors

# Configure logging before creating any loggers
setup_logging()
logger = logging.getLogger(__name__)

_BOOT_TS = time.time()

# Always use ORJSONResponse for JSON payloads to ensure consistent, fast
# serialization across all endpoints.
app = FastAPI(title=settings.PROJECT_NAME, default_response_class=ORJSONResponse)
setup_tracer(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1024)
logger.info("CORS origins set to: %s", settings.CORS_ORIGINS)


@app.exception_handler(QuoteValidationError)
async def quote_validation_exception_handler(request: Request, exc: QuoteValidationError):
    """Out-of-range or unknown quote inputs are a client error (400)."""
    logger.warning("Quote validation failed at %s: %s", request.url.path, exc.field_errors)
    return ORJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"message": exc.message, "field_errors": exc.field_errors}},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return request-shape errors in the same ``field_errors`` structure."""
    errors = exc.errors()
    logger.warning("Validation error at %s: %s", request.url.path, errors)
    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": {
                "message": "Invalid request",
                "field_errors": request_field_errors(errors),
            }
        },
    )


api_prefix = settings.API_V1_STR  # usually something like "/api/v1"

app.include_router(api_quote.router, prefix=f"{api_prefix}", tags=["quotes"])


@app.get("/healthz/live", tags=["health"])
async def health_live():
    """Liveness probe: the process is up."""
    return {"status": "ok", "kind": "live", "uptime_s": round(time.time() - _BOOT_TS, 1)}


@app.get("/healthz/ready", tags=["health"])
def health_ready():
    """Readiness probe: the database answers a trivial query."""
    t0 = time.perf_counter()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Readiness DB ping failed: %s", exc)
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "kind": "ready", "reason": "db_unavailable"},
            headers={"Cache-Control": "no-store"},
        )
    return ORJSONResponse(
        content={
            "status": "ok",
            "kind": "ready",
            "db_ping_ms": round((time.perf_counter() - t0) * 1000.0, 1),
            "pid": os.getpid(),
        },
        headers={"Cache-Control": "no-store"},
    )


@app.on_event("startup")
def create_tables() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured")


@app.get("/")
def read_root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME}"}
