"""Observability helpers for logging and tracing.

Environment knobs:

- LOG_LEVEL (default: INFO): root logger level
- ENABLE_TRACING (default: 0): instrument the FastAPI app with OpenTelemetry
- ENABLE_CONSOLE_TRACING (default: 1): emit spans to the console when tracing
- OTEL_TRACES_SAMPLER_RATIO (default: 1.0): trace sampling ratio (0.0 to 1.0)
- OTEL_EXCLUDED_URLS: comma-separated URL patterns to exclude from tracing
"""

from __future__ import annotations

import logging
import os

from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from pythonjsonlogger.json import JsonFormatter

from .config import settings

logger = logging.getLogger(__name__)


def _parse_bool(value: str | bool | None, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def setup_logging() -> None:
    """Configure structured JSON logging."""
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter("%(levelname)s %(name)s %(message)s"))
    root = logging.getLogger()
    root.handlers = [handler]
    # Prefer process env, then Settings fallback (loaded from .env)
    level_name = (os.getenv("LOG_LEVEL") or settings.LOG_LEVEL or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root.setLevel(level)
    access_logger = logging.getLogger("uvicorn.access")
    if _parse_bool(os.getenv("DISABLE_ACCESS_LOG"), level >= logging.WARNING):
        access_logger.handlers = []
        access_logger.propagate = False
        access_logger.disabled = True
    else:
        access_logger.setLevel(level)


def _sampler_ratio() -> float:
    raw = os.getenv("OTEL_TRACES_SAMPLER_RATIO")
    if raw is None:
        return 1.0
    try:
        ratio = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid OTEL_TRACES_SAMPLER_RATIO=%r", raw)
        return 1.0
    return 0.0 if ratio < 0 else (1.0 if ratio > 1 else ratio)


def setup_tracer(app) -> None:
    """Attach an OpenTelemetry tracer to the FastAPI app."""
    if not _parse_bool(os.getenv("ENABLE_TRACING"), settings.ENABLE_TRACING):
        return
    resource = Resource(attributes={"service.name": "quotes-api"})
    provider = TracerProvider(
        resource=resource,
        sampler=ParentBased(TraceIdRatioBased(_sampler_ratio())),
    )

    enable_console = _parse_bool(os.getenv("ENABLE_CONSOLE_TRACING"), settings.ENABLE_CONSOLE_TRACING)
    if enable_console:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)

    excluded = [s.strip() for s in os.getenv("OTEL_EXCLUDED_URLS", "").split(",") if s.strip()]
    excluded_urls = ",".join(dict.fromkeys(excluded)) if excluded else None
    FastAPIInstrumentor.instrument_app(app, excluded_urls=excluded_urls)
