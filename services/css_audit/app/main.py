"""FastAPI application entrypoint."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import audits
from .config import get_settings
from .domain.throughput import ThroughputUnavailableError
from .observability.log_config import configure_logging
from .observability.otel import configure_telemetry


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="CSS Audit",
        version="0.1.0",
        openapi_version="3.1.0",
        docs_url="/docs",
        redoc_url=None,
    )

    configure_logging()
    configure_telemetry()

    @app.exception_handler(ThroughputUnavailableError)
    async def _throughput_unavailable_handler(request: Request, exc: ThroughputUnavailableError):
        return JSONResponse(
            status_code=502,
            content={
                "error": "ThroughputUnavailable",
                "message": str(exc),
                "remediation": "Check the network throughput service or pass networkThroughput explicitly",
            },
        )

    @app.exception_handler(Exception)
    async def _generic_exception_handler(request: Request, exc: Exception):  # pragma: no cover - fallback
        return JSONResponse(
            status_code=500,
            content={
                "error": "InternalServerError",
                "message": str(exc),
                "remediation": "Contact CSS audit support with the request payload",
            },
        )

    app.include_router(audits.router)

    @app.get("/healthz")
    async def healthcheck():
        return {"status": "ok", "environment": settings.environment}

    return app


app = create_app()


__all__ = ["app", "create_app"]
