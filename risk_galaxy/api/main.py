"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from risk_galaxy.api.middleware import RequestIDMiddleware, MetricsMiddleware
from risk_galaxy.api.v1 import galaxy, prediction
from risk_galaxy.infrastructure.observability.logging import setup_logging
from risk_galaxy.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Risk Galaxy",
        description="Per-file fragility scoring for the code risk map",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(galaxy.router, prefix="/v1", tags=["galaxy"])
    app.include_router(prediction.router, prefix="/v1", tags=["prediction"])

    return app


app = create_app()
