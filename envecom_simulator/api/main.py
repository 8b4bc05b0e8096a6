"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from envecom_simulator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from envecom_simulator.api.v1 import simulation, extraction
from envecom_simulator.infrastructure.observability.logging import setup_logging
from envecom_simulator.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="ENVECOM Compensation Simulator",
        description="Energy-credit compensation simulation and bill extraction service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(simulation.router, prefix="/v1", tags=["simulations"])
    app.include_router(extraction.router, prefix="/v1", tags=["extractions"])

    return app


app = create_app()
