"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from emi_calculator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from emi_calculator.api import form
from emi_calculator.api.v1 import emi
from emi_calculator.infrastructure.observability.logging import setup_logging
from emi_calculator.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="EMI Calculator",
        description="Loan instalment, interest and total payment calculator",
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

    # Register routers
    app.include_router(form.router, tags=["form"])
    app.include_router(emi.router, prefix="/v1", tags=["emi"])

    return app


app = create_app()
