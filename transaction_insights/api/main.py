"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from transaction_insights.api.middleware import RequestIDMiddleware, MetricsMiddleware
from transaction_insights.api.v1 import report, rankings, beneficiaries
from transaction_insights.infrastructure.observability.logging import setup_logging
from transaction_insights.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Transaction Insights",
        description="Aggregate statistics, groupings and rankings over transaction datasets",
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
    app.include_router(report.router, prefix="/v1", tags=["reports"])
    app.include_router(rankings.router, prefix="/v1", tags=["rankings"])
    app.include_router(beneficiaries.router, prefix="/v1", tags=["beneficiaries"])

    return app


app = create_app()
