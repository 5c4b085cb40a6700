"""Age of money HTTP service: app factory, health and Prometheus endpoints"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from age_of_money.api.middleware import RequestIDMiddleware, MetricsMiddleware
from age_of_money.api.v1 import calculate, report, snapshot, history
from age_of_money.infrastructure.database.session import init_db
from age_of_money.infrastructure.observability.logging import setup_logging
from age_of_money.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Snapshot tables must exist before the first report is stored
    init_db()
    yield


def create_app() -> FastAPI:
    """Build the app with JSON logging, tracing middleware and the v1 age of money routers"""
    app = FastAPI(
        title="Age of Money Service",
        description="FIFO age of money, rolling averages and trends",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
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
    app.include_router(calculate.router, prefix="/v1", tags=["age-of-money"])
    app.include_router(report.router, prefix="/v1", tags=["age-of-money"])
    app.include_router(snapshot.router, prefix="/v1", tags=["snapshots"])
    app.include_router(history.router, prefix="/v1", tags=["history"])

    return app


app = create_app()
