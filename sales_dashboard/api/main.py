"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from sales_dashboard.api.dependencies import get_repository
from sales_dashboard.api.errors import register_exception_handlers
from sales_dashboard.api.middleware import RequestIDMiddleware, MetricsMiddleware
from sales_dashboard.api.routes import charts, combined, initialize, transactions
from sales_dashboard.api.routes.schemas import HealthResponse
from sales_dashboard.domain.repository import TransactionRepository
from sales_dashboard.infrastructure.database.models import Base
from sales_dashboard.infrastructure.database.session import engine
from sales_dashboard.infrastructure.observability.logging import setup_logging
from sales_dashboard.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Sales Dashboard API",
        description="Product transaction search, monthly statistics and chart data",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count", "X-Page", "X-Per-Page"],
    )

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    def health_check(repository: TransactionRepository = Depends(get_repository)):
        return HealthResponse(status="ok", service=settings.service_name, records=repository.count())

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(initialize.router, tags=["seed"])
    app.include_router(transactions.router, tags=["transactions"])
    app.include_router(charts.router, tags=["statistics"])
    app.include_router(combined.router, tags=["dashboard"])

    return app


app = create_app()
