"""FastAPI application factory"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finance_api.api.errors import register_exception_handlers
from finance_api.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finance_api.api.v1 import auth, dashboard, debts, records
from finance_api.infrastructure.database.session import init_db
from finance_api.infrastructure.observability.logging import setup_logging
from finance_api.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Finance API",
        description="Personal finance bookkeeping: expenses, revenues, debts and summaries",
        version="0.1.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/api/docs")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(auth.router, prefix="/api", tags=["auth"])
    app.include_router(records.expenses_router, prefix="/api", tags=["expenses"])
    app.include_router(records.revenues_router, prefix="/api", tags=["revenues"])
    app.include_router(debts.router, prefix="/api", tags=["debts"])
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured host/port"""
    uvicorn.run("finance_api.api.main:app", host=settings.host, port=settings.port)
