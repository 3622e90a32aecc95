"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from ledger_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from ledger_gateway.api.routes import statement, transactions
from ledger_gateway.infrastructure.database.seed import create_schema, seed_customers
from ledger_gateway.infrastructure.database.session import SessionLocal, engine
from ledger_gateway.infrastructure.observability.logging import setup_logging
from ledger_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed customers for local runs; production uses db/schema.sql"""
    if settings.create_schema_on_startup:
        create_schema(engine)
        db = SessionLocal()
        try:
            seed_customers(db)
        finally:
            db.close()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Ledger Gateway",
        description="Customer balances with bounded overdraft and transaction statements",
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
    app.include_router(transactions.router, tags=["transactions"])
    app.include_router(statement.router, tags=["statements"])

    return app


app = create_app()


def serve() -> None:
    """Console entry point: run the app with uvicorn"""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)
