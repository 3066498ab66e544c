"""FastAPI application factory"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from autofinance.api.dependencies import get_request_id
from autofinance.api.middleware import RequestIDMiddleware, MetricsMiddleware
from autofinance.api.v1 import affordability, financing, preapproval, projections, recommendations, sensitivity, vehicles
from autofinance.config import settings
from autofinance.domain.exceptions import DomainException
from autofinance.infrastructure.observability.logging import setup_logging
from autofinance.infrastructure.observability.metrics import record_calculation_error

# Setup structured logging
setup_logging()


def operation_name(request: Request) -> str:
    """Operation label for a request; routes are named after the calculation they serve"""
    route = request.scope.get("route")
    return getattr(route, "name", None) or "unmatched"


async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Domain errors are caller input problems: 422 with the reason"""
    record_calculation_error(operation_name(request), exc)
    logging.warning(
        f"Calculation rejected: {exc}",
        extra={"request_id": get_request_id(request), "error": type(exc).__name__},
    )
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="AutoFinance Engine",
        description="Vehicle financing, affordability and pre-approval calculations",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(DomainException, domain_error_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(vehicles.router, prefix="/v1", tags=["vehicles"])
    app.include_router(financing.router, prefix="/v1", tags=["financing"])
    app.include_router(affordability.router, prefix="/v1", tags=["affordability"])
    app.include_router(recommendations.router, prefix="/v1", tags=["recommendations"])
    app.include_router(projections.router, prefix="/v1", tags=["projections"])
    app.include_router(sensitivity.router, prefix="/v1", tags=["sensitivity"])
    app.include_router(preapproval.router, prefix="/v1", tags=["preapproval"])

    return app


app = create_app()
