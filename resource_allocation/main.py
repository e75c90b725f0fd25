import time
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from prometheus_client import make_asgi_app
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from resource_allocation.api.main import api_router
from resource_allocation.application.services.workspace import AllocationWorkspace
from resource_allocation.core.config import settings
from resource_allocation.core.observability import (
    REQUEST_COUNT,
    get_logger,
    initialize_observability,
    set_correlation_id,
)

logger = get_logger(__name__)


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging and correlation tracking."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(
            request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        )

        start_time = time.time()
        method = request.method
        path = request.url.path

        logger.info(
            "Request started",
            method=method,
            path=path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            REQUEST_COUNT.labels(method=method, endpoint=path, status="500").inc()
            logger.error(
                "Request failed",
                method=method,
                path=path,
                duration_seconds=time.time() - start_time,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        REQUEST_COUNT.labels(
            method=method, endpoint=path, status=str(response.status_code)
        ).inc()
        response.headers["X-Correlation-ID"] = correlation_id

        logger.info(
            "Request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_seconds=time.time() - start_time,
        )
        return response


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    initialize_observability()
    logger.info(
        "Application started",
        project_name=settings.PROJECT_NAME,
        environment=settings.ENVIRONMENT,
        api_version=settings.API_V1_STR,
        metrics_enabled=settings.ENABLE_METRICS,
    )
    yield
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
    Resource Allocation Tool - spreadsheet cleaning and rule configuration API

    Upload client, worker and task spreadsheets, check them for broken
    references and out-of-range values, describe allocation rules in plain
    English, and export a clean dataset for an allocation solver.
    """,
    version="1.0.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    generate_unique_id_function=custom_generate_unique_id,
    lifespan=lifespan,
)

# One shared dataset per process
app.state.workspace = AllocationWorkspace()

app.add_middleware(ObservabilityMiddleware)

if settings.all_cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.all_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(api_router, prefix=settings.API_V1_STR)

if settings.ENABLE_METRICS:
    app.mount("/metrics", make_asgi_app())


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
