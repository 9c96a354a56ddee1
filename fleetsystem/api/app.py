# This file builds the FastAPI application and registers all API routers.
# Startup creates the truck table when configured, middleware adds request ids and timing headers,
# and Prometheus metrics are exposed on `/metrics`.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import RequestResponseEndpoint

from fleetsystem.api.api_config import CORS_ALLOWED_METHODS, get_api_config
from fleetsystem.api.cors import PrefixedCORSMiddleware
from fleetsystem.api.ddl import apply_truck_ddl
from fleetsystem.api.dependencies import get_database_client
from fleetsystem.api.error_handlers import register_error_handlers
from fleetsystem.api.routers.health import router as health_router
from fleetsystem.api.routers.trucks import router as trucks_router
from fleetsystem.common.logging import configure_logging

LOGGER = logging.getLogger("fleet")

API_HTTP_REQUESTS_TOTAL = Counter(
    "fleet_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "fleet_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "fleet_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method", "path"],
)


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description="Record management for a truck fleet: CRUD and paged listing over truck records.",
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
            {"name": "trucks", "description": "Create, read, update, delete and page through trucks."},
        ],
    )

    if config.allowed_origins:
        app.add_middleware(
            PrefixedCORSMiddleware,
            path_prefix=config.api_prefix,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=list(CORS_ALLOWED_METHODS),
            allow_headers=["*"],
            max_age=config.cors_max_age,
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        path_label = request.url.path
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            return response
        finally:
            duration_s = time.perf_counter() - started
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    def startup_checks() -> None:
        db = get_database_client()
        app.state.db_connected_at_startup = db.can_connect()
        if not app.state.db_connected_at_startup:
            LOGGER.warning("database unreachable at startup")
            return
        if config.auto_create_schema:
            try:
                apply_truck_ddl(db.engine, table_name=config.truck_table_name)
            except SQLAlchemyError:
                LOGGER.exception("could not create table %s", config.truck_table_name)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(trucks_router, prefix=config.api_prefix)

    return app


app = create_app()
