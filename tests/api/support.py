# This file provides shared helpers for API endpoint tests.
# Tests override dependency factories so no real database server is needed.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from fleetsystem.api.api_config import ApiConfig
from fleetsystem.api.app import app
from fleetsystem.api.dependencies import get_config, get_database_client, get_truck_service


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test Fleet API",
        "api_prefix": "/api",
        "host": "0.0.0.0",
        "port": 8080,
        "environment": "test",
        "database_url": "sqlite+pysqlite:///:memory:",
        "default_page_size": 2,
        "max_page_size": 5,
        "default_sort": "id,asc",
        "allowed_origins": ["http://localhost:4200"],
        "cors_max_age": 3600,
        "truck_table_name": "truck",
        "auto_create_schema": True,
        "app_version": "0.1.0",
    }
    values.update(overrides)
    return ApiConfig(**values)


class FakeDBClient:
    """Simple fake DB dependency for readiness endpoint tests."""

    def __init__(self, *, connected: bool = True, existing_tables: set[str] | None = None) -> None:
        self._connected = connected
        self._tables = {"truck"} if existing_tables is None else existing_tables

    def can_connect(self) -> bool:
        return self._connected

    def table_exists(self, table_name: str) -> bool:
        return self._connected and table_name in self._tables


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    truck_service: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()

    app.dependency_overrides[get_config] = lambda: resolved_config
    if db_client is not None:
        app.dependency_overrides[get_database_client] = lambda: db_client
    if truck_service is not None:
        app.dependency_overrides[get_truck_service] = lambda: truck_service

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
