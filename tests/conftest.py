"""
Shared test configuration.
Environment defaults are seeded before any application module is imported, and the
fixtures below give each test its own in-memory SQLite truck table.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

TEST_ENV_DEFAULTS = {
    "PROJECT_NAME": "fleetsystem-test",
    "ENV": "test",
    "LOG_LEVEL": "INFO",
    "DATABASE_URL": "sqlite+pysqlite:///:memory:",
}

for _key, _value in TEST_ENV_DEFAULTS.items():
    os.environ.setdefault(_key, _value)

from fleetsystem.api.db_access import DatabaseClient  # noqa: E402
from fleetsystem.api.ddl import apply_truck_ddl  # noqa: E402
from fleetsystem.api.repository import TruckRepository  # noqa: E402
from fleetsystem.api.services.truck_service import TruckService  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    for key, value in TEST_ENV_DEFAULTS.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)


@pytest.fixture
def db_client() -> Iterator[DatabaseClient]:
    client = DatabaseClient(database_url="sqlite+pysqlite:///:memory:")
    apply_truck_ddl(client.engine, table_name="truck")
    yield client
    client.engine.dispose()


@pytest.fixture
def truck_repository(db_client: DatabaseClient) -> TruckRepository:
    return TruckRepository(db=db_client, table_name="truck")


@pytest.fixture
def truck_service(truck_repository: TruckRepository) -> TruckService:
    return TruckService(repository=truck_repository)
