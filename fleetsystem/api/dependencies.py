# This file provides dependency factories for FastAPI routes and startup hooks.
# Each object is built once with its collaborators passed to the constructor.
# Tests replace these factories through `app.dependency_overrides`.

from __future__ import annotations

from functools import lru_cache

from fleetsystem.api.api_config import ApiConfig, get_api_config
from fleetsystem.api.db_access import DatabaseClient
from fleetsystem.api.repository import TruckRepository
from fleetsystem.api.services.truck_service import TruckService


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


@lru_cache(maxsize=1)
def get_truck_repository() -> TruckRepository:
    config = get_api_config()
    return TruckRepository(db=get_database_client(), table_name=config.truck_table_name)


@lru_cache(maxsize=1)
def get_truck_service() -> TruckService:
    return TruckService(repository=get_truck_repository())


def get_config() -> ApiConfig:
    return get_api_config()
