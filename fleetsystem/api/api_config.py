# This file defines runtime settings for the API layer in one place.
# Route prefix, pagination defaults, CORS policy and the truck table name are read from the environment.
# The loader applies local-development defaults and validates the table name as a safe SQL identifier.

from __future__ import annotations

import os
import re
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

DEFAULT_ALLOWED_ORIGINS: tuple[str, ...] = ("http://localhost:4200",)
CORS_ALLOWED_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "OPTIONS")


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Fleet System API"
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 8080
    environment: str = "local"
    database_url: str
    default_page_size: int = 2
    max_page_size: int = 100
    default_sort: str = "id,asc"
    allowed_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    cors_max_age: int = 3600
    truck_table_name: str = "truck"
    auto_create_schema: bool = True
    app_version: str = "0.1.0"

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("api_prefix must start with '/'.")
        cleaned = value.rstrip("/")
        if not cleaned:
            raise ValueError("api_prefix must not be the root path.")
        return cleaned

    @field_validator("truck_table_name")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        if not _IDENTIFIER_RE.match(value):
            raise ValueError(f"Unsafe SQL identifier: {value!r}")
        return value

    @field_validator("default_page_size", "max_page_size", "cors_max_age")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Fleet System API"),
        "api_prefix": os.getenv("API_PREFIX", "/api"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 8080),
        "environment": os.getenv("ENV", "local"),
        "database_url": os.getenv("DATABASE_URL", ""),
        "default_page_size": _env_int("API_DEFAULT_PAGE_SIZE", 2),
        "max_page_size": _env_int("API_MAX_PAGE_SIZE", 100),
        "default_sort": os.getenv("API_DEFAULT_SORT", "id,asc"),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", list(DEFAULT_ALLOWED_ORIGINS)),
        "cors_max_age": _env_int("API_CORS_MAX_AGE", 3600),
        "truck_table_name": os.getenv("API_TRUCK_TABLE_NAME", "truck"),
        "auto_create_schema": _env_bool("API_AUTO_CREATE_SCHEMA", True),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }
    if not config_values["database_url"]:
        raise RuntimeError("DATABASE_URL is required for API startup.")

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
