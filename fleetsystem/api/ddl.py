"""DDL helpers for the truck table."""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from fleetsystem.api.entities import TruckStatus

LOGGER = logging.getLogger("fleet")

_STATUS_CHECK = ", ".join(f"'{member.name}'" for member in TruckStatus)

_TRUCK_DDL_BY_DIALECT: dict[str, str] = {
    "postgresql": """
    CREATE TABLE IF NOT EXISTS {table} (
        id BIGINT GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
        model VARCHAR(255) NOT NULL,
        status VARCHAR(32) NOT NULL CHECK (status IN ({statuses})),
        details VARCHAR(1024)
    )
    """,
    "sqlite": """
    CREATE TABLE IF NOT EXISTS {table} (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        model VARCHAR(255) NOT NULL,
        status VARCHAR(32) NOT NULL CHECK (status IN ({statuses})),
        details VARCHAR(1024)
    )
    """,
}


def truck_table_ddl(*, dialect_name: str, table_name: str) -> str:
    """Return the CREATE TABLE statement for the given SQLAlchemy dialect."""

    template = _TRUCK_DDL_BY_DIALECT.get(dialect_name, _TRUCK_DDL_BY_DIALECT["postgresql"])
    return template.format(table=table_name, statuses=_STATUS_CHECK)


def apply_truck_ddl(engine: Engine, *, table_name: str) -> None:
    """Create the truck table if it does not exist yet."""

    sql_text = truck_table_ddl(dialect_name=engine.dialect.name, table_name=table_name)
    with engine.begin() as connection:
        connection.exec_driver_sql(sql_text)
    LOGGER.info("truck table ready table=%s dialect=%s", table_name, engine.dialect.name)
