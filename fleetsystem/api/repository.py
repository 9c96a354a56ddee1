# This file implements the storage gateway for truck rows.
# Every method runs parameterized SQL through `DatabaseClient`; nothing is cached between calls.
# Sort columns come from an allowlist so ORDER BY never interpolates user input.

from __future__ import annotations

from fleetsystem.api.db_access import DatabaseClient
from fleetsystem.api.entities import Truck
from fleetsystem.api.pagination import Page, PaginationSpec, SortSpec

TRUCK_SORT_FIELD_MAP: dict[str, str] = {
    "id": "t.id",
    "model": "t.model",
    "status": "t.status",
    "details": "t.details",
}


class TruckRepository:
    """CRUD and paging access to the truck table."""

    def __init__(self, *, db: DatabaseClient, table_name: str) -> None:
        self.db = db
        self.table = table_name

    def find_all(self) -> list[Truck]:
        query = f"""
        SELECT t.id, t.model, t.status, t.details
        FROM {self.table} t
        ORDER BY t.id ASC
        """
        return [Truck.from_row(row) for row in self.db.fetch_all(query)]

    def find_page(self, *, page: int, size: int, sort: SortSpec) -> Page[Truck]:
        window = PaginationSpec(page=page, size=size)
        total_count = self.count()

        data_query = f"""
        SELECT t.id, t.model, t.status, t.details
        FROM {self.table} t
        ORDER BY {self._order_by_clause(sort)}, t.id ASC
        LIMIT :limit OFFSET :offset
        """
        rows = self.db.fetch_all(data_query, {"limit": window.size, "offset": window.offset})
        return Page(
            items=[Truck.from_row(row) for row in rows],
            page=page,
            size=size,
            total_count=total_count,
            sort=sort,
        )

    def count(self) -> int:
        query = f"SELECT COUNT(*) AS total_count FROM {self.table}"
        return int(self.db.fetch_scalar(query))

    def find_by_id(self, truck_id: int) -> Truck | None:
        query = f"""
        SELECT t.id, t.model, t.status, t.details
        FROM {self.table} t
        WHERE t.id = :truck_id
        """
        row = self.db.fetch_one(query, {"truck_id": truck_id})
        return Truck.from_row(row) if row is not None else None

    def exists_by_id(self, truck_id: int) -> bool:
        query = f"SELECT 1 FROM {self.table} WHERE id = :truck_id LIMIT 1"
        return self.db.fetch_one(query, {"truck_id": truck_id}) is not None

    def save(self, truck: Truck) -> Truck:
        """Insert a new row when `truck.id` is None, otherwise overwrite the row with that id."""

        params = {
            "model": truck.model,
            "status": truck.status.name,
            "details": truck.details,
        }
        if truck.id is None:
            query = f"""
            INSERT INTO {self.table} (model, status, details)
            VALUES (:model, :status, :details)
            RETURNING id, model, status, details
            """
            row = self.db.execute_returning(query, params)
            if row is None:
                raise RuntimeError(f"Insert into {self.table} returned no row.")
            return Truck.from_row(row)

        params["truck_id"] = truck.id
        update_query = f"""
        UPDATE {self.table}
        SET model = :model, status = :status, details = :details
        WHERE id = :truck_id
        """
        if self.db.execute(update_query, params) == 0:
            insert_query = f"""
            INSERT INTO {self.table} (id, model, status, details)
            VALUES (:truck_id, :model, :status, :details)
            """
            self.db.execute(insert_query, params)
        return Truck(id=truck.id, model=truck.model, status=truck.status, details=truck.details)

    def delete_by_id(self, truck_id: int) -> None:
        query = f"DELETE FROM {self.table} WHERE id = :truck_id"
        self.db.execute(query, {"truck_id": truck_id})

    @staticmethod
    def _order_by_clause(sort: SortSpec) -> str:
        return f"{TRUCK_SORT_FIELD_MAP[sort.field]} {sort.order.upper()}"
