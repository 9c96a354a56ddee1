# This file defines the persisted truck record and its status enumeration.
# Status strings cross the API boundary case-insensitively and are parsed here before any write.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TruckStatus(str, Enum):
    OPERATIONAL = "OPERATIONAL"
    IN_MAINTENANCE = "IN_MAINTENANCE"


class InvalidStatusError(ValueError):
    """Raised when a status string does not name a `TruckStatus` member."""

    def __init__(self, raw_value: object) -> None:
        self.raw_value = raw_value
        accepted = ", ".join(member.name for member in TruckStatus)
        super().__init__(f"Invalid truck status: {raw_value!r}. Accepted values: {accepted}")


def parse_status(raw_value: str | None) -> TruckStatus:
    """Uppercase `raw_value` and match it exactly against the member names."""

    if not isinstance(raw_value, str):
        raise InvalidStatusError(raw_value)
    try:
        return TruckStatus[raw_value.upper()]
    except KeyError as exc:
        raise InvalidStatusError(raw_value) from exc


@dataclass
class Truck:
    model: str
    status: TruckStatus
    details: str | None = None
    id: int | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Truck:
        return cls(
            id=int(row["id"]),
            model=row["model"],
            status=TruckStatus[row["status"]],
            details=row.get("details"),
        )
