# This file defines the external truck representation and the paged listing response.
# `status` is a plain string here; services parse it into `TruckStatus` before writes.

from __future__ import annotations

from pydantic import BaseModel, Field


class TruckDTO(BaseModel):
    id: int | None = None
    model: str
    status: str
    details: str | None = None


class PaginationMetadata(BaseModel):
    page: int = Field(ge=0)
    size: int = Field(ge=1)
    total_elements: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    sort: str


class TruckPageResponse(BaseModel):
    data: list[TruckDTO]
    pagination: PaginationMetadata
