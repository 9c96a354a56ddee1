# This file defines the truck CRUD and paged listing endpoints under the API prefix.
# Handlers pass straight through to `TruckService` and turn service errors into HTTP responses.
# The paged listing validates page, size and sort before the query runs.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import PlainTextResponse

from fleetsystem.api.api_config import ApiConfig
from fleetsystem.api.dependencies import get_config, get_truck_service
from fleetsystem.api.error_handlers import APIError, unwrap_result
from fleetsystem.api.pagination import MAX_STORE_INT, normalize_pagination, parse_sort
from fleetsystem.api.repository import TRUCK_SORT_FIELD_MAP
from fleetsystem.api.schemas.truck_schemas import PaginationMetadata, TruckDTO, TruckPageResponse
from fleetsystem.api.services.truck_service import TruckService

DELETE_CONFIRMATION = "Truck Deleted Successfully"

router = APIRouter(prefix="/trucks", tags=["trucks"])
TruckServiceDep = Annotated[TruckService, Depends(get_truck_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
TruckIdPath = Annotated[int, Path(ge=-MAX_STORE_INT - 1, le=MAX_STORE_INT)]


@router.get("", response_model=list[TruckDTO])
def get_all_trucks(service: TruckServiceDep) -> list[TruckDTO]:
    return service.get_all_trucks()


@router.get("/page", response_model=TruckPageResponse)
def get_trucks_page(
    service: TruckServiceDep,
    config: ConfigDep,
    page: int = Query(default=0),
    size: int | None = Query(default=None),
    sort: str | None = Query(default=None),
) -> TruckPageResponse:
    try:
        pagination = normalize_pagination(
            page=page,
            size=size,
            default_page_size=config.default_page_size,
            max_page_size=config.max_page_size,
        )
        sort_spec = parse_sort(
            requested_sort=sort,
            default_sort=config.default_sort,
            allowed_fields=set(TRUCK_SORT_FIELD_MAP),
        )
    except ValueError as exc:
        raise APIError(
            status_code=400,
            error_code="INVALID_QUERY_PARAM",
            message=str(exc),
        ) from exc

    truck_page = service.get_trucks(page=pagination.page, size=pagination.size, sort=sort_spec)

    return TruckPageResponse(
        data=truck_page.items,
        pagination=PaginationMetadata(
            page=truck_page.page,
            size=truck_page.size,
            total_elements=truck_page.total_count,
            total_pages=truck_page.total_pages,
            sort=sort_spec.as_text,
        ),
    )


@router.post("", response_model=TruckDTO)
def create_truck(dto: TruckDTO, service: TruckServiceDep) -> TruckDTO | None:
    return unwrap_result(service.create_truck(dto))


@router.get("/{truck_id}", response_model=TruckDTO)
def get_truck_by_id(truck_id: TruckIdPath, service: TruckServiceDep) -> TruckDTO | None:
    return unwrap_result(service.get_truck_by_id(truck_id))


@router.put("/{truck_id}", response_model=TruckDTO)
def update_truck(truck_id: TruckIdPath, dto: TruckDTO, service: TruckServiceDep) -> TruckDTO | None:
    return unwrap_result(service.update_truck(truck_id, dto))


@router.delete("/{truck_id}", response_class=PlainTextResponse)
def delete_truck(truck_id: TruckIdPath, service: TruckServiceDep) -> str:
    unwrap_result(service.delete_truck(truck_id))
    return DELETE_CONFIRMATION
