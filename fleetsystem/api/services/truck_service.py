# This file implements the truck service used by the truck router.
# It maps between `TruckDTO` and the persisted `Truck`, checks existence before updates and deletes,
# and reports not-found and invalid-status failures as `ServiceResult` errors.

from __future__ import annotations

import logging

from fleetsystem.api.entities import InvalidStatusError, Truck, parse_status
from fleetsystem.api.pagination import Page, SortSpec
from fleetsystem.api.repository import TruckRepository
from fleetsystem.api.schemas.truck_schemas import TruckDTO
from fleetsystem.api.services.results import ErrorKind, ServiceResult

LOGGER = logging.getLogger("fleet")


def not_found_message(truck_id: int) -> str:
    return f"Truck not found with ID: {truck_id}"


def to_dto(truck: Truck) -> TruckDTO:
    return TruckDTO(
        id=truck.id,
        model=truck.model,
        status=truck.status.name,
        details=truck.details,
    )


class TruckService:
    """Truck CRUD operations on top of a `TruckRepository`."""

    def __init__(self, *, repository: TruckRepository) -> None:
        self.repository = repository

    def get_all_trucks(self) -> list[TruckDTO]:
        return [to_dto(truck) for truck in self.repository.find_all()]

    def get_trucks(self, *, page: int, size: int, sort: SortSpec) -> Page[TruckDTO]:
        return self.repository.find_page(page=page, size=size, sort=sort).map(to_dto)

    def get_truck_by_id(self, truck_id: int) -> ServiceResult[TruckDTO]:
        truck = self.repository.find_by_id(truck_id)
        if truck is None:
            return self._not_found(truck_id)
        return ServiceResult.success(to_dto(truck))

    def create_truck(self, dto: TruckDTO) -> ServiceResult[TruckDTO]:
        try:
            status = parse_status(dto.status)
        except InvalidStatusError as exc:
            return ServiceResult.failure(ErrorKind.INVALID_STATUS, str(exc))

        saved = self.repository.save(Truck(model=dto.model, status=status, details=dto.details))
        LOGGER.info("truck created id=%s status=%s", saved.id, saved.status.name)
        return ServiceResult.success(to_dto(saved))

    def update_truck(self, truck_id: int, dto: TruckDTO) -> ServiceResult[TruckDTO]:
        truck = self.repository.find_by_id(truck_id)
        if truck is None:
            return self._not_found(truck_id)

        try:
            status = parse_status(dto.status)
        except InvalidStatusError as exc:
            return ServiceResult.failure(ErrorKind.INVALID_STATUS, str(exc))

        truck.model = dto.model
        truck.status = status
        truck.details = dto.details
        updated = self.repository.save(truck)
        LOGGER.info("truck updated id=%s status=%s", updated.id, updated.status.name)
        return ServiceResult.success(to_dto(updated))

    def delete_truck(self, truck_id: int) -> ServiceResult[None]:
        if not self.repository.exists_by_id(truck_id):
            return self._not_found(truck_id)
        self.repository.delete_by_id(truck_id)
        LOGGER.info("truck deleted id=%s", truck_id)
        return ServiceResult.success()

    @staticmethod
    def _not_found(truck_id: int) -> ServiceResult:
        message = not_found_message(truck_id)
        LOGGER.warning(message)
        return ServiceResult.failure(ErrorKind.NOT_FOUND, message)
