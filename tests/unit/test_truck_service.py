"""
Unit tests for the truck service: DTO mapping, existence checks and explicit error results.
"""

from fleetsystem.api.pagination import SortSpec
from fleetsystem.api.schemas.truck_schemas import TruckDTO
from fleetsystem.api.services.results import ErrorKind
from fleetsystem.api.services.truck_service import TruckService


def _create(service: TruckService, model: str, status: str = "operational", details: str | None = None) -> TruckDTO:
    result = service.create_truck(TruckDTO(model=model, status=status, details=details))
    assert result.ok
    return result.value


def test_create_truck_normalizes_status_and_assigns_id(truck_service: TruckService) -> None:
    result = truck_service.create_truck(
        TruckDTO(model="Volvo FH16", status="operational", details="new")
    )

    assert result.ok
    assert result.value == TruckDTO(id=1, model="Volvo FH16", status="OPERATIONAL", details="new")


def test_create_truck_ignores_incoming_id(truck_service: TruckService) -> None:
    created = truck_service.create_truck(TruckDTO(id=77, model="DAF XF", status="OPERATIONAL")).value

    assert created.id == 1


def test_created_truck_is_returned_by_lookup(truck_service: TruckService) -> None:
    created = _create(truck_service, "Scania R450", status="In_Maintenance", details="gearbox")

    fetched = truck_service.get_truck_by_id(created.id)

    assert fetched.ok
    assert fetched.value == created
    assert fetched.value.status == "IN_MAINTENANCE"


def test_get_missing_truck_returns_not_found(truck_service: TruckService) -> None:
    result = truck_service.get_truck_by_id(999)

    assert not result.ok
    assert result.value is None
    assert result.error.kind is ErrorKind.NOT_FOUND
    assert "999" in result.error.message
    assert result.error.message == "Truck not found with ID: 999"


def test_create_truck_with_unknown_status_persists_nothing(truck_service: TruckService) -> None:
    result = truck_service.create_truck(TruckDTO(model="Iveco S-Way", status="parked"))

    assert result.error.kind is ErrorKind.INVALID_STATUS
    assert "parked" in result.error.message
    assert truck_service.get_all_trucks() == []


def test_update_truck_overwrites_fields_and_keeps_id(truck_service: TruckService) -> None:
    created = _create(truck_service, "Mercedes Actros", details="first")

    result = truck_service.update_truck(
        created.id,
        TruckDTO(id=500, model="Mercedes Actros L", status="in_maintenance", details=None),
    )

    assert result.ok
    assert result.value == TruckDTO(
        id=created.id, model="Mercedes Actros L", status="IN_MAINTENANCE", details=None
    )
    assert truck_service.get_truck_by_id(created.id).value == result.value
    assert len(truck_service.get_all_trucks()) == 1


def test_update_missing_truck_returns_not_found(truck_service: TruckService) -> None:
    result = truck_service.update_truck(3, TruckDTO(model="Renault T", status="OPERATIONAL"))

    assert result.error.kind is ErrorKind.NOT_FOUND
    assert truck_service.get_all_trucks() == []


def test_update_with_unknown_status_leaves_row_unchanged(truck_service: TruckService) -> None:
    created = _create(truck_service, "Volvo FM")

    result = truck_service.update_truck(created.id, TruckDTO(model="Volvo FMX", status="retired"))

    assert result.error.kind is ErrorKind.INVALID_STATUS
    assert truck_service.get_truck_by_id(created.id).value == created


def test_delete_truck_removes_it(truck_service: TruckService) -> None:
    created = _create(truck_service, "MAN TGS")

    deleted = truck_service.delete_truck(created.id)

    assert deleted.ok
    assert truck_service.get_truck_by_id(created.id).error.kind is ErrorKind.NOT_FOUND


def test_delete_missing_truck_has_no_side_effects(truck_service: TruckService) -> None:
    kept = _create(truck_service, "DAF CF")

    result = truck_service.delete_truck(kept.id + 1)

    assert result.error.kind is ErrorKind.NOT_FOUND
    assert truck_service.get_all_trucks() == [kept]


def test_get_trucks_pages_in_id_order(truck_service: TruckService) -> None:
    created = [_create(truck_service, f"Truck {index}") for index in range(5)]
    sort = SortSpec(field="id", order="asc")

    first = truck_service.get_trucks(page=0, size=2, sort=sort)
    last = truck_service.get_trucks(page=2, size=2, sort=sort)

    assert first.items == created[:2]
    assert last.items == created[4:]
    assert first.total_count == 5
    assert all(isinstance(item, TruckDTO) for item in first.items)
