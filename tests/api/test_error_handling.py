# This file tests unexpected-failure mapping and the cross-origin policy on API routes.

from __future__ import annotations

from sqlalchemy.exc import OperationalError

from tests.api.support import api_test_client


class BrokenTruckService:
    def get_all_trucks(self) -> list[object]:
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    def get_truck_by_id(self, truck_id: int) -> object:
        raise RuntimeError(f"store exploded for {truck_id}")


def test_unexpected_error_returns_500_text() -> None:
    with api_test_client(truck_service=BrokenTruckService(), raise_server_exceptions=False) as client:
        response = client.get("/api/trucks/7")

    assert response.status_code == 500
    assert response.text == "An unexpected error occurred: store exploded for 7"


def test_store_error_detail_is_appended() -> None:
    with api_test_client(truck_service=BrokenTruckService(), raise_server_exceptions=False) as client:
        response = client.get("/api/trucks")

    assert response.status_code == 500
    assert response.text.startswith("An unexpected error occurred: ")
    assert "connection refused" in response.text


def test_cors_preflight_allowed_for_api_routes(truck_service) -> None:
    with api_test_client(truck_service=truck_service) as client:
        response = client.options(
            "/api/trucks",
            headers={
                "Origin": "http://localhost:4200",
                "Access-Control-Request-Method": "PUT",
            },
        )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:4200"
    assert response.headers["access-control-allow-credentials"] == "true"
    assert response.headers["access-control-max-age"] == "3600"
    assert "PUT" in response.headers["access-control-allow-methods"]


def test_cors_rejects_unknown_origin(truck_service) -> None:
    with api_test_client(truck_service=truck_service) as client:
        response = client.options(
            "/api/trucks",
            headers={
                "Origin": "http://evil.example",
                "Access-Control-Request-Method": "GET",
            },
        )

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_cors_headers_absent_outside_api_prefix() -> None:
    with api_test_client() as client:
        response = client.get("/health", headers={"Origin": "http://localhost:4200"})

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


def test_store_error_keeps_cors_headers() -> None:
    with api_test_client(truck_service=BrokenTruckService()) as client:
        response = client.get("/api/trucks", headers={"Origin": "http://localhost:4200"})

    assert response.status_code == 500
    assert response.headers["x-error-code"] == "INTERNAL_SERVER_ERROR"
    assert response.headers["access-control-allow-origin"] == "http://localhost:4200"
    assert "connection refused" in response.text
