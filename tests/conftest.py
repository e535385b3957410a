from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from vehicle_service.adapters.interfaces.vendor_client import VehicleVendorClient
from vehicle_service.domain.models.vehicle import EngineCommand
from vehicle_service.main import create_application
from vehicle_service.services.vehicle_service import VehicleService


class StubVendorClient(VehicleVendorClient):
    """Vendor client returning canned payloads and recording every call."""

    def __init__(self) -> None:
        self.responses: dict[str, Any] = {}
        self.errors: dict[str, Exception] = {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.closed = False

    def respond(self, operation: str, payload: Any) -> None:
        self.responses[operation] = payload

    def fail(self, operation: str, error: Exception) -> None:
        self.errors[operation] = error

    def calls_to(self, operation: str) -> int:
        return sum(1 for name, _ in self.calls if name == operation)

    async def _answer(self, operation: str, *args: Any) -> Any:
        self.calls.append((operation, args))
        if operation in self.errors:
            raise self.errors[operation]
        return self.responses.get(operation)

    async def fetch_vehicle_info(self, vehicle_id: str) -> Any:
        return await self._answer("vehicle_info", vehicle_id)

    async def fetch_security_status(self, vehicle_id: str) -> Any:
        return await self._answer("security_status", vehicle_id)

    async def fetch_energy(self, vehicle_id: str) -> Any:
        return await self._answer("energy", vehicle_id)

    async def send_engine_command(self, vehicle_id: str, command: EngineCommand) -> Any:
        return await self._answer("engine", vehicle_id, command)

    async def close(self) -> None:
        self.closed = True


def vehicle_info_payload(**overrides: Any) -> dict[str, Any]:
    data = {
        "vin": {"type": "String", "value": "123123412412"},
        "color": {"type": "String", "value": "Metallic Silver"},
        "fourDoorSedan": {"type": "Boolean", "value": "True"},
        "twoDoorCoupe": {"type": "Boolean", "value": "False"},
        "driveTrain": {"type": "String", "value": "v8"},
    }
    data.update(overrides)
    return {"service": "getVehicleInfo", "status": "200", "data": data}


def door(location: Any, locked: Any) -> dict[str, Any]:
    return {
        "location": {"type": "String", "value": location},
        "locked": {"type": "Boolean", "value": locked},
    }


def security_payload(values: Any) -> dict[str, Any]:
    return {
        "service": "getSecurityStatus",
        "status": "200",
        "data": {"doors": {"type": "Array", "values": values}},
    }


FOUR_DOORS = [
    door("frontLeft", "False"),
    door("frontRight", "True"),
    door("backLeft", "False"),
    door("backRight", "True"),
]


def energy_payload(tank: Any = None, battery: Any = None) -> dict[str, Any]:
    return {
        "service": "getEnergyService",
        "status": "200",
        "data": {
            "tankLevel": tank if tank is not None else {"type": "Null", "value": "null"},
            "batteryLevel": battery if battery is not None else {"type": "Null", "value": "null"},
        },
    }


def engine_payload(status: Any) -> dict[str, Any]:
    return {"service": "actionEngine", "status": "200", "actionResult": {"status": status}}


@pytest.fixture
def vendor() -> StubVendorClient:
    return StubVendorClient()


@pytest.fixture
def service(vendor: StubVendorClient) -> VehicleService:
    return VehicleService(vendor)


@pytest.fixture
def client(vendor: StubVendorClient) -> TestClient:
    app = create_application(vendor_client=vendor)
    return TestClient(app, raise_server_exceptions=False)
