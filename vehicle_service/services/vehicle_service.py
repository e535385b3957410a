import logging
from typing import Any, Awaitable, Callable, List, Optional

from vehicle_service.adapters.implementations.mm_api.classifier import (
    ACTION_RESULT_SECTION,
    DATA_SECTION,
    ResponseOutcome,
    classify_response,
)
from vehicle_service.adapters.implementations.mm_api.normalizer import (
    normalize_energy,
    normalize_engine_action,
    normalize_security_status,
    normalize_vehicle_info,
)
from vehicle_service.adapters.interfaces.vendor_client import VehicleVendorClient
from vehicle_service.core.exceptions import VendorTransportError
from vehicle_service.domain.models.vehicle import (
    DoorStatus,
    EnergyLevel,
    EngineAction,
    EngineActionOutcome,
    EngineCommand,
    VehicleInfo,
    is_valid_vehicle_id,
)
from vehicle_service.domain.result import ErrorKind, OperationResult

logger = logging.getLogger(__name__)

Transform = Callable[[Any], OperationResult]


class VehicleService:
    """
    Facade over the vendor client for the vehicle endpoints.

    Every operation follows the same pipeline: call the vendor, classify the
    envelope, normalize the forwarded section. Failures come back as
    ``OperationResult`` errors; nothing in the expected taxonomy is raised.
    """

    def __init__(self, vendor_client: VehicleVendorClient):
        """Initialize with the vendor client to call through."""
        self.vendor_client = vendor_client

    async def get_vehicle_info(self, vehicle_id: str) -> OperationResult[VehicleInfo]:
        """Gets basic vehicle information."""
        return await self._execute(
            "vehicle_info",
            vehicle_id,
            lambda: self.vendor_client.fetch_vehicle_info(vehicle_id),
            self._to_vehicle_info,
        )

    async def get_doors(self, vehicle_id: str) -> OperationResult[List[DoorStatus]]:
        """Gets door lock states in vendor order."""
        return await self._execute(
            "doors",
            vehicle_id,
            lambda: self.vendor_client.fetch_security_status(vehicle_id),
            self._to_doors,
        )

    async def get_fuel(self, vehicle_id: str) -> OperationResult[Optional[float]]:
        """Gets the fuel level in percent, ``None`` when unknown."""
        result = await self._get_energy("fuel", vehicle_id)
        if not result.ok:
            return result
        return OperationResult.success(result.value.fuel_percent)

    async def get_battery(self, vehicle_id: str) -> OperationResult[Optional[float]]:
        """Gets the battery level in percent, ``None`` when unknown."""
        result = await self._get_energy("battery", vehicle_id)
        if not result.ok:
            return result
        return OperationResult.success(result.value.battery_percent)

    async def action_engine(self, vehicle_id: str, action: Any) -> OperationResult[EngineActionOutcome]:
        """
        Starts or stops the engine.

        Args:
            vehicle_id: Vehicle identifier
            action: Caller supplied action, exactly ``"START"`` or ``"STOP"``

        Returns:
            OperationResult: ``Invalid`` for any other action, checked before
            the vendor is contacted
        """
        if action is None:
            return OperationResult.failure(ErrorKind.INVALID, "Action is required", {"field": "action"})
        if not isinstance(action, str) or action not in (EngineAction.START.value, EngineAction.STOP.value):
            return OperationResult.failure(
                ErrorKind.INVALID,
                "Action must be either START or STOP",
                {"field": "action", "value": action if isinstance(action, str) else repr(action)},
            )

        command = EngineCommand.for_action(EngineAction(action))
        logger.info(f"Engine action {action} requested for vehicle {vehicle_id}")
        return await self._execute(
            "engine",
            vehicle_id,
            lambda: self.vendor_client.send_engine_command(vehicle_id, command),
            self._to_engine_outcome,
            section=ACTION_RESULT_SECTION,
        )

    async def _get_energy(self, operation: str, vehicle_id: str) -> OperationResult[EnergyLevel]:
        return await self._execute(
            operation,
            vehicle_id,
            lambda: self.vendor_client.fetch_energy(vehicle_id),
            lambda data: OperationResult.success(normalize_energy(data)),
        )

    async def _execute(
        self,
        operation: str,
        vehicle_id: str,
        call: Callable[[], Awaitable[Any]],
        transform: Transform,
        section: str = DATA_SECTION,
    ) -> OperationResult:
        if not is_valid_vehicle_id(vehicle_id):
            return OperationResult.failure(
                ErrorKind.INVALID,
                "Vehicle ID must be a numeric string",
                {"field": "id"},
            )

        logger.info(f"Fetching {operation} for vehicle {vehicle_id}")
        try:
            payload = await call()
        except VendorTransportError as e:
            logger.error(f"Vendor call for {operation} failed for vehicle {vehicle_id}: {e.message}")
            return OperationResult.failure(
                ErrorKind.UPSTREAM_ERROR,
                "Vendor API request failed",
                {"reason": e.message},
            )

        classified = classify_response(payload, section)

        if classified.outcome is ResponseOutcome.NOT_FOUND:
            logger.info(f"Vehicle {vehicle_id} not found by vendor ({operation})")
            return OperationResult.failure(
                ErrorKind.NOT_FOUND,
                f"Vehicle with id={vehicle_id} not found",
                {"id": vehicle_id},
            )

        if classified.outcome is ResponseOutcome.UPSTREAM_ERROR:
            message = classified.message
            logger.error(f"{message} ({operation}, vehicle {vehicle_id})")
            details = {}
            if classified.status is not None:
                details["status"] = classified.status
            if classified.reason:
                details["reason"] = classified.reason
            return OperationResult.failure(ErrorKind.UPSTREAM_ERROR, message, details or None)

        result = transform(classified.section)
        if not result.ok:
            logger.error(f"{result.message} ({operation}, vehicle {vehicle_id})", extra={"data": result.details or {}})
        return result

    @staticmethod
    def _to_vehicle_info(data: Any) -> OperationResult[VehicleInfo]:
        fields = normalize_vehicle_info(data)
        missing = [name for name, value in fields.items() if value is None]
        if missing:
            return OperationResult.failure(
                ErrorKind.MALFORMED_UPSTREAM_DATA,
                "Incomplete data from vendor API",
                {"missingFields": missing},
            )
        return OperationResult.success(VehicleInfo(**fields))

    @staticmethod
    def _to_doors(data: Any) -> OperationResult[List[DoorStatus]]:
        doors = normalize_security_status(data)
        if doors is None:
            return OperationResult.failure(
                ErrorKind.MALFORMED_UPSTREAM_DATA,
                "Invalid doors data format from vendor API",
            )
        return OperationResult.success(doors)

    @staticmethod
    def _to_engine_outcome(action_result: Any) -> OperationResult[EngineActionOutcome]:
        reading = normalize_engine_action(action_result)
        if reading.outcome is not None:
            return OperationResult.success(reading.outcome)

        if reading.status is None:
            return OperationResult.failure(
                ErrorKind.MALFORMED_UPSTREAM_DATA,
                "Malformed response from vendor API",
            )
        return OperationResult.failure(
            ErrorKind.MALFORMED_UPSTREAM_DATA,
            f"Unexpected status from vendor API: {reading.status}",
            {"status": reading.status},
        )
