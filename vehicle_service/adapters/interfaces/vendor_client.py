from abc import ABC, abstractmethod
from typing import Any

from vehicle_service.domain.models.vehicle import EngineCommand


class VehicleVendorClient(ABC):
    """
    Abstract contract for the vehicle vendor API client.

    Each method issues exactly one outbound request and returns the decoded
    vendor payload verbatim, without classification or normalization.
    Implementations must hold no per-call mutable state so a single instance
    can be shared by concurrent requests.

    Raises:
        VendorTransportError: from every method, when the request itself
            fails (timeout, connection refused, undecodable body).
    """

    @abstractmethod
    async def fetch_vehicle_info(self, vehicle_id: str) -> Any:
        """
        Fetches basic vehicle information (vin, color, body style, drive train).

        Args:
            vehicle_id: The vendor's vehicle identifier.

        Returns:
            Any: The raw decoded vendor payload.
        """
        pass

    @abstractmethod
    async def fetch_security_status(self, vehicle_id: str) -> Any:
        """
        Fetches the door lock states of a vehicle.

        Args:
            vehicle_id: The vendor's vehicle identifier.

        Returns:
            Any: The raw decoded vendor payload.
        """
        pass

    @abstractmethod
    async def fetch_energy(self, vehicle_id: str) -> Any:
        """
        Fetches the fuel tank and battery levels of a vehicle.

        Args:
            vehicle_id: The vendor's vehicle identifier.

        Returns:
            Any: The raw decoded vendor payload.
        """
        pass

    @abstractmethod
    async def send_engine_command(self, vehicle_id: str, command: EngineCommand) -> Any:
        """
        Sends an engine start or stop command.

        Args:
            vehicle_id: The vendor's vehicle identifier.
            command: The vendor engine command.

        Returns:
            Any: The raw decoded vendor payload.
        """
        pass

    async def close(self) -> None:
        """Releases any network resources held by the client."""
        return None
