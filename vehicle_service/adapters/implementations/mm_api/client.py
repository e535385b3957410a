import time
from typing import Any, Dict, Optional

import httpx

from vehicle_service.adapters.interfaces.vendor_client import VehicleVendorClient
from vehicle_service.core.exceptions import VendorTransportError
from vehicle_service.core.logging import get_logger, log_data
from vehicle_service.domain.models.vehicle import EngineCommand

logger = get_logger(__name__)


class MMApiClient(VehicleVendorClient):
    """
    Client for the MM vehicle API.

    Every operation is a single JSON ``POST`` to a fixed endpoint under the
    base URL. Responses are returned as decoded, untouched. There are no
    retries and no caching.
    """

    VEHICLE_INFO_PATH = "/getVehicleInfoService"
    SECURITY_STATUS_PATH = "/getSecurityStatusService"
    ENERGY_PATH = "/getEnergyService"
    ENGINE_ACTION_PATH = "/actionEngineService"

    RESPONSE_TYPE = "JSON"

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the MM API client.

        Args:
            base_url: Base URL of the vendor API, e.g. ``https://host/v1``
            timeout: Transport timeout in seconds
            http_client: Optional preconfigured ``httpx.AsyncClient``; one is
                created when omitted
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Content-Type": "application/json"}
        )

        logger.info(f"MM API client initialized for {self.base_url}")

    async def fetch_vehicle_info(self, vehicle_id: str) -> Any:
        return await self._post(self.VEHICLE_INFO_PATH, self._build_payload(vehicle_id))

    async def fetch_security_status(self, vehicle_id: str) -> Any:
        return await self._post(self.SECURITY_STATUS_PATH, self._build_payload(vehicle_id))

    async def fetch_energy(self, vehicle_id: str) -> Any:
        return await self._post(self.ENERGY_PATH, self._build_payload(vehicle_id))

    async def send_engine_command(self, vehicle_id: str, command: EngineCommand) -> Any:
        payload = self._build_payload(vehicle_id)
        payload["command"] = EngineCommand(command).value
        return await self._post(self.ENGINE_ACTION_PATH, payload)

    async def close(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()

    def _build_payload(self, vehicle_id: str) -> Dict[str, Any]:
        return {"id": vehicle_id, "responseType": self.RESPONSE_TYPE}

    async def _post(self, path: str, payload: Dict[str, Any]) -> Any:
        """
        Make one request to the MM API.

        Args:
            path: Endpoint path relative to the base URL
            payload: JSON request body

        Returns:
            The decoded JSON body

        Raises:
            VendorTransportError: If the request fails, the body is not JSON,
                or the HTTP status is an error without a vendor envelope
        """
        url = f"{self.base_url}{path}"
        start_time = time.time()

        try:
            response = await self.http_client.post(url, json=payload)
        except httpx.HTTPError as e:
            logger.error(
                f"MM API request to {path} failed: {e.__class__.__name__}: {str(e)}",
                extra=log_data(url=url)
            )
            raise VendorTransportError(f"Request to vendor API failed: {e.__class__.__name__}", url=url, original_exception=e)

        duration = time.time() - start_time
        logger.debug(
            f"MM API request completed in {duration:.2f}s",
            extra=log_data(url=url, status_code=response.status_code)
        )

        try:
            body = response.json()
        except ValueError as e:
            logger.error(
                f"MM API returned a non-JSON body from {path}",
                extra=log_data(url=url, status_code=response.status_code)
            )
            raise VendorTransportError("Vendor API returned a non-JSON body", url=url, original_exception=e)

        # The vendor reports its own status inside the envelope; pass that through
        # even on HTTP errors so the classifier can see it.
        if response.is_error and not (isinstance(body, dict) and "status" in body):
            logger.error(
                f"MM API returned HTTP {response.status_code} from {path}",
                extra=log_data(url=url, status_code=response.status_code)
            )
            raise VendorTransportError(f"Vendor API returned HTTP {response.status_code}", url=url)

        return body
