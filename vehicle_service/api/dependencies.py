from fastapi import Path, Request

from vehicle_service.core.exceptions import InvalidRequestError
from vehicle_service.core.logging import get_logger
from vehicle_service.domain.models.vehicle import is_valid_vehicle_id
from vehicle_service.services.vehicle_service import VehicleService

# Initialize logger
logger = get_logger(__name__)


async def get_vehicle_service(request: Request) -> VehicleService:
    """
    Dependency for providing the vehicle service facade.

    The facade is built once per application in ``create_application`` and
    stored on ``app.state``.

    Returns:
        VehicleService: The application's vehicle service
    """
    return request.app.state.vehicle_service


async def get_vehicle_id(
    id: str = Path(..., description="Numeric vehicle identifier", examples=["1234"])
) -> str:
    """
    Validate the ``id`` path parameter.

    Args:
        id: Raw path parameter

    Returns:
        str: The validated vehicle ID

    Raises:
        InvalidRequestError: If the ID is not a numeric string
    """
    if not is_valid_vehicle_id(id):
        logger.warning(f"Rejected invalid vehicle ID: {id!r}")
        raise InvalidRequestError(
            detail="Vehicle ID must be a numeric string",
            details={"field": "id"}
        )
    return id
