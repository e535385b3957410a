from typing import List

from fastapi import APIRouter, Depends

from vehicle_service.api.dependencies import get_vehicle_id, get_vehicle_service
from vehicle_service.api.response_validation import unwrap, validate_response
from vehicle_service.domain.schemas.vehicle import (
    DoorStatusListAdapter,
    DoorStatusResponse,
    EngineActionRequest,
    EngineActionResponse,
    ErrorResponse,
    PercentResponse,
    VehicleInfoResponse,
)
from vehicle_service.services.vehicle_service import VehicleService

router = APIRouter(prefix="/vehicles", tags=["Vehicles"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid vehicle ID or request body"},
    404: {"model": ErrorResponse, "description": "Vehicle not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
    502: {"model": ErrorResponse, "description": "Bad gateway - vendor API error or malformed vendor data"},
}


@router.get(
    "/{id}",
    response_model=VehicleInfoResponse,
    responses=ERROR_RESPONSES,
    summary="Get vehicle info"
)
async def get_vehicle(
    vehicle_id: str = Depends(get_vehicle_id),
    vehicle_service: VehicleService = Depends(get_vehicle_service)
):
    """Gets vin, color, door count and drive train of a vehicle."""
    info = unwrap(await vehicle_service.get_vehicle_info(vehicle_id))
    return validate_response(VehicleInfoResponse, {
        "vin": info.vin,
        "color": info.color,
        "doorCount": info.door_count,
        "driveTrain": info.drive_train,
    })


@router.get(
    "/{id}/doors",
    response_model=List[DoorStatusResponse],
    responses=ERROR_RESPONSES,
    summary="Get door lock status"
)
async def get_doors(
    vehicle_id: str = Depends(get_vehicle_id),
    vehicle_service: VehicleService = Depends(get_vehicle_service)
):
    """Gets the lock state of every door, in the order the vendor reports them."""
    doors = unwrap(await vehicle_service.get_doors(vehicle_id))
    return validate_response(
        DoorStatusListAdapter,
        [{"location": door.location, "locked": door.locked} for door in doors]
    )


@router.get(
    "/{id}/fuel",
    response_model=PercentResponse,
    responses=ERROR_RESPONSES,
    summary="Get fuel percentage"
)
async def get_fuel(
    vehicle_id: str = Depends(get_vehicle_id),
    vehicle_service: VehicleService = Depends(get_vehicle_service)
):
    """Gets the fuel level. ``percent`` is null for vehicles without a tank."""
    percent = unwrap(await vehicle_service.get_fuel(vehicle_id))
    return validate_response(PercentResponse, {"percent": percent})


@router.get(
    "/{id}/battery",
    response_model=PercentResponse,
    responses=ERROR_RESPONSES,
    summary="Get battery percentage"
)
async def get_battery(
    vehicle_id: str = Depends(get_vehicle_id),
    vehicle_service: VehicleService = Depends(get_vehicle_service)
):
    """Gets the battery level. ``percent`` is null for vehicles without a battery."""
    percent = unwrap(await vehicle_service.get_battery(vehicle_id))
    return validate_response(PercentResponse, {"percent": percent})


@router.post(
    "/{id}/engine",
    response_model=EngineActionResponse,
    responses=ERROR_RESPONSES,
    summary="Start or stop the engine"
)
async def post_engine(
    body: EngineActionRequest,
    vehicle_id: str = Depends(get_vehicle_id),
    vehicle_service: VehicleService = Depends(get_vehicle_service)
):
    """Sends START or STOP to the vehicle and reports whether the vendor executed it."""
    outcome = unwrap(await vehicle_service.action_engine(vehicle_id, body.action))
    return validate_response(EngineActionResponse, {"status": outcome.value})
