from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from vehicle_service.domain.models.vehicle import DoorLocation


class VehicleInfoResponse(BaseModel):
    """Response body of GET /vehicles/{id}."""
    vin: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)
    doorCount: Literal[2, 4]
    driveTrain: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vin": "123123412412",
                "color": "Metallic Silver",
                "doorCount": 4,
                "driveTrain": "v8"
            }
        }
    )


class DoorStatusResponse(BaseModel):
    """One entry of the GET /vehicles/{id}/doors response."""
    location: DoorLocation
    locked: bool

    model_config = ConfigDict(use_enum_values=True)


DoorStatusListAdapter = TypeAdapter(List[DoorStatusResponse])


class PercentResponse(BaseModel):
    """Response body of the fuel and battery endpoints. ``null`` when the level is unknown."""
    percent: Optional[float] = Field(None, ge=0, le=100)


class EngineActionRequest(BaseModel):
    """
    Request body of POST /vehicles/{id}/engine.

    ``action`` is kept as a plain string; it is checked against START/STOP
    by the service so that a bad value is reported as an invalid request.
    """
    action: Optional[Any] = Field(None, examples=["START", "STOP"])


class EngineActionResponse(BaseModel):
    """Response body of POST /vehicles/{id}/engine."""
    status: Literal["success", "error"]


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint."""
    error: str
    message: str
    details: Optional[Dict[str, Any]] = None
    requestId: str
