import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

VEHICLE_ID_PATTERN = re.compile(r"[0-9]+")


class DoorLocation(str, Enum):
    """Door positions the public API exposes."""
    FRONT_LEFT = "frontLeft"
    FRONT_RIGHT = "frontRight"
    BACK_LEFT = "backLeft"
    BACK_RIGHT = "backRight"


class EngineAction(str, Enum):
    """Engine action accepted from API callers."""
    START = "START"
    STOP = "STOP"


class EngineCommand(str, Enum):
    """Engine command understood by the vendor API."""
    START_VEHICLE = "START_VEHICLE"
    STOP_VEHICLE = "STOP_VEHICLE"

    @classmethod
    def for_action(cls, action: EngineAction) -> "EngineCommand":
        if action is EngineAction.START:
            return cls.START_VEHICLE
        return cls.STOP_VEHICLE


class EngineActionOutcome(str, Enum):
    """Normalized result of an engine command."""
    SUCCESS = "success"
    FAILED = "error"


@dataclass(frozen=True)
class VehicleInfo:
    """Domain model for basic vehicle information. Never partially populated."""

    vin: str
    color: str
    door_count: int
    drive_train: str


@dataclass(frozen=True)
class DoorStatus:
    """Lock state of one door. ``location`` is passed through from the vendor unchanged."""

    location: str
    locked: bool


@dataclass(frozen=True)
class EnergyLevel:
    """Fuel and battery levels in percent; either may be unknown."""

    fuel_percent: Optional[float] = None
    battery_percent: Optional[float] = None


def is_valid_vehicle_id(vehicle_id: object) -> bool:
    """Vehicle ids are non-empty strings of ASCII digits."""
    return isinstance(vehicle_id, str) and VEHICLE_ID_PATTERN.fullmatch(vehicle_id) is not None
