from .vehicle import (
    DoorLocation,
    DoorStatus,
    EnergyLevel,
    EngineAction,
    EngineActionOutcome,
    EngineCommand,
    VehicleInfo,
    is_valid_vehicle_id,
)

__all__ = [
    'DoorLocation',
    'DoorStatus',
    'EnergyLevel',
    'EngineAction',
    'EngineActionOutcome',
    'EngineCommand',
    'VehicleInfo',
    'is_valid_vehicle_id',
]
