"""
Normalizers for MM API data sections.

The MM API wraps every scalar in a tagged value, ``{"type": ..., "value": ...}``,
where booleans are the strings ``"True"``/``"False"`` and numbers are decimal
strings. The functions here only ever see the data section of a payload that
was already classified as a success. They never raise on malformed input:
missing or mistyped fields become ``None`` and the caller decides whether
that is acceptable.
"""
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from vehicle_service.domain.models.vehicle import DoorStatus, EnergyLevel, EngineActionOutcome

logger = logging.getLogger(__name__)

TRUE_VALUE = "True"
NUMBER_TYPE = "Number"

# Leading decimal number of a string, trailing text ignored.
_DECIMAL_PREFIX = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

# Falsy renderings of a tagged value; the textual zero is deliberately included.
_FALSY_VALUES = ("", "0")


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _field(data: Any, name: str) -> Mapping[str, Any]:
    """Return the tagged value stored under ``name``, or an empty mapping."""
    return _as_mapping(_as_mapping(data).get(name))


def _string_value(data: Any, name: str) -> Optional[str]:
    value = _field(data, name).get("value")
    if isinstance(value, str) and value:
        return value
    return None


def _is_truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value not in _FALSY_VALUES
    return bool(value)


def _number_value(field: Mapping[str, Any]) -> Optional[float]:
    """Parse a ``Number`` tagged value; anything else is unknown."""
    value = field.get("value")
    if field.get("type") != NUMBER_TYPE or not _is_truthy(value):
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None

    match = _DECIMAL_PREFIX.match(str(value))
    number = float(match.group(0)) if match else None
    if number is None or not math.isfinite(number):
        logger.warning(f"Unparseable number value from MM API: {value!r}")
        return None
    return number


def normalize_vehicle_info(data: Any) -> Dict[str, Any]:
    """
    Extract vehicle info fields from a ``getVehicleInfoService`` data section.

    Returns:
        Dict with ``vin``, ``color``, ``door_count`` and ``drive_train``; any of
        them may be ``None`` when the vendor omitted or mistyped it.
    """
    door_count = None
    if _field(data, "fourDoorSedan").get("value") == TRUE_VALUE:
        door_count = 4
    elif _field(data, "twoDoorCoupe").get("value") == TRUE_VALUE:
        door_count = 2

    return {
        "vin": _string_value(data, "vin"),
        "color": _string_value(data, "color"),
        "door_count": door_count,
        "drive_train": _string_value(data, "driveTrain"),
    }


def normalize_security_status(data: Any) -> Optional[List[DoorStatus]]:
    """
    Normalize a ``getSecurityStatusService`` data section into door states.

    Returns:
        The doors in vendor order, or ``None`` if ``doors.values`` is not a list.
        Entries without string ``location``/``locked`` values are dropped.
    """
    values = _field(data, "doors").get("values")
    if not isinstance(values, list):
        return None

    doors = []
    for index, door in enumerate(values):
        location = _field(door, "location").get("value")
        locked = _field(door, "locked").get("value")
        if not isinstance(location, str) or not isinstance(locked, str):
            logger.warning(f"Skipping invalid door entry at index {index}: {door!r}")
            continue
        doors.append(DoorStatus(location=location, locked=locked == TRUE_VALUE))
    return doors


def normalize_energy(data: Any) -> EnergyLevel:
    """Normalize a ``getEnergyService`` data section. Unknown levels are ``None``."""
    return EnergyLevel(
        fuel_percent=_number_value(_field(data, "tankLevel")),
        battery_percent=_number_value(_field(data, "batteryLevel")),
    )


@dataclass(frozen=True)
class EngineActionReading:
    """
    An ``actionEngineService`` action result after normalization.

    ``status`` is the upper-cased vendor status, ``None`` when it was missing
    or not a string. ``outcome`` is ``None`` unless the status was recognised.
    """

    status: Optional[str] = None
    outcome: Optional[EngineActionOutcome] = None


_ENGINE_OUTCOMES = {
    "EXECUTED": EngineActionOutcome.SUCCESS,
    "FAILED": EngineActionOutcome.FAILED,
}


def normalize_engine_action(action_result: Any) -> EngineActionReading:
    """
    Collapse an ``actionEngineService`` action result into an outcome.

    ``EXECUTED`` and ``FAILED`` are matched case-insensitively.
    """
    status = _as_mapping(action_result).get("status")
    if not isinstance(status, str):
        return EngineActionReading()

    status = status.upper()
    return EngineActionReading(status=status, outcome=_ENGINE_OUTCOMES.get(status))
