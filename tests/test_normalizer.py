from __future__ import annotations

import logging

import pytest

from conftest import FOUR_DOORS, door
from vehicle_service.adapters.implementations.mm_api.normalizer import (
    EngineActionReading,
    normalize_energy,
    normalize_engine_action,
    normalize_security_status,
    normalize_vehicle_info,
)
from vehicle_service.domain.models.vehicle import DoorStatus, EnergyLevel, EngineActionOutcome


def test_vehicle_info_complete() -> None:
    fields = normalize_vehicle_info(
        {
            "vin": {"type": "String", "value": "123123412412"},
            "color": {"type": "String", "value": "Metallic Silver"},
            "fourDoorSedan": {"type": "Boolean", "value": "True"},
            "twoDoorCoupe": {"type": "Boolean", "value": "False"},
            "driveTrain": {"type": "String", "value": "v8"},
        }
    )

    assert fields == {
        "vin": "123123412412",
        "color": "Metallic Silver",
        "door_count": 4,
        "drive_train": "v8",
    }


def test_vehicle_info_two_door_coupe() -> None:
    fields = normalize_vehicle_info(
        {
            "fourDoorSedan": {"type": "Boolean", "value": "False"},
            "twoDoorCoupe": {"type": "Boolean", "value": "True"},
        }
    )

    assert fields["door_count"] == 2


def test_vehicle_info_missing_fields_are_none() -> None:
    fields = normalize_vehicle_info(
        {
            "vin": {"type": "String", "value": ""},
            "color": None,
            "fourDoorSedan": {"type": "Boolean", "value": "False"},
            "twoDoorCoupe": {"type": "Boolean", "value": "False"},
            "driveTrain": {"type": "Number", "value": 8},
        }
    )

    assert fields == {"vin": None, "color": None, "door_count": None, "drive_train": None}


@pytest.mark.parametrize("data", [None, [], "garbage", 42])
def test_vehicle_info_never_raises_on_non_mapping(data: object) -> None:
    assert normalize_vehicle_info(data) == {
        "vin": None,
        "color": None,
        "door_count": None,
        "drive_train": None,
    }


def test_doors_preserve_order() -> None:
    doors = normalize_security_status({"doors": {"type": "Array", "values": FOUR_DOORS}})

    assert doors == [
        DoorStatus(location="frontLeft", locked=False),
        DoorStatus(location="frontRight", locked=True),
        DoorStatus(location="backLeft", locked=False),
        DoorStatus(location="backRight", locked=True),
    ]


def test_doors_drop_malformed_entries(caplog: pytest.LogCaptureFixture) -> None:
    values = [
        door("frontLeft", "False"),
        door("frontRight", True),
        {"location": {"value": "backLeft"}},
        None,
        door("backRight", "True"),
    ]

    with caplog.at_level(logging.WARNING):
        doors = normalize_security_status({"doors": {"values": values}})

    assert doors == [
        DoorStatus(location="frontLeft", locked=False),
        DoorStatus(location="backRight", locked=True),
    ]
    assert "index 1" in caplog.text
    assert "index 2" in caplog.text
    assert "index 3" in caplog.text


def test_doors_pass_unknown_locations_through() -> None:
    doors = normalize_security_status({"doors": {"values": [door("trunk", "True")]}})

    assert doors == [DoorStatus(location="trunk", locked=True)]


def test_doors_only_literal_true_is_locked() -> None:
    doors = normalize_security_status({"doors": {"values": [door("frontLeft", "true")]}})

    assert doors == [DoorStatus(location="frontLeft", locked=False)]


@pytest.mark.parametrize(
    "data",
    [
        {"doors": {"values": None}},
        {"doors": {"values": "frontLeft"}},
        {"doors": {"values": {"0": {}}}},
        {"doors": None},
        {},
        None,
    ],
)
def test_doors_invalid_format_returns_none(data: object) -> None:
    assert normalize_security_status(data) is None


def test_doors_empty_list_is_valid() -> None:
    assert normalize_security_status({"doors": {"values": []}}) == []


@pytest.mark.parametrize(
    "level, expected",
    [
        ({"type": "Number", "value": "76.5"}, 76.5),
        ({"type": "Number", "value": "100"}, 100.0),
        ({"type": "Number", "value": "0.0"}, 0.0),
        ({"type": "Number", "value": "0"}, None),
        ({"type": "Number", "value": ""}, None),
        ({"type": "Number", "value": None}, None),
        ({"type": "Number", "value": "abc"}, None),
        ({"type": "Number", "value": "76.5abc"}, 76.5),
        ({"type": "Number", "value": "1_0"}, 1.0),
        ({"type": "Number", "value": " 42"}, 42.0),
        ({"type": "Number", "value": ".5e1"}, 5.0),
        ({"type": "Number", "value": "nan"}, None),
        ({"type": "Number", "value": "NaN"}, None),
        ({"type": "Number", "value": "inf"}, None),
        ({"type": "Number", "value": "1e999"}, None),
        ({"type": "Number", "value": 55}, 55.0),
        ({"type": "Number", "value": True}, None),
        ({"type": "String", "value": "50"}, None),
        ({"type": "Null", "value": "null"}, None),
        ({"value": "50"}, None),
        (None, None),
    ],
)
def test_energy_level_parsing(level: object, expected: object) -> None:
    energy = normalize_energy({"tankLevel": level, "batteryLevel": level})

    assert energy.fuel_percent == expected
    assert energy.battery_percent == expected


def test_energy_missing_fields() -> None:
    assert normalize_energy({}) == EnergyLevel(fuel_percent=None, battery_percent=None)
    assert normalize_energy(None) == EnergyLevel(fuel_percent=None, battery_percent=None)


def test_energy_fuel_only_vehicle() -> None:
    energy = normalize_energy(
        {
            "tankLevel": {"type": "Number", "value": "30.2"},
            "batteryLevel": {"type": "Null", "value": "null"},
        }
    )

    assert energy == EnergyLevel(fuel_percent=30.2, battery_percent=None)


@pytest.mark.parametrize("status", ["EXECUTED", "executed", "Executed"])
def test_engine_executed_any_case_is_success(status: str) -> None:
    assert normalize_engine_action({"status": status}) == EngineActionReading(
        status="EXECUTED", outcome=EngineActionOutcome.SUCCESS
    )


@pytest.mark.parametrize("status", ["FAILED", "failed"])
def test_engine_failed_is_failed(status: str) -> None:
    assert normalize_engine_action({"status": status}).outcome is EngineActionOutcome.FAILED


def test_engine_unknown_status_keeps_status() -> None:
    assert normalize_engine_action({"status": "pending"}) == EngineActionReading(status="PENDING")


@pytest.mark.parametrize("action_result", [{"status": 1}, {}, None, "EXECUTED"])
def test_engine_missing_status_has_no_status(action_result: object) -> None:
    assert normalize_engine_action(action_result) == EngineActionReading()
