"""Tests for saved aircraft registration and fleet validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wbcalc.catalog.fleet import register_aircraft, validate_fleet_data
from wbcalc.contracts.aircraft import SavedAircraft
from wbcalc.contracts.enums import StationKind


def _legacy_record(**overrides) -> dict:
    record = {
        "id": "custom-1700000000000",
        "make": "Cessna",
        "model": "172S",
        "registration": "N12345",
        "emptyWeight": 1680,
        "emptyArm": 40.5,
        "stations": [
            {"id": "frontSeat", "name": "Front", "arm": 37, "maxWeight": 500},
            {"id": "fuel", "name": "Fuel", "arm": 48, "maxWeight": 336},
        ],
        "envelope": [
            {"cg": 35, "weight": 1500},
            {"cg": 35, "weight": 2200},
            {"cg": 47.3, "weight": 2550},
            {"cg": 47.3, "weight": 1500},
        ],
        "savedArmOverrides": {"frontSeat": 38.2},
    }
    record.update(overrides)
    return record


class TestRegister:
    def test_from_template(self, c172s):
        saved = register_aircraft(c172s, " n172sp ")
        assert isinstance(saved, SavedAircraft)
        assert saved.registration == "N172SP"
        assert saved.id == "c172s-n172sp"
        assert saved.stations == c172s.stations
        assert saved.envelope == c172s.envelope
        assert saved.arm_overrides == {}

    def test_empty_weight_and_overrides(self, c172s):
        saved = register_aircraft(
            c172s,
            "N12345",
            empty_weight_lbs=1702,
            empty_arm_in=40.8,
            arm_overrides={"frontSeat": 38.5, "wingLocker": 60},
        )
        assert saved.empty_weight_lbs == 1702
        assert saved.empty_arm_in == 40.8
        assert saved.arm_overrides == {"frontSeat": 38.5}

    def test_reregister_keeps_saved_overrides(self, c172s):
        first = register_aircraft(c172s, "N1", arm_overrides={"frontSeat": 38.5})
        second = register_aircraft(first, "N2", arm_overrides={"rearSeat": 74})
        assert second.arm_overrides == {"frontSeat": 38.5, "rearSeat": 74}
        assert second.registration == "N2"

    def test_explicit_id(self, c172s):
        assert register_aircraft(c172s, "N1", aircraft_id="mine").id == "mine"

    def test_blank_registration_rejected(self, c172s):
        with pytest.raises(ValidationError):
            register_aircraft(c172s, "   ")


class TestValidateFleet:
    def test_not_a_list(self):
        assert validate_fleet_data({"fleet": []}) is None
        assert validate_fleet_data("N12345") is None
        assert validate_fleet_data(None) is None

    def test_empty_list_is_empty_fleet(self):
        assert validate_fleet_data([]) == []

    def test_round_trip_of_saved_records(self, c172s):
        saved = register_aircraft(c172s, "N12345")
        fleet = validate_fleet_data([saved.to_dict()])
        assert fleet == [saved]

    def test_invalid_records_dropped(self, c172s):
        saved = register_aircraft(c172s, "N12345").to_dict()
        missing_registration = {k: v for k, v in saved.items() if k != "registration"}
        fleet = validate_fleet_data([saved, missing_registration, "junk", 42])
        assert [a.registration for a in fleet] == ["N12345"]

    def test_all_invalid_is_not_a_fleet(self):
        assert validate_fleet_data([{"foo": "bar"}, 3]) is None

    def test_invalid_envelope_dropped(self, c172s):
        saved = register_aircraft(c172s, "N12345").to_dict()
        saved["envelope"] = saved["envelope"][:2]
        assert validate_fleet_data([saved]) is None

    def test_non_finite_weight_dropped(self, c172s):
        saved = register_aircraft(c172s, "N12345").to_dict()
        saved["empty_weight_lbs"] = float("nan")
        assert validate_fleet_data([saved]) is None


class TestLegacyRecords:
    def test_upgrade(self):
        fleet = validate_fleet_data([_legacy_record()])
        assert len(fleet) == 1
        aircraft = fleet[0]
        assert aircraft.empty_weight_lbs == 1680
        assert aircraft.empty_arm_in == 40.5
        assert aircraft.arm_overrides == {"frontSeat": 38.2}
        assert aircraft.envelope[2].cg_in == 47.3
        assert aircraft.stations[0].max_weight_lbs == 500

    def test_fuel_station_recognised_by_id(self):
        aircraft = validate_fleet_data([_legacy_record()])[0]
        assert aircraft.fuel_station.id == "fuel"
        assert aircraft.stations[0].kind == StationKind.STANDARD

    def test_only_first_fuel_match_is_fuel(self):
        stations = [
            {"id": "fuelLeft", "name": "Left", "arm": 48},
            {"id": "fuelRight", "name": "Right", "arm": 48},
        ]
        aircraft = validate_fleet_data([_legacy_record(stations=stations)])[0]
        assert [s.kind for s in aircraft.stations] == [StationKind.FUEL, StationKind.STANDARD]

    def test_registration_normalized(self):
        aircraft = validate_fleet_data([_legacy_record(registration=" g-abcd ")])[0]
        assert aircraft.registration == "G-ABCD"

    def test_missing_make_defaults(self):
        aircraft = validate_fleet_data([_legacy_record(make=None)])[0]
        assert aircraft.make == "Custom"

    def test_malformed_legacy_dropped(self):
        assert validate_fleet_data([_legacy_record(emptyWeight="heavy")]) is None
