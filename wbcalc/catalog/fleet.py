"""User fleet: saved aircraft derived from catalog templates.

The fleet itself is stored by the caller (browser storage, file export);
this module only builds saved records and validates fleet data handed back
to us.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from wbcalc.contracts.aircraft import AircraftTemplate, SavedAircraft
from wbcalc.contracts.enums import RecordType, StationKind
from wbcalc.services.envelope_analyzer import validate_envelope

logger = logging.getLogger(__name__)


def register_aircraft(
    template: AircraftTemplate | SavedAircraft,
    registration: str,
    *,
    empty_weight_lbs: float | None = None,
    empty_arm_in: float | None = None,
    arm_overrides: dict[str, float] | None = None,
    aircraft_id: str | None = None,
) -> SavedAircraft:
    """Create a saved aircraft from a template (or re-register a saved one).

    Station arms not listed in ``arm_overrides`` keep the template's
    effective arm, including overrides already saved on ``template``.
    """
    registration = registration.strip().upper()
    overrides: dict[str, float] = {}
    if isinstance(template, SavedAircraft):
        overrides.update(template.arm_overrides)
    overrides.update(arm_overrides or {})

    known = {s.id for s in template.stations}
    overrides = {k: v for k, v in overrides.items() if k in known}

    data = template.model_dump(exclude={"record_type", "registration", "arm_overrides"})
    data.update(
        id=aircraft_id or f"{template.id}-{registration.lower()}",
        registration=registration,
        arm_overrides=overrides,
    )
    if empty_weight_lbs is not None:
        data["empty_weight_lbs"] = empty_weight_lbs
    if empty_arm_in is not None:
        data["empty_arm_in"] = empty_arm_in
    return SavedAircraft.model_validate(data)


def validate_fleet_data(data: Any) -> list[SavedAircraft] | None:
    """Validate fleet data loaded from storage or an import file.

    - Non-list input -> None.
    - Invalid records are dropped (logged), valid ones returned.
    - A non-empty list in which no record is valid -> None, since it is
      most likely not fleet data at all.

    Records in the legacy camelCase layout are upgraded first.
    """
    if not isinstance(data, list):
        return None

    fleet: list[SavedAircraft] = []
    for index, record in enumerate(data):
        aircraft = _parse_record(record)
        if aircraft is None:
            logger.warning("Dropping invalid fleet record #%d", index)
            continue
        fleet.append(aircraft)

    if data and not fleet:
        return None
    return fleet


def _parse_record(record: Any) -> SavedAircraft | None:
    if not isinstance(record, dict):
        return None
    if "emptyWeight" in record:
        record = _upgrade_legacy_record(record)
    try:
        aircraft = SavedAircraft.model_validate(record)
    except ValidationError as exc:
        logger.debug("Fleet record rejected: %s", exc)
        return None

    envelopes = [aircraft.envelope]
    if aircraft.utility_envelope is not None:
        envelopes.append(aircraft.utility_envelope)
    for envelope in envelopes:
        problems = validate_envelope(envelope)
        if problems:
            logger.debug("Fleet record %s envelope rejected: %s", aircraft.id, problems)
            return None
    return aircraft


def _upgrade_legacy_record(record: dict[str, Any]) -> dict[str, Any]:
    """Map a legacy camelCase record to the current contract.

    Legacy data has no station kind; the fuel station is recognised once,
    here, by its id. Malformed fields are passed through untouched so that
    contract validation rejects them.
    """
    stations = record.get("stations")
    if isinstance(stations, list):
        stations = [_upgrade_legacy_station(s) for s in stations]
        fuel_seen = False
        for station in stations:
            if isinstance(station, dict) and station.get("kind") == StationKind.FUEL.value:
                if fuel_seen:
                    station["kind"] = StationKind.STANDARD.value
                fuel_seen = True

    upgraded: dict[str, Any] = {
        "record_type": RecordType.SAVED.value,
        "id": record.get("id"),
        "make": record.get("make") or "Custom",
        "model": record.get("model"),
        "registration": _upgrade_legacy_registration(record.get("registration")),
        "empty_weight_lbs": record.get("emptyWeight"),
        "empty_arm_in": record.get("emptyArm"),
        "stations": stations,
        "envelope": _upgrade_legacy_envelope(record.get("envelope")),
    }
    if record.get("utilityEnvelope") is not None:
        upgraded["utility_envelope"] = _upgrade_legacy_envelope(record["utilityEnvelope"])
    if record.get("savedArmOverrides") is not None:
        upgraded["arm_overrides"] = record["savedArmOverrides"]
    return upgraded


def _upgrade_legacy_registration(registration: Any) -> Any:
    if isinstance(registration, str):
        return registration.strip().upper()
    return registration


def _upgrade_legacy_station(station: Any) -> Any:
    if not isinstance(station, dict):
        return station
    station_id = station.get("id")
    is_fuel = isinstance(station_id, str) and "fuel" in station_id.lower()
    upgraded = {
        "id": station_id,
        "name": station.get("name"),
        "arm_in": station.get("arm"),
        "kind": StationKind.FUEL.value if is_fuel else StationKind.STANDARD.value,
    }
    if station.get("maxWeight") is not None:
        upgraded["max_weight_lbs"] = station["maxWeight"]
    return upgraded


def _upgrade_legacy_envelope(points: Any) -> Any:
    if not isinstance(points, list):
        return points
    return [
        {"cg_in": p.get("cg"), "weight_lbs": p.get("weight")} if isinstance(p, dict) else p
        for p in points
    ]
