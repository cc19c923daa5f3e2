"""Command-line weight & balance calculator.

Usage:
    python -m wbcalc.cli --aircraft c172s --load frontSeat=340 --load fuel=30 --gallons
    python -m wbcalc.cli --aircraft c172s-n12345 --fleet fleet.json --trip 20 --burn 8 --json
    python -m wbcalc.cli --aircraft c152 --load frontSeat=340 --fuel-preset tabs

Exit status: 0 for GO, 1 for NO-GO, 2 for usage or data errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from wbcalc.catalog.catalog import AircraftCatalog
from wbcalc.catalog.errors import AircraftNotFoundError, CatalogError, FleetDataError
from wbcalc.catalog.fleet import validate_fleet_data
from wbcalc.contracts.aircraft import AircraftTemplate, SavedAircraft
from wbcalc.contracts.balance import FlightPlanResult, PhaseCheck
from wbcalc.contracts.enums import Category, FlightPhase, Verdict
from wbcalc.contracts.loading import AdHocStation, FuelPlan, LoadingState
from wbcalc.services.flight_plan import evaluate_flight_plan
from wbcalc.services.fuel import fuel_capacity, toggle_fuel_unit

logger = logging.getLogger(__name__)


def _key_value(text: str) -> tuple[str, float]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected STATION=VALUE, got {text!r}")
    try:
        return key, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None


def _ad_hoc(text: str) -> AdHocStation:
    """NAME:WEIGHT@ARM, e.g. 'Camera bag:12@95'."""
    name, sep, rest = text.rpartition(":")
    weight, sep2, arm = rest.partition("@")
    if not sep or not sep2 or not name:
        raise argparse.ArgumentTypeError(f"expected NAME:WEIGHT@ARM, got {text!r}")
    try:
        return AdHocStation(
            id=f"custom-{name.strip().lower().replace(' ', '-')}",
            name=name.strip(),
            weight_lbs=float(weight),
            arm_in=float(arm),
        )
    except ValueError:
        raise argparse.ArgumentTypeError(f"bad numbers in {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weight & balance calculator")
    parser.add_argument("--aircraft", required=True, help="Catalog or fleet aircraft id (e.g. c172s)")
    parser.add_argument("--fleet", type=Path, help="JSON file with saved aircraft")
    parser.add_argument("--catalog", type=Path, help="JSON catalog replacing the built-in one")
    parser.add_argument(
        "--load", type=_key_value, action="append", default=[], metavar="STATION=VALUE",
        help="Weight at a station (fuel in gallons with --gallons)",
    )
    parser.add_argument(
        "--arm", type=_key_value, action="append", default=[], metavar="STATION=ARM",
        help="Override a station arm",
    )
    parser.add_argument(
        "--item", type=_ad_hoc, action="append", default=[], metavar="NAME:WEIGHT@ARM",
        help="Add an ad hoc load item in pounds",
    )
    parser.add_argument("--gallons", action="store_true", help="Fuel station entry is in gallons")
    parser.add_argument(
        "--fuel-preset", choices=["tabs", "full"],
        help="Fill the fuel station to the tabs or to capacity (overrides --load for it)",
    )
    parser.add_argument("--taxi", type=float, default=1.5, help="Taxi fuel in gallons")
    parser.add_argument("--trip", type=float, default=0.0, help="Trip fuel in gallons")
    parser.add_argument("--burn", type=float, default=0.0, help="Cruise burn in gal/h")
    parser.add_argument("--empty-weight", type=float, help="Basic empty weight override (lbs)")
    parser.add_argument("--empty-arm", type=float, help="Basic empty arm override (in)")
    parser.add_argument(
        "--category", choices=[c.value for c in Category], default=Category.NORMAL.value,
    )
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def load_aircraft(
    aircraft_id: str,
    catalog: AircraftCatalog,
    fleet_path: Path | None = None,
) -> AircraftTemplate | SavedAircraft:
    """Find an aircraft in the fleet file first, then in the catalog."""
    if fleet_path is not None:
        with open(fleet_path, encoding="utf-8") as f:
            fleet = validate_fleet_data(json.load(f))
        if fleet is None:
            raise FleetDataError(f"{fleet_path}: not a valid fleet file")
        for saved in fleet:
            if saved.id == aircraft_id:
                return saved
    return catalog.get(aircraft_id)


def format_report(aircraft: AircraftTemplate | SavedAircraft, result: FlightPlanResult) -> str:
    phases = result.phases
    lines = [
        f"{aircraft.display_name}, {result.category} category",
        "",
        f"{'Item':<24}{'Weight':>10}{'Arm':>10}{'Moment':>12}",
    ]
    for item in [phases.empty, *phases.stations]:
        flag = "  (over max)" if item.over_max else ""
        lines.append(
            f"{item.name:<24}{item.weight_lbs:>10.1f}{item.arm_in:>10.2f}{item.moment_lb_in:>12.1f}{flag}"
        )
    lines.append("")

    checks: dict[str, PhaseCheck | None] = {
        FlightPhase.TAKEOFF.value: result.takeoff,
        FlightPhase.LANDING.value: result.landing,
    }
    lines.append(
        f"{FlightPhase.RAMP.value.capitalize():<10}{phases.ramp.weight_lbs:>8.1f} lbs"
        f"  CG {phases.ramp.cg_in:.2f} in"
    )
    for name, check in checks.items():
        if check is None:
            continue
        status = "OK" if check.is_safe else check.analysis.limit_diagnostic
        lines.append(
            f"{name.capitalize():<10}{check.result.weight_lbs:>8.1f} lbs"
            f"  CG {check.result.cg_in:.2f} in  {status}"
        )

    if phases.endurance_hours is not None:
        lines.append(f"Endurance {phases.endurance_hours}h {phases.endurance_minutes:02d}m")
    else:
        lines.append("Endurance --h --m")
    lines.append("")
    lines.append(f"Status: {result.verdict}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = (
            AircraftCatalog.from_json_file(args.catalog) if args.catalog
            else AircraftCatalog.builtin()
        )
        aircraft = load_aircraft(args.aircraft, catalog, args.fleet)
    except AircraftNotFoundError as exc:
        logger.error("%s", exc)
        return 2
    except (CatalogError, OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot load aircraft data: %s", exc)
        return 2

    weights = dict(args.load)
    if args.fuel_preset:
        station = aircraft.fuel_station
        if station is None:
            logger.error("%s has no fuel station", aircraft.id)
            return 2
        capacity = fuel_capacity(aircraft)
        gallons = capacity.tabs_gal if args.fuel_preset == "tabs" else capacity.capacity_gal
        weights[station.id] = (
            gallons if args.gallons else toggle_fuel_unit(gallons, currently_gallons=True)
        )

    try:
        loading = LoadingState(
            weights=weights,
            arm_overrides=dict(args.arm),
            ad_hoc_stations=args.item,
            fuel=FuelPlan(taxi_gal=args.taxi, trip_gal=args.trip, burn_gph=args.burn),
            fuel_in_gallons=args.gallons,
            empty_weight_lbs=args.empty_weight,
            empty_arm_in=args.empty_arm,
        )
    except ValidationError as exc:
        logger.error("Invalid loading: %s", exc)
        return 2

    result = evaluate_flight_plan(aircraft, loading, args.category)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_report(aircraft, result))

    return 0 if result.verdict == Verdict.GO else 1


if __name__ == "__main__":
    sys.exit(main())
