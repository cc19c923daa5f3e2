"""Moment accumulation: station loads to ramp / takeoff / landing conditions.

Every contribution is reduced to weight and moment (weight x arm). The CG of
a phase is its total moment divided by its total weight. Fuel burned for
taxi and trip is removed at the fuel station's arm.

The computation is a pure function of its inputs and never raises on
numeric values: zero weights go through ``safe_divide`` and negative
weights (over-burn, entry mistakes) are carried through as-is for the
envelope check to flag.
"""

from __future__ import annotations

import logging
import math

from wbcalc.contracts.aircraft import AircraftTemplate, SavedAircraft
from wbcalc.contracts.balance import FlightPhases, PhaseResult, StationLine
from wbcalc.contracts.enums import Category, StationKind
from wbcalc.contracts.loading import LoadingState
from wbcalc.services.fuel import gallons_to_lbs, lbs_to_gallons

logger = logging.getLogger(__name__)

EMPTY_LINE_ID = "empty"


def safe_divide(numerator: float, denominator: float, fallback_divisor: float = 1.0) -> float:
    """Divide, substituting ``fallback_divisor`` when the denominator is zero.

    With the default fallback a zero-weight CG evaluates to the moment
    itself. The value is numeric but meaningless; ``PhaseResult.cg_defined``
    tells callers when it was produced.
    """
    if denominator == 0:
        return numerator / fallback_divisor
    return numerator / denominator


def compute_flight_phases(
    aircraft: AircraftTemplate | SavedAircraft,
    loading: LoadingState,
    category: Category | str = Category.NORMAL,
) -> FlightPhases:
    """Compute ramp, takeoff and landing weight/CG for a loading.

    Steps:
        1. Start from basic empty weight and moment.
        2. Add each catalog station (fuel converted from gallons if needed,
           arm override applied) and record the fuel arm.
        3. Add ad hoc items (always pounds).
        4. Takeoff = ramp minus taxi fuel; landing = takeoff minus trip fuel.
        5. Endurance from usable takeoff fuel and burn rate.

    ``category`` only selects the envelope downstream; it is accepted here
    so callers can pass the whole selection through, and has no effect on
    the arithmetic.
    """
    logger.debug("Computing flight phases for %s (%s)", aircraft.id, category)

    empty_weight = (
        loading.empty_weight_lbs if loading.empty_weight_lbs is not None
        else aircraft.empty_weight_lbs
    )
    empty_arm = (
        loading.empty_arm_in if loading.empty_arm_in is not None
        else aircraft.empty_arm_in
    )
    empty_line = StationLine(
        id=EMPTY_LINE_ID,
        name="Basic Empty Weight",
        kind=StationKind.STANDARD,
        weight_lbs=empty_weight,
        arm_in=empty_arm,
        moment_lb_in=empty_weight * empty_arm,
    )

    overrides = _effective_arm_overrides(aircraft, loading)
    _warn_unknown_stations(aircraft, loading)

    weight = empty_line.weight_lbs
    moment = empty_line.moment_lb_in
    fuel_arm = 0.0
    fuel_weight = 0.0
    lines: list[StationLine] = []

    # --- Catalog stations ---
    for station in aircraft.stations:
        entered = loading.weights.get(station.id, 0.0)
        is_fuel = station.kind == StationKind.FUEL
        station_weight = gallons_to_lbs(entered) if is_fuel and loading.fuel_in_gallons else entered
        arm = overrides.get(station.id, station.arm_in)
        station_moment = station_weight * arm

        weight += station_weight
        moment += station_moment
        if is_fuel:
            fuel_arm = arm
            fuel_weight = station_weight

        lines.append(
            StationLine(
                id=station.id,
                name=station.name,
                kind=station.kind,
                weight_lbs=station_weight,
                arm_in=arm,
                moment_lb_in=station_moment,
                max_weight_lbs=station.max_weight_lbs,
                over_max=(
                    station.max_weight_lbs is not None
                    and station_weight > station.max_weight_lbs
                ),
            )
        )

    # --- Ad hoc items ---
    for item in loading.ad_hoc_stations:
        item_moment = item.weight_lbs * item.arm_in
        weight += item.weight_lbs
        moment += item_moment
        lines.append(
            StationLine(
                id=item.id,
                name=item.name,
                kind=StationKind.AD_HOC,
                weight_lbs=item.weight_lbs,
                arm_in=item.arm_in,
                moment_lb_in=item_moment,
            )
        )

    ramp = _phase(weight, moment)

    # --- Fuel burn ---
    taxi_fuel = gallons_to_lbs(loading.fuel.taxi_gal)
    takeoff = _phase(
        ramp.weight_lbs - taxi_fuel,
        ramp.moment_lb_in - taxi_fuel * fuel_arm,
    )

    trip_fuel = 0.0
    if loading.fuel.trip_gal > 0:
        trip_fuel = gallons_to_lbs(loading.fuel.trip_gal)
        landing = _phase(
            takeoff.weight_lbs - trip_fuel,
            takeoff.moment_lb_in - trip_fuel * fuel_arm,
        )
    else:
        landing = takeoff.model_copy()

    hours, minutes = _endurance(fuel_weight - taxi_fuel, loading.fuel.burn_gph)

    return FlightPhases(
        ramp=ramp,
        takeoff=takeoff,
        landing=landing,
        empty=empty_line,
        stations=lines,
        fuel_arm_in=fuel_arm,
        fuel_weight_lbs=fuel_weight,
        taxi_fuel_lbs=taxi_fuel,
        trip_fuel_lbs=trip_fuel,
        endurance_hours=hours,
        endurance_minutes=minutes,
    )


def _phase(weight: float, moment: float) -> PhaseResult:
    return PhaseResult(
        weight_lbs=weight,
        moment_lb_in=moment,
        cg_in=safe_divide(moment, weight),
        cg_defined=weight != 0,
    )


def _effective_arm_overrides(
    aircraft: AircraftTemplate | SavedAircraft,
    loading: LoadingState,
) -> dict[str, float]:
    """Saved airframe overrides first, then the ones entered for this load."""
    overrides: dict[str, float] = {}
    if isinstance(aircraft, SavedAircraft):
        overrides.update(aircraft.arm_overrides)
    overrides.update(loading.arm_overrides)
    return overrides


def _warn_unknown_stations(
    aircraft: AircraftTemplate | SavedAircraft,
    loading: LoadingState,
) -> None:
    known = {s.id for s in aircraft.stations}
    unknown = sorted(set(loading.weights) - known)
    if unknown:
        logger.warning(
            "Ignoring weights for stations not on %s: %s",
            aircraft.id, ", ".join(unknown),
        )


def _endurance(usable_fuel_lbs: float, burn_gph: float) -> tuple[int | None, int | None]:
    """Hours and minutes of usable fuel at the cruise burn rate.

    Returns ``(None, None)`` when there is no burn rate or no usable fuel,
    or when the duration is not a finite number.
    """
    usable_gal = lbs_to_gallons(usable_fuel_lbs)
    if not (burn_gph > 0 and usable_gal > 0):
        return None, None

    total_hours = usable_gal / burn_gph
    if not math.isfinite(total_hours):
        return None, None
    hours = math.floor(total_hours)
    minutes = math.floor((total_hours - hours) * 60)
    return hours, minutes
