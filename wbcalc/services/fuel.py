"""Fuel unit handling.

Avgas is converted with a fixed density; there is no temperature or
fuel-grade correction.
"""

from __future__ import annotations

import math

from wbcalc.contracts.aircraft import AircraftTemplate, SavedAircraft, Station
from wbcalc.contracts.balance import FuelCapacity

FUEL_DENSITY_LBS_PER_GAL = 6.0

# Used when the fuel station does not declare a max weight
DEFAULT_TANK_GAL = 53.0
TABS_FRACTION = 0.66


def gallons_to_lbs(gallons: float) -> float:
    return gallons * FUEL_DENSITY_LBS_PER_GAL


def lbs_to_gallons(lbs: float) -> float:
    return lbs / FUEL_DENSITY_LBS_PER_GAL


def toggle_fuel_unit(value: float, currently_gallons: bool) -> float:
    """Convert a fuel entry when the pilot flips the gal/lbs switch.

    The quantity of fuel is unchanged; only the number shown in the entry
    field is re-expressed in the other unit.
    """
    if currently_gallons:
        return gallons_to_lbs(value)
    return lbs_to_gallons(value)


def max_fuel_gallons(station: Station | None) -> float:
    """Tank capacity in gallons, derived from the station's max weight."""
    if station is None or station.max_weight_lbs is None:
        return DEFAULT_TANK_GAL
    return lbs_to_gallons(station.max_weight_lbs)


def tabs_gallons(capacity_gal: float) -> float:
    """Fuel filled to the tabs, rounded half up to a whole gallon."""
    return float(math.floor(capacity_gal * TABS_FRACTION + 0.5))


def fuel_capacity(aircraft: AircraftTemplate | SavedAircraft) -> FuelCapacity:
    capacity = max_fuel_gallons(aircraft.fuel_station)
    tabs = tabs_gallons(capacity)
    return FuelCapacity(
        capacity_gal=capacity,
        capacity_lbs=gallons_to_lbs(capacity),
        tabs_gal=tabs,
        tabs_lbs=toggle_fuel_unit(tabs, currently_gallons=True),
    )
