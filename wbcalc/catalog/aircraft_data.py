"""Built-in aircraft catalog.

Figures from the type certificate data sheets (TCDS) and POH section 6 of
each type. Weights in pounds, arms in inches aft of the manufacturer datum.
Envelopes list the forward boundary bottom-up, then the aft boundary
top-down, closing back on the first vertex.
"""

from __future__ import annotations

from typing import Any


def _env(*points: tuple[float, float]) -> list[dict[str, float]]:
    return [{"cg_in": cg, "weight_lbs": weight} for cg, weight in points]


def _station(
    station_id: str, name: str, arm: float, max_weight: float, kind: str = "standard"
) -> dict[str, Any]:
    return {
        "id": station_id,
        "name": name,
        "arm_in": arm,
        "max_weight_lbs": max_weight,
        "kind": kind,
    }


# Cessna 172M and 172N share the 2300 lbs envelope of TCDS 3A12
_C172_2300_NORMAL = _env(
    (35.0, 1500), (35.0, 1950), (38.5, 2300), (47.3, 2300), (47.3, 1500), (35.0, 1500),
)
_C172_2300_UTILITY = _env(
    (35.0, 1500), (35.0, 1950), (35.5, 2000), (40.5, 2000), (40.5, 1500), (35.0, 1500),
)

_C150_C152_STATIONS = [
    ("frontSeat", "Pilot & Passenger", 39.0, 400),
    ("fuel", "Fuel", 42.0, None),
    ("baggage1", "Baggage Area 1", 64.0, 120),
    ("baggage2", "Baggage Area 2", 84.0, 40),
]


def _two_seat_stations(fuel_name: str, fuel_max: float) -> list[dict[str, Any]]:
    stations = []
    for station_id, name, arm, max_weight in _C150_C152_STATIONS:
        if station_id == "fuel":
            stations.append(_station(station_id, fuel_name, arm, fuel_max, kind="fuel"))
        else:
            stations.append(_station(station_id, name, arm, max_weight))
    return stations


BUILTIN_AIRCRAFT: list[dict[str, Any]] = [
    # Cessna 172S Skyhawk SP, TCDS 3A12, 172S POH section 2
    {
        "id": "c172s",
        "make": "Cessna",
        "model": "172S Skyhawk SP",
        "empty_weight_lbs": 1663,
        "empty_arm_in": 40.0,
        "stations": [
            _station("frontSeat", "Pilot & Front Pax", 37.0, 500),
            _station("rearSeat", "Rear Passengers", 73.0, 500),
            _station("fuel", "Fuel (56 gal)", 48.0, 336, kind="fuel"),
            _station("baggage1", "Baggage Area 1", 95.0, 120),
            _station("baggage2", "Baggage Area 2", 123.0, 50),
        ],
        # Normal category, max 2550 lbs; forward limit 41.0 at gross
        "envelope": _env(
            (35.0, 1500), (35.0, 2200), (41.0, 2550), (47.3, 2550), (47.3, 1500), (35.0, 1500),
        ),
        # Utility category, max 2200 lbs
        "utility_envelope": _env(
            (35.0, 1500), (35.0, 2200), (40.5, 2200), (40.5, 1500), (35.0, 1500),
        ),
    },
    # Cessna 172N Skyhawk, TCDS 3A12
    {
        "id": "c172n",
        "make": "Cessna",
        "model": "172N Skyhawk",
        "empty_weight_lbs": 1419,
        "empty_arm_in": 39.0,
        "stations": [
            _station("frontSeat", "Pilot & Front Pax", 37.0, 400),
            _station("rearSeat", "Rear Passengers", 73.0, 400),
            _station("fuel", "Fuel (40 gal)", 48.0, 240, kind="fuel"),
            _station("baggage1", "Baggage Area 1", 95.0, 120),
            _station("baggage2", "Baggage Area 2", 123.0, 50),
        ],
        "envelope": _C172_2300_NORMAL,
        "utility_envelope": _C172_2300_UTILITY,
    },
    # Cessna 172M Skyhawk (1975), 172M POH
    {
        "id": "c172m",
        "make": "Cessna",
        "model": "172M Skyhawk",
        "empty_weight_lbs": 1350,
        "empty_arm_in": 39.0,
        "stations": [
            _station("frontSeat", "Pilot & Front Pax", 37.0, 400),
            _station("rearSeat", "Rear Passengers", 73.0, 400),
            _station("fuel", "Fuel (38 gal)", 48.0, 228, kind="fuel"),
            _station("baggage1", "Baggage Area 1", 95.0, 120),
            _station("baggage2", "Baggage Area 2", 123.0, 50),
        ],
        "envelope": _C172_2300_NORMAL,
        "utility_envelope": _C172_2300_UTILITY,
    },
    # Cessna 152, TCDS 3A19; same gross weight in both categories
    {
        "id": "c152",
        "make": "Cessna",
        "model": "152",
        "empty_weight_lbs": 1107,
        "empty_arm_in": 30.0,
        "stations": _two_seat_stations("Fuel (24.5 gal)", 147),
        "envelope": _env(
            (31.0, 1350), (32.65, 1670), (36.5, 1670), (36.5, 1350), (31.0, 1350),
        ),
        "utility_envelope": _env(
            (31.0, 1350), (32.65, 1670), (36.5, 1670), (36.5, 1350), (31.0, 1350),
        ),
    },
    # Cessna 150M Commuter, TCDS 3A19; forward limit 32.9 at gross
    {
        "id": "c150m",
        "make": "Cessna",
        "model": "150M Commuter",
        "empty_weight_lbs": 1111,
        "empty_arm_in": 33.0,
        "stations": _two_seat_stations("Fuel (22.5 gal)", 135),
        "envelope": _env(
            (30.9, 1100), (31.5, 1270), (32.9, 1600), (37.5, 1600), (37.5, 1100), (30.9, 1100),
        ),
        "utility_envelope": _env(
            (30.9, 1100), (31.5, 1270), (32.9, 1600), (37.5, 1600), (37.5, 1100), (30.9, 1100),
        ),
    },
    # Piper Archer II (PA-28-181), TCDS 2A13
    {
        "id": "pa28-181",
        "make": "Piper",
        "model": "Archer II (PA-28-181)",
        "empty_weight_lbs": 1604,
        "empty_arm_in": 87.9,
        "stations": [
            _station("frontSeat", "Pilot & Co-Pilot", 80.5, 400),
            _station("rearSeat", "Rear Passengers", 118.1, 400),
            _station("fuel", "Fuel (48 gal)", 95.0, 288, kind="fuel"),
            _station("baggage", "Baggage Area", 142.8, 200),
        ],
        "envelope": _env(
            (82.0, 1200), (82.0, 2050), (88.6, 2550), (93.0, 2550), (93.0, 1200), (82.0, 1200),
        ),
        # Utility keeps the normal category aft limit
        "utility_envelope": _env(
            (82.0, 1200), (82.0, 2050), (83.0, 2130), (93.0, 2130), (93.0, 1200), (82.0, 1200),
        ),
    },
    # Diamond DA40 Star, TCDS A47CE
    {
        "id": "da40",
        "make": "Diamond",
        "model": "DA40 Star",
        "empty_weight_lbs": 1757,
        "empty_arm_in": 96.7,
        "stations": [
            _station("frontSeat", "Pilot & Co-Pilot", 90.6, 400),
            _station("rearSeat", "Rear Passengers", 128.0, 350),
            _station("fuel", "Fuel (50 gal)", 103.5, 300, kind="fuel"),
            _station("baggage", "Baggage", 143.7, 66),
        ],
        "envelope": _env(
            (94.5, 1720), (94.5, 2161), (97.6, 2646), (100.4, 2646), (100.4, 1720), (94.5, 1720),
        ),
        "utility_envelope": _env(
            (94.5, 1720), (94.5, 2161), (100.4, 2161), (100.4, 1720), (94.5, 1720),
        ),
    },
]
