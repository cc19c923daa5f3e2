"""Per-calculation loading inputs.

Nothing here is persisted: a ``LoadingState`` is rebuilt from the user's
entries on every change and passed to the calculation as a whole.
"""

from pydantic import Field

from wbcalc.contracts.common import ContractModel


class AdHocStation(ContractModel):
    """A user-added load item with no catalog counterpart.

    Always entered in pounds.
    """

    id: str = Field(..., min_length=1)
    name: str = Field(default="Custom Item")
    weight_lbs: float = 0.0
    arm_in: float = 0.0


class FuelPlan(ContractModel):
    """Fuel burned between ramp, takeoff and landing."""

    taxi_gal: float = Field(default=1.5, description="Fuel used before takeoff")
    trip_gal: float = Field(default=0.0, description="Fuel burned in flight")
    burn_gph: float = Field(default=0.0, description="Cruise fuel flow")


class LoadingState(ContractModel):
    """Everything the pilot entered for one weight & balance computation.

    ``weights`` is keyed by station id and expressed in the station's active
    unit: gallons for the fuel station when ``fuel_in_gallons`` is set,
    pounds otherwise. Stations missing from ``weights`` are empty.
    """

    weights: dict[str, float] = Field(default_factory=dict)
    arm_overrides: dict[str, float] = Field(default_factory=dict)
    ad_hoc_stations: list[AdHocStation] = Field(default_factory=list)
    fuel: FuelPlan = Field(default_factory=FuelPlan)
    fuel_in_gallons: bool = False

    # Basic empty weight/arm as re-weighed, replacing the aircraft's figures
    empty_weight_lbs: float | None = None
    empty_arm_in: float | None = None
