"""Aircraft weight & balance data.

An aircraft is either a catalog ``AircraftTemplate`` or a ``SavedAircraft``
(a template the user has customized and registered). The two are told apart
by the explicit ``record_type`` discriminator, never by sniffing fields.
"""

from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field, field_validator

from wbcalc.contracts.common import ContractModel
from wbcalc.contracts.enums import StationKind

REGISTRATION_PATTERN = r"^[A-Z0-9-]+$"


class EnvelopePoint(ContractModel):
    """A vertex of the CG envelope in the (CG, weight) plane.

    The ordered list of points forms a closed polygon; the last point does
    not need to repeat the first.
    """

    model_config = ConfigDict(frozen=True)

    cg_in: float = Field(..., description="CG position in inches aft of datum")
    weight_lbs: float = Field(..., description="Gross weight in pounds")


class Station(ContractModel):
    """A loading station with a fixed catalog arm.

    Seats, baggage areas and the fuel tank are stations. The fuel station
    is marked with ``kind=fuel``; its entry may be made in gallons.
    """

    id: str = Field(..., min_length=1, description="Stable identifier, e.g. 'frontSeat'")
    name: str = Field(..., min_length=1, description="e.g. 'Pilot & Front Pax'")
    arm_in: float = Field(..., description="Moment arm in inches")
    max_weight_lbs: float | None = Field(default=None, gt=0)
    kind: StationKind = StationKind.STANDARD


class _AircraftBase(ContractModel):
    id: str = Field(..., min_length=1, description="e.g. 'c172s'")
    make: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    empty_weight_lbs: float = Field(..., gt=0, description="Basic empty weight")
    empty_arm_in: float = Field(..., description="Basic empty weight arm")
    stations: list[Station] = Field(default_factory=list)
    envelope: list[EnvelopePoint] = Field(
        default_factory=list,
        description="Normal category envelope polygon",
    )
    utility_envelope: list[EnvelopePoint] | None = Field(
        default=None,
        description="Utility category envelope polygon, if certified",
    )

    @field_validator("stations")
    @classmethod
    def _check_stations(cls, stations: list[Station]) -> list[Station]:
        ids = [s.id for s in stations]
        if len(set(ids)) != len(ids):
            raise ValueError("station ids must be unique")
        kinds = [s.kind for s in stations]
        if kinds.count(StationKind.FUEL) > 1:
            raise ValueError("at most one fuel station is allowed")
        if StationKind.AD_HOC in kinds:
            raise ValueError("ad hoc stations belong to the loading state, not the aircraft")
        return stations

    @property
    def fuel_station(self) -> Station | None:
        for station in self.stations:
            if station.kind == StationKind.FUEL:
                return station
        return None

    @property
    def display_name(self) -> str:
        return f"{self.make} {self.model}"


class AircraftTemplate(_AircraftBase):
    """Read-only catalog aircraft."""

    record_type: Literal["template"] = "template"


class SavedAircraft(_AircraftBase):
    """A user-owned aircraft derived from a template.

    ``arm_overrides`` maps station id to a measured arm that replaces the
    catalog arm in every calculation for this airframe.
    """

    record_type: Literal["saved"] = "saved"
    registration: str = Field(..., pattern=REGISTRATION_PATTERN, description="e.g. N12345, F-GKXU")
    arm_overrides: dict[str, float] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return f"{self.registration} ({self.make} {self.model})"


AircraftRecord = Annotated[
    Union[AircraftTemplate, SavedAircraft],
    Field(discriminator="record_type"),
]
