"""Weight & balance results.

Calculated (never persisted): produced by ``wbcalc.services`` on every
input change and consumed by the presentation layer and the manifest
report generator.
"""

from pydantic import Field

from wbcalc.contracts.aircraft import EnvelopePoint
from wbcalc.contracts.common import ResultModel
from wbcalc.contracts.enums import Category, LimitKind, StationKind, Verdict


class StationLine(ResultModel):
    """One line of the loading manifest: weight, arm and resulting moment."""

    id: str
    name: str
    kind: StationKind
    weight_lbs: float
    arm_in: float
    moment_lb_in: float
    max_weight_lbs: float | None = None
    over_max: bool = False


class PhaseResult(ResultModel):
    """Weight, moment and CG of the aircraft at one flight phase.

    ``cg_defined`` is False when the phase weight is zero. ``cg_in`` then
    holds the guarded value (moment divided by 1) and must not be read as a
    physical CG.
    """

    weight_lbs: float
    moment_lb_in: float
    cg_in: float
    cg_defined: bool = True


class FlightPhases(ResultModel):
    """Ramp, takeoff and landing conditions plus the manifest line items."""

    ramp: PhaseResult
    takeoff: PhaseResult
    landing: PhaseResult
    empty: StationLine
    stations: list[StationLine] = Field(default_factory=list)
    fuel_arm_in: float = 0.0
    fuel_weight_lbs: float = 0.0
    taxi_fuel_lbs: float = 0.0
    trip_fuel_lbs: float = 0.0
    endurance_hours: int | None = None
    endurance_minutes: int | None = None


class FuelCapacity(ResultModel):
    """Usable tank capacity and the tabs fill level, in both units."""

    capacity_gal: float
    capacity_lbs: float
    tabs_gal: float
    tabs_lbs: float


class CGLimits(ResultModel):
    """Forward and aft CG limits of an envelope at a given weight."""

    weight_lbs: float
    min_cg_in: float
    max_cg_in: float


class LimitDiagnostic(ResultModel):
    """The most specific envelope limit a point violates."""

    kind: LimitKind
    exceeded_by: float | None = None
    message: str


class EnvelopeAnalysis(ResultModel):
    """Containment verdict for one (CG, weight) point."""

    inside: bool
    limit_diagnostic: str | None = None
    limit: LimitDiagnostic | None = None


class PhaseCheck(ResultModel):
    """A flight phase result checked against the active envelope."""

    result: PhaseResult
    analysis: EnvelopeAnalysis

    @property
    def is_safe(self) -> bool:
        return self.analysis.inside


class FlightPlanResult(ResultModel):
    """Full GO / NO-GO assessment for a loading."""

    phases: FlightPhases
    category: Category
    envelope: list[EnvelopePoint]
    max_gross_lbs: float | None = None
    takeoff: PhaseCheck
    landing: PhaseCheck | None = None
    verdict: Verdict
    load_percent: float | None = Field(
        default=None, description="Takeoff weight as % of max gross, capped at 100"
    )
