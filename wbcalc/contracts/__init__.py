"""wbcalc data contracts, Pydantic v2 models for weight & balance.

Data authority
--------------

**Aircraft catalog** (read-only reference data, vetted at load time):
- ``AircraftTemplate``: built-in or loaded from ``WBCALC_CATALOG_PATH``

**User fleet** (owned by the caller, supplied per request):
- ``SavedAircraft``: customized airframe with registration and arm overrides

**Per-calculation inputs** (never persisted):
- ``LoadingState``: station weights, arm overrides, ad hoc items, fuel plan

Calculated (never persisted)
----------------------------
- ``FlightPhases``: ramp / takeoff / landing weight, moment and CG
- ``EnvelopeAnalysis``: containment and limit diagnostic per point
- ``FlightPlanResult``: GO / NO-GO verdict for the active category
"""

from wbcalc.contracts.enums import (
    Category,
    FlightPhase,
    LimitKind,
    RecordType,
    StationKind,
    Verdict,
)
from wbcalc.contracts.common import ContractModel, ResultModel
from wbcalc.contracts.aircraft import (
    AircraftRecord,
    AircraftTemplate,
    EnvelopePoint,
    SavedAircraft,
    Station,
)
from wbcalc.contracts.loading import AdHocStation, FuelPlan, LoadingState
from wbcalc.contracts.balance import (
    CGLimits,
    EnvelopeAnalysis,
    FlightPhases,
    FlightPlanResult,
    FuelCapacity,
    LimitDiagnostic,
    PhaseCheck,
    PhaseResult,
    StationLine,
)

__all__ = [
    # Enums
    "Category",
    "FlightPhase",
    "LimitKind",
    "RecordType",
    "StationKind",
    "Verdict",
    # Common
    "ContractModel",
    "ResultModel",
    # Aircraft
    "AircraftRecord",
    "AircraftTemplate",
    "EnvelopePoint",
    "SavedAircraft",
    "Station",
    # Loading
    "AdHocStation",
    "FuelPlan",
    "LoadingState",
    # Results
    "CGLimits",
    "EnvelopeAnalysis",
    "FlightPhases",
    "FlightPlanResult",
    "FuelCapacity",
    "LimitDiagnostic",
    "PhaseCheck",
    "PhaseResult",
    "StationLine",
]
