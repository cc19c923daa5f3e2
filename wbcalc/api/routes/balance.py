"""Weight & balance calculation endpoints.

Stateless: every request carries the full loading and is recomputed from
scratch. The aircraft is either a catalog id or an inline record (a saved
aircraft from the caller's fleet).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, model_validator

from wbcalc.api.deps import get_catalog
from wbcalc.catalog.catalog import AircraftCatalog
from wbcalc.catalog.errors import AircraftNotFoundError
from wbcalc.contracts.aircraft import AircraftRecord, AircraftTemplate, EnvelopePoint, SavedAircraft
from wbcalc.contracts.enums import Category
from wbcalc.contracts.loading import LoadingState
from wbcalc.services.envelope_analyzer import analyze_envelope
from wbcalc.services.flight_plan import evaluate_flight_plan
from wbcalc.services.moment_accumulator import compute_flight_phases

router = APIRouter(prefix="/balance", tags=["balance"])


class BalanceRequest(BaseModel):
    """Loading of one aircraft in one category."""

    aircraft_id: str | None = Field(default=None, description="Catalog aircraft id")
    aircraft: AircraftRecord | None = Field(
        default=None, description="Inline aircraft record (template or saved)"
    )
    loading: LoadingState = Field(default_factory=LoadingState)
    category: Category = Category.NORMAL
    evaluate_landing: bool = True

    @model_validator(mode="after")
    def _one_aircraft(self) -> "BalanceRequest":
        if (self.aircraft_id is None) == (self.aircraft is None):
            raise ValueError("provide exactly one of aircraft_id or aircraft")
        return self


class EnvelopeRequest(BaseModel):
    point: EnvelopePoint
    envelope: list[EnvelopePoint] = Field(..., description="Ordered polygon vertices")


def _resolve_aircraft(
    request: BalanceRequest,
    catalog: AircraftCatalog,
) -> AircraftTemplate | SavedAircraft:
    if request.aircraft is not None:
        return request.aircraft
    try:
        return catalog.get(request.aircraft_id)
    except AircraftNotFoundError:
        raise HTTPException(status_code=404, detail="Aircraft not found") from None


@router.post("/phases")
async def compute_phases(
    request: BalanceRequest,
    catalog: AircraftCatalog = Depends(get_catalog),
) -> dict:
    """Ramp / takeoff / landing weight, moment and CG with line items."""
    aircraft = _resolve_aircraft(request, catalog)
    phases = compute_flight_phases(aircraft, request.loading, request.category)
    return phases.to_dict()


@router.post("/envelope")
async def check_envelope(request: EnvelopeRequest) -> dict:
    """Containment and limit diagnostic for a single point."""
    return analyze_envelope(request.point, request.envelope).to_dict()


@router.post("/flight-plan")
async def flight_plan(
    request: BalanceRequest,
    catalog: AircraftCatalog = Depends(get_catalog),
) -> dict:
    """Full GO / NO-GO assessment in the requested category."""
    aircraft = _resolve_aircraft(request, catalog)
    result = evaluate_flight_plan(
        aircraft,
        request.loading,
        request.category,
        evaluate_landing=request.evaluate_landing,
    )
    return result.to_dict()
