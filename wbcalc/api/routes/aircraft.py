"""Aircraft catalog endpoints (read-only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from wbcalc.api.deps import get_catalog, get_template
from wbcalc.catalog.catalog import AircraftCatalog
from wbcalc.contracts.aircraft import AircraftTemplate
from wbcalc.contracts.enums import Category
from wbcalc.services.envelope_analyzer import cg_limits_at_weight
from wbcalc.services.flight_plan import select_envelope
from wbcalc.services.fuel import fuel_capacity

router = APIRouter(prefix="/aircraft", tags=["aircraft"])


@router.get("")
async def list_aircraft(
    catalog: AircraftCatalog = Depends(get_catalog),
) -> list[dict]:
    return [a.to_dict() for a in catalog.list_all()]


@router.get("/{aircraft_id}")
async def get_aircraft(
    template: AircraftTemplate = Depends(get_template),
) -> dict:
    """Aircraft record plus tank capacity and tabs level."""
    data = template.to_dict()
    data["fuel_capacity"] = fuel_capacity(template).to_dict()
    return data


@router.get("/{aircraft_id}/limits")
async def get_cg_limits(
    weight_lbs: float = Query(..., description="Gross weight to slice the envelope at"),
    category: Category = Category.NORMAL,
    template: AircraftTemplate = Depends(get_template),
) -> dict:
    """Forward and aft CG limits of the envelope at a given weight."""
    applied, envelope = select_envelope(template, category)
    limits = cg_limits_at_weight(weight_lbs, envelope)
    if limits is None:
        raise HTTPException(
            status_code=404,
            detail=f"Envelope has no extent at {weight_lbs:.0f} lbs",
        )
    data = limits.to_dict()
    data["category"] = applied.value
    return data
