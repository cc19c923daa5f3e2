"""Fleet endpoints: build and validate saved aircraft.

Storage stays with the client; these endpoints only produce and check the
records it keeps.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, Field, ValidationError, field_validator

from wbcalc.api.deps import get_catalog
from wbcalc.catalog.catalog import AircraftCatalog
from wbcalc.catalog.errors import AircraftNotFoundError
from wbcalc.catalog.fleet import register_aircraft, validate_fleet_data
from wbcalc.contracts.aircraft import REGISTRATION_PATTERN

router = APIRouter(prefix="/fleet", tags=["fleet"])


class RegisterRequest(BaseModel):
    """Register a catalog type as a user airframe."""

    template_id: str = Field(..., min_length=1)
    registration: str = Field(..., pattern=REGISTRATION_PATTERN, description="e.g. N12345")
    empty_weight_lbs: float | None = Field(default=None, gt=0)
    empty_arm_in: float | None = None
    arm_overrides: dict[str, float] = Field(default_factory=dict)

    @field_validator("registration", mode="before")
    @classmethod
    def _normalize_registration(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@router.post("/register", status_code=201)
async def register(
    request: RegisterRequest,
    catalog: AircraftCatalog = Depends(get_catalog),
) -> dict:
    try:
        template = catalog.get(request.template_id)
    except AircraftNotFoundError:
        raise HTTPException(status_code=404, detail="Aircraft not found") from None

    try:
        saved = register_aircraft(
            template,
            request.registration,
            empty_weight_lbs=request.empty_weight_lbs,
            empty_arm_in=request.empty_arm_in,
            arm_overrides=request.arm_overrides,
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=[f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in exc.errors()],
        ) from None
    return saved.to_dict()


@router.post("/validate")
async def validate(data: Any = Body(...)) -> list[dict]:
    """Return the valid aircraft of an imported fleet, 422 if it is not a fleet."""
    fleet = validate_fleet_data(data)
    if fleet is None:
        raise HTTPException(status_code=422, detail="Not a valid fleet file")
    return [a.to_dict() for a in fleet]
