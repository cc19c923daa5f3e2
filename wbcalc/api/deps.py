"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from wbcalc.catalog.catalog import AircraftCatalog
from wbcalc.catalog.errors import AircraftNotFoundError
from wbcalc.contracts.aircraft import AircraftTemplate

# ------------------------------------------------------------------
# Catalog (singleton from app.state)
# ------------------------------------------------------------------


def get_catalog(request: Request) -> AircraftCatalog:
    return request.app.state.catalog


def get_template(
    aircraft_id: str,
    catalog: AircraftCatalog = Depends(get_catalog),
) -> AircraftTemplate:
    """Resolve a path ``aircraft_id`` to a catalog template, 404 if unknown."""
    try:
        return catalog.get(aircraft_id)
    except AircraftNotFoundError:
        raise HTTPException(status_code=404, detail="Aircraft not found") from None
