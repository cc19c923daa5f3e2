"""Shared fixtures: catalog aircraft and simple envelopes."""

from __future__ import annotations

import pytest

from wbcalc.catalog.catalog import AircraftCatalog
from wbcalc.contracts.aircraft import AircraftTemplate, EnvelopePoint


@pytest.fixture(scope="session")
def catalog() -> AircraftCatalog:
    return AircraftCatalog.builtin()


@pytest.fixture
def c172s(catalog) -> AircraftTemplate:
    return catalog.get("c172s")


@pytest.fixture
def rectangle() -> list[EnvelopePoint]:
    """CG 30-40 in, 1000-2000 lbs."""
    return [
        EnvelopePoint(cg_in=30, weight_lbs=1000),
        EnvelopePoint(cg_in=30, weight_lbs=2000),
        EnvelopePoint(cg_in=40, weight_lbs=2000),
        EnvelopePoint(cg_in=40, weight_lbs=1000),
    ]
