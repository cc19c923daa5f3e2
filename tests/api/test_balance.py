"""Tests for weight & balance calculation endpoints."""

from __future__ import annotations

import pytest

from wbcalc.catalog.catalog import AircraftCatalog
from wbcalc.catalog.fleet import register_aircraft

BASIC_LOADING = {
    "weights": {"frontSeat": 340, "fuel": 30},
    "fuel_in_gallons": True,
    "fuel": {"taxi_gal": 1.5},
}

HEAVY_LOADING = {
    "weights": {"frontSeat": 340, "rearSeat": 170, "fuel": 40},
    "fuel_in_gallons": True,
}


class TestPhasesAPI:
    async def test_phases(self, client):
        resp = await client.post(
            "/api/balance/phases",
            json={"aircraft_id": "c172s", "loading": BASIC_LOADING},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["ramp"]["weight_lbs"] == 2183
        assert data["takeoff"]["weight_lbs"] == 2174
        assert data["fuel_arm_in"] == 48.0
        assert len(data["stations"]) == 5

    async def test_unknown_aircraft(self, client):
        resp = await client.post("/api/balance/phases", json={"aircraft_id": "b747"})
        assert resp.status_code == 404

    async def test_needs_exactly_one_aircraft(self, client):
        resp = await client.post("/api/balance/phases", json={"loading": BASIC_LOADING})
        assert resp.status_code == 422

        inline = AircraftCatalog.builtin().get("c172s").to_dict()
        resp = await client.post(
            "/api/balance/phases",
            json={"aircraft_id": "c172s", "aircraft": inline},
        )
        assert resp.status_code == 422

    async def test_inline_saved_aircraft(self, client):
        saved = register_aircraft(
            AircraftCatalog.builtin().get("c172s"),
            "N12345",
            arm_overrides={"frontSeat": 38.0},
        )
        resp = await client.post(
            "/api/balance/phases",
            json={"aircraft": saved.to_dict(), "loading": {"weights": {"frontSeat": 100}}},
        )
        assert resp.status_code == 200
        assert resp.json()["stations"][0]["arm_in"] == 38.0

    async def test_nan_rejected(self, client):
        resp = await client.post(
            "/api/balance/phases",
            content='{"aircraft_id": "c172s", "loading": {"weights": {"frontSeat": NaN}}}',
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail[0]["loc"][-1] == "frontSeat"
        assert "input" not in detail[0]


class TestEnvelopeAPI:
    async def test_inside(self, client):
        resp = await client.post(
            "/api/balance/envelope",
            json={
                "point": {"cg_in": 40, "weight_lbs": 2000},
                "envelope": AircraftCatalog.builtin().get("c172s").to_dict()["envelope"],
            },
        )
        assert resp.status_code == 200
        assert resp.json() == {"inside": True}

    async def test_forward_limit(self, client):
        rectangle = [
            {"cg_in": 30, "weight_lbs": 1000},
            {"cg_in": 30, "weight_lbs": 2000},
            {"cg_in": 40, "weight_lbs": 2000},
            {"cg_in": 40, "weight_lbs": 1000},
        ]
        resp = await client.post(
            "/api/balance/envelope",
            json={"point": {"cg_in": 25, "weight_lbs": 1500}, "envelope": rectangle},
        )
        data = resp.json()
        assert data["inside"] is False
        assert data["limit_diagnostic"] == "forward limit exceeded by 5"
        assert data["limit"]["kind"] == "forward"


class TestFlightPlanAPI:
    async def test_go(self, client):
        resp = await client.post(
            "/api/balance/flight-plan",
            json={"aircraft_id": "c172s", "loading": BASIC_LOADING},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["verdict"] == "GO"
        assert data["max_gross_lbs"] == 2550
        assert data["load_percent"] == pytest.approx(2174 / 2550 * 100)

    async def test_utility_no_go(self, client):
        resp = await client.post(
            "/api/balance/flight-plan",
            json={"aircraft_id": "c172s", "loading": HEAVY_LOADING, "category": "utility"},
        )
        data = resp.json()
        assert data["verdict"] == "NO-GO"
        assert data["category"] == "utility"
        assert data["takeoff"]["analysis"]["limit_diagnostic"] == "over max gross by 204"

    async def test_skip_landing(self, client):
        resp = await client.post(
            "/api/balance/flight-plan",
            json={"aircraft_id": "c172s", "loading": BASIC_LOADING, "evaluate_landing": False},
        )
        assert "landing" not in resp.json()


class TestOverflowAPI:
    async def test_huge_weights_give_no_go(self, client):
        resp = await client.post(
            "/api/balance/flight-plan",
            json={"aircraft_id": "c172s", "loading": {"weights": {"frontSeat": 1e308, "rearSeat": 1e308}}},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["verdict"] == "NO-GO"
        assert data["phases"]["takeoff"]["weight_lbs"] is None
        assert data["takeoff"]["analysis"]["limit"]["kind"] == "over_max_gross"

    async def test_huge_point_on_envelope_endpoint(self, client):
        resp = await client.post(
            "/api/balance/envelope",
            json={
                "point": {"cg_in": 35, "weight_lbs": 1e308},
                "envelope": [
                    {"cg_in": 30, "weight_lbs": -1e308},
                    {"cg_in": 30, "weight_lbs": -9e307},
                    {"cg_in": 40, "weight_lbs": -9e307},
                    {"cg_in": 40, "weight_lbs": -1e308},
                ],
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["inside"] is False
        assert data["limit"]["exceeded_by"] is None
