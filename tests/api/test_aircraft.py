"""Tests for aircraft catalog API endpoints."""

from __future__ import annotations

import pytest


class TestAircraftAPI:
    async def test_health(self, client):
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "catalog_ready": True, "aircraft_count": 7}

    async def test_list(self, client):
        resp = await client.get("/api/aircraft")
        assert resp.status_code == 200
        ids = [a["id"] for a in resp.json()]
        assert "c172s" in ids
        assert len(ids) == 7

    async def test_get(self, client):
        resp = await client.get("/api/aircraft/c172s")
        assert resp.status_code == 200
        data = resp.json()
        assert data["record_type"] == "template"
        assert data["empty_weight_lbs"] == 1663
        fuel = [s for s in data["stations"] if s["kind"] == "fuel"]
        assert fuel == [{"id": "fuel", "name": "Fuel (56 gal)", "arm_in": 48.0, "max_weight_lbs": 336.0, "kind": "fuel"}]
        assert data["fuel_capacity"] == {
            "capacity_gal": 56.0,
            "capacity_lbs": 336.0,
            "tabs_gal": 37.0,
            "tabs_lbs": 222.0,
        }

    async def test_get_not_found(self, client):
        resp = await client.get("/api/aircraft/b747")
        assert resp.status_code == 404


class TestLimitsAPI:
    async def test_normal_limits(self, client):
        resp = await client.get("/api/aircraft/c172s/limits", params={"weight_lbs": 2375})
        assert resp.status_code == 200
        data = resp.json()
        assert data["category"] == "normal"
        assert data["min_cg_in"] == pytest.approx(38.0)
        assert data["max_cg_in"] == pytest.approx(47.3)

    async def test_utility_limits(self, client):
        resp = await client.get(
            "/api/aircraft/c172s/limits",
            params={"weight_lbs": 2000, "category": "utility"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["category"] == "utility"
        assert data["max_cg_in"] == pytest.approx(40.5)

    async def test_above_envelope(self, client):
        resp = await client.get("/api/aircraft/c172s/limits", params={"weight_lbs": 3000})
        assert resp.status_code == 404

    async def test_bad_category(self, client):
        resp = await client.get(
            "/api/aircraft/c172s/limits",
            params={"weight_lbs": 2000, "category": "aerobatic"},
        )
        assert resp.status_code == 422
