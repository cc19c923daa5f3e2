"""Tests for fleet API endpoints."""

from __future__ import annotations

import pytest


class TestRegisterAPI:
    async def test_register(self, client):
        resp = await client.post(
            "/api/fleet/register",
            json={
                "template_id": "c172s",
                "registration": "n12345",
                "empty_weight_lbs": 1702,
                "arm_overrides": {"frontSeat": 38.5},
            },
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["record_type"] == "saved"
        assert data["id"] == "c172s-n12345"
        assert data["registration"] == "N12345"
        assert data["empty_weight_lbs"] == 1702
        assert data["arm_overrides"] == {"frontSeat": 38.5}

    async def test_unknown_template(self, client):
        resp = await client.post(
            "/api/fleet/register",
            json={"template_id": "b747", "registration": "N1"},
        )
        assert resp.status_code == 404

    async def test_bad_empty_weight(self, client):
        resp = await client.post(
            "/api/fleet/register",
            json={"template_id": "c172s", "registration": "N1", "empty_weight_lbs": 0},
        )
        assert resp.status_code == 422


    async def test_registration_normalized(self, client):
        resp = await client.post(
            "/api/fleet/register",
            json={"template_id": "c172s", "registration": "  f-gkxu "},
        )
        assert resp.status_code == 201
        assert resp.json()["registration"] == "F-GKXU"

    @pytest.mark.parametrize("registration", ["   ", "", "N 123", "N12345!"])
    async def test_bad_registration(self, client, registration):
        resp = await client.post(
            "/api/fleet/register",
            json={"template_id": "c172s", "registration": registration},
        )
        assert resp.status_code == 422

    async def test_non_finite_arm_rejected(self, client):
        resp = await client.post(
            "/api/fleet/register",
            content='{"template_id": "c172s", "registration": "N1", "empty_arm_in": NaN}',
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 422


class TestValidateAPI:
    async def test_valid_fleet(self, client):
        saved = (
            await client.post(
                "/api/fleet/register",
                json={"template_id": "c152", "registration": "N152AB"},
            )
        ).json()
        resp = await client.post("/api/fleet/validate", json=[saved, {"junk": True}])
        assert resp.status_code == 200
        assert [a["registration"] for a in resp.json()] == ["N152AB"]

    async def test_not_a_fleet(self, client):
        resp = await client.post("/api/fleet/validate", json={"aircraft": []})
        assert resp.status_code == 422

    async def test_all_invalid(self, client):
        resp = await client.post("/api/fleet/validate", json=[1, 2, 3])
        assert resp.status_code == 422
