"""Tests for the HTTP API."""

from __future__ import annotations

from fastapi.testclient import TestClient

from binpack3d.api import app

client = TestClient(app)


def test_pack_returns_bins() -> None:
    request = {
        "catalog_preset": "standard",
        "items": [
            {"id": "A", "width": 20, "height": 100, "depth": 30, "weight": 10, "quantity": 2},
            {"id": "B", "width": 100, "height": 100, "depth": 30, "weight": 10, "quantity": 3},
        ],
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 200
    data = response.json()
    assert data["num_items"] == 5
    assert data["num_bins"] == len(data["bins"]) >= 1

    placed = data["bins"][0]["items"][0]
    assert set(placed.keys()) == {"id", "width", "height", "depth", "weight", "position", "rotation", "dims"}
    assert placed["rotation"] in {"RT1", "RT2", "RT3", "RT4", "RT5", "RT6"}
    assert len(placed["position"]) == 3
    assert 0 <= data["bins"][0]["fill_rate"] <= 1


def test_pack_item_too_large_returns_422() -> None:
    request = {
        "catalog": [{"name": "small", "width": 10, "height": 10, "depth": 10}],
        "items": [{"id": "X", "width": 11, "height": 11, "depth": 11, "weight": 1}],
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error"] == "ITEM_TOO_LARGE"
    assert detail["item"] == {"id": "X", "width": 11, "height": 11, "depth": 11, "weight": 1}
    assert "item too large" in detail["summary"]


def test_pack_unknown_preset_returns_400() -> None:
    request = {"catalog_preset": "pallets", "items": [{"width": 1, "height": 1, "depth": 1}]}

    response = client.post("/pack", json=request)

    assert response.status_code == 400
    assert "Unknown catalog_preset" in response.json()["detail"]


def test_pack_invalid_body_returns_422() -> None:
    response = client.post("/pack", json={"items": [{"width": -1, "height": 1, "depth": 1}]})

    assert response.status_code == 422


def test_catalogs_and_health() -> None:
    assert client.get("/health").json() == {"ok": True}
    assert "standard" in client.get("/catalogs").json()["presets"]
