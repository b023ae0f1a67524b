from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from binpack3d.catalog import get_catalog, preset_names
from binpack3d.config import configure_logging, default_catalog
from binpack3d.io.schemas import ItemSchema, PackingRequestSchema
from binpack3d.metrics import compute_metrics
from binpack3d.models import Bin
from binpack3d.plan import build_items, build_plan


def test_item_quantity_expands_with_numbered_ids() -> None:
    assert [i.id for i in ItemSchema(id="A", width=1, height=2, depth=3, quantity=3).to_items()] == [
        "A_0000",
        "A_0001",
        "A_0002",
    ]
    assert [i.id for i in ItemSchema(id="A", width=1, height=2, depth=3).to_items()] == ["A"]
    assert [i.id for i in ItemSchema(width=1, height=2, depth=3, quantity=2).to_items()] == ["item_0000", "item_0001"]


def test_build_items_keeps_request_order() -> None:
    request = PackingRequestSchema(
        items=[
            {"id": "small", "width": 1, "height": 1, "depth": 1},
            {"id": "big", "width": 9, "height": 9, "depth": 9, "weight": 4, "quantity": 2},
        ]
    )

    items = build_items(request)

    assert [i.id for i in items] == ["small", "big_0000", "big_0001"]
    assert items[1].weight == 4


@pytest.mark.parametrize(
    "payload",
    [
        {"items": []},
        {"items": [{"width": -1, "height": 1, "depth": 1}]},
        {"items": [{"width": 1, "height": 1, "depth": 1, "quantity": 0}]},
        {"items": [{"width": 1.5, "height": 1, "depth": 1}]},
    ],
)
def test_request_validation(payload) -> None:
    with pytest.raises(ValidationError):
        PackingRequestSchema.model_validate(payload)


def test_catalog_presets() -> None:
    assert "standard" in preset_names()
    catalog = get_catalog(" Standard ")
    assert [b.name for b in catalog][:2] == ["Box1", "Box2"]
    assert all(b.items == [] for b in catalog)
    # Fresh bins on every call.
    assert get_catalog("standard")[0] is not catalog[0]


def test_unknown_catalog_preset() -> None:
    with pytest.raises(ValueError, match="Unknown catalog_preset"):
        get_catalog("pallets")


def test_build_plan_with_explicit_catalog() -> None:
    request = PackingRequestSchema.model_validate(
        {
            "catalog_preset": "standard",
            "catalog": [{"name": "crate", "width": 20, "height": 20, "depth": 20, "weight": 5}],
            "items": [{"id": "c", "width": 10, "height": 10, "depth": 10, "weight": 2, "quantity": 8}],
        }
    )

    result = build_plan(request)

    assert result.num_bins == 1
    assert result.num_items == 8
    crate = result.bins[0]
    assert crate.name == "crate"
    assert crate.used_volume == crate.volume == 8000
    assert crate.fill_rate == 1.0
    assert crate.total_weight == 5 + 8 * 2
    assert crate.items[0].position == [0, 0, 0]
    assert crate.items[0].rotation == "RT1"
    assert crate.items[0].dims == [10, 10, 10]
    assert sorted({tuple(i.position) for i in crate.items}) == [
        (x, y, z) for x in (0, 10) for y in (0, 10) for z in (0, 10)
    ]


def test_build_plan_falls_back_to_configured_catalog(monkeypatch) -> None:
    monkeypatch.delenv("BINPACK3D_CATALOG", raising=False)
    assert default_catalog() == "standard"

    request = PackingRequestSchema(items=[{"id": "A", "width": 100, "height": 100, "depth": 30}])

    assert [b.name for b in build_plan(request).bins] == ["Box1"]

    monkeypatch.setenv("BINPACK3D_CATALOG", "pallets")
    with pytest.raises(ValueError):
        build_plan(request)


def test_compute_metrics() -> None:
    assert compute_metrics(Bin(width=2, height=3, depth=4)) == (0, 24, 0.0)
    assert compute_metrics(Bin(width=0, height=3, depth=4)) == (0, 0, 0.0)


def test_configure_logging_levels() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        with pytest.raises(ValueError):
            configure_logging("chatty")
    finally:
        root.setLevel(previous)
