# src/binpack3d/catalog.py
from __future__ import annotations

from binpack3d.models import Bin

# Shipping carton catalogs, smallest first. Units are whatever the items use (mm for "standard").
CATALOG_PRESETS: dict[str, list[dict]] = {
    "standard": [
        {"name": "Box1",  "width": 220, "height": 160, "depth": 100, "weight": 110},
        {"name": "Box2",  "width": 260, "height": 145, "depth": 145, "weight": 120},
        {"name": "Box3",  "width": 270, "height": 185, "depth": 110, "weight": 140},
        {"name": "Box4",  "width": 310, "height": 220, "depth": 140, "weight": 210},
        {"name": "Box5",  "width": 300, "height": 210, "depth": 200, "weight": 250},
        {"name": "Box6",  "width": 300, "height": 300, "depth": 130, "weight": 290},
        {"name": "Box7",  "width": 370, "height": 270, "depth": 150, "weight": 300},
        {"name": "Box8",  "width": 300, "height": 300, "depth": 250, "weight": 360},
        {"name": "Box9",  "width": 470, "height": 280, "depth": 210, "weight": 400},
        {"name": "Box10", "width": 430, "height": 315, "depth": 200, "weight": 430},
        {"name": "Box11", "width": 330, "height": 330, "depth": 350, "weight": 500},
        {"name": "Box12", "width": 465, "height": 350, "depth": 370, "weight": 650},
    ],
}


def preset_names() -> list[str]:
    return sorted(CATALOG_PRESETS.keys())


def get_catalog(preset: str) -> list[Bin]:
    key = preset.strip().lower()
    if key not in CATALOG_PRESETS:
        raise ValueError(f"Unknown catalog_preset '{preset}'. Valid: {preset_names()}")
    return [Bin(**spec) for spec in CATALOG_PRESETS[key]]
