from __future__ import annotations
from binpack3d.models import Bin, PlacedItem


def placement_volume(p: PlacedItem) -> int:
    w, h, d = p.dimensions()
    return w * h * d


def compute_metrics(bin: Bin) -> tuple[int, int, float]:
    used_volume = sum(placement_volume(p) for p in bin.items)
    bin_volume = bin.volume()
    fill_rate = 0.0 if bin_volume == 0 else used_volume / bin_volume
    return used_volume, bin_volume, fill_rate
