"""Choosing bins from the catalog."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from binpack3d.geometry import ORIGIN, volume
from binpack3d.models import Bin, PackableItem
from binpack3d.packing.placement import place


def pick_bin(catalog: Sequence[Any], item: PackableItem) -> Optional[Bin]:
    """
    First catalog bin, in declared order, that can hold ``item`` at the origin.

    Returns a fresh empty bin, or None when no bin fits.
    """
    for template in catalog:
        candidate = Bin.from_template(template)
        if not candidate.is_valid():
            continue
        if place(candidate, item, ORIGIN):
            return Bin.from_template(template)
    return None


def bigger_bin(catalog: Sequence[Any], current: Bin) -> Optional[Bin]:
    """
    First catalog bin, in declared order, with a volume strictly above ``current``.

    The catalog does not have to be sorted, so the answer is not necessarily
    the next size up.
    """
    current_volume = current.volume()
    for template in catalog:
        if volume(template) > current_volume:
            return Bin.from_template(template)
    return None
