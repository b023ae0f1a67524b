"""Fitting a single item into a bin at a given anchor."""

from __future__ import annotations

from typing import Iterator, Sequence

from binpack3d.geometry import Rotation, Vector, boxes_intersect, fits_within, oriented_dims
from binpack3d.models import Bin, PackableItem, PlacedItem


def place(bin: Bin, item: PackableItem, position: Sequence[int]) -> bool:
    """
    Try to put ``item`` at ``position`` inside ``bin``.

    Rotations are tried in order RT1..RT6 and those that would leave the bin
    are skipped. The first rotation that fits the bin decides the outcome:
    if it collides with an already placed item the placement fails, even
    though a later rotation might have fit. This caps packing density and is
    kept on purpose, since packing plans depend on it.

    On success the item is appended to ``bin.items``.
    """
    pos: Vector = (int(position[0]), int(position[1]), int(position[2]))
    bounds = bin.dimensions()

    for rotation in Rotation:
        dims = oriented_dims(item, rotation)
        if not fits_within(pos, dims, bounds):
            continue

        for placed in bin.items:
            if boxes_intersect(placed.position, placed.dimensions(), pos, dims):
                return False

        bin.items.append(PlacedItem(item=item, position=pos, rotation=rotation))
        return True

    return False


def candidate_anchors(bin: Bin) -> Iterator[Vector]:
    """
    Anchors next to the items already in ``bin``.

    For each axis (width, then height, then depth) and each placed item in
    placement order, yield the item's position pushed past its oriented
    extent on that axis.
    """
    placed_items = list(bin.items)
    for axis in range(3):
        for placed in placed_items:
            pos = list(placed.position)
            pos[axis] += placed.dimensions()[axis]
            yield (pos[0], pos[1], pos[2])
