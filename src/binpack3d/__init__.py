"""Heterogeneous 3D bin packing with bin escalation."""

from binpack3d.errors import ItemTooLargeError
from binpack3d.geometry import Rotation, intersect
from binpack3d.models import Bin, Item, PackableItem, PlacedItem
from binpack3d.packing.first_fit import fill_bin, pack

__all__ = [
    "Bin",
    "Item",
    "ItemTooLargeError",
    "PackableItem",
    "PlacedItem",
    "Rotation",
    "fill_bin",
    "intersect",
    "pack",
]
