"""Geometry utilities for the packing engine.

All positions and sizes are integer triples ordered (width, height, depth),
which are the x, y and z axes of a bin.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Sequence, Tuple

if TYPE_CHECKING:
    from .models import PackableItem

Vector = Tuple[int, int, int]

ORIGIN: Vector = (0, 0, 0)

# Axis pairs checked by the 3D intersection test: (x, y), (y, z), (x, z).
AXIS_PAIRS = ((0, 1), (1, 2), (0, 2))


class Rotation(IntEnum):
    """The six axis-aligned orientations of an item inside a bin."""

    RT1 = 0  # w, h, d
    RT2 = 1  # h, w, d
    RT3 = 2  # h, d, w
    RT4 = 3  # d, h, w
    RT5 = 4  # d, w, h
    RT6 = 5  # w, d, h

    @property
    def label(self) -> str:
        return _LABELS[self]

    def orient(self, dims: Sequence[int]) -> Vector:
        """Map intrinsic (w, h, d) onto the bin's (x, y, z) axes."""
        a, b, c = _PERMUTATIONS[self]
        return (dims[a], dims[b], dims[c])

    def __str__(self) -> str:
        return f"{self.name} ({self.label})"


_PERMUTATIONS: dict[Rotation, Vector] = {
    Rotation.RT1: (0, 1, 2),
    Rotation.RT2: (1, 0, 2),
    Rotation.RT3: (1, 2, 0),
    Rotation.RT4: (2, 1, 0),
    Rotation.RT5: (2, 0, 1),
    Rotation.RT6: (0, 2, 1),
}

_LABELS: dict[Rotation, str] = {
    Rotation.RT1: "w, h, d",
    Rotation.RT2: "h, w, d",
    Rotation.RT3: "h, d, w",
    Rotation.RT4: "d, h, w",
    Rotation.RT5: "d, w, h",
    Rotation.RT6: "w, d, h",
}


def dimensions(obj: Any) -> Vector:
    """Intrinsic (width, height, depth) of an item or a bin."""
    return (int(obj.width), int(obj.height), int(obj.depth))


def volume(obj: Any) -> int:
    width, height, depth = dimensions(obj)
    return width * height * depth


def oriented_dims(item: "PackableItem", rotation: Rotation) -> Vector:
    return rotation.orient(dimensions(item))


def _half(n: int) -> int:
    # Truncates toward zero, not toward negative infinity.
    return n // 2 if n >= 0 else -(-n // 2)


def intersect(
    pos_a: Sequence[int],
    pos_b: Sequence[int],
    size_a: Sequence[int],
    size_b: Sequence[int],
) -> bool:
    """
    Rectangle overlap test on one pair of axes.

    Each rectangle is reduced to its centre ``pos + size/2`` (integer halves,
    truncated) and the rectangles overlap when the centre distance on both
    axes is strictly smaller than half the summed extents.

    Touching edges are not an overlap. With odd extents the truncation makes
    the test slightly loose: a 3-wide rectangle at 0 and a 2-wide one at 2
    are reported as disjoint.
    """
    center_ax = pos_a[0] + _half(size_a[0])
    center_ay = pos_a[1] + _half(size_a[1])
    center_bx = pos_b[0] + _half(size_b[0])
    center_by = pos_b[1] + _half(size_b[1])

    dx = abs(center_ax - center_bx)
    dy = abs(center_ay - center_by)

    return dx < _half(size_a[0] + size_b[0]) and dy < _half(size_a[1] + size_b[1])


#        +-----------------+
#       /|                /|
#      / |               / |
#     +-----------------+  |
#     |  |              |  |
#     |  H              |  |
#     |  |              |  |
#     |  O----W---------|--+
#     | /               | /
#     |D                |/
#     +-----------------+
def boxes_intersect(
    pos_a: Sequence[int],
    dims_a: Sequence[int],
    pos_b: Sequence[int],
    dims_b: Sequence[int],
) -> bool:
    """Two oriented boxes intersect when all three axis-pair projections do."""
    for i, j in AXIS_PAIRS:
        if not intersect(
            (pos_a[i], pos_a[j]),
            (pos_b[i], pos_b[j]),
            (dims_a[i], dims_a[j]),
            (dims_b[i], dims_b[j]),
        ):
            return False
    return True


def fits_within(position: Sequence[int], dims: Sequence[int], bounds: Sequence[int]) -> bool:
    """True when a box at ``position`` with ``dims`` stays inside ``bounds``."""
    return all(p + d <= b for p, d, b in zip(position, dims, bounds))
