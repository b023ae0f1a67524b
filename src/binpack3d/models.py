from __future__ import annotations

from typing import Any, List, Optional, Protocol, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .geometry import Rotation, Vector, boxes_intersect, dimensions, oriented_dims, volume


class PackableItem(Protocol):
    """Anything the engine can pack: four numeric attributes, nothing else."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    @property
    def depth(self) -> int: ...

    @property
    def weight(self) -> int: ...


class Item(BaseModel):
    """Immutable cuboid item."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(default=None, description="Optional label of the item")
    width: int = Field(ge=0, description="Width of the item")
    height: int = Field(ge=0, description="Height of the item")
    depth: int = Field(ge=0, description="Depth of the item")
    weight: int = Field(default=0, ge=0, description="Weight of the item")


class PlacedItem(BaseModel):
    """An item fixed at a position inside a bin, with the rotation it was placed in."""

    item: Any = Field(description="The packed item, as supplied by the caller")
    position: Tuple[int, int, int] = Field(description="Minimum corner (x, y, z) of the placed item")
    rotation: Rotation = Field(default=Rotation.RT1, description="Orientation of the item")

    @property
    def weight(self) -> int:
        return int(self.item.weight)

    def dimensions(self) -> Vector:
        """Oriented (x, y, z) extent of the item."""
        return oriented_dims(self.item, self.rotation)

    def intersects(self, other: "PlacedItem") -> bool:
        return boxes_intersect(self.position, self.dimensions(), other.position, other.dimensions())

    def __str__(self) -> str:
        w, h, d = dimensions(self.item)
        x, y, z = self.position
        return (
            f"item(w: {w}, h: {h}, d: {d}, weight: {self.weight}) "
            f"pos(w: {x}, h: {y}, d: {z}) rotation({self.rotation})"
        )


class Bin(BaseModel):
    """
    A container with fixed capacity and the items placed in it so far.

    ``weight`` is the weight of the empty bin itself. It is reported, never
    enforced.
    """

    name: str = Field(default="", description="Display name of the bin")
    width: int = Field(ge=0, description="Width of the bin")
    height: int = Field(ge=0, description="Height of the bin")
    depth: int = Field(ge=0, description="Depth of the bin")
    weight: int = Field(default=0, ge=0, description="Weight of the empty bin")
    items: List[PlacedItem] = Field(default_factory=list)

    @classmethod
    def from_template(cls, template: Any) -> "Bin":
        """Open a new, empty bin with the capacity of a catalog template."""
        return cls(
            name=getattr(template, "name", ""),
            width=template.width,
            height=template.height,
            depth=template.depth,
            weight=getattr(template, "weight", 0),
        )

    def dimensions(self) -> Vector:
        return dimensions(self)

    def volume(self) -> int:
        return volume(self)

    def is_valid(self) -> bool:
        return self.volume() != 0

    def total_weight(self) -> int:
        return self.weight + sum(placed.weight for placed in self.items)

    def packed_items(self) -> list[Any]:
        """Underlying items in placement order, without their rotations."""
        return [placed.item for placed in self.items]

    def __str__(self) -> str:
        lines = [
            f"bin {self.name} (w: {self.width}, h: {self.height}, d: {self.depth}, "
            f"weight: {self.weight}) items: {len(self.items)}"
        ]
        for i, placed in enumerate(self.items):
            lines.append(f"  item {i}: {placed}")
        return "\n".join(lines)
