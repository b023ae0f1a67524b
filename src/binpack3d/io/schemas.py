"""Data schemas for input/output operations."""

from typing import List, Optional

from pydantic import BaseModel, Field

from binpack3d.models import Bin, Item


class ItemSchema(BaseModel):
    """Schema for an item line, possibly repeated ``quantity`` times."""
    id: Optional[str] = Field(None, description="Identifier of the item")
    width: int = Field(ge=0, description="Width of the item")
    height: int = Field(ge=0, description="Height of the item")
    depth: int = Field(ge=0, description="Depth of the item")
    weight: int = Field(ge=0, default=0, description="Weight of the item")
    quantity: int = Field(ge=1, default=1, description="Number of identical items")

    def to_items(self) -> List[Item]:
        dims = {"width": self.width, "height": self.height, "depth": self.depth, "weight": self.weight}
        if self.quantity == 1:
            return [Item(id=self.id, **dims)]
        prefix = self.id or "item"
        return [Item(id=f"{prefix}_{i:04d}", **dims) for i in range(self.quantity)]


class BinSchema(BaseModel):
    """Schema for a catalog bin."""
    name: str = Field("", description="Display name of the bin")
    width: int = Field(ge=0, description="Width of the bin")
    height: int = Field(ge=0, description="Height of the bin")
    depth: int = Field(ge=0, description="Depth of the bin")
    weight: int = Field(ge=0, default=0, description="Weight of the empty bin")

    def to_bin(self) -> Bin:
        return Bin(**self.model_dump())


class PackingRequestSchema(BaseModel):
    """Schema for a packing request."""
    catalog: Optional[List[BinSchema]] = Field(None, description="Explicit bin catalog, in preference order")
    catalog_preset: Optional[str] = Field(None, description="Name of a built-in catalog")
    items: List[ItemSchema] = Field(min_length=1, description="List of items to pack")


class PlacedItemSchema(BaseModel):
    """Schema for an item placed in a bin."""
    id: Optional[str] = None
    width: int
    height: int
    depth: int
    weight: int
    position: List[int] = Field(description="Minimum corner (x, y, z)")
    rotation: str = Field(description="Rotation tag, RT1 to RT6")
    dims: List[int] = Field(description="Oriented (x, y, z) extent")


class PackedBinSchema(BaseModel):
    """Schema for a packed bin."""
    name: str
    width: int
    height: int
    depth: int
    weight: int
    total_weight: int
    used_volume: int
    volume: int
    fill_rate: float = Field(ge=0, le=1, description="Bin utilization ratio")
    items: List[PlacedItemSchema] = Field(default_factory=list)


class PackingResultSchema(BaseModel):
    """Schema for a packing result."""
    bins: List[PackedBinSchema] = Field(description="Packed bins in opening order")
    num_bins: int = Field(ge=0, description="Number of bins used")
    num_items: int = Field(ge=0, description="Number of items packed")
