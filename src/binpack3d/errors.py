from __future__ import annotations

from typing import Any


class ItemTooLargeError(ValueError):
    """Raised when no catalog bin can hold an item, whatever its rotation."""

    def __init__(self, item: Any):
        self.item = item
        super().__init__(
            "item too large for any catalog bin: "
            f"{{width: {item.width}, height: {item.height}, depth: {item.depth}, weight: {item.weight}}}"
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": getattr(self.item, "id", None),
            "width": self.item.width,
            "height": self.item.height,
            "depth": self.item.depth,
            "weight": self.item.weight,
        }
