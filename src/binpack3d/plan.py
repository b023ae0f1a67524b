"""Turn a validated packing request into a packing plan."""

from __future__ import annotations

import logging

from binpack3d.catalog import get_catalog
from binpack3d.config import default_catalog
from binpack3d.io.schemas import (
    PackedBinSchema,
    PackingRequestSchema,
    PackingResultSchema,
    PlacedItemSchema,
)
from binpack3d.metrics import compute_metrics
from binpack3d.models import Bin, Item
from binpack3d.packing.first_fit import pack

logger = logging.getLogger(__name__)


def build_catalog(request: PackingRequestSchema) -> list[Bin]:
    """Explicit catalog first, then the named preset, then the configured default."""
    if request.catalog:
        return [b.to_bin() for b in request.catalog]
    return get_catalog(request.catalog_preset or default_catalog())


def build_items(request: PackingRequestSchema) -> list[Item]:
    items: list[Item] = []
    for line in request.items:
        items.extend(line.to_items())
    return items


def summarize_bin(bin: Bin) -> PackedBinSchema:
    used_volume, bin_volume, fill_rate = compute_metrics(bin)
    return PackedBinSchema(
        name=bin.name,
        width=bin.width,
        height=bin.height,
        depth=bin.depth,
        weight=bin.weight,
        total_weight=bin.total_weight(),
        used_volume=used_volume,
        volume=bin_volume,
        fill_rate=min(fill_rate, 1.0),
        items=[
            PlacedItemSchema(
                id=getattr(p.item, "id", None),
                width=p.item.width,
                height=p.item.height,
                depth=p.item.depth,
                weight=p.item.weight,
                position=list(p.position),
                rotation=p.rotation.name,
                dims=list(p.dimensions()),
            )
            for p in bin.items
        ],
    )


def build_plan(request: PackingRequestSchema) -> PackingResultSchema:
    """
    Pack the request's items into its catalog.

    Raises ItemTooLargeError when an item fits no bin and ValueError for an
    unknown catalog preset.
    """
    catalog = build_catalog(request)
    items = build_items(request)
    logger.info(f"Packing {len(items)} items against a catalog of {len(catalog)} bins")

    bins = pack(catalog, items)

    return PackingResultSchema(
        bins=[summarize_bin(b) for b in bins],
        num_bins=len(bins),
        num_items=sum(len(b.items) for b in bins),
    )
