# src/binpack3d/packing/first_fit.py

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

from binpack3d.errors import ItemTooLargeError
from binpack3d.geometry import ORIGIN, volume
from binpack3d.models import Bin, PackableItem
from binpack3d.packing.placement import candidate_anchors, place
from binpack3d.packing.selection import bigger_bin, pick_bin

logger = logging.getLogger(__name__)


def sort_items(items: Iterable[PackableItem]) -> list[PackableItem]:
    """Largest volume first; equal volumes keep their input order."""
    return sorted(items, key=volume, reverse=True)


def pack(catalog: Sequence[Any], items: Iterable[PackableItem]) -> list[Bin]:
    """
    Pack ``items`` into bins opened from ``catalog``.

    - Items are sorted by descending volume
    - Each round opens the first catalog bin that holds the leading item,
      fills it, and hands the items it could not take to the next round
    - Deterministic (no randomness)

    Returns the non-empty bins in the order they were opened. Raises
    ItemTooLargeError, and returns nothing, when an item fits no catalog bin.
    The catalog entries are only read.
    """
    remaining = sort_items(items)
    bins: list[Bin] = []

    while remaining:
        first = remaining[0]
        current = pick_bin(catalog, first)
        if current is None:
            logger.warning(f"No catalog bin can hold item {getattr(first, 'id', None)!r}")
            raise ItemTooLargeError(first)

        current, remaining = fill_bin(catalog, current, remaining)
        if current.items:
            bins.append(current)
        logger.debug(f"Closed bin {current.name!r} with {len(current.items)} items, {len(remaining)} left")

    logger.info(f"Packed into {len(bins)} bins: {[b.name for b in bins]}")
    return bins


def fill_bin(
    catalog: Sequence[Any],
    current: Bin,
    items: Sequence[PackableItem],
    allow_escalation: bool = True,
) -> tuple[Bin, list[PackableItem]]:
    """
    Fill ``current`` with ``items`` in order.

    The first item goes to the origin, moving to larger bins until it fits.
    Every other item is tried at the anchors next to the placed items. When
    none fits and ``allow_escalation`` is set, larger bins are tried with the
    whole content plus the new item (see ``_escalate``).

    Returns the bin finally used, which may differ from ``current``, and the
    items left out of it.
    """
    if not items:
        return current, []

    while not place(current, items[0], ORIGIN):
        larger = bigger_bin(catalog, current)
        if larger is None:
            return current, list(items)
        logger.debug(f"Leading item does not fit {current.name!r}, trying {larger.name!r}")
        current = larger

    unplaced: list[PackableItem] = []
    for item in items[1:]:
        if _place_next_to_others(current, item):
            continue

        if allow_escalation:
            escalated = _escalate(catalog, current, item)
            if escalated is not None:
                logger.debug(f"Escalated from {current.name!r} to {escalated.name!r}")
                current = escalated
                continue

        unplaced.append(item)

    return current, unplaced


def _place_next_to_others(current: Bin, item: PackableItem) -> bool:
    for anchor in candidate_anchors(current):
        if place(current, item, anchor):
            return True
    return False


def _escalate(catalog: Sequence[Any], current: Bin, item: PackableItem) -> Optional[Bin]:
    """
    Look for a larger bin holding everything in ``current`` plus ``item``.

    Each candidate is checked with a non-escalating fill trial. A trial may
    itself have moved to a bigger bin for its leading item, so the next
    candidate is looked up from the bin the trial ended with. Volumes
    strictly increase, which bounds the loop by the catalog size.
    """
    batch = current.packed_items() + [item]

    candidate = bigger_bin(catalog, current)
    while candidate is not None:
        trial, left = fill_bin(catalog, candidate, batch, allow_escalation=False)
        if not left:
            return trial
        candidate = bigger_bin(catalog, trial)

    return None
