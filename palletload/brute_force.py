"""Exhaustive search over every subset of pallets."""

from __future__ import annotations

from palletload.model import DataSet, PalletList

_MAX_PALLETS = 64


def brute_force(dataset: DataSet) -> PalletList:
    """Return the most profitable subset of pallets that fits the truck.

    Every subset is tried in bitmask order. Among subsets of equal profit
    the first one found is kept. Data sets with 64 or more pallets give an
    empty list.
    """
    pallets = list(dataset.pallets)
    capacity = dataset.truck.capacity
    count = len(pallets)

    if count >= _MAX_PALLETS:
        return PalletList()

    best_value = 0
    best_mask = 0
    for mask in range(1 << count):
        chosen = [pallet for bit, pallet in enumerate(pallets) if mask >> bit & 1]
        value = sum(pallet.profit for pallet in chosen)
        weight = sum(pallet.weight for pallet in chosen)
        if weight <= capacity and value > best_value:
            best_value = value
            best_mask = mask

    if best_value == 0:
        return PalletList()
    return PalletList.of(
        pallet for bit, pallet in enumerate(pallets) if best_mask >> bit & 1
    )