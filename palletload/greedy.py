"""Greedy loading by profit-to-weight ratio."""

from __future__ import annotations

from palletload.model import DataSet, Pallet, PalletList


def _ratio(pallet: Pallet) -> float:
    if pallet.weight == 0:
        return float("inf") if pallet.profit else 0.0
    return pallet.profit / pallet.weight


def greedy(dataset: DataSet) -> PalletList:
    """Load pallets by falling profit-to-weight ratio while they fit.

    Equal ratios put heavier pallets first, then lower identifiers.
    """
    capacity = dataset.truck.capacity
    ordered = sorted(
        dataset.pallets,
        key=lambda pallet: (-_ratio(pallet), -pallet.weight, pallet.id),
    )

    result = PalletList()
    weight = 0
    for pallet in ordered:
        if weight + pallet.weight <= capacity:
            result.add(pallet)
            weight += pallet.weight
    return result