"""Depth-first search over pallet subsets, pruning loads that are too heavy."""

from __future__ import annotations

from palletload.model import DataSet, Pallet, PalletList


def backtracking(dataset: DataSet) -> PalletList:
    """Return the most profitable subset of pallets that fits the truck.

    At each pallet the branch without it is explored before the branch with
    it; a branch is only entered if the pallet still fits. Among subsets of
    equal profit the first complete one reached is kept.
    """
    pallets = list(dataset.pallets)
    capacity = dataset.truck.capacity

    best_profit = 0
    best_selection: list[int] = []
    selection: list[int] = []

    def search(index: int, weight: int, profit: int) -> None:
        nonlocal best_profit, best_selection
        if index == len(pallets):
            if profit > best_profit:
                best_profit = profit
                best_selection = list(selection)
            return

        search(index + 1, weight, profit)

        pallet: Pallet = pallets[index]
        if weight + pallet.weight <= capacity:
            selection.append(index)
            search(index + 1, weight + pallet.weight, profit + pallet.profit)
            selection.pop()

    search(0, 0, 0)
    return PalletList.of(pallets[index] for index in best_selection)