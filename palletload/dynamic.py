"""Bottom-up dynamic programming over pallets and remaining capacity."""

from __future__ import annotations

from typing import NamedTuple

from palletload.model import DataSet, PalletList


class _Cell(NamedTuple):
    profit: int = 0
    item_count: int = 0
    index_sum: int = 0

    def rank(self) -> tuple[int, int, int]:
        # Higher profit wins, then fewer pallets, then lower index sum.
        return (self.profit, -self.item_count, -self.index_sum)


def dynamic_programming(dataset: DataSet) -> PalletList:
    """Return an optimal subset of pallets that fits the truck.

    Among equally profitable loads, the one with fewer pallets is preferred,
    then the one whose pallet indices sum lower. Pallets are listed from the
    last chosen to the first.
    """
    pallets = list(dataset.pallets)
    capacity = dataset.truck.capacity
    count = len(pallets)

    if count == 0 or capacity == 0:
        return PalletList()

    table = [[_Cell()] * (capacity + 1)]
    for index, pallet in enumerate(pallets):
        previous = table[-1]
        row = []
        for room in range(capacity + 1):
            best = previous[room]
            if pallet.weight <= room:
                base = previous[room - pallet.weight]
                candidate = _Cell(
                    base.profit + pallet.profit,
                    base.item_count + 1,
                    base.index_sum + index,
                )
                if best.rank() < candidate.rank():
                    best = candidate
            row.append(best)
        table.append(row)

    result = PalletList()
    room = capacity
    for i in range(count, 0, -1):
        if room <= 0:
            break
        pallet = pallets[i - 1]
        if room < pallet.weight:
            continue
        base = table[i - 1][room - pallet.weight]
        expected = _Cell(
            base.profit + pallet.profit, base.item_count + 1, base.index_sum + i - 1
        )
        current = table[i][room]
        if current == expected and current != table[i - 1][room]:
            result.add(pallet)
            room -= pallet.weight

    return result