"""Core data types: pallets, trucks, pallet lists and data sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple


@dataclass(frozen=True)
class Pallet:
    """A pallet with an identifier, a weight and the profit it brings."""

    id: int
    weight: int
    profit: int

    def __str__(self) -> str:
        return f"Pallet(ID: {self.id}, Weight: {self.weight}, Profit: {self.profit})"


@dataclass(frozen=True)
class Truck:
    """A truck with a weight capacity and the number of pallets on offer."""

    capacity: int
    pallets: int

    def __str__(self) -> str:
        return f"Truck(Capacity: {self.capacity}, Pallets: {self.pallets})"


@dataclass
class PalletList:
    """An ordered collection of pallets."""

    pallets: list[Pallet] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.pallets = list(self.pallets)

    def add(self, pallet: Pallet) -> None:
        """Append a pallet to the list."""
        self.pallets.append(pallet)

    def total_weight(self) -> int:
        """Sum of the weights of all pallets."""
        return sum(pallet.weight for pallet in self.pallets)

    def total_profit(self) -> int:
        """Sum of the profits of all pallets."""
        return sum(pallet.profit for pallet in self.pallets)

    def __iter__(self) -> Iterator[Pallet]:
        return iter(self.pallets)

    def __len__(self) -> int:
        return len(self.pallets)

    def __str__(self) -> str:
        entries = ",\n".join(f"  {pallet}" for pallet in self.pallets)
        body = f"{entries}\n" if entries else ""
        return (
            f"PalletList: [\n{body}]\n"
            f"\n"
            f"Pallets: {len(self.pallets)}\n"
            f"Weight: {self.total_weight()}\n"
            f"Profit: {self.total_profit()}\n"
        )

    @classmethod
    def of(cls, pallets: Iterable[Pallet]) -> "PalletList":
        """Build a list from any iterable of pallets."""
        return cls(list(pallets))


class DataSet(NamedTuple):
    """A truck together with the pallets that may be loaded onto it."""

    truck: Truck
    pallets: PalletList