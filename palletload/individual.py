"""Bit-string individuals, populations of them and their crossover."""

from __future__ import annotations

import random
import sys

from palletload.model import DataSet

LOWEST_FITNESS = -sys.float_info.max


class Individual:
    """A fixed-length bit string; bit i set means pallet i is loaded."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._bits = 0
        self.fitness = 0.0

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError("Index out of range")

    def __getitem__(self, index: int) -> bool:
        self._check(index)
        return bool(self._bits >> index & 1)

    def __setitem__(self, index: int, value: bool) -> None:
        self._check(index)
        if value:
            self._bits |= 1 << index
        else:
            self._bits &= ~(1 << index)

    def __len__(self) -> int:
        return self._size

    @property
    def bits(self) -> int:
        """The genome as an integer bit mask."""
        return self._bits

    def _selected(self) -> list[int]:
        return [index for index in range(self._size) if self._bits >> index & 1]

    def clone(self) -> "Individual":
        """An independent copy with the same genome and fitness."""
        copy = Individual(self._size)
        copy._bits = self._bits
        copy.fitness = self.fitness
        return copy

    def calculate_fitness(self, dataset: DataSet) -> None:
        """Set fitness to the loaded profit less 0.001 per pallet, or the lowest value if overweight."""
        pallets = dataset.pallets.pallets
        selected = self._selected()
        weight = sum(pallets[index].weight for index in selected)
        profit = sum(pallets[index].profit for index in selected)
        if weight > dataset.truck.capacity:
            self.fitness = LOWEST_FITNESS
        else:
            self.fitness = float(profit) - 0.001 * len(selected)

    def status(self, dataset: DataSet) -> str:
        """A report of fitness, load and the 1-based numbers of the chosen pallets."""
        pallets = dataset.pallets.pallets
        selected = self._selected()
        weight = sum(pallets[index].weight for index in selected)
        profit = sum(pallets[index].profit for index in selected)
        numbers = "".join(f"{index + 1} " for index in selected)
        return (
            f"Fitness:    {self.fitness:g}\n"
            f"Max weight: {dataset.truck.capacity}\n"
            f"Weight:     {weight}\n"
            f"Profit:     {profit}\n"
            f"Pallets:    {len(selected)}\n"
            f"\n"
            f"{numbers}\n"
        )


class Population:
    """A set of individuals sharing one random number generator."""

    def __init__(self, size: int, num_pallets: int, seed: int | None) -> None:
        self.rng = random.Random(seed)
        self.individuals = [Individual(num_pallets) for _ in range(size)]

    def update_fitness(self, dataset: DataSet) -> None:
        """Recalculate the fitness of every individual."""
        for individual in self.individuals:
            individual.calculate_fitness(dataset)

    def sort_by_fitness(self) -> None:
        """Order individuals from fittest to least fit."""
        self.individuals.sort(key=lambda individual: individual.fitness, reverse=True)


def crossover(
    parent1: Individual,
    parent2: Individual,
    crossover_rate: float,
    rng: random.Random,
) -> tuple[Individual, Individual]:
    """Single-point crossover: with probability crossover_rate the tails are swapped."""
    child1 = parent1.clone()
    child2 = parent2.clone()

    if rng.random() > crossover_rate:
        return child1, child2

    length = len(parent1)
    if length < 2:
        return child1, child2

    point = rng.randint(1, length - 1)
    for index in range(point, length):
        child1[index] = parent2[index]
        child2[index] = parent1[index]
    return child1, child2