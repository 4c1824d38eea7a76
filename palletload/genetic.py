"""Genetic search for a good pallet load."""

from __future__ import annotations

import math
import random
import sys
import time
from bisect import bisect_left
from itertools import accumulate
from typing import Iterator, Optional

from palletload.individual import Individual, Population, crossover
from palletload.model import DataSet, PalletList
from palletload.terminal import clear_screen

POPULATION_SIZE = 1000
CROSSOVER_RATE = 0.75
ELITE_SHARE = 0.05
TOURNAMENT_SHARE = 0.35
ROULETTE_SHARE = 0.2
RANDOM_SHARE = 0.4
TOURNAMENT_SIZE = 5


def _mutation_points(size: int, rate: float, rng: random.Random) -> Iterator[int]:
    """Positions that flip, each chosen independently with probability rate."""
    if rate >= 1.0:
        yield from range(size)
        return
    log_keep = math.log1p(-rate)
    position = -1
    while True:
        position += 1 + int(math.log(1.0 - rng.random()) / log_keep)
        if position >= size:
            return
        yield position


def _evaluate(population: Population, dataset: DataSet, cache: dict[int, float]) -> None:
    for individual in population.individuals:
        known = cache.get(individual.bits)
        if known is None:
            individual.calculate_fitness(dataset)
            cache[individual.bits] = individual.fitness
        else:
            individual.fitness = known


def _tournament(individuals: list[Individual], rng: random.Random) -> int:
    best = rng.randrange(len(individuals))
    for _ in range(TOURNAMENT_SIZE - 1):
        competitor = rng.randrange(len(individuals))
        if individuals[competitor].fitness > individuals[best].fitness:
            best = competitor
    return best


def _roulette(ceilings: list[float], total: float, rng: random.Random) -> int:
    pick = rng.uniform(0.0, total)
    index = bisect_left(ceilings, pick)
    return min(index, len(ceilings) - 1)


def _next_generation(
    population: Population, num_pallets: int, mutation_rate: float
) -> None:
    individuals = population.individuals
    rng = population.rng
    size = len(individuals)

    elite = int(size * ELITE_SHARE)
    tail = individuals[elite:]
    rng.shuffle(tail)
    individuals[elite:] = tail

    tournament_count = int(size * TOURNAMENT_SHARE)
    for i in range(0, tournament_count, 2):
        first = _tournament(individuals, rng)
        second = _tournament(individuals, rng)
        child1, child2 = crossover(individuals[first], individuals[second], CROSSOVER_RATE, rng)
        individuals[elite + i] = child1
        if i + 1 < tournament_count:
            individuals[elite + i + 1] = child2

    roulette_count = int(size * ROULETTE_SHARE)
    fitnesses = [individual.fitness for individual in individuals]
    total = sum(fitnesses)
    # Running maximum of the cumulative sums: the first index reaching a pick is found by bisection.
    ceilings = list(accumulate(accumulate(fitnesses), max))
    start = elite + tournament_count
    for i in range(0, roulette_count, 2):
        first = _roulette(ceilings, total, rng)
        second = _roulette(ceilings, total, rng)
        child1, child2 = crossover(individuals[first], individuals[second], CROSSOVER_RATE, rng)
        individuals[start + i] = child1
        if i + 1 < roulette_count:
            individuals[start + i + 1] = child2

    random_count = int(size * RANDOM_SHARE)
    start += roulette_count
    for i in range(random_count):
        individuals[start + i] = Individual(num_pallets)

    for individual in individuals[1:]:
        for gene in _mutation_points(len(individual), mutation_rate, rng):
            individual[gene] = not individual[gene]


def _write_results(population: Population, dataset: DataSet, output_path: str) -> None:
    try:
        with open(output_path, "w", encoding="utf-8") as output:
            output.write("Final generation results:\n\n")
            for individual in population.individuals:
                output.write(individual.status(dataset))
                output.write("\n\n")
    except OSError:
        print("Unable to open file for writing.", file=sys.stderr)


def genetic(
    dataset: DataSet,
    show_progress: bool = True,
    output_path: Optional[str] = "output.txt",
    seed: Optional[int] = None,
) -> PalletList:
    """Evolve a population of loads until the best stops improving, then return it.

    The final generation is reported to output_path unless it is None. The
    best genome is trimmed in pallet order so that the load fits the truck.
    """
    pallets = list(dataset.pallets)
    capacity = dataset.truck.capacity
    num_pallets = len(pallets)
    mutation_rate = max(0.001, min(0.1, 1.0 / num_pallets)) if num_pallets else 0.1

    if seed is None:
        seed = time.time_ns() & 0xFFFFFFFF
    population = Population(POPULATION_SIZE, num_pallets, seed)

    if num_pallets <= 50:
        threshold = 1000
    elif num_pallets <= 1000:
        threshold = 500
    else:
        threshold = 200

    cache: dict[int, float] = {}
    best_fitness = -math.inf
    stale = 0
    generation = 0
    while stale < threshold:
        _evaluate(population, dataset, cache)
        population.sort_by_fitness()
        leader = population.individuals[0]

        if show_progress:
            clear_screen()
            print(f"Generation: {generation}")
            print(leader.status(dataset), end="")

        if leader.fitness > best_fitness:
            best_fitness = leader.fitness
            stale = 0
        else:
            stale += 1

        _next_generation(population, num_pallets, mutation_rate)
        generation += 1

    _evaluate(population, dataset, cache)
    population.sort_by_fitness()

    if output_path is not None:
        _write_results(population, dataset, output_path)

    best = population.individuals[0]
    result = PalletList()
    weight = 0
    for index, pallet in enumerate(pallets):
        if best[index] and weight + pallet.weight <= capacity:
            result.add(pallet)
            weight += pallet.weight
    return result