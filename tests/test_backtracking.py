import random

import pytest

from palletload.backtracking import backtracking
from palletload.brute_force import brute_force
from palletload.model import DataSet, Pallet, PalletList, Truck


def _dataset(capacity, pallets):
    return DataSet(Truck(capacity, len(pallets)), PalletList(pallets))


def _random_dataset(seed):
    rng = random.Random(seed)
    count = rng.randint(0, 10)
    pallets = [
        Pallet(i + 1, rng.randint(1, 20), rng.randint(0, 30)) for i in range(count)
    ]
    return _dataset(rng.randint(1, 60), pallets)


def test_empty_dataset_gives_empty_list():
    assert backtracking(_dataset(10, [])).pallets == []


def test_picks_best_combination():
    pallets = [Pallet(1, 5, 10), Pallet(2, 5, 20), Pallet(3, 5, 30)]
    result = backtracking(_dataset(10, pallets))
    assert result.pallets == [pallets[1], pallets[2]]


def test_tie_keeps_first_leaf_reached():
    pallets = [Pallet(1, 5, 10), Pallet(2, 5, 10)]
    result = backtracking(_dataset(5, pallets))
    assert result.pallets == [pallets[1]]


def test_zero_profit_gives_empty_list():
    pallets = [Pallet(1, 1, 0), Pallet(2, 2, 0)]
    assert backtracking(_dataset(10, pallets)).pallets == []


def test_nothing_fits():
    pallets = [Pallet(1, 11, 5), Pallet(2, 12, 7)]
    assert backtracking(_dataset(10, pallets)).pallets == []


@pytest.mark.parametrize("seed", range(25))
def test_matches_brute_force_profit(seed):
    dataset = _random_dataset(seed)
    result = backtracking(dataset)
    assert result.total_profit() == brute_force(dataset).total_profit()
    assert result.total_weight() <= dataset.truck.capacity


@pytest.mark.parametrize("seed", range(10))
def test_result_keeps_input_order(seed):
    dataset = _random_dataset(seed)
    result = backtracking(dataset)
    positions = [dataset.pallets.pallets.index(pallet) for pallet in result]
    assert positions == sorted(positions)