import random

import pytest

from palletload.brute_force import brute_force
from palletload.greedy import greedy
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
    assert greedy(_dataset(10, [])).pallets == []


def test_orders_by_ratio_and_skips_what_does_not_fit():
    pallets = [Pallet(1, 6, 12), Pallet(2, 5, 15), Pallet(3, 5, 5)]
    result = greedy(_dataset(10, pallets))
    assert result.pallets == [pallets[1], pallets[2]]


def test_equal_ratio_prefers_heavier():
    pallets = [Pallet(1, 2, 4), Pallet(2, 4, 8)]
    result = greedy(_dataset(4, pallets))
    assert result.pallets == [pallets[1]]


def test_equal_ratio_and_weight_prefers_lower_id():
    pallets = [Pallet(5, 3, 6), Pallet(3, 3, 6)]
    result = greedy(_dataset(3, pallets))
    assert result.pallets == [pallets[1]]


def test_weightless_profitable_pallet_goes_first():
    pallets = [Pallet(1, 5, 50), Pallet(2, 0, 1)]
    result = greedy(_dataset(5, pallets))
    assert result.pallets == [pallets[1], pallets[0]]


@pytest.mark.parametrize("seed", range(25))
def test_never_beats_optimum_and_fits(seed):
    dataset = _random_dataset(seed)
    result = greedy(dataset)
    assert result.total_weight() <= dataset.truck.capacity
    assert result.total_profit() <= brute_force(dataset).total_profit()


@pytest.mark.parametrize("seed", range(10))
def test_everything_fits_takes_all(seed):
    dataset = _random_dataset(seed)
    roomy = _dataset(10_000, dataset.pallets.pallets)
    result = greedy(roomy)
    assert sorted(p.id for p in result) == sorted(p.id for p in dataset.pallets)