import pytest

from palletload.brute_force import brute_force
from palletload.genetic import genetic
from palletload.model import DataSet, Pallet, PalletList, Truck

DATASET = DataSet(
    Truck(50, 4),
    PalletList(
        [
            Pallet(1, 10, 60),
            Pallet(2, 20, 100),
            Pallet(3, 30, 120),
            Pallet(4, 15, 50),
        ]
    ),
)


@pytest.fixture(scope="module")
def run(tmp_path_factory):
    output = tmp_path_factory.mktemp("genetic") / "output.txt"
    result = genetic(DATASET, show_progress=False, output_path=str(output), seed=7)
    return result, output


def test_result_fits_truck(run):
    result, _ = run
    assert result.total_weight() <= DATASET.truck.capacity


def test_result_is_optimal_on_small_dataset(run):
    result, _ = run
    assert result.total_profit() == brute_force(DATASET).total_profit()


def test_result_pallets_come_from_dataset_in_order(run):
    result, _ = run
    ids = [pallet.id for pallet in result]
    assert ids == sorted(ids)
    assert set(result) <= set(DATASET.pallets)


def test_final_generation_report_written(run):
    _, output = run
    text = output.read_text(encoding="utf-8")
    assert text.startswith("Final generation results:\n\n")
    assert text.count("Max weight: 50") == 1000


def test_same_seed_same_result_and_progress_shown(run, capsys):
    expected, _ = run
    again = genetic(DATASET, show_progress=True, output_path=None, seed=7)
    assert again == expected
    printed = capsys.readouterr().out
    assert "Generation: 0\n" in printed
    assert "\033[2J\033[1;1H" in printed