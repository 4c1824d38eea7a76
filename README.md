# palletload

palletload chooses which pallets to load onto a truck. Each pallet has a weight
and a profit, and the truck has a weight capacity. The goal is the highest total
profit that stays within that capacity. This is the 0/1 knapsack problem.

There are five solvers:

1. **Brute-Force** (`palletload.brute_force.brute_force`). It tries every subset
   in bitmask order. A data set with 64 or more pallets gives an empty result.
2. **Greedy** (`palletload.greedy.greedy`). It takes pallets in order of falling
   profit-to-weight ratio while they fit. When two ratios are equal, the heavier
   pallet comes first, then the one with the lower identifier.
3. **Dynamic Programming** (`palletload.dynamic.dynamic_programming`). It gives
   an exact answer. When two loads have the same profit, it prefers the one with
   fewer pallets, and after that the one whose pallet indices have the lower
   sum. The chosen pallets are listed from last to first.
4. **Backtracking** (`palletload.backtracking.backtracking`). It is an exhaustive
   depth-first search that skips any branch that goes over capacity.
5. **Genetic Programming** (`palletload.genetic.genetic`). It is an evolutionary
   search for a near-optimal load.

Each solver takes a `DataSet` and returns a `PalletList`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Datasets

A data set `<id>` is a pair of CSV files in one directory. By default that
directory is `datasets/` under the current working directory. Each file begins
with a header line.

`TruckAndPallets_<id>.csv` holds the capacity and the number of pallets:

```
Capacity,Pallets
100,4
```

`Pallets_<id>.csv` holds one pallet per line, as id, weight and profit:

```
Pallet,Weight,Profit
1,10,10
2,20,7
3,30,25
4,40,24
```

A data set is listed only when both of its files are present. Blank lines in
the pallets file are not accepted.

## Command line

### Interactive mode

```
palletload
```

1. Pick an algorithm from the menu.
2. Pick one of the data sets in `datasets/`.

The program then prints the chosen pallets together with their count, total
weight and total profit.

The menu lists five entries, but the Genetic Programming entry is selected by
typing `6`. Typing `5` is rejected as invalid input. While the genetic solver
runs, it redraws the best individual of each generation.

### Measure mode

Measure mode runs one algorithm, or all of them, a given number of times on a
data set and prints the average execution time of each:

```
palletload measure all 01 10
palletload measure 3 01 5 -v
```

- Algorithm numbers run from 1 to 5, in the order listed above.
- `-v` prints the time of every run.

The genetic solver writes a report of its final generation to `output.txt` in
the current directory. This happens in both modes.

## Library use

```python
from palletload.parsers import load_dataset, available_datasets
from palletload.dynamic import dynamic_programming
from palletload.greedy import greedy

print(available_datasets("datasets"))
dataset = load_dataset("01", "datasets")

best = dynamic_programming(dataset)
print(best)
print(best.total_profit(), best.total_weight())

approx = greedy(dataset)
```

`load_dataset` raises `palletload.parsers.DatasetNotFoundError` for an unknown
identifier.

Data sets can also be built directly from `palletload.model`:

```python
from palletload.model import DataSet, Pallet, PalletList, Truck

dataset = DataSet(Truck(100, 2), PalletList([Pallet(1, 60, 10), Pallet(2, 50, 9)]))
```

`genetic(dataset, show_progress=True, output_path="output.txt", seed=None)`
takes these optional arguments:

- `seed`: makes a run repeatable.
- `show_progress`: set it to `False` to stop the per-generation display.
- `output_path`: set it to `None` to skip writing the report.

`palletload.cli` also provides:

- `measure(algorithm, dataset_id, runs)`, which returns the average time in
  milliseconds for each algorithm name.
- `write_results_csv(filename, results)`, which writes
  `(algorithm, dataset, time in ms, profit)` rows under a header line.