"""Reading truck and pallet data sets from CSV files."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, Union

from palletload.model import DataSet, Pallet, PalletList, Truck

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_BASE_PATH = "datasets"
_PALLETS_PREFIX = "Pallets_"
_TRUCK_PREFIX = "TruckAndPallets_"
_SUFFIX = ".csv"
_INT_RE = re.compile(r"\s*([+-]?\d+)")


class DatasetNotFoundError(ValueError):
    """Raised when a requested data set is not available."""


def _parse_int(token: str) -> int:
    match = _INT_RE.match(token)
    if match is None:
        raise ValueError(f"invalid integer: {token!r}")
    return int(match.group(1))


def _fields(line: str, count: int) -> list[int]:
    tokens = line.split(",")
    tokens += [""] * (count - len(tokens))
    return [_parse_int(token) for token in tokens[:count]]


def read_truck(stream: Iterable[str]) -> Truck:
    """Read a truck from a CSV stream: a header line, then capacity and pallet count."""
    lines = iter(stream)
    next(lines, "")
    capacity, pallets = _fields(next(lines, ""), 2)
    return Truck(capacity, pallets)


def read_pallets(stream: Iterable[str]) -> PalletList:
    """Read pallets from a CSV stream: a header line, then id, weight and profit per line."""
    lines = iter(stream)
    next(lines, "")
    result = PalletList()
    for line in lines:
        pallet_id, weight, profit = _fields(line, 3)
        result.add(Pallet(pallet_id, weight, profit))
    return result


def available_datasets(base_path: PathLike = DEFAULT_BASE_PATH) -> list[str]:
    """Identifiers of data sets that have both a pallets and a truck file, sorted."""
    base = Path(base_path)
    found = []
    for entry in base.iterdir():
        name = entry.name
        if not (name.startswith(_PALLETS_PREFIX) and name.find(_SUFFIX) == len(name) - len(_SUFFIX)):
            continue
        dataset_id = name[len(_PALLETS_PREFIX):-len(_SUFFIX)]
        if (base / f"{_TRUCK_PREFIX}{dataset_id}{_SUFFIX}").exists():
            found.append(dataset_id)
    return sorted(found)


def dataset_exists(dataset_id: str, base_path: PathLike = DEFAULT_BASE_PATH) -> bool:
    """Whether a data set with this identifier is available."""
    return dataset_id in available_datasets(base_path)


def load_dataset(dataset_id: str, base_path: PathLike = DEFAULT_BASE_PATH) -> DataSet:
    """Load the truck and pallets of a data set."""
    if not dataset_exists(dataset_id, base_path):
        raise DatasetNotFoundError("Dataset does not exist.")
    base = Path(base_path)
    truck_file = base / f"{_TRUCK_PREFIX}{dataset_id}{_SUFFIX}"
    pallet_file = base / f"{_PALLETS_PREFIX}{dataset_id}{_SUFFIX}"
    with open(truck_file, encoding="utf-8") as truck_stream, open(
        pallet_file, encoding="utf-8"
    ) as pallet_stream:
        truck = read_truck(truck_stream)
        pallets = read_pallets(pallet_stream)
    return DataSet(truck, pallets)