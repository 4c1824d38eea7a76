"""Command line entry point: interactive solving and timing measurements."""

from __future__ import annotations

import csv
import re
import sys
import time
from typing import Iterable, Optional, TextIO, Union

from palletload.backtracking import backtracking
from palletload.brute_force import brute_force
from palletload.dynamic import dynamic_programming
from palletload.genetic import genetic
from palletload.greedy import greedy
from palletload.model import DataSet, PalletList
from palletload.parsers import (
    DEFAULT_BASE_PATH,
    PathLike,
    available_datasets,
    dataset_exists,
    load_dataset,
)
from palletload.terminal import Algorithm, Color, clear_screen, read_line, set_screen_color

ALGORITHM_NAMES = {
    Algorithm.BRUTE_FORCE: "Brute-Force",
    Algorithm.GREEDY: "Greedy",
    Algorithm.DYNAMIC_PROGRAMMING: "Dynamic Programming",
    Algorithm.BACKTRACKING: "Backtracking",
    Algorithm.GENETIC_PROGRAMMING: "Genetic Programming",
}

_MENU_CHOICES = {
    "1": Algorithm.BRUTE_FORCE,
    "2": Algorithm.GREEDY,
    "3": Algorithm.DYNAMIC_PROGRAMMING,
    "4": Algorithm.BACKTRACKING,
    "6": Algorithm.GENETIC_PROGRAMMING,
}

USAGE = (
    "Usage: ./da_project measure (all | algorithm-number) dataset-number "
    "(number of runs) [-v]"
)

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _solve(algorithm: Algorithm, dataset: DataSet, show_progress: bool) -> PalletList:
    if algorithm is Algorithm.BRUTE_FORCE:
        return brute_force(dataset)
    if algorithm is Algorithm.GREEDY:
        return greedy(dataset)
    if algorithm is Algorithm.DYNAMIC_PROGRAMMING:
        return dynamic_programming(dataset)
    if algorithm is Algorithm.BACKTRACKING:
        return backtracking(dataset)
    if algorithm is Algorithm.GENETIC_PROGRAMMING:
        return genetic(dataset, show_progress=show_progress)
    raise ValueError(f"unknown algorithm: {algorithm!r}")


def run_algorithm(algorithm: Algorithm, dataset: DataSet) -> PalletList:
    """Solve a data set with the chosen algorithm."""
    return _solve(algorithm, dataset, show_progress=True)


def _prompt(out: TextIO, text: str) -> None:
    set_screen_color(Color.CYAN, out)
    out.write(text)
    set_screen_color(Color.CLEAR, out)


def _invalid(out: TextIO) -> None:
    set_screen_color(Color.RED, out)
    out.write("Invalid Input!\n")
    set_screen_color(Color.CLEAR, out)


def select_algorithm(
    stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> Algorithm:
    """Ask for an algorithm until a valid choice is entered."""
    out = stdout or sys.stdout
    error = False
    while True:
        clear_screen(out)
        _prompt(out, "Available Algorithms: \n")
        for number, name in enumerate(ALGORITHM_NAMES.values(), start=1):
            out.write(f"{number}. {name}\n")
        out.write("\n")
        if error:
            _invalid(out)
        _prompt(out, "Algorithm to use: ")
        out.flush()

        choice = _MENU_CHOICES.get(read_line(stdin).strip())
        if choice is not None:
            return choice
        error = True


def select_dataset(
    base_path: PathLike = DEFAULT_BASE_PATH,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> DataSet:
    """Ask for a data set until an available one is entered, then load it."""
    out = stdout or sys.stdout
    datasets = available_datasets(base_path)
    if not datasets:
        out.write("No datasets available.\n")
        raise RuntimeError("No datasets available.")

    error = False
    while True:
        clear_screen(out)
        _prompt(out, "Available datasets: ")
        out.write("".join(f"{dataset_id} " for dataset_id in datasets))
        out.write("\n\n")
        if error:
            _invalid(out)
        _prompt(out, "Dataset to load: ")
        out.flush()

        selected = read_line(stdin).strip()
        if selected in datasets:
            return load_dataset(selected, base_path)
        error = True


def write_results_csv(
    filename: PathLike, results: Iterable[tuple[str, str, float, int]]
) -> None:
    """Write (algorithm, dataset, time in ms, profit) rows to a CSV file."""
    with open(filename, "w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(["Algorithm", "Dataset", "ExecutionTime(ms)", "Profit"])
        for algorithm, dataset, elapsed, profit in results:
            writer.writerow([algorithm, dataset, f"{elapsed:g}", profit])


def measure(
    algorithm: Union[Algorithm, str],
    dataset_id: str,
    runs: int,
    verbose: bool = False,
    base_path: PathLike = DEFAULT_BASE_PATH,
    stdout: Optional[TextIO] = None,
) -> dict[str, float]:
    """Time an algorithm (or "all") on a data set; return average milliseconds by name."""
    out = stdout or sys.stdout
    if algorithm == "all":
        to_test = list(Algorithm)
    elif isinstance(algorithm, Algorithm):
        to_test = [algorithm]
    else:
        raise ValueError(f"unknown algorithm: {algorithm!r}")

    dataset = load_dataset(dataset_id, base_path)

    stats: dict[str, list[float]] = {}
    for current in to_test:
        name = ALGORITHM_NAMES[current]
        out.write(f"Testing algorithm: {name}\n")
        for run in range(runs):
            if verbose:
                out.write(f"Run {run + 1} on dataset: {dataset_id}")
            start = time.perf_counter()
            _solve(current, dataset, show_progress=False)
            elapsed = (time.perf_counter() - start) * 1000.0
            if verbose:
                out.write(f" Execution Time: {elapsed:g} ms\n")
            stats.setdefault(name, []).append(elapsed)

    averages = {name: sum(times) / len(times) for name, times in sorted(stats.items())}
    out.write("\nSummary of Average Results:\n")
    for name, average in averages.items():
        out.write(f"Algorithm: {name}, Average Execution Time: {average:g} ms\n")
    return averages


def _parse_int(text: str) -> int:
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _measure_command(args: list[str]) -> int:
    verbose = "-v" in args
    if len(args) < 4:
        print(USAGE, file=sys.stderr)
        return 1

    algorithm_arg, dataset_id, runs_arg = args[1], args[2], args[3]
    try:
        runs = _parse_int(runs_arg)
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1
    if runs < 0:
        print(USAGE, file=sys.stderr)
        return 1

    print(f"Algorithm: {algorithm_arg}, Dataset: {dataset_id}, Runs: {runs}")

    algorithm: Union[Algorithm, str]
    if algorithm_arg == "all":
        algorithm = "all"
    else:
        try:
            number = _parse_int(algorithm_arg)
        except ValueError:
            print(USAGE, file=sys.stderr)
            return 1
        if not 1 <= number <= 5:
            print("Invalid algorithm number. Must be between 1 and 6.", file=sys.stderr)
            return 1
        algorithm = Algorithm(number - 1)

    if not dataset_exists(dataset_id):
        print(f"Dataset {dataset_id} does not exist.", file=sys.stderr)
        return 1

    measure(algorithm, dataset_id, runs, verbose)
    return 0


_SELECTED_MESSAGES = {
    Algorithm.BRUTE_FORCE: "Brute-Force algorithm selected.",
    Algorithm.GREEDY: "Greedy algorithm selected.",
    Algorithm.DYNAMIC_PROGRAMMING: "Dynamic Programming algorithm selected.",
    Algorithm.BACKTRACKING: "Backtracking algorithm selected.",
    Algorithm.GENETIC_PROGRAMMING: "Genetic Programming algorithm selected.",
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive solver, or the "measure" command when asked."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "measure":
        return _measure_command(args)

    algorithm = select_algorithm()
    dataset = select_dataset()
    clear_screen()
    solution = run_algorithm(algorithm, dataset)
    clear_screen()
    print(_SELECTED_MESSAGES[algorithm])
    print(solution)
    return 0


if __name__ == "__main__":
    sys.exit(main())